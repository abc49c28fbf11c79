"""
Shared fixtures.

Every test runs against a fresh process root callback whose diagnostic
stream is an in-memory recorder, and with default configuration, so results
do not depend on the environment or on ~/.faultscope.
"""

import pytest

from faultscope.config import FaultScopeConfig
from faultscope.config import loader as config_loader
from faultscope.core.dispatch import callback as callback_module
from faultscope.core.dispatch import root as root_module
from faultscope.core.dispatch.root import RootCallback


class RecordingStream:
    """Diagnostic stream that keeps every write; optionally writes in small chunks."""

    def __init__(self, chunk: int = 0):
        self.chunk = chunk
        self.writes = []

    def write(self, data: bytes) -> int:
        n = len(data) if not self.chunk else min(self.chunk, len(data))
        self.writes.append(bytes(data[:n]))
        return n

    @property
    def data(self) -> bytes:
        return b"".join(self.writes)

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    config = FaultScopeConfig.default()
    monkeypatch.setattr(config_loader, "_CONFIG", config)
    return config


@pytest.fixture
def make_stream():
    return RecordingStream


@pytest.fixture
def stream():
    return RecordingStream()


@pytest.fixture(autouse=True)
def root(monkeypatch, stream):
    """Process root callback for the duration of one test."""
    root = RootCallback(throw_enabled=True, stream=stream)
    monkeypatch.setattr(root_module, "_ROOT", root)
    yield root
    # Every test must leave the override stack as it found it.
    assert callback_module.callback_depth() == 0
