# faultscope/core/dispatch/stream.py
"""
Diagnostic output stream.

The root callback writes raw bytes to a stream. A write may be partial; the
writer retries with the remainder until everything is written or the stream
reports failure (a non-positive count or an OSError), in which case the
message is dropped. A broken diagnostic channel never raises.
"""

from __future__ import annotations

from typing import Protocol
import os
import sys


class DiagnosticStream(Protocol):
    def write(self, data: bytes) -> int:
        """Write some prefix of ``data``; return the number of bytes written."""
        ...


class FdStream:
    """Unbuffered writes to a raw file descriptor (stderr by default)."""

    def __init__(self, fd: int = 2):
        self.fd = fd

    def write(self, data: bytes) -> int:
        return os.write(self.fd, data)

    def __repr__(self) -> str:
        return f"FdStream(fd={self.fd})"


def default_stream() -> DiagnosticStream:
    """Stream over the process's standard diagnostic descriptor."""
    try:
        fd = sys.stderr.fileno()
    except (AttributeError, ValueError, OSError):
        fd = 2
    return FdStream(fd)


def write_fully(stream: DiagnosticStream, data: bytes) -> bool:
    """
    Write all of ``data``, retrying partial writes.

    Returns:
        True if every byte was written, False if the stream gave up
    """
    view = memoryview(data)
    while view:
        try:
            n = stream.write(bytes(view))
        except OSError:
            return False
        if n is None or n <= 0:
            # stream is broken; give up
            return False
        view = view[n:]
    return True
