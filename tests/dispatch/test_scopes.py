"""
Override scope tests - fault_context, LoggingCallback, CollectingCallback
"""

import logging

import pytest

from faultscope import (
    CollectingCallback,
    Durability,
    FatalFaultError,
    FaultError,
    LoggingCallback,
    Nature,
    fail,
    fatal,
    fault_context,
    log,
    on_recoverable_fault,
    require,
)
from faultscope.config import FaultScopeConfig
from faultscope.config import loader as config_loader
from faultscope.core.errors import Fault, iter_frames


def test_fault_context_annotates_faults():
    """Test: a fault reported inside the scope carries the scope's frame"""
    with pytest.raises(FaultError) as exc_info:
        with fault_context("while flushing"):
            fail(Nature.OS_ERROR, "disk full")

    frame = exc_info.value.fault.context
    assert frame.description == "while flushing"
    assert frame.file == __file__
    assert frame.next is None
    assert str(exc_info.value).startswith(f"{__file__}:{frame.line}: context: while flushing\n")


def test_nested_contexts_outermost_scope_is_head():
    """Test: the outer scope wraps last, so its frame is attached most recently"""
    with pytest.raises(FaultError) as exc_info:
        with fault_context("opening database"):
            with fault_context("reading page 7"):
                require(False, "checksum mismatch")

    descriptions = [f.description for f in iter_frames(exc_info.value.fault.context)]
    assert descriptions == ["opening database", "reading page 7"]

    text = str(exc_info.value)
    assert text.index("context: opening database\n") < text.index("context: reading page 7\n")
    assert text.splitlines()[0].endswith(": context: opening database")


def test_fault_context_annotates_fatal_faults():
    with pytest.raises(FatalFaultError) as exc_info:
        with fault_context("replaying journal"):
            fatal(Nature.INTERNAL_BUG, "impossible state")

    assert exc_info.value.fault.context.description == "replaying journal"


def test_explicit_location():
    with pytest.raises(FaultError) as exc_info:
        with fault_context("syncing", file="sync.py", line=42):
            fail(Nature.UNCLASSIFIED)

    frame = exc_info.value.fault.context
    assert (frame.file, frame.line) == ("sync.py", 42)


def test_context_log_lines_are_indented(stream):
    """Test: each scope logs its own header once, then indents nested lines"""
    with fault_context("outer"):
        with fault_context("inner"):
            log("first")
            log("second")

    assert stream.text == (
        "context: outer\n"
        "_context: inner\n"
        "__first\n"
        "__second\n"
    )


def test_lazy_description_evaluated_once():
    calls = []

    def describe():
        calls.append(1)
        return "computed"

    with CollectingCallback() as errors:
        with fault_context(describe):
            fail(Nature.UNCLASSIFIED, "a")
            fail(Nature.UNCLASSIFIED, "b")

    assert len(calls) == 1
    assert [f.context.description for f in errors.faults] == ["computed", "computed"]


def test_unused_lazy_description_never_evaluated():
    def describe():
        raise AssertionError("should not be called")

    with fault_context(describe):
        pass


def test_logging_callback_redirects_lines(caplog, stream):
    """Test: log lines go to the logging module instead of the stream"""
    logger = logging.getLogger("tests.faultscope")

    with caplog.at_level(logging.INFO, logger="tests.faultscope"):
        with LoggingCallback(logger, level=logging.INFO):
            with fault_context("indexing"):
                log("halfway")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["context: indexing", "_halfway"]
    assert caplog.records[1].context_depth == 1
    assert caplog.records[1].fault_file == __file__
    assert stream.text == ""


def test_logging_callback_propagate(caplog, stream):
    logger = logging.getLogger("tests.faultscope.propagate")

    with caplog.at_level(logging.WARNING, logger="tests.faultscope.propagate"):
        with LoggingCallback(logger, propagate=True):
            log("both")

    assert [r.getMessage() for r in caplog.records] == ["both"]
    assert stream.text == "both\n"


def test_collecting_callback_gathers_faults():
    with CollectingCallback() as errors:
        for value in (1, -2, 3, -4):
            require(value > 0, f"{value} must be positive")

    assert [f.description for f in errors.faults] == ["-2 must be positive", "-4 must be positive"]

    with pytest.raises(FaultError) as exc_info:
        errors.raise_if_any()
    assert exc_info.value.fault is errors.faults[0]


def test_collecting_callback_keeps_independent_copies():
    """Test: later annotation of the reported fault does not alter the collected one"""
    fault = Fault(Nature.OS_ERROR, Durability.PERMANENT, "x.c", 10, "disk full")

    with CollectingCallback() as errors:
        on_recoverable_fault(fault)

    fault.wrap_context("later.c", 1, "annotated after collection")

    collected = errors.faults[0]
    assert collected is not fault
    assert collected.context is None
    assert str(collected).startswith("x.c:10: error from OS: disk full\nstack: ")


def test_logging_callback_custom_indent(caplog):
    """Test: an explicit indent_char overrides the configured one"""
    logger = logging.getLogger("tests.faultscope.indent")

    with caplog.at_level(logging.WARNING, logger="tests.faultscope.indent"):
        with LoggingCallback(logger, indent_char="."):
            log("deep", context_depth=2)

    assert [r.getMessage() for r in caplog.records] == ["..deep"]


def test_logging_callback_defaults_to_configured_indent(monkeypatch):
    monkeypatch.setattr(config_loader, "_CONFIG", FaultScopeConfig(indent_char="-"))

    assert LoggingCallback().indent_char == "-"


def test_collecting_callback_passes_fatal_through():
    with CollectingCallback() as errors:
        with pytest.raises(FatalFaultError):
            fatal(Nature.INTERNAL_BUG, "stop")

    assert len(errors) == 0
    errors.raise_if_any()
