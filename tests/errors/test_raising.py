"""
Reporting helper tests - require / assert_that / fail / fatal / fail_os / log
"""

import errno

import pytest

from faultscope import (
    CollectingCallback,
    Durability,
    FatalFaultError,
    FaultError,
    Nature,
    assert_that,
    fail,
    fail_os,
    fatal,
    log,
    os_fault,
    require,
)


def test_require_passes_silently():
    assert require(True, "never reported") is True


def test_require_reports_precondition_at_caller():
    """Test: a failed requirement raises with the caller's file"""
    with pytest.raises(FaultError) as exc_info:
        require(1 > 2, "one must exceed two")

    fault = exc_info.value.fault
    assert fault.nature is Nature.PRECONDITION_VIOLATION
    assert fault.durability is Durability.PERMANENT
    assert fault.description == "one must exceed two"
    assert fault.file == __file__
    assert fault.line > 0


def test_assert_that_reports_internal_bug():
    with pytest.raises(FaultError) as exc_info:
        assert_that([], "list must not be empty")

    assert exc_info.value.fault.nature is Nature.INTERNAL_BUG


def test_require_returns_false_when_collected():
    """Test: with the fault swallowed by an override, require returns False"""
    with CollectingCallback() as errors:
        held = require(False, "bad input")

    assert held is False
    assert len(errors) == 1


def test_fail_uses_given_classification():
    with pytest.raises(FaultError) as exc_info:
        fail(Nature.NETWORK_FAILURE, "peer reset", Durability.TEMPORARY)

    err = exc_info.value
    assert err.nature is Nature.NETWORK_FAILURE
    assert err.retryable is True
    assert "network failure (temporary): peer reset" in str(err)


def test_fatal_raises_fatal_error():
    with pytest.raises(FatalFaultError) as exc_info:
        fatal(Nature.INTERNAL_BUG, "corrupted index")

    assert isinstance(exc_info.value, FaultError)
    assert exc_info.value.fault.description == "corrupted index"


def test_fail_os_temporary_errno():
    """Test: EAGAIN maps to a temporary OS error"""
    err = OSError(errno.EAGAIN, "Resource temporarily unavailable")

    with pytest.raises(FaultError) as exc_info:
        fail_os(err, "read(sock)")

    fault = exc_info.value.fault
    assert fault.nature is Nature.OS_ERROR
    assert fault.durability is Durability.TEMPORARY
    assert fault.description == "read(sock): Resource temporarily unavailable"
    assert fault.file == __file__


def test_os_fault_permanent_errno_with_filename():
    err = FileNotFoundError(errno.ENOENT, "No such file or directory", "/tmp/missing")

    fault = os_fault(err)

    assert fault.durability is Durability.PERMANENT
    assert fault.description == "No such file or directory: '/tmp/missing'"
    assert fault.file == __file__


def test_log_writes_newline_terminated_line(stream):
    log("cache warmed")

    assert stream.text == "cache warmed\n"
