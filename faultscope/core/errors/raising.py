# faultscope/core/errors/raising.py
"""
Helpers for code that detects failures.

Each helper builds a Fault located at its caller and routes it through the
current callback of the calling thread. Whether that raises, logs or
collects is up to the installed overrides and the root policy, so callers
must be prepared for these helpers to return normally.
"""

from __future__ import annotations

from typing import Optional
import errno

from .codes import Durability, Nature
from .fault import Fault
from ..dispatch.callback import get_callback
from ...utils.location import caller_location


# errno values worth retrying
TEMPORARY_ERRNOS = frozenset(
    code
    for code in (
        getattr(errno, name, None)
        for name in ("EAGAIN", "EWOULDBLOCK", "EINTR", "ENOBUFS", "ENOMEM", "ETIMEDOUT", "EBUSY")
    )
    if code is not None
)


def _make(nature: Nature, durability: Durability, description: str, depth: int) -> Fault:
    file, line = caller_location(depth + 1)
    return Fault(nature, durability, file, line, description)


def fail(
    nature: Nature,
    description: str = "",
    durability: Durability = Durability.PERMANENT,
) -> None:
    """Report a recoverable fault located at the caller."""
    get_callback().on_recoverable_fault(_make(nature, durability, description, 1))


def fatal(
    nature: Nature,
    description: str = "",
    durability: Durability = Durability.PERMANENT,
) -> None:
    """Report a fatal fault located at the caller."""
    get_callback().on_fatal_fault(_make(nature, durability, description, 1))


def require(condition: object, description: str = "") -> bool:
    """
    Check a caller-supplied precondition.

    Reports a PRECONDITION_VIOLATION when ``condition`` is false.

    Returns:
        Whether the condition held (useful when the fault was only logged)
    """
    if condition:
        return True
    get_callback().on_recoverable_fault(
        _make(Nature.PRECONDITION_VIOLATION, Durability.PERMANENT, description, 1)
    )
    return False


def assert_that(condition: object, description: str = "") -> bool:
    """Check an internal invariant; reports an INTERNAL_BUG when false."""
    if condition:
        return True
    get_callback().on_recoverable_fault(
        _make(Nature.INTERNAL_BUG, Durability.PERMANENT, description, 1)
    )
    return False


def os_fault(err: OSError, description: str = "", *, depth: int = 1) -> Fault:
    """
    Build an OS_ERROR fault from an OSError.

    Durability is TEMPORARY for errno values where a retry can succeed.
    """
    durability = Durability.TEMPORARY if err.errno in TEMPORARY_ERRNOS else Durability.PERMANENT
    detail = err.strerror or str(err)
    if err.filename is not None:
        detail = f"{detail}: {err.filename!r}"
    text = f"{description}: {detail}" if description else detail
    return _make(Nature.OS_ERROR, durability, text, depth)


def fail_os(err: OSError, description: str = "") -> None:
    """Report an OSError as a recoverable OS_ERROR fault."""
    get_callback().on_recoverable_fault(os_fault(err, description, depth=2))


def log(text: str, *, context_depth: int = 0, location: Optional[tuple] = None) -> None:
    """Log a diagnostic line through the current callback chain."""
    file, line = location if location is not None else caller_location(1)
    if not text.endswith("\n"):
        text += "\n"
    get_callback().log_message(file, line, context_depth, text)
