# faultscope/core/dispatch/callback.py
"""
Callback override stack.

Every thread owns an independent stack of installed callbacks. The innermost
(most recently installed, not yet removed) callback receives every fault and
log line reported on that thread; each callback is linked to the one that was
current when it was installed and, by default, delegates to it. When no
override is installed the process-wide root callback is current.

Installation and removal nest in strict LIFO order tied to a lexical scope:

    >>> class Quiet(FaultCallback):
    ...     def on_recoverable_fault(self, fault):
    ...         pass  # swallow
    >>> with Quiet():
    ...     fail(Nature.OS_ERROR, "ignored")

Out-of-order removal, double installation and installing the root are
structural bugs and raise CallbackMisuseError immediately.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List, Optional
import threading

from ..errors.exceptions import CallbackMisuseError

if TYPE_CHECKING:
    from ..errors.fault import Fault


class _ThreadState(threading.local):
    """Per-thread override stack, indexed by depth."""

    def __init__(self):
        self.stack: List["FaultCallback"] = []
        self.unwind_depth = 0


_state = _ThreadState()

# Guards the claim on a callback instance across threads
_INSTALL_LOCK = threading.Lock()


class FaultCallback:
    """
    Pluggable handler for faults and diagnostic log lines.

    Subclasses override any of the three hooks. The default implementation
    of each hook delegates to ``self.next``, the callback that was current
    when this one was installed.

    Usage:
    ```python
    with MyCallback():          # install on enter, uninstall on exit
        ...

    with override(MyCallback()) as cb:
        ...
    ```
    """

    is_root = False

    _next: Optional["FaultCallback"] = None
    _owner: Optional[int] = None

    @property
    def next(self) -> Optional["FaultCallback"]:
        """The callback this one delegates to."""
        if self._next is None:
            raise CallbackMisuseError(
                f"{type(self).__name__} is not installed; it has no next callback"
            )
        return self._next

    @property
    def installed(self) -> bool:
        return self._next is not None

    # -------- install / uninstall --------

    def install(self) -> "FaultCallback":
        """
        Link to the current callback and become current on this thread.

        Raises:
            CallbackMisuseError: If this callback is already installed
        """
        with _INSTALL_LOCK:
            if self._owner is not None:
                raise CallbackMisuseError(
                    f"{type(self).__name__} is already installed "
                    f"(thread {self._owner}); a callback can be installed only once at a time"
                )
            self._owner = threading.get_ident()
        self._next = get_callback()
        _state.stack.append(self)
        return self

    def uninstall(self) -> None:
        """
        Restore the callback that was current before this one was installed.

        Raises:
            CallbackMisuseError: If this callback is not the innermost one on
                the calling thread
        """
        stack = _state.stack
        if not stack or stack[-1] is not self:
            raise CallbackMisuseError(
                f"{type(self).__name__} must be uninstalled by the thread that installed it, "
                f"in reverse order of installation"
            )
        stack.pop()
        self._next = None
        self._owner = None

    def __enter__(self) -> "FaultCallback":
        return self.install()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.uninstall()

    # -------- hooks --------

    def on_recoverable_fault(self, fault: "Fault") -> None:
        """A fault occurred that the caller can recover from."""
        self.next.on_recoverable_fault(fault)

    def on_fatal_fault(self, fault: "Fault") -> None:
        """A fault occurred that the caller cannot continue after."""
        self.next.on_fatal_fault(fault)

    def log_message(self, file: str, line: int, context_depth: int, text: str) -> None:
        """A diagnostic line should be logged, ``context_depth`` levels deep."""
        self.next.log_message(file, line, context_depth, text)

    def __repr__(self) -> str:
        state = "installed" if self.installed else "detached"
        return f"<{type(self).__name__} {state}>"


def get_callback() -> FaultCallback:
    """Innermost callback on this thread, or the root callback if none."""
    stack = _state.stack
    if stack:
        return stack[-1]
    from .root import get_root_callback
    return get_root_callback()


def callback_depth() -> int:
    """Number of overrides installed on this thread."""
    return len(_state.stack)


@contextmanager
def override(callback: FaultCallback) -> Iterator[FaultCallback]:
    """
    Install ``callback`` for the duration of the block.

    The callback is removed on every exit path, including exceptions.
    """
    callback.install()
    try:
        yield callback
    finally:
        callback.uninstall()


# ---- unwind tracking ----

@contextmanager
def unwinding() -> Iterator[None]:
    """
    Mark the enclosed block as cleanup running while an exception unwinds.

    Recoverable faults reported inside the block are logged instead of
    raised, so the exception already in flight is not replaced.

    Example:
        >>> try:
        ...     work()
        ... finally:
        ...     with unwinding():
        ...         release_resources()
    """
    _state.unwind_depth += 1
    try:
        yield
    finally:
        _state.unwind_depth -= 1


def unwind_in_progress() -> bool:
    return _state.unwind_depth > 0


# ---- dispatch (always through the current callback) ----

def on_recoverable_fault(fault: "Fault") -> None:
    get_callback().on_recoverable_fault(fault)


def on_fatal_fault(fault: "Fault") -> None:
    get_callback().on_fatal_fault(fault)


def log_message(file: str, line: int, context_depth: int, text: str) -> None:
    get_callback().log_message(file, line, context_depth, text)
