# faultscope/core/dispatch/root.py
"""
Root callback: the terminal policy at the bottom of every override stack.

Decisions:
- Recoverable fault: raise FaultError, unless throwing is disabled or the
  code reporting it runs inside ``with unwinding():``, in which case the
  fault is logged.
- Fatal fault: always raise FatalFaultError, unless throwing is disabled.
- Log line: indent by context depth and write to the diagnostic stream.

Unwinding is never detected automatically. A ``finally:`` block or an
``__exit__`` running because an exception propagates counts as unwinding
only when it enters ``unwinding()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
import logging
import threading

from .callback import FaultCallback, get_callback, unwind_in_progress
from .stream import DiagnosticStream, default_stream, write_fully
from ..errors.exceptions import CallbackMisuseError, FatalFaultError, FaultError
from ..errors.stringify import render_fault_summary

if TYPE_CHECKING:
    from ..errors.fault import Fault


logger = logging.getLogger(__name__)


class RootCallback(FaultCallback):
    """
    Terminal callback. It has no next callback and never delegates.

    Recoverable faults are logged instead of raised only when throwing is
    disabled or inside ``with unwinding():``. An exception propagating
    through a plain ``finally:`` block is not detected; cleanup code that
    must not replace the in-flight exception enters ``unwinding()``.

    Args:
        throw_enabled: If False, faults are only ever logged
        stream: Diagnostic stream; None means the process's stderr
        indent_char: Character repeated once per context level
    """

    is_root = True

    def __init__(
        self,
        throw_enabled: bool = True,
        stream: Optional[DiagnosticStream] = None,
        indent_char: str = "_",
    ):
        self.throw_enabled = throw_enabled
        self.stream = stream
        self.indent_char = indent_char

    @property
    def next(self) -> None:
        return None

    @property
    def installed(self) -> bool:
        return False

    def install(self) -> "FaultCallback":
        raise CallbackMisuseError("the root callback cannot be installed as an override")

    def uninstall(self) -> None:
        raise CallbackMisuseError("the root callback cannot be uninstalled")

    # -------- policy --------

    def on_recoverable_fault(self, fault: "Fault") -> None:
        if not self.throw_enabled or unwind_in_progress():
            self._log_fault(fault)
        else:
            raise FaultError(fault)

    def on_fatal_fault(self, fault: "Fault") -> None:
        if not self.throw_enabled:
            self._log_fault(fault)
        else:
            raise FatalFaultError(fault)

    def log_message(self, file: str, line: int, context_depth: int, text: str) -> None:
        if context_depth > 0:
            text = self.indent_char * context_depth + text

        stream = self.stream if self.stream is not None else default_stream()
        write_fully(stream, text.encode("utf-8", errors="replace"))

    def _log_fault(self, fault: "Fault") -> None:
        # Re-enter at the top of the chain so installed log processing still
        # applies. Context is left out: installed context scopes add it back.
        get_callback().log_message(fault.file, fault.line, 0, render_fault_summary(fault) + "\n")

    def __repr__(self) -> str:
        return f"<RootCallback throw_enabled={self.throw_enabled}>"


# Process-wide root, created once on first use
_ROOT: Optional[RootCallback] = None
_ROOT_LOCK = threading.Lock()


def get_root_callback() -> RootCallback:
    """
    Get or create the process-wide root callback.

    Configuration is read once, when the root is created.
    """
    global _ROOT

    if _ROOT is None:
        with _ROOT_LOCK:
            if _ROOT is None:
                from faultscope.config import get_config

                config = get_config()
                _ROOT = RootCallback(
                    throw_enabled=config.throw_enabled,
                    indent_char=config.indent_char,
                )
                logger.debug("Created root callback: %r", _ROOT)

    return _ROOT
