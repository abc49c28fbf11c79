# faultscope/core/dispatch/__init__.py
"""
Fault dispatch: the per-thread callback override stack and its root policy.

No side effects on import; the root callback is created on first use.
"""

from .callback import (
    FaultCallback,
    callback_depth,
    get_callback,
    log_message,
    on_fatal_fault,
    on_recoverable_fault,
    override,
    unwind_in_progress,
    unwinding,
)
from .root import RootCallback, get_root_callback
from .scopes import CollectingCallback, ContextScope, LoggingCallback, fault_context
from .stream import DiagnosticStream, FdStream, write_fully

__all__ = [
    "FaultCallback",
    "RootCallback",
    "ContextScope",
    "LoggingCallback",
    "CollectingCallback",
    "DiagnosticStream",
    "FdStream",
    "callback_depth",
    "fault_context",
    "get_callback",
    "get_root_callback",
    "log_message",
    "on_fatal_fault",
    "on_recoverable_fault",
    "override",
    "unwind_in_progress",
    "unwinding",
    "write_fully",
]
