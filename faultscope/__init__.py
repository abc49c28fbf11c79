# faultscope/__init__.py
"""
faultscope - Classified faults with scoped, overridable reporting

A Fault is a classified failure (what kind of condition, whether retrying can
help) carrying a raw stack trace and a chain of context annotations. Faults
are reported through a per-thread stack of callbacks; any scope can install
an override to annotate, log, collect or redirect faults reported beneath it.
The root policy at the bottom raises FaultError, or logs when throwing is
disabled or an exception is already unwinding.

Basic usage:

Reporting:
    >>> from faultscope import Nature, require, fail
    >>> require(len(buf) > 0, "buffer must not be empty")
    >>> fail(Nature.NETWORK_FAILURE, "peer reset", Durability.TEMPORARY)

Context:
    >>> from faultscope import fault_context
    >>> with fault_context("while flushing journal"):
    ...     flush()

Overrides:
    >>> from faultscope import FaultCallback
    >>> class Quiet(FaultCallback):
    ...     def on_recoverable_fault(self, fault):
    ...         pass
    >>> with Quiet():
    ...     risky()
"""

__version__ = "0.1.0"

from .core.errors import (
    CallbackMisuseError,
    ContextFrame,
    Durability,
    FatalFaultError,
    Fault,
    FaultError,
    Nature,
    assert_that,
    fail,
    fail_os,
    fatal,
    log,
    os_fault,
    render_fault,
    require,
)
from .core.dispatch import (
    CollectingCallback,
    ContextScope,
    FaultCallback,
    LoggingCallback,
    RootCallback,
    fault_context,
    get_callback,
    get_root_callback,
    log_message,
    on_fatal_fault,
    on_recoverable_fault,
    override,
    unwind_in_progress,
    unwinding,
)
from .core.trace import STACK_TRACE_CAPACITY, ReturnAddress
from .config import FaultScopeConfig, get_config, load_config

__all__ = [
    # Version
    "__version__",

    # Fault value
    "Nature",
    "Durability",
    "ContextFrame",
    "Fault",
    "ReturnAddress",
    "STACK_TRACE_CAPACITY",
    "render_fault",

    # Throwables
    "FaultError",
    "FatalFaultError",
    "CallbackMisuseError",

    # Reporting helpers
    "assert_that",
    "fail",
    "fail_os",
    "fatal",
    "log",
    "os_fault",
    "require",

    # Dispatch
    "FaultCallback",
    "RootCallback",
    "ContextScope",
    "LoggingCallback",
    "CollectingCallback",
    "fault_context",
    "get_callback",
    "get_root_callback",
    "log_message",
    "on_fatal_fault",
    "on_recoverable_fault",
    "override",
    "unwind_in_progress",
    "unwinding",

    # Config
    "FaultScopeConfig",
    "get_config",
    "load_config",
]
