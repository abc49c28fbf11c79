# faultscope/core/errors/__init__.py
"""
Core fault types for faultscope.

This package defines the components responsible for:
- Representing faults (classification, context chain, stack trace)
- Rendering faults as text
- Reporting faults from the code that detects them

No side effects on import.
"""

from .codes import Durability, Nature
from .context import ContextFrame, chain_depth, iter_frames
from .fault import Fault
from .stringify import render_durability, render_fault, render_fault_summary, render_nature
from .exceptions import CallbackMisuseError, FatalFaultError, FaultError
from .raising import assert_that, fail, fail_os, fatal, log, os_fault, require

__all__ = [
    "Nature",
    "Durability",
    "ContextFrame",
    "Fault",
    "FaultError",
    "FatalFaultError",
    "CallbackMisuseError",
    "chain_depth",
    "iter_frames",
    "render_durability",
    "render_fault",
    "render_fault_summary",
    "render_nature",
    "assert_that",
    "fail",
    "fail_os",
    "fatal",
    "log",
    "os_fault",
    "require",
]
