# faultscope/core/trace/__init__.py
"""
Stack-trace capture for faults.

No side effects on import.
"""

from .stack import (
    STACK_TRACE_CAPACITY,
    ReturnAddress,
    capture_return_addresses,
    render_stack_trace,
)

__all__ = [
    "STACK_TRACE_CAPACITY",
    "ReturnAddress",
    "capture_return_addresses",
    "render_stack_trace",
]
