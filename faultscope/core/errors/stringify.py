# faultscope/core/errors/stringify.py
"""
Human-readable rendering of faults.

Pure functions. Rendering a fault is total and deterministic: the same fault
always renders to the same text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Durability, Nature
from .context import iter_frames
from ..trace.stack import render_stack_trace

if TYPE_CHECKING:
    from .fault import Fault


def render_nature(nature: Nature) -> str:
    return nature.value


def render_durability(durability: Durability) -> str:
    return durability.value


def render_context(fault: "Fault") -> str:
    """One line per context frame, innermost-attached first."""
    return "".join(
        f"{frame.file}:{frame.line}: context: {frame.description}\n"
        for frame in iter_frames(fault.context)
    )


def render_fault_summary(fault: "Fault") -> str:
    """
    Classification, description and stack trace, without location or context.

    Format: ``<nature>[ (temporary)][: <description>]\\nstack: <addresses>``
    """
    parts = [render_nature(fault.nature)]
    if fault.durability is Durability.TEMPORARY:
        parts.append(" (temporary)")
    if fault.description:
        parts.append(": ")
        parts.append(fault.description)
    parts.append("\nstack: ")
    parts.append(render_stack_trace(fault.stack_trace))
    return "".join(parts)


def render_fault(fault: "Fault") -> str:
    """
    Full rendering: context lines followed by ``<file>:<line>: <summary>``.

    Example:
        y.py:20: context: while flushing
        x.py:10: error from OS: disk full
        stack: 0x7f3a2c+12 0x7f3a90+40
    """
    return f"{render_context(fault)}{fault.file}:{fault.line}: {render_fault_summary(fault)}"
