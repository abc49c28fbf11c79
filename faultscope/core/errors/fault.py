# faultscope/core/errors/fault.py
"""
The fault value.

A Fault is a classified failure: where it was detected, what kind of
condition it is, whether a retry could help, a description, the raw call
stack at the moment of construction and an optional chain of context
frames. Classification, location and stack trace are fixed at construction.
Only the context chain grows, and only by prepending.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .codes import Durability, Nature
from .context import ContextFrame, chain_to_list
from ..trace.stack import STACK_TRACE_CAPACITY, ReturnAddress, capture_return_addresses


def _stack_capture_enabled() -> bool:
    from faultscope.config import get_config
    return get_config().capture_stack


class Fault:
    """
    A classified failure with stack trace and diagnostic context.

    Example:
        >>> fault = Fault(Nature.OS_ERROR, Durability.PERMANENT, "x.py", 10, "disk full")
        >>> fault.wrap_context("y.py", 20, "while flushing")
        >>> print(fault)
        y.py:20: context: while flushing
        x.py:10: error from OS: disk full
        stack: ...
    """

    __slots__ = (
        "_nature",
        "_durability",
        "_file",
        "_line",
        "_description",
        "_stack_trace",
        "_context",
    )

    def __init__(
        self,
        nature: Nature,
        durability: Durability,
        file: str,
        line: int,
        description: str = "",
    ):
        self._nature = Nature(nature)
        self._durability = Durability(durability)
        self._file = file
        self._line = line
        self._description = description or ""
        self._context: Optional[ContextFrame] = None

        # skip=1 leaves out this constructor's own frame
        if _stack_capture_enabled():
            self._stack_trace: Tuple[ReturnAddress, ...] = capture_return_addresses(
                STACK_TRACE_CAPACITY, skip=1
            )
        else:
            self._stack_trace = ()

    # -------- accessors --------

    @property
    def nature(self) -> Nature:
        return self._nature

    @property
    def durability(self) -> Durability:
        return self._durability

    @property
    def file(self) -> str:
        return self._file

    @property
    def line(self) -> int:
        return self._line

    @property
    def description(self) -> str:
        """Description text; empty string means no description."""
        return self._description

    @property
    def stack_trace(self) -> Tuple[ReturnAddress, ...]:
        return self._stack_trace

    @property
    def context(self) -> Optional[ContextFrame]:
        """Head of the context chain (most recently attached), or None."""
        return self._context

    @property
    def is_temporary(self) -> bool:
        return self._durability is Durability.TEMPORARY

    # -------- mutation --------

    def wrap_context(self, file: str, line: int, description: str) -> None:
        """Attach a context frame in front of the existing chain."""
        self._context = ContextFrame(file, line, description, self._context)

    # -------- copying --------

    def copy(self) -> "Fault":
        """Independent clone, including the context chain and stack trace."""
        clone = Fault.__new__(Fault)
        clone._nature = self._nature
        clone._durability = self._durability
        clone._file = self._file
        clone._line = self._line
        clone._description = self._description
        clone._stack_trace = tuple(self._stack_trace)
        clone._context = self._context.copy() if self._context is not None else None
        return clone

    def __copy__(self) -> "Fault":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Fault":
        return self.copy()

    def __getstate__(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.__slots__}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        for name, value in state.items():
            object.__setattr__(self, name, value)

    # -------- rendering --------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self._file,
            "line": self._line,
            "nature": self._nature.name,
            "durability": self._durability.name,
            "description": self._description,
            "stack": [str(address) for address in self._stack_trace],
            "context": chain_to_list(self._context),
        }

    def __str__(self) -> str:
        from .stringify import render_fault
        return render_fault(self)

    def __repr__(self) -> str:
        return (
            f"Fault({self._nature.name}, {self._durability.name}, "
            f"{self._file!r}, {self._line}, {self._description!r})"
        )
