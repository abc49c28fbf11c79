# faultscope/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .fault import Fault
from .stringify import render_fault


@dataclass(eq=False)
class FaultError(Exception):
    """
    Throwable wrapper around a Fault.

    ``str()`` renders the whole fault (context chain, classification,
    description, stack) on demand.
    """
    fault: Fault

    def __post_init__(self) -> None:
        super().__init__(self.fault.description)

    def __str__(self) -> str:
        return render_fault(self.fault)

    def __reduce__(self):
        return (type(self), (self.fault.copy(),))

    @property
    def nature(self):
        return self.fault.nature

    @property
    def durability(self):
        return self.fault.durability

    @property
    def retryable(self) -> bool:
        return self.fault.is_temporary

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, **self.fault.to_dict()}


class FatalFaultError(FaultError):
    """Raised for faults reported through the fatal path."""


class CallbackMisuseError(AssertionError):
    """
    Structural misuse of the callback override stack.

    Raised when overrides are installed or removed out of strict LIFO order,
    installed twice, or when the root callback is installed as an override.
    This indicates a bug in the caller, not a runtime condition.
    """
