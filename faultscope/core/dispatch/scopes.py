# faultscope/core/dispatch/scopes.py
"""
Ready-made override callbacks.

- ContextScope / fault_context(): narrate what the enclosed code is doing
- LoggingCallback: redirect diagnostic lines into the logging module
- CollectingCallback: gather recoverable faults instead of raising them
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Union
import logging

from .callback import FaultCallback
from ..errors.exceptions import FaultError
from ...utils.location import caller_location

if TYPE_CHECKING:
    from ..errors.fault import Fault


Description = Union[str, Callable[[], str]]


class ContextScope(FaultCallback):
    """
    Attach a context frame to every fault reported inside the scope.

    Log lines reported inside the scope are indented one level deeper. The
    first time anything is logged inside the scope, the scope logs its own
    ``context: <description>`` line first, so the indented lines read as
    belonging to it.

    The description may be a callable; it is evaluated at most once, the
    first time a fault or log line needs it.
    """

    def __init__(self, description: Description, file: str, line: int):
        self.file = file
        self.line = line
        self._description = description
        self._logged = False

    @property
    def description(self) -> str:
        if callable(self._description):
            self._description = str(self._description())
        return self._description

    def install(self) -> "FaultCallback":
        self._logged = False
        return super().install()

    def on_recoverable_fault(self, fault: "Fault") -> None:
        fault.wrap_context(self.file, self.line, self.description)
        self.next.on_recoverable_fault(fault)

    def on_fatal_fault(self, fault: "Fault") -> None:
        fault.wrap_context(self.file, self.line, self.description)
        self.next.on_fatal_fault(fault)

    def log_message(self, file: str, line: int, context_depth: int, text: str) -> None:
        if not self._logged:
            self._logged = True
            self.next.log_message(self.file, self.line, 0, f"context: {self.description}\n")
        self.next.log_message(file, line, context_depth + 1, text)


def fault_context(
    description: Description,
    file: Optional[str] = None,
    line: Optional[int] = None,
) -> ContextScope:
    """
    Scope that narrates what the enclosed code is doing.

    Example:
        >>> with fault_context("while flushing journal"):
        ...     flush()
    """
    if file is None:
        file, caller_line = caller_location(1)
        line = caller_line if line is None else line
    return ContextScope(description, file, line if line is not None else 0)


class LoggingCallback(FaultCallback):
    """
    Send diagnostic lines to a ``logging.Logger`` instead of the raw stream.

    Args:
        logger: Target logger (default: ``faultscope.diagnostics``)
        level: Level used for every line
        propagate: Also pass lines on to the next callback
        indent_char: Character repeated once per context level (default:
            the configured indent_char)
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.WARNING,
        propagate: bool = False,
        indent_char: Optional[str] = None,
    ):
        if indent_char is None:
            from faultscope.config import get_config
            indent_char = get_config().indent_char
        self.logger = logger or logging.getLogger("faultscope.diagnostics")
        self.level = level
        self.propagate = propagate
        self.indent_char = indent_char

    def log_message(self, file: str, line: int, context_depth: int, text: str) -> None:
        indent = self.indent_char * context_depth
        self.logger.log(
            self.level,
            "%s%s",
            indent,
            text.rstrip("\n"),
            extra={
                "fault_file": file,
                "fault_line": line,
                "context_depth": context_depth,
            },
        )
        if self.propagate:
            self.next.log_message(file, line, context_depth, text)


class CollectingCallback(FaultCallback):
    """
    Collect recoverable faults instead of letting them raise.

    Fatal faults still pass through.

    Example:
        >>> with CollectingCallback() as errors:
        ...     for record in records:
        ...         validate(record)
        >>> errors.raise_if_any()
    """

    def __init__(self):
        self.faults: List["Fault"] = []

    def on_recoverable_fault(self, fault: "Fault") -> None:
        self.faults.append(fault.copy())

    def raise_if_any(self) -> None:
        """Raise FaultError for the first collected fault, if any."""
        if self.faults:
            raise FaultError(self.faults[0])

    def __len__(self) -> int:
        return len(self.faults)
