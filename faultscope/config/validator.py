# faultscope/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import TYPE_CHECKING, List, Literal
from dataclasses import dataclass

if TYPE_CHECKING:
    from .loader import FaultScopeConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "faultscope.indent_char"
    message: str
    hint: str = ""  # Optional hint for fixing

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def validate_config(config: "FaultScopeConfig") -> List[ConfigIssue]:
    """
    Validate configuration values.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    for name in ("throw_enabled", "capture_stack"):
        value = getattr(config, name)
        if not isinstance(value, bool):
            issues.append(ConfigIssue(
                level="error",
                path=f"faultscope.{name}",
                message=f"Invalid {name} value: {value!r} (must be true or false)",
                hint=f"Set faultscope.{name} to true or false",
            ))

    if not isinstance(config.indent_char, str) or len(config.indent_char) != 1:
        issues.append(ConfigIssue(
            level="error",
            path="faultscope.indent_char",
            message=f"Invalid indent_char: {config.indent_char!r} (must be exactly one character)",
            hint="Set faultscope.indent_char to a single character such as '_'",
        ))
    elif config.indent_char.isspace() and config.indent_char != " ":
        issues.append(ConfigIssue(
            level="warn",
            path="faultscope.indent_char",
            message="indent_char is a control whitespace character; nesting depth will be hard to read",
            hint="Use a visible character such as '_' or a plain space",
        ))

    # log-only faults without a stack
    if config.throw_enabled is False and config.capture_stack is False:
        issues.append(ConfigIssue(
            level="warn",
            path="faultscope.capture_stack",
            message="capture_stack=false with throw_enabled=false leaves logged faults without stack traces",
            hint="Keep capture_stack=true when faults are log-only",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
