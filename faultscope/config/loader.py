# faultscope/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Environment variables override YAML
- Read once per process; immutable afterwards
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import os
import threading

import yaml

from .validator import ConfigIssue, validate_config
from ..utils.paths import config_search_paths


logger = logging.getLogger(__name__)

# Environment overrides: variable -> config field
ENV_OVERRIDES: Dict[str, str] = {
    "FAULTSCOPE_THROW": "throw_enabled",
    "FAULTSCOPE_CAPTURE_STACK": "capture_stack",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Configuration parsed but holds invalid values."""

    def __init__(self, issues: List[ConfigIssue]):
        self.issues = issues
        super().__init__("; ".join(str(issue) for issue in issues))


@dataclass(frozen=True)
class FaultScopeConfig:
    """
    Process-wide faultscope configuration.

    throw_enabled: If False, faults are never raised, only logged
    capture_stack: If False, faults are constructed with an empty stack trace
    indent_char: Character repeated once per context level in log lines
    """

    throw_enabled: bool = True
    capture_stack: bool = True
    indent_char: str = "_"

    @classmethod
    def default(cls) -> "FaultScopeConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "FaultScopeConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown faultscope config keys: %s", ", ".join(unknown))
        return replace(cls.default(), **{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FaultScopeConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $FAULTSCOPE_CONFIG
                2. ~/.faultscope/config.yml (or $FAULTSCOPE_HOME/config.yml)

        Returns:
            FaultScopeConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()

        section = yaml_data.get("faultscope", yaml_data)
        if not isinstance(section, dict):
            logger.warning("Ignoring faultscope config: expected a mapping, got %s", type(section).__name__)
            return cls.default()

        return cls.from_mapping(section)

    def with_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> "FaultScopeConfig":
        """Apply FAULTSCOPE_* environment overrides."""
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for var, field_name in ENV_OVERRIDES.items():
            raw = environ.get(var)
            if raw is None:
                continue
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                overrides[field_name] = True
            elif value in _FALSE_VALUES:
                overrides[field_name] = False
            else:
                logger.warning("Ignoring %s=%r: expected a boolean", var, raw)
        return replace(self, **overrides) if overrides else self

    def validate(self) -> List[ConfigIssue]:
        """
        Validate configuration values.

        Returns:
            List of issues (warn/error level)
        """
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "faultscope": {
                "throw_enabled": self.throw_enabled,
                "capture_stack": self.capture_stack,
                "indent_char": self.indent_char,
            }
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    paths = [Path(config_path)] if config_path else config_search_paths()

    for path in paths:
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Failed to read faultscope config %s: %s", path, e)
                return None
            return data if isinstance(data, dict) else None

    return None  # No YAML found, use code defaults


def load_config(config_path: Optional[Path] = None, *, strict: bool = False) -> FaultScopeConfig:
    """
    Load faultscope configuration.

    Args:
        config_path: Optional path to YAML file
        strict: Raise ConfigError on error-level issues instead of falling
            back to defaults

    Returns:
        FaultScopeConfig instance (always has code defaults, frozen)
    """
    config = FaultScopeConfig.from_yaml(config_path).with_env_overrides()

    issues = config.validate()
    errors = [issue for issue in issues if issue.level == "error"]
    for issue in issues:
        if issue.level == "warn":
            logger.warning("faultscope config: %s", issue)

    if errors:
        if strict:
            raise ConfigError(errors)
        for issue in errors:
            logger.warning("faultscope config: %s (using defaults)", issue)
        return FaultScopeConfig.default()

    return config


# Process-wide configuration, read once on first use
_CONFIG: Optional[FaultScopeConfig] = None
_CONFIG_LOCK = threading.Lock()


def get_config() -> FaultScopeConfig:
    """
    Get the process-wide configuration, loading it on first use.

    Returns:
        The same FaultScopeConfig instance for the life of the process
    """
    global _CONFIG

    if _CONFIG is None:
        with _CONFIG_LOCK:
            if _CONFIG is None:
                _CONFIG = load_config()
                logger.debug("faultscope config loaded: %s", _CONFIG.to_dict())

    return _CONFIG


__all__ = [
    "ConfigError",
    "FaultScopeConfig",
    "get_config",
    "load_config",
]
