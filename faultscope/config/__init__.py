# faultscope/config/__init__.py
"""
faultscope Configuration

Design principles:
1. Code has defaults; YAML is optional input (YAML can be deleted)
2. Environment variables override YAML
3. Loaded once per process and never mutated afterwards
"""

from .loader import ConfigError, FaultScopeConfig, get_config, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    "ConfigError",
    "ConfigIssue",
    "FaultScopeConfig",
    "get_config",
    "load_config",
    "validate_config",
]
