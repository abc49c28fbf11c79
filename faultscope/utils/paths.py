# faultscope/utils/paths.py
"""
Shared path utilities for faultscope.

Design goals:
- No hidden side-effects in "get_*" helpers (they don't create directories).
- Explicit environment overrides win over home-directory defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import os


CONFIG_FILE_NAME = "config.yml"


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def get_faultscope_home() -> Path:
    """
    Directory holding user-level faultscope files.

    Rules:
    1. If FAULTSCOPE_HOME is set, use it.
    2. Otherwise ~/.faultscope
    """
    return _env_path("FAULTSCOPE_HOME") or Path.home() / ".faultscope"


def config_search_paths() -> List[Path]:
    """
    Candidate config files, most specific first.

    FAULTSCOPE_CONFIG (explicit file) comes before the home-directory file.
    """
    paths = []
    explicit = _env_path("FAULTSCOPE_CONFIG")
    if explicit is not None:
        paths.append(explicit)
    paths.append(get_faultscope_home() / CONFIG_FILE_NAME)
    return paths
