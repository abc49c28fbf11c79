# faultscope/utils/location.py
from __future__ import annotations

from typing import Tuple
import sys


UNKNOWN_LOCATION: Tuple[str, int] = ("<unknown>", 0)


def caller_location(depth: int = 1) -> Tuple[str, int]:
    """
    Source file and line ``depth`` frames above the function calling this.

    ``caller_location(1)`` inside ``f`` returns where ``f`` was called from.
    Falls back to ``("<unknown>", 0)`` when the stack is shallower.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_LOCATION
    try:
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame
