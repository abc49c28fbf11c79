# faultscope/core/errors/codes.py
from __future__ import annotations

from enum import Enum
from typing import Final


# ---- classification (stable public contract) ----

class Nature(Enum):
    """What kind of condition caused a fault."""
    PRECONDITION_VIOLATION = "requirement not met"
    INTERNAL_BUG = "bug in code"
    OS_ERROR = "error from OS"
    NETWORK_FAILURE = "network failure"
    UNCLASSIFIED = "error"

    def __str__(self) -> str:
        return self.value


class Durability(Enum):
    """Whether retrying the failed operation could plausibly succeed."""
    TEMPORARY = "temporary"
    PERMANENT = "permanent"

    def __str__(self) -> str:
        return self.value


# ---- semantic groups (internal helpers) ----

# The caller broke a contract; retrying the same call is pointless.
CALLER_NATURES: Final[frozenset] = frozenset({
    Nature.PRECONDITION_VIOLATION,
})

# Our own code is wrong.
BUG_NATURES: Final[frozenset] = frozenset({
    Nature.INTERNAL_BUG,
})

# The environment failed us (OS, network).
ENVIRONMENT_NATURES: Final[frozenset] = frozenset({
    Nature.OS_ERROR,
    Nature.NETWORK_FAILURE,
})
