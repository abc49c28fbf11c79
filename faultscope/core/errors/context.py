# faultscope/core/errors/context.py
"""
Diagnostic context chain.

A fault carries a singly linked chain of context frames, innermost first:
the head is the most recently attached annotation and each frame's ``next``
points at the frame attached before it (one level further out in the call
nesting). Frames are immutable; growing the chain always means prepending a
new head.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class ContextFrame:
    """One annotation narrating why a fault surfaced at one level of nesting."""
    file: str
    line: int
    description: str
    next: Optional["ContextFrame"] = None

    def copy(self) -> "ContextFrame":
        """
        Deep-copy this frame and every frame after it.

        The copy shares no frame objects with the original. Built iteratively
        so that long chains never hit the recursion limit.
        """
        frames = list(iter_frames(self))
        copied: Optional[ContextFrame] = None
        for frame in reversed(frames):
            copied = ContextFrame(frame.file, frame.line, frame.description, copied)
        assert copied is not None
        return copied

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "line": self.line,
            "description": self.description,
        }


def iter_frames(head: Optional[ContextFrame]) -> Iterator[ContextFrame]:
    """Yield frames in stored order (innermost-attached first)."""
    frame = head
    while frame is not None:
        yield frame
        frame = frame.next


def chain_depth(head: Optional[ContextFrame]) -> int:
    """Number of frames in the chain starting at ``head``."""
    return sum(1 for _ in iter_frames(head))


def chain_to_list(head: Optional[ContextFrame]) -> List[dict]:
    return [frame.to_dict() for frame in iter_frames(head)]
