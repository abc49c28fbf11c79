# faultscope/core/trace/stack.py
"""
Stack-trace capture.

Captures raw return addresses for the current call stack. An address here is
the identity of a frame's code object plus the offset of the instruction the
frame was executing. Addresses are raw: turning them back into file/line
information is left to external tooling.

Capture is best-effort. It never raises; when the interpreter cannot provide
frames it returns an empty tuple.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, NamedTuple, Tuple


STACK_TRACE_CAPACITY: Final[int] = 16

logger = logging.getLogger(__name__)


class ReturnAddress(NamedTuple):
    """Raw address of one captured frame."""
    code: int    # id() of the frame's code object
    offset: int  # last executed instruction offset within that code object

    def __str__(self) -> str:
        return f"{self.code:#x}+{self.offset}"


def capture_return_addresses(
    max_count: int = STACK_TRACE_CAPACITY,
    skip: int = 0,
) -> Tuple[ReturnAddress, ...]:
    """
    Capture up to ``max_count`` addresses, innermost frame first.

    Args:
        max_count: Maximum number of addresses to return
        skip: Number of frames above the caller to omit (0 = start at the
            function that called this one)

    Returns:
        Tuple of addresses; may be shorter than ``max_count`` or empty
    """
    if max_count <= 0:
        return ()

    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        # fewer frames than requested
        return ()
    except Exception as e:
        logger.debug("Stack capture unavailable: %s: %s", type(e).__name__, e)
        return ()

    addresses = []
    try:
        while frame is not None and len(addresses) < max_count:
            addresses.append(ReturnAddress(id(frame.f_code), frame.f_lasti))
            frame = frame.f_back
    except Exception as e:
        logger.debug("Stack capture stopped early: %s: %s", type(e).__name__, e)
    finally:
        # Break the reference to the frame chain.
        del frame

    return tuple(addresses)


def render_stack_trace(addresses: Tuple[ReturnAddress, ...]) -> str:
    """Render addresses as whitespace-separated tokens."""
    return " ".join(str(address) for address in addresses)
