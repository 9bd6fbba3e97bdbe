"""Recursion budget for the recursive-descent parser.

Nesting depth itself is tracked by ParseContext; this module only decides
how deep the parser may go before Python runs out of stack.

Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
import sys

from jparse.constants import FRAMES_PER_NESTING_LEVEL, RECURSION_RESERVE_FRAMES

__all__ = ["depth_clamp", "stack_depth"]

logger = logging.getLogger(__name__)


def stack_depth() -> int:
    """Count the Python frames on the calling thread's stack, caller included."""
    depth = 0
    frame = inspect.currentframe()
    if frame is not None:
        frame = frame.f_back
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = RECURSION_RESERVE_FRAMES,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    current_depth: int | None = None,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Each nesting level costs ``frames_per_level`` interpreter frames. The
    frames already on the stack and ``reserve_frames`` (entry point plus the
    innermost scalar production) come off sys.getrecursionlimit() first, so
    parsing at the returned depth does not raise RecursionError when called
    from the same stack depth. Logs warning if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Frames kept free beyond the nesting chain (default: 100)
        frames_per_level: Frames consumed per array/object level
        current_depth: Frames already on the stack; measured when None

    Returns:
        Safe depth value, clamped if necessary (never below 0)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100, current_depth=0)  # 600 frames, within limit
        100
        >>> depth_clamp(500, current_depth=0)  # clamped to (1000 - 100) // 6
        150
    """
    if current_depth is None:
        current_depth = stack_depth()
    limit = sys.getrecursionlimit()
    max_safe_depth = max(0, (limit - current_depth - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds Python recursion limit (%d) "
            "with %d frames already in use. "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            limit,
            current_depth,
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
