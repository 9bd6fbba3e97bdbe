"""Core utilities shared across syntax and projection layers.

Exports:
    depth_clamp: Clamp nesting depth against the Python recursion limit
    stack_depth: Count frames on the current stack

Python 3.13+.
"""

from .depth_guard import depth_clamp, stack_depth

__all__ = ["depth_clamp", "stack_depth"]
