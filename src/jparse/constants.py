"""Shared constants for JParse.

Centralized configuration constants used across the syntax and projection
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing
- Input limits: DoS prevention via size constraints
- Grammar tables: Character classes of the JSON grammar (RFC 8259)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "RECURSION_RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar tables
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "HEX_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum array/object nesting accepted by the parser.
# Each nesting level costs a fixed number of Python frames in the recursive
# descent, so this bound keeps parsing clear of RecursionError.
MAX_DEPTH: int = 100

# Python frames consumed per array/object level:
# element -> value -> attempt -> object -> attempt -> member -> element
FRAMES_PER_NESTING_LEVEL: int = 6

# Frames kept free beyond the nesting chain for the parse entry point and the
# innermost scalar production (string escape -> hex digits), with headroom
# for calling parse() deeper than the parser was constructed.
RECURSION_RESERVE_FRAMES: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# GRAMMAR TABLES
# ============================================================================

# Insignificant whitespace: tab, line feed, carriage return, space. Nothing else.
WHITESPACE_CHARS: str = "\t\n\r "

# ASCII digits only - str.isdigit() accepts Unicode digits like ² which
# the JSON grammar does not.
ASCII_DIGITS: str = "0123456789"

HEX_DIGITS: str = "0123456789abcdefABCDEF"
