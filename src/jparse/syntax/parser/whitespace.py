"""Whitespace handling utilities for the JSON parser.

Per RFC 8259:
    ws = *( %x20 / %x09 / %x0A / %x0D )
"""

from jparse.constants import WHITESPACE_CHARS
from jparse.syntax.cursor import Cursor


def is_whitespace(ch: str) -> bool:
    """Check if a character is JSON insignificant whitespace.

    Stricter than str.isspace(): form feed, vertical tab, NBSP and the
    Unicode space separators are rejected.
    """
    return len(ch) == 1 and ch in WHITESPACE_CHARS


def skip_ws(cursor: Cursor) -> Cursor:
    """Skip insignificant whitespace (tab, LF, CR, space).

    Used around every Element and between object member tokens.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Example:
        >>> skip_ws(Cursor(" \\t\\r\\n 1", 0)).pos
        5
    """
    while not cursor.is_eof and is_whitespace(cursor.current):
        cursor = cursor.advance()
    return cursor
