"""Primitive productions for the JSON parser.

This module provides the scalar productions of RFC 8259: the literal
names, string literals with escapes, and numbers.

Error Context:
    Productions record why they failed via ParseContext.fail() and
    return None. The furthest recorded failure becomes the error
    reported for the document.
"""

from jparse.constants import ASCII_DIGITS, HEX_DIGITS
from jparse.diagnostics import DiagnosticCode
from jparse.syntax.cursor import Cursor, ParseResult
from jparse.syntax.parser.context import ParseContext, attempt

__all__ = [
    "parse_character",
    "parse_escape_sequence",
    "parse_false",
    "parse_null",
    "parse_number",
    "parse_string",
    "parse_true",
]

# \uXXXX = exactly 4 hex digits (one UTF-16 code unit)
_UNICODE_ESCAPE_LEN: int = 4

# UTF-16 surrogate code unit ranges. A high surrogate must be directly
# followed by an escaped low surrogate; together they encode one scalar value.
_HIGH_SURROGATE_START: int = 0xD800
_HIGH_SURROGATE_END: int = 0xDBFF
_LOW_SURROGATE_START: int = 0xDC00
_LOW_SURROGATE_END: int = 0xDFFF

# First code point allowed unescaped in a string; U+0000..U+001F must be escaped.
_MIN_UNESCAPED: int = 0x20

# Single-character escapes: \X -> character
_SHORT_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# =============================================================================
# Literal names
# =============================================================================


def _parse_keyword[T](
    cursor: Cursor, context: ParseContext, keyword: str, value: T
) -> ParseResult[T] | None:
    if cursor.slice_ahead(len(keyword)) != keyword:
        return context.fail(f"Expected '{keyword}'", cursor, (keyword,))
    return ParseResult(value, cursor.advance(len(keyword)))


def parse_true(cursor: Cursor, context: ParseContext) -> ParseResult[bool] | None:
    """Parse the literal name ``true``."""
    return _parse_keyword(cursor, context, "true", True)


def parse_false(cursor: Cursor, context: ParseContext) -> ParseResult[bool] | None:
    """Parse the literal name ``false``."""
    return _parse_keyword(cursor, context, "false", False)


def parse_null(cursor: Cursor, context: ParseContext) -> ParseResult[None] | None:
    """Parse the literal name ``null``."""
    return _parse_keyword(cursor, context, "null", None)


# =============================================================================
# Strings
# =============================================================================


def _parse_hex4(cursor: Cursor, context: ParseContext) -> tuple[int, Cursor] | None:
    """Parse exactly four hex digits (case-insensitive) into a code unit."""
    # Use slice_ahead for O(1) extraction instead of character-by-character loop
    hex_digits = cursor.slice_ahead(_UNICODE_ESCAPE_LEN)
    if len(hex_digits) < _UNICODE_ESCAPE_LEN or not all(c in HEX_DIGITS for c in hex_digits):
        return context.fail(
            f"Invalid Unicode escape (expected {_UNICODE_ESCAPE_LEN} hex digits)",
            cursor,
            ("0-9", "a-f", "A-F"),
            DiagnosticCode.INVALID_ESCAPE,
        )
    return (int(hex_digits, 16), cursor.advance(_UNICODE_ESCAPE_LEN))


def _parse_unicode_escape(cursor: Cursor, context: ParseContext) -> tuple[str, Cursor] | None:
    """Parse the payload of ``\\u`` (cursor is after the ``u``).

    Combines an escaped surrogate pair into a single scalar value.
    """
    unit = _parse_hex4(cursor, context)
    if unit is None:
        return None
    code_unit, cursor = unit

    if _LOW_SURROGATE_START <= code_unit <= _LOW_SURROGATE_END:
        return context.fail(
            f"Unpaired low surrogate \\u{code_unit:04X}",
            cursor,
            code=DiagnosticCode.INVALID_ESCAPE,
        )

    if not _HIGH_SURROGATE_START <= code_unit <= _HIGH_SURROGATE_END:
        return (chr(code_unit), cursor)

    # High surrogate: the next escape must be its low half
    if cursor.slice_ahead(2) != "\\u":
        return context.fail(
            f"Unpaired high surrogate \\u{code_unit:04X}",
            cursor,
            ("\\u",),
            DiagnosticCode.INVALID_ESCAPE,
        )
    low = _parse_hex4(cursor.advance(2), context)
    if low is None:
        return None
    low_unit, low_cursor = low
    if not _LOW_SURROGATE_START <= low_unit <= _LOW_SURROGATE_END:
        return context.fail(
            f"Unpaired high surrogate \\u{code_unit:04X}",
            cursor,
            code=DiagnosticCode.INVALID_ESCAPE,
        )

    code_point = 0x10000 + ((code_unit - _HIGH_SURROGATE_START) << 10) + (
        low_unit - _LOW_SURROGATE_START
    )
    return (chr(code_point), low_cursor)


def parse_escape_sequence(cursor: Cursor, context: ParseContext) -> tuple[str, Cursor] | None:
    """Parse escape sequence after backslash in string.

    Supported escape sequences:
        \\" \\\\ \\/ \\b \\f \\n \\r \\t
        \\uXXXX → Unicode code unit (surrogate pairs combined)

    Args:
        cursor: Position AFTER the backslash
        context: Current parse context

    Returns:
        (escaped_char, new_cursor) on success, None on invalid escape
    """
    if cursor.is_eof:
        return context.fail(
            "Unexpected EOF in escape sequence", cursor, code=DiagnosticCode.UNEXPECTED_EOF
        )

    escape_ch = cursor.current

    if escape_ch in _SHORT_ESCAPES:
        return (_SHORT_ESCAPES[escape_ch], cursor.advance())

    if escape_ch == "u":
        return _parse_unicode_escape(cursor.advance(), context)

    return context.fail(
        f"Invalid escape sequence: \\{escape_ch}",
        cursor,
        tuple(_SHORT_ESCAPES) + ("u",),
        DiagnosticCode.INVALID_ESCAPE,
    )


def parse_character(cursor: Cursor, context: ParseContext) -> ParseResult[str] | None:
    """Parse one string character: a literal code point or an escape.

    Fails without recording anything on the closing quote, which is the
    normal end of a string rather than an error.
    """
    if cursor.is_eof:
        return context.fail(
            "Unterminated string literal", cursor, ('"',), DiagnosticCode.UNEXPECTED_EOF
        )

    ch = cursor.current

    if ch == '"':
        return None

    if ch == "\\":
        escape_result = parse_escape_sequence(cursor.advance(), context)
        if escape_result is None:
            return None
        escaped_char, cursor = escape_result
        return ParseResult(escaped_char, cursor)

    if ord(ch) < _MIN_UNESCAPED:
        return context.fail(
            f"Unescaped control character U+{ord(ch):04X} in string", cursor, ("\\u",)
        )

    return ParseResult(ch, cursor.advance())


def parse_string(cursor: Cursor, context: ParseContext) -> ParseResult[str] | None:
    """Parse string literal: "text"

    Examples:
        "hello" → hello
        "with \\"quotes\\"" → with "quotes"
        "\\u00E4" → ä
        "\\uD83D\\uDE00" → 😀 (one character)

    Args:
        cursor: Current position in source
        context: Current parse context

    Returns:
        ParseResult(string_value, new_cursor) on success, None if invalid
    """
    if cursor.is_eof or cursor.current != '"':
        return context.fail("Expected string", cursor, ('"',))

    cursor = cursor.advance()  # Skip opening "
    chars: list[str] = []

    while (result := attempt(parse_character, cursor, context)) is not None:
        chars.append(result.value)
        cursor = result.cursor

    closing = cursor.expect('"')
    if closing is None:
        # parse_character recorded why the string cannot continue here
        return None
    return ParseResult("".join(chars), closing)


# =============================================================================
# Numbers
# =============================================================================


def _skip_digits(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()
    return cursor


def parse_number(cursor: Cursor, context: ParseContext) -> ParseResult[float] | None:
    """Parse number: -?(0|[1-9][0-9]*)(.[0-9]+)?([eE][+-]?[0-9]+)?

    Every JSON number becomes a float; there is no integer variant.

    Examples:
        42 → 42.0
        -0 → -0.0
        1.5e-3 → 0.0015

    Rejected:
        01 (leading zero), 1. (no fraction digits), 1e (no exponent digits),
        +1, .5

    Args:
        cursor: Current position in source
        context: Current parse context

    Returns:
        ParseResult(float_value, new_cursor) on success, None if not a number
    """
    start_cursor = cursor

    # Optional minus sign (plus is not allowed)
    if not cursor.is_eof and cursor.current == "-":
        cursor = cursor.advance()

    if cursor.is_eof or cursor.current not in ASCII_DIGITS:
        return context.fail("Expected number", cursor, ("-", "0-9"), DiagnosticCode.INVALID_NUMBER)

    # Integer part: a lone 0, or a nonzero digit followed by digits
    if cursor.current == "0":
        cursor = cursor.advance()
        if not cursor.is_eof and cursor.current in ASCII_DIGITS:
            return context.fail(
                "Leading zeros are not allowed in numbers",
                cursor,
                code=DiagnosticCode.INVALID_NUMBER,
            )
    else:
        cursor = _skip_digits(cursor)

    # Optional fraction: once '.' is seen a digit is required
    if not cursor.is_eof and cursor.current == ".":
        cursor = cursor.advance()
        if cursor.is_eof or cursor.current not in ASCII_DIGITS:
            return context.fail(
                "Expected digit after decimal point",
                cursor,
                ("0-9",),
                DiagnosticCode.INVALID_NUMBER,
            )
        cursor = _skip_digits(cursor)

    # Optional exponent: once 'e'/'E' is seen a digit is required
    if not cursor.is_eof and cursor.current in ("e", "E"):
        cursor = cursor.advance()
        if not cursor.is_eof and cursor.current in ("+", "-"):
            cursor = cursor.advance()
        if cursor.is_eof or cursor.current not in ASCII_DIGITS:
            return context.fail(
                "Expected digit in exponent",
                cursor,
                ("0-9",),
                DiagnosticCode.INVALID_NUMBER,
            )
        cursor = _skip_digits(cursor)

    number_str = start_cursor.slice_to(cursor.pos)
    return ParseResult(float(number_str), cursor)
