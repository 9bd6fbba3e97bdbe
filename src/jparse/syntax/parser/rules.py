"""Grammar rules for JSON values, arrays, objects and members.

The ``value`` production is ambiguous at its first character only in the
sense that any of seven alternatives may start it. parse_value tries them in
a fixed priority order through the backtracking trial wrapper and commits
to the first one that matches:

    object, array, string, number, true, false, null

Composite productions recurse through parse_element, which wraps a value
in insignificant whitespace.
"""

from jparse.diagnostics import DiagnosticCode
from jparse.syntax.cursor import Cursor, ParseResult
from jparse.syntax.parser.context import ParseContext, Production, attempt
from jparse.syntax.parser.primitives import (
    parse_false,
    parse_null,
    parse_number,
    parse_string,
    parse_true,
)
from jparse.syntax.parser.whitespace import skip_ws
from jparse.value_types import JsonValue

__all__ = [
    "VALUE_ALTERNATIVES",
    "ParseContext",
    "parse_array",
    "parse_element",
    "parse_member",
    "parse_object",
    "parse_value",
]

# Tokens that may start a value, for "expected" lists in error reports
_VALUE_START_TOKENS: tuple[str, ...] = ("{", "[", '"', "-", "0-9", "true", "false", "null")


# =============================================================================
# Value dispatch
# =============================================================================


def parse_element(cursor: Cursor, context: ParseContext) -> ParseResult[JsonValue] | None:
    """Parse element: ws value ws"""
    cursor = skip_ws(cursor)

    result = parse_value(cursor, context)
    if result is None:
        return result

    return ParseResult(result.value, skip_ws(result.cursor))


def parse_value(cursor: Cursor, context: ParseContext) -> ParseResult[JsonValue] | None:
    """Parse value by trying each alternative in grammar-priority order.

    Examples:
        {"a": 1} → {"a": 1.0}
        [true, null] → [True, None]
        "x" → "x"

    Args:
        cursor: Current position in source (whitespace already skipped)
        context: Current parse context

    Returns:
        ParseResult of the first matching alternative, None if none match
    """
    for production in VALUE_ALTERNATIVES:
        result = attempt(production, cursor, context)
        if result is not None:
            return result

    if cursor.is_eof:
        return context.fail(
            "Unexpected end of input, expected a value",
            cursor,
            _VALUE_START_TOKENS,
            DiagnosticCode.UNEXPECTED_EOF,
        )
    return context.fail("Expected value", cursor, _VALUE_START_TOKENS)


# =============================================================================
# Arrays
# =============================================================================


def parse_array(cursor: Cursor, context: ParseContext) -> ParseResult[list[JsonValue]] | None:
    """Parse array: '[' ws ( element ( ',' element )* )? ']'

    A ',' commits to another element, so ``[1,]`` is rejected.

    Args:
        cursor: Current position in source
        context: Current parse context

    Returns:
        ParseResult(list_of_values, new_cursor) on success, None otherwise

    Raises:
        JsonNestingDepthError: If nesting exceeds the context limit
    """
    if cursor.is_eof or cursor.current != "[":
        return context.fail("Expected '['", cursor, ("[",))

    nested = context.enter_nested(cursor)
    cursor = skip_ws(cursor.advance())
    elements: list[JsonValue] = []

    element = attempt(parse_element, cursor, nested)
    if element is not None:
        elements.append(element.value)
        cursor = element.cursor

        while (after_comma := cursor.expect(",")) is not None:
            element = attempt(parse_element, after_comma, nested)
            if element is None:
                return None
            elements.append(element.value)
            cursor = element.cursor

    closing = cursor.expect("]")
    if closing is None:
        return _fail_unclosed(cursor, context, "]", has_items=bool(elements))
    return ParseResult(elements, closing)


# =============================================================================
# Objects
# =============================================================================


def parse_member(
    cursor: Cursor, context: ParseContext
) -> ParseResult[tuple[str, JsonValue]] | None:
    """Parse member: ws string ws ':' element"""
    cursor = skip_ws(cursor)

    if cursor.is_eof or cursor.current != '"':
        return context.fail("Expected string key", cursor, ('"',))

    key = parse_string(cursor, context)
    if key is None:
        return key

    cursor = skip_ws(key.cursor)
    after_colon = cursor.expect(":")
    if after_colon is None:
        return context.fail("Expected ':' after object key", cursor, (":",))

    value = parse_element(after_colon, context)
    if value is None:
        return value

    return ParseResult((key.value, value.value), value.cursor)


def parse_object(
    cursor: Cursor, context: ParseContext
) -> ParseResult[dict[str, JsonValue]] | None:
    """Parse object: '{' ws ( member ( ',' member )* )? '}'

    Members keep insertion order. A repeated key overwrites the earlier
    value and keeps the earlier position (last write wins).

    Args:
        cursor: Current position in source
        context: Current parse context

    Returns:
        ParseResult(dict, new_cursor) on success, None otherwise

    Raises:
        JsonNestingDepthError: If nesting exceeds the context limit
    """
    if cursor.is_eof or cursor.current != "{":
        return context.fail("Expected '{'", cursor, ("{",))

    nested = context.enter_nested(cursor)
    cursor = skip_ws(cursor.advance())
    members: dict[str, JsonValue] = {}

    member = attempt(parse_member, cursor, nested)
    if member is not None:
        key, value = member.value
        members[key] = value
        cursor = member.cursor

        while (after_comma := cursor.expect(",")) is not None:
            member = attempt(parse_member, after_comma, nested)
            if member is None:
                return None
            key, value = member.value
            members[key] = value
            cursor = member.cursor

    closing = cursor.expect("}")
    if closing is None:
        return _fail_unclosed(cursor, context, "}", has_items=bool(members))
    return ParseResult(members, closing)


def _fail_unclosed(cursor: Cursor, context: ParseContext, bracket: str, *, has_items: bool) -> None:
    opening_expected = '"' if bracket == "}" else "value"
    expected = (",", bracket) if has_items else (opening_expected, bracket)
    if cursor.is_eof:
        return context.fail(
            f"Unexpected end of input, expected '{bracket}'",
            cursor,
            expected,
            DiagnosticCode.UNEXPECTED_EOF,
        )
    if has_items:
        return context.fail(f"Expected ',' or '{bracket}'", cursor, expected)
    return context.fail(f"Expected '{bracket}'", cursor, expected)


VALUE_ALTERNATIVES: tuple[Production[JsonValue], ...] = (
    parse_object,
    parse_array,
    parse_string,
    parse_number,
    parse_true,
    parse_false,
    parse_null,
)
