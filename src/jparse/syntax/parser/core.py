"""Core JSON parser implementation.

This module provides the JsonParser class that turns a complete JSON
document into a JsonValue tree.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~jparse.syntax.cursor.Cursor`)
    to traverse source text. Each production (in :mod:`~jparse.syntax.parser.rules`
    and :mod:`~jparse.syntax.parser.primitives`) returns either a
    :class:`~jparse.syntax.cursor.ParseResult` containing the parsed value
    and updated cursor position, or None on grammar failure.

    The document grammar is ``element EOF``: one value surrounded by optional
    whitespace, with nothing after it.

Security:
    Includes configurable input size and nesting depth limits to prevent
    DoS via unbounded memory allocation or stack exhaustion.

See Also:
    - :mod:`jparse.syntax.cursor` - Cursor and ParseResult types
    - :mod:`jparse.syntax.parser.rules` - Value, array, object productions
"""

import logging

from jparse.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jparse.core.depth_guard import depth_clamp
from jparse.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    JsonSyntaxError,
    SourceSpan,
)
from jparse.syntax.cursor import Cursor, ParseError
from jparse.syntax.parser.context import FailureTracker, ParseContext
from jparse.syntax.parser.rules import parse_element
from jparse.value_types import JsonValue

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)


class JsonParser:
    """JSON parser using immutable cursor pattern.

    Design:
    - Immutable cursor makes backtracking free: a failed trial leaves the
      caller's cursor untouched
    - No module-level state: every parse() call builds its own cursor and
      context, so one parser instance can serve many threads
    - Error messages include line:column with source context

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Configurable max_nesting_depth prevents stack exhaustion via [[[[...]]]]

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum allowed array/object nesting (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 100).
                              Clamped against the Python recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> JsonValue:
        """Parse a complete JSON document.

        Args:
            source: The whole document (no partial input)

        Returns:
            The root value: None, bool, float, str, list or dict

        Raises:
            JsonSyntaxError: If the document does not match the grammar
            JsonNestingDepthError: If nesting exceeds max_nesting_depth
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> parser = JsonParser()
            >>> parser.parse('{"Names": ["Alice", "Bob"], "Age": 4}')
            {'Names': ['Alice', 'Bob'], 'Age': 4.0}
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        logger.debug("Parsing JSON document (%d characters)", len(source))

        failures = FailureTracker()
        context = ParseContext(max_nesting_depth=self._max_nesting_depth, failures=failures)
        cursor = Cursor(source, 0)

        result = parse_element(cursor, context)

        if result is None:
            # parse_element always records a failure before returning None
            error = failures.furthest or ParseError("Expected value", cursor)
            raise self._syntax_error(error)

        if not result.cursor.is_eof:
            raise self._syntax_error(
                ParseError(
                    "Unexpected content after top-level value",
                    result.cursor,
                    ("EOF",),
                    DiagnosticCode.TRAILING_CONTENT,
                )
            )

        logger.debug("Parsed JSON document in %d trials", failures.trials)
        return result.value

    def try_parse(self, source: str) -> tuple[JsonValue, tuple[JsonSyntaxError, ...]]:
        """Parse a document without raising on syntax errors.

        Returns:
            Tuple of (result, errors):
            - result: Parsed value, or None if parsing failed
            - errors: Tuple of JsonSyntaxError (empty tuple on success)

        Note:
            ``null`` parses to None too; check ``errors`` to tell them apart.
            Nesting and size limit violations still raise.

        Example:
            >>> value, errors = JsonParser().try_parse("[1,]")
            >>> value, errors[0].position
            (None, 3)
        """
        try:
            return (self.parse(source), ())
        except JsonSyntaxError as e:
            return (None, (e,))

    @staticmethod
    def _syntax_error(error: ParseError) -> JsonSyntaxError:
        """Convert the recorded grammar failure into the public exception."""
        line, column = error.cursor.compute_line_col()
        position = error.cursor.pos
        end = position if error.cursor.is_eof else position + 1
        span = SourceSpan(start=position, end=end, line=line, column=column)
        diagnostic = ErrorTemplate.syntax_error(error.code, error.message, span, error.expected)
        logger.debug("JSON syntax error: %s", error.format_error())
        return JsonSyntaxError(
            diagnostic,
            position=position,
            line=line,
            column=column,
            expected=error.expected,
            source=error.cursor.source,
        )
