"""Immutable cursor infrastructure for type-safe parsing.

Productions take a Cursor and return a ParseResult carrying the advanced
cursor, or None when they do not match.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor, so backtracking is just
      keeping the cursor you had before a trial
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    Line numbers count LF (\\n). CRLF documents report correct lines because
    the \\n is still present. CR-only documents report everything on line 1.
"""

from dataclasses import dataclass, field

from jparse.diagnostics import DiagnosticCode, ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("[1]", 0)
        >>> cursor.current
        '['
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        '1'
        >>> cursor.current  # Original unchanged (immutability)
        '['
        >>> Cursor("[1]", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input

        Type safety: mypy knows current is ALWAYS str, never None.
        Guard with is_eof instead of checking for None.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Never moves past EOF.

        Example:
            >>> cursor = Cursor("true", 0)
            >>> cursor.advance(4).pos
            4
            >>> cursor.advance(10).pos
            4
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor, run a production, then slice:

            >>> start_cursor = Cursor("-12,", 0)
            >>> start_cursor.slice_to(3)
            '-12'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.

        Example:
            >>> Cursor("null", 0).slice_ahead(4)
            'null'
            >>> Cursor("nu", 0).slice_ahead(4)
            'nu'
        """
        return self.source[self.pos : self.pos + n]

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("[]", 0).expect("[").pos
            1
            >>> Cursor("[]", 0).expect("{") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> cursor = Cursor('{\\n  "a": x\\n}', 9)
            >>> cursor.compute_line_col()
            (2, 8)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every production has signature:
            def parse_foo(cursor: Cursor, context: ParseContext) -> ParseResult[Foo] | None:
                ...
                return ParseResult(parsed_value, new_cursor)

        None signals grammar failure. The caller still holds the cursor it
        passed in, which is the rollback point.

    Example:
        >>> cursor = Cursor("[]", 0)
        >>> result = ParseResult([], cursor.advance(2))
        >>> result.value
        []
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Grammar failure with location and context.

    Recorded by failing productions; the furthest one becomes the
    JsonSyntaxError reported for the document.

    Example:
        >>> cursor = Cursor("[1 2]", 3)
        >>> error = ParseError("Expected ',' or ']'", cursor, expected=(",", "]"))
        >>> error.format_error()
        "1:4: Expected ',' or ']' (expected: ',', ']')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    code: DiagnosticCode = DiagnosticCode.UNEXPECTED_CHARACTER

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> cursor = Cursor('{\\n"a" 1}', 6)
            >>> ParseError("Expected ':' after object key", cursor).format_error()
            "2:5: Expected ':' after object key"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg
