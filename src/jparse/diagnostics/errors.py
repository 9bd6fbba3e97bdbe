"""JParse exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JParseError(Exception):
    """Base exception for all JParse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonSyntaxError(JParseError):
    """JSON document does not match the grammar.

    No partial tree is produced. The error points at the furthest
    position the grammar reached before every alternative failed.

    Attributes:
        position: Character offset of the failure (0-indexed)
        line: Line of the failure (1-indexed)
        column: Column of the failure (1-indexed)
        expected: Tokens that would have been accepted at the failure point
        source: The document being parsed
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int = 0,
        line: int = 1,
        column: int = 1,
        expected: tuple[str, ...] = (),
        source: str = "",
    ) -> None:
        """Initialize JsonSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            position: Character offset of the failure
            line: Line of the failure (1-indexed)
            column: Column of the failure (1-indexed)
            expected: Tokens accepted at the failure point
            source: The document being parsed
        """
        super().__init__(message)
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        self.source = source

    def format_with_context(self, context_lines: int = 2) -> str:
        """Render the failing line(s) with a caret under the failure column.

        Example:
            >>> try:
            ...     parse('{"a" 1}')
            ... except JsonSyntaxError as e:
            ...     print(e.format_with_context())
            1:6: Expected ':' after object key (expected: ':')
            <BLANKLINE>
               1 | {"a" 1}
                        ^
        """
        lines = self.source.split("\n")
        result_lines = [self.format_error(), ""]

        start_line = max(1, self.line - context_lines)
        end_line = min(len(lines), self.line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == self.line:
                pointer = " " * (len(line_num_str) + self.column - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)

    def format_error(self) -> str:
        """Format error as a single ``line:column: message`` line.

        Example:
            >>> error = JsonSyntaxError("Expected ']'", position=3, line=1, column=4)
            >>> error.format_error()
            "1:4: Expected ']'"
        """
        message = self.diagnostic.message if self.diagnostic else str(self)
        error_msg = f"{self.line}:{self.column}: {message}"
        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"
        return error_msg


class JsonNestingDepthError(JParseError):
    """Arrays/objects nested deeper than the configured limit.

    Fatal: never absorbed by a backtracking trial, always surfaces from
    the top-level parse call.
    """


class ProjectionError(JParseError):
    """Parsed value cannot be projected onto the requested record type.

    Examples:
    - Projecting an Array or scalar instead of an Object
    - Target type is not a dataclass
    - Required record field has no matching key
    """
