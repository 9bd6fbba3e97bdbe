"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    _SYNTAX_HINTS: dict[DiagnosticCode, str] = {
        DiagnosticCode.UNEXPECTED_EOF: "Check for unclosed brackets, braces or quotes",
        DiagnosticCode.UNEXPECTED_CHARACTER: (
            "Check separators: members and elements are separated by ',' "
            "and keys are followed by ':'"
        ),
        DiagnosticCode.TRAILING_CONTENT: "A document holds exactly one top-level value",
        DiagnosticCode.INVALID_ESCAPE: (
            'Valid escapes are \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX'
        ),
        DiagnosticCode.INVALID_NUMBER: (
            "Numbers have no leading zeros and need digits after '.' and 'e'"
        ),
    }

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint=ErrorTemplate._SYNTAX_HINTS[DiagnosticCode.UNEXPECTED_EOF],
        )

    @staticmethod
    def syntax_error(
        code: DiagnosticCode,
        message: str,
        span: SourceSpan,
        expected: tuple[str, ...] = (),
    ) -> Diagnostic:
        """Grammar failure at a source location.

        Args:
            code: One of the 3000-range syntax codes
            message: Description recorded by the failing production
            span: Location of the failure
            expected: Tokens accepted at that location

        Returns:
            Diagnostic for the given syntax code
        """
        return Diagnostic(
            code=code,
            message=message,
            span=span,
            hint=ErrorTemplate._SYNTAX_HINTS.get(code),
            expected=expected,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, position: int) -> Diagnostic:
        """Array/object nesting limit exceeded.

        Args:
            max_depth: The configured nesting limit
            position: Offset of the bracket that crossed the limit

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Flatten the document or raise max_nesting_depth on JsonParser",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Document exceeds the configured size limit.

        Args:
            size: Length of the document in characters
            max_size: The configured limit

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in JsonParser constructor to increase limit",
        )

    # =========================================================================
    # PROJECTION ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def projection_not_object(received_type: str) -> Diagnostic:
        """Projection input is not an Object.

        Args:
            received_type: Python type name of the value received

        Returns:
            Diagnostic for PROJECTION_NOT_OBJECT
        """
        msg = f"Only JSON objects can be projected onto a record, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.PROJECTION_NOT_OBJECT,
            message=msg,
            span=None,
            hint="Project the object nested inside the value instead",
        )

    @staticmethod
    def projection_not_record(type_name: str) -> Diagnostic:
        """Projection target is not a dataclass.

        Args:
            type_name: Name of the target type

        Returns:
            Diagnostic for PROJECTION_NOT_RECORD
        """
        msg = f"Projection target '{type_name}' is not a dataclass"
        return Diagnostic(
            code=DiagnosticCode.PROJECTION_NOT_RECORD,
            message=msg,
            span=None,
            hint="Decorate the target type with @dataclass",
        )

    @staticmethod
    def projection_field_missing(field_name: str, type_name: str) -> Diagnostic:
        """Required record field has no matching object key.

        Args:
            field_name: Record field without a default
            type_name: Name of the target type

        Returns:
            Diagnostic for PROJECTION_FIELD_MISSING
        """
        msg = f"No key matches required field '{field_name}' of '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.PROJECTION_FIELD_MISSING,
            message=msg,
            span=None,
            hint="Give the field a default value or add the key to the document",
            field_name=field_name,
        )
