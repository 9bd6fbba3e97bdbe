"""Tests for the diagnostics package: codes, templates, formatter, errors."""

from __future__ import annotations

import json

import pytest

from jparse.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    JParseError,
    JsonNestingDepthError,
    JsonSyntaxError,
    OutputFormat,
    ProjectionError,
    SourceSpan,
)

# ============================================================================
# CODES AND SPANS
# ============================================================================


class TestDiagnosticCode:
    """Code ranges are stable."""

    def test_syntax_codes_in_3000_range(self) -> None:
        syntax = [
            DiagnosticCode.UNEXPECTED_EOF,
            DiagnosticCode.UNEXPECTED_CHARACTER,
            DiagnosticCode.TRAILING_CONTENT,
            DiagnosticCode.INVALID_ESCAPE,
            DiagnosticCode.INVALID_NUMBER,
            DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            DiagnosticCode.SOURCE_TOO_LARGE,
        ]
        assert all(3000 <= code.value < 4000 for code in syntax)

    def test_projection_codes_in_4000_range(self) -> None:
        projection = [
            DiagnosticCode.PROJECTION_NOT_OBJECT,
            DiagnosticCode.PROJECTION_NOT_RECORD,
            DiagnosticCode.PROJECTION_FIELD_MISSING,
        ]
        assert all(4000 <= code.value < 5000 for code in projection)

    def test_values_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestSourceSpan:
    """SourceSpan validates its invariants."""

    def test_valid_span(self) -> None:
        span = SourceSpan(start=3, end=4, line=1, column=4)
        assert span.end - span.start == 1

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"start": -1, "end": 0, "line": 1, "column": 1}, "start must be >= 0"),
            ({"start": 2, "end": 1, "line": 1, "column": 1}, "must be >= start"),
            ({"start": 0, "end": 0, "line": 0, "column": 1}, "line must be >= 1"),
            ({"start": 0, "end": 0, "line": 1, "column": 0}, "column must be >= 1"),
        ],
    )
    def test_invalid_span(self, kwargs: dict[str, int], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            SourceSpan(**kwargs)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Every error message is produced by ErrorTemplate."""

    def test_unexpected_eof(self) -> None:
        diagnostic = ErrorTemplate.unexpected_eof(7)

        assert diagnostic.code is DiagnosticCode.UNEXPECTED_EOF
        assert diagnostic.message == "Unexpected EOF at position 7"
        assert diagnostic.hint is not None

    def test_syntax_error_attaches_hint_and_expected(self) -> None:
        span = SourceSpan(start=2, end=3, line=1, column=3)
        diagnostic = ErrorTemplate.syntax_error(
            DiagnosticCode.INVALID_NUMBER, "Expected digit in exponent", span, ("0-9",)
        )

        assert diagnostic.span == span
        assert diagnostic.expected == ("0-9",)
        assert diagnostic.hint is not None
        assert "leading zeros" in diagnostic.hint

    def test_nesting_depth_exceeded(self) -> None:
        diagnostic = ErrorTemplate.nesting_depth_exceeded(100, 412)

        assert diagnostic.code is DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED
        assert diagnostic.message == "Maximum nesting depth (100) exceeded at position 412"

    def test_source_too_large_uses_thousands_separators(self) -> None:
        diagnostic = ErrorTemplate.source_too_large(2_000_000, 1_048_576)

        assert "2,000,000" in diagnostic.message
        assert "1,048,576" in diagnostic.message

    def test_projection_field_missing_names_field(self) -> None:
        diagnostic = ErrorTemplate.projection_field_missing("name", "Dog")

        assert diagnostic.field_name == "name"
        assert diagnostic.message == "No key matches required field 'name' of 'Dog'"


# ============================================================================
# FORMATTER
# ============================================================================


def _syntax_diagnostic() -> Diagnostic:
    span = SourceSpan(start=5, end=6, line=1, column=6)
    return ErrorTemplate.syntax_error(
        DiagnosticCode.UNEXPECTED_CHARACTER, "Expected ':' after object key", span, (":",)
    )


class TestDiagnosticFormatter:
    """Rust, simple and JSON output formats."""

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(_syntax_diagnostic())
        lines = output.split("\n")

        assert lines[0] == "error[UNEXPECTED_CHARACTER]: Expected ':' after object key"
        assert lines[1] == "  --> line 1, column 6"
        assert lines[2] == "  = expected: ':'"
        assert lines[3].startswith("  = help: ")

    def test_rust_format_field(self) -> None:
        diagnostic = ErrorTemplate.projection_field_missing("age", "Dog")
        output = DiagnosticFormatter().format(diagnostic)

        assert "  = field: age" in output
        assert "-->" not in output

    def test_rust_format_with_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(_syntax_diagnostic())

        assert output.startswith("\033[1;31merror\033[0m")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER, message="m", severity="warning"
        )

        assert DiagnosticFormatter().format(diagnostic).startswith("warning[")

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert (
            formatter.format(ErrorTemplate.projection_not_record("Dog"))
            == "PROJECTION_NOT_RECORD: Projection target 'Dog' is not a dataclass"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(_syntax_diagnostic()))

        assert data["code"] == "UNEXPECTED_CHARACTER"
        assert data["code_value"] == 3002
        assert (data["line"], data["column"], data["start"], data["end"]) == (1, 6, 5, 6)
        assert data["expected"] == [":"]
        assert data["severity"] == "error"
        assert "field_name" not in data

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.UNEXPECTED_CHARACTER, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "UNEXPECTED_CHARACTER: " + "x" * 10 + "..."

    def test_control_characters_escaped(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.UNEXPECTED_CHARACTER, message="a\nb")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(diagnostic) == "UNEXPECTED_CHARACTER: a\\x0ab"

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.unexpected_eof(0), ErrorTemplate.unexpected_eof(1)]
        )

        assert output.count("\n\n") == 1

    def test_diagnostic_str_and_format_error(self) -> None:
        diagnostic = _syntax_diagnostic()

        assert str(diagnostic) == "Expected ':' after object key"
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptionHierarchy:
    """All library errors derive from JParseError."""

    @pytest.mark.parametrize(
        "exc_type", [JsonSyntaxError, JsonNestingDepthError, ProjectionError]
    )
    def test_subclasses(self, exc_type: type[JParseError]) -> None:
        assert issubclass(exc_type, JParseError)

    def test_plain_message(self) -> None:
        error = JParseError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.projection_not_object("list")
        error = ProjectionError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[PROJECTION_NOT_OBJECT]")

    def test_syntax_error_defaults(self) -> None:
        error = JsonSyntaxError("Expected ']'")

        assert (error.position, error.line, error.column) == (0, 1, 1)
        assert error.expected == ()
        assert error.format_error() == "1:1: Expected ']'"

    def test_format_with_context_limits_lines(self) -> None:
        source = "[\n1,\n2,\n3,\nx\n]"
        error = JsonSyntaxError(
            "Expected value", position=10, line=5, column=1, source=source
        )

        rendered = error.format_with_context(context_lines=1)

        assert "   4 | 3," in rendered
        assert "   5 | x" in rendered
        assert "   6 | ]" in rendered
        assert "   3 | " not in rendered
