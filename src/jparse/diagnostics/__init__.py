"""Diagnostic system for JParse errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    JParseError,
    JsonNestingDepthError,
    JsonSyntaxError,
    ProjectionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "JParseError",
    "JsonNestingDepthError",
    "JsonSyntaxError",
    "OutputFormat",
    "ProjectionError",
    "SourceSpan",
]
