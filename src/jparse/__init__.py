"""JParse - recursive-descent JSON parser with backtracking productions.

Parses a complete JSON document (RFC 8259) into native Python values and
reports failures with line:column diagnostics.

Public API:
    parse - Parse a document, raising JsonSyntaxError on failure
    try_parse - Parse a document, returning (value, errors)
    JsonParser - Parser with configurable size and nesting limits
    JsonValue - Type alias for parsed values
    project - Populate a dataclass from a parsed object

Exceptions:
    JParseError - Base exception class
    JsonSyntaxError - Document does not match the grammar
    JsonNestingDepthError - Nesting deeper than the configured limit
    ProjectionError - Object cannot be projected onto a record

Submodules:
    jparse.syntax - Cursor, ParseResult and the parser productions
    jparse.diagnostics - Error codes, templates and formatters
    jparse.projection - Object to dataclass projection
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    JParseError,
    JsonNestingDepthError,
    JsonSyntaxError,
    ProjectionError,
)
from .projection import project
from .syntax import JsonParser, parse
from .value_types import JsonValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("jparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

# Grammar conformance
__json_spec__ = "RFC 8259"

__all__ = [
    "JParseError",
    "JsonNestingDepthError",
    "JsonParser",
    "JsonSyntaxError",
    "JsonValue",
    "ProjectionError",
    "__json_spec__",
    "__version__",
    "parse",
    "project",
    "try_parse",
]


def try_parse(source: str) -> tuple[JsonValue, tuple[JsonSyntaxError, ...]]:
    """Parse a JSON document, returning errors instead of raising.

    Convenience function for JsonParser().try_parse().

    Example:
        >>> value, errors = try_parse('{"a": [1, 2]}')
        >>> value, errors
        ({'a': [1.0, 2.0]}, ())
    """
    return JsonParser().try_parse(source)
