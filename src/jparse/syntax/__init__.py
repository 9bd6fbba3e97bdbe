"""JSON syntax parsing package.

Provides the cursor infrastructure and the recursive-descent parser.
Separate from projection so tooling can depend on the parser alone.

Python 3.13+.
"""

from jparse.value_types import JsonValue

from .cursor import Cursor, ParseError, ParseResult
from .parser import JsonParser, ParseContext

__all__ = [
    "Cursor",
    "JsonParser",
    "JsonValue",
    "ParseContext",
    "ParseError",
    "ParseResult",
    "parse",
]


def parse(source: str) -> JsonValue:
    """Parse a JSON document into a value tree.

    Convenience function for JsonParser().parse().

    Args:
        source: Complete JSON document

    Returns:
        Root value of the document

    Example:
        >>> from jparse.syntax import parse
        >>> parse('[ { "A": [ { "B": [ {} ] } ] } ]')
        [{'A': [{'B': [{}]}]}]
    """
    parser = JsonParser()
    return parser.parse(source)
