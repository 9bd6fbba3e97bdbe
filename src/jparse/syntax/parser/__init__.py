"""JSON parser module.

This module provides the main JsonParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main JsonParser class and document entry point
- context.py: ParseContext, failure tracking and the backtracking trial wrapper
- primitives.py: Scalar productions (literal names, strings, numbers)
- rules.py: Value dispatch, element, array, object and member productions
- whitespace.py: Insignificant whitespace handling

Public API:
    JsonParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from jparse.syntax.parser.context import ParseContext
from jparse.syntax.parser.core import JsonParser

__all__ = ["JsonParser", "ParseContext"]
