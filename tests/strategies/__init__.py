"""Hypothesis strategies for JParse property-based testing.

Usage:
    from tests.strategies import json_documents, json_number_sources

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - json_documents, json_number_sources, json_string_contents
    - json_invalid_documents, json_nested_arrays
"""

from .documents import (
    JSON_WHITESPACE,
    KEY_PARTS,
    NON_JSON_WHITESPACE,
    json_documents,
    json_invalid_documents,
    json_keys,
    json_nested_arrays,
    json_number_sources,
    json_scalars,
    json_string_contents,
    json_values,
    json_whitespace,
)

__all__ = [
    "JSON_WHITESPACE",
    "KEY_PARTS",
    "NON_JSON_WHITESPACE",
    "json_documents",
    "json_invalid_documents",
    "json_keys",
    "json_nested_arrays",
    "json_number_sources",
    "json_scalars",
    "json_string_contents",
    "json_values",
    "json_whitespace",
]
