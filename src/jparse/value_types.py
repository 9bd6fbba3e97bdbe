"""Value types produced by the parser.

Exports:
    - JsonValue: Union of the six JSON data-model variants

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["JsonValue"]

# JSON data model mapped onto native Python types:
#   null -> None, true/false -> bool, number -> float (always, no int variant),
#   string -> str, array -> list, object -> dict (insertion ordered).
type JsonValue = (
    None
    | bool
    | float
    | str
    | list[JsonValue]
    | dict[str, JsonValue]
)
