"""Projection of parsed objects onto dataclass records.

Maps a JSON object onto a statically declared record by matching keys to
field names ignoring case and underscores. The field list comes from
dataclasses.fields(), so the record type fully declares what is copied.

Rules:
    - Input must be an object (dict); arrays and scalars are rejected
    - Field "name" matches key "Name", "NAME", ...; field "is_good_boy"
      matches "IsGoodBoy" and "isGoodBoy"; the first such key in document
      order wins
    - Values are copied as parsed (numbers stay float, no coercion)
    - Fields without a matching key keep their default
    - Keys without a matching field are ignored

Python 3.13+.
"""

import logging
from dataclasses import MISSING, fields, is_dataclass

from jparse.diagnostics import ErrorTemplate, ProjectionError
from jparse.value_types import JsonValue

__all__ = ["project"]

logger = logging.getLogger(__name__)


def _match_name(name: str) -> str:
    """Fold a key or field name for matching: case and underscores ignored."""
    return name.replace("_", "").casefold()


def project[R](value: JsonValue, record_type: type[R]) -> R:
    """Build a ``record_type`` instance from a parsed JSON object.

    Args:
        value: Parsed value; must be the Object variant
        record_type: Dataclass to instantiate

    Returns:
        New record with matched fields populated

    Raises:
        ProjectionError: If value is not an object, record_type is not a
            dataclass, or a field without default has no matching key

    Example:
        >>> @dataclass
        ... class Dog:
        ...     name: str = ""
        ...     age: float = 0.0
        ...     is_good_boy: bool = False
        >>> project(parse('{"Name": "Javvy", "AGE": 4, "IsGoodBoy": true, "Breed": "Pug"}'), Dog)
        Dog(name='Javvy', age=4.0, is_good_boy=True)
    """
    if not isinstance(value, dict):
        raise ProjectionError(ErrorTemplate.projection_not_object(type(value).__name__))

    if not (isinstance(record_type, type) and is_dataclass(record_type)):
        type_name = getattr(record_type, "__name__", repr(record_type))
        raise ProjectionError(ErrorTemplate.projection_not_record(type_name))

    # folded name -> original key, first key in document order wins
    keys_by_name: dict[str, str] = {}
    for key in value:
        keys_by_name.setdefault(_match_name(key), key)

    kwargs: dict[str, JsonValue] = {}
    used_keys: set[str] = set()

    for record_field in fields(record_type):
        if not record_field.init:
            continue
        key = keys_by_name.get(_match_name(record_field.name))
        if key is None:
            if record_field.default is MISSING and record_field.default_factory is MISSING:
                raise ProjectionError(
                    ErrorTemplate.projection_field_missing(record_field.name, record_type.__name__)
                )
            continue
        kwargs[record_field.name] = value[key]
        used_keys.add(key)

    ignored = [key for key in value if key not in used_keys]
    if ignored:
        logger.debug(
            "Ignoring %d unmatched key(s) projecting onto %s: %s",
            len(ignored),
            record_type.__name__,
            ", ".join(ignored),
        )

    return record_type(**kwargs)
