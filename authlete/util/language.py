"""
Value coercion helpers.

Authlete's wire format is lenient: booleans may arrive as strings and large
integers may arrive as strings. These helpers convert such values into the
strict in-memory types used by the DTOs.
"""

import os
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..types.errors import ValidationError


def to_display_string(value: Any) -> Optional[str]:
    """
    Convert a value to the string form used on the wire.
    ``None`` stays ``None`` and booleans become ``"true"``/``"false"``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    return str(value)


def parse_boolean(value: Any) -> bool:
    """
    Interpret a wire value as a boolean flag.

    ``None`` is ``False``. A string is ``True`` only when it equals
    ``"true"`` ignoring case; every other string is ``False``.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"

    raise ValidationError(
        f"Failed to parse a value of type {type(value).__name__} as a boolean.",
        value=value)


def parse_integer(value: Any) -> int:
    """Interpret a wire value as an integer. ``None`` is ``0``."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValidationError("A boolean cannot be parsed as an integer.", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(f"'{value}' is not an integer.", value=value)

    raise ValidationError(
        f"Failed to parse a value of type {type(value).__name__} as an integer.",
        value=value)


def or_zero(value: Optional[Union[int, str]]) -> Union[int, str]:
    return 0 if value is None else value


def or_empty(value: Optional[str]) -> str:
    return "" if value is None else value


def get_from_dict(key: str, mapping: Optional[Mapping[str, Any]]) -> Any:
    """Look up ``key``; ``None`` when the mapping or the entry is missing."""
    if mapping is None:
        return None
    return mapping.get(key)


def get_from_dict_as_boolean(key: str, mapping: Optional[Mapping[str, Any]]) -> bool:
    return parse_boolean(get_from_dict(key, mapping))


def get_from_env(name: str) -> Optional[str]:
    """Value of an environment variable, ``None`` when unset or empty."""
    value = os.environ.get(name)
    if not value:
        return None
    return value


def enum_names(values: Optional[Iterable[Enum]]) -> Optional[List[str]]:
    """Canonical names of a list of enum members."""
    if values is None:
        return None
    return [value.name for value in values]


def to_query_value(value: Any) -> str:
    """Render a query parameter value before URL encoding."""
    if value is None:
        return ""
    return to_display_string(value)
