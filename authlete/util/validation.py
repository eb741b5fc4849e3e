"""
Guard functions used by DTO setters and API entry points.

Each guard checks a single (name, value) pair and raises ValidationError
naming the argument when the check fails. A bool never counts as an integer.
"""

from typing import Any

from ..types.errors import ValidationError


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_boolean(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ValidationError(f"'{name}' must be a boolean value.", name, value)


def ensure_integer(name: str, value: Any) -> None:
    if not _is_integer(value):
        raise ValidationError(f"'{name}' must be an integer.", name, value)


def ensure_string(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"'{name}' must be a string.", name, value)


def ensure_string_or_integer(name: str, value: Any) -> None:
    if not (isinstance(value, str) or _is_integer(value)):
        raise ValidationError(f"'{name}' must be a string or an integer.", name, value)


def ensure_not_null(name: str, value: Any) -> None:
    if value is None:
        raise ValidationError(f"'{name}' must not be null.", name)


def ensure_not_negative(name: str, value: Any) -> None:
    if value < 0:
        raise ValidationError(f"'{name}' must not be negative.", name, value)


def ensure_null_or_string(name: str, value: Any) -> None:
    if value is not None:
        ensure_string(name, value)


def ensure_null_or_integer(name: str, value: Any) -> None:
    if value is not None:
        ensure_integer(name, value)


def ensure_null_or_string_or_integer(name: str, value: Any) -> None:
    if value is not None:
        ensure_string_or_integer(name, value)


def ensure_null_or_type(name: str, value: Any, expected_type: type) -> None:
    if value is not None and not isinstance(value, expected_type):
        raise ValidationError(
            f"'{name}' must be null or an instance of {expected_type.__name__}.",
            name, value)


def ensure_null_or_list_of_string(name: str, value: Any) -> None:
    if value is None:
        return

    if not isinstance(value, list):
        raise ValidationError(f"'{name}' must be null or a list.", name, value)

    for index, element in enumerate(value):
        if not isinstance(element, str):
            raise ValidationError(
                f"'{name}[{index}]' must be a string.", name, element)


def ensure_null_or_list_of_type(name: str, value: Any, expected_type: type) -> None:
    if value is None:
        return

    if not isinstance(value, list):
        raise ValidationError(f"'{name}' must be null or a list.", name, value)

    for index, element in enumerate(value):
        if not isinstance(element, expected_type):
            raise ValidationError(
                f"'{name}[{index}]' must be an instance of {expected_type.__name__}.",
                name, element)
