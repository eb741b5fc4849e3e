"""
Closed enumerations exchanged with the Authlete API.

Each enum is a ``str``/``Enum`` mixin whose member values are the canonical
uppercase names used on the wire. Parsing goes through ``value_of``, which
never falls back to a default for unknown names.
"""

from enum import Enum
from typing import Any, Iterable, List, Optional

from .errors import EnumValueError, TypeMismatchError


class AuthleteEnum(str, Enum):
    """Base class of every closed value set used by the DTOs."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def value_of(cls, value: Any, field: Optional[str] = None):
        """
        Resolve a member from a canonical name.

        ``None`` yields ``None`` and a member of this enum is returned as is.
        A string must match a member name exactly (case-sensitive).
        """
        if value is None:
            return None

        if isinstance(value, cls):
            return value

        # Members of other enums are str instances too.
        if not isinstance(value, str) or isinstance(value, Enum):
            raise TypeMismatchError(
                f"{cls.__name__} cannot be built from a value of type "
                f"{type(value).__name__}.",
                field, 'string', value)

        member = cls.__members__.get(value)
        if member is None:
            raise EnumValueError(cls, value, field)

        return member

    @classmethod
    def value_of_list(cls, values: Optional[Iterable[Any]],
                      field: Optional[str] = None) -> Optional[List["AuthleteEnum"]]:
        """Apply ``value_of`` to every element of ``values``."""
        if values is None:
            return None
        return [cls.value_of(value, field) for value in values]

    @classmethod
    def names(cls) -> List[str]:
        return list(cls.__members__)
