"""
Base contract shared by every Authlete DTO.

A DTO declares its fields as class attributes using the descriptor types
below. Each descriptor knows its wire key, its default, how to validate an
assigned value and how to convert between the wire form and the in-memory
form. ``Dto`` collects the descriptors into an ordered field table and
implements ``to_dict``/``from_dict``/``to_json``/``from_json`` once, on top
of that table.

Assignment always goes through the descriptor, so values set directly and
values decoded from JSON are checked by exactly the same code.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from ..types.enum import AuthleteEnum
from ..types.errors import TypeMismatchError, ValidationError
from ..util.encoding import (
    INT64_MAX, INT64_MIN, decode_json_object, encode_json
)
from ..util.language import parse_boolean, parse_integer
from ..util.validation import (
    ensure_boolean, ensure_integer, ensure_not_negative,
    ensure_null_or_list_of_string, ensure_null_or_list_of_type,
    ensure_null_or_string, ensure_null_or_string_or_integer,
    ensure_null_or_type
)

T = TypeVar('T', bound='Dto')

_CAMEL_PATTERN = re.compile(r'_([a-z0-9])')


def to_camel_case(name: str) -> str:
    """``client_id_alias`` -> ``clientIdAlias``"""
    return _CAMEL_PATTERN.sub(lambda m: m.group(1).upper(), name)


class Field:
    """
    A DTO field.

    ``key`` is the wire key. It defaults to the camelCase form of the
    attribute name.
    """

    expected = 'value'

    def __init__(self, key: Optional[str] = None, default: Any = None):
        self.key = key
        self.default = default
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name
        if self.key is None:
            self.key = to_camel_case(name)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj, value):
        obj.__dict__[self.name] = self.validate(value)

    def validate(self, value: Any) -> Any:
        """Check a value being assigned and return what gets stored."""
        return value

    def decode(self, value: Any) -> Any:
        """Convert a wire value into something ``validate`` accepts."""
        return value

    def encode(self, value: Any) -> Any:
        """Convert a stored value into its wire form."""
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


class StringField(Field):
    expected = 'string'

    def validate(self, value):
        ensure_null_or_string(self.name, value)
        return value


class StringOrIntegerField(Field):
    """
    A number that may also travel as a string. The representation given is
    kept as is, so values too large for the peer's integers survive.
    Integers outside the signed 64-bit range are written as strings, the
    form they are read back in.
    """

    expected = 'integer or string'

    def validate(self, value):
        ensure_null_or_string_or_integer(self.name, value)
        return value

    def encode(self, value):
        if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
            return str(value)
        return value


class IntegerField(Field):
    """A strict integer, ``0`` when absent (pagination offsets, counts)."""

    expected = 'integer'

    def __init__(self, key: Optional[str] = None, default: int = 0,
                 non_negative: bool = False):
        super().__init__(key, default)
        self.non_negative = non_negative

    def validate(self, value):
        ensure_integer(self.name, value)
        if self.non_negative:
            ensure_not_negative(self.name, value)
        return value

    def decode(self, value):
        try:
            return parse_integer(value)
        except ValidationError as e:
            raise ValidationError(
                f"'{self.name}' must be an integer.", self.name, value) from e


class BooleanField(Field):
    """
    A flag. On the wire ``null`` and any string other than ``"true"``
    (ignoring case) read as ``False``.
    """

    expected = 'boolean'

    def __init__(self, key: Optional[str] = None, default: bool = False):
        super().__init__(key, default)

    def validate(self, value):
        ensure_boolean(self.name, value)
        return value

    def decode(self, value):
        try:
            return parse_boolean(value)
        except ValidationError as e:
            raise ValidationError(
                f"'{self.name}' must be a boolean value.", self.name, value) from e


class NullableBooleanField(Field):
    """A tri-state boolean: ``True``, ``False`` or unknown (``None``)."""

    expected = 'boolean'

    def validate(self, value):
        if value is not None:
            ensure_boolean(self.name, value)
        return value


class EnumField(Field):
    """A member of a closed enum, travelling as its canonical name."""

    expected = 'string'

    def __init__(self, enum_type: Type[AuthleteEnum], key: Optional[str] = None):
        super().__init__(key)
        self.enum_type = enum_type

    def validate(self, value):
        return self.enum_type.value_of(value, self.name)

    def encode(self, value):
        return None if value is None else value.name


class StringListField(Field):
    expected = 'list'

    def validate(self, value):
        ensure_null_or_list_of_string(self.name, value)
        return value

    def encode(self, value):
        return None if value is None else list(value)


class EnumListField(Field):
    expected = 'list'

    def __init__(self, enum_type: Type[AuthleteEnum], key: Optional[str] = None):
        super().__init__(key)
        self.enum_type = enum_type

    def validate(self, value):
        if value is None:
            return None
        if not isinstance(value, list):
            raise ValidationError(
                f"'{self.name}' must be null or a list.", self.name, value)
        return self.enum_type.value_of_list(value, self.name)

    def encode(self, value):
        return None if value is None else [element.name for element in value]


class DtoField(Field):
    """A nested DTO, travelling as a JSON object."""

    expected = 'object'

    def __init__(self, dto_type: Type['Dto'], key: Optional[str] = None):
        super().__init__(key)
        self.dto_type = dto_type

    def validate(self, value):
        ensure_null_or_type(self.name, value, self.dto_type)
        return value

    def decode(self, value):
        if value is None or isinstance(value, self.dto_type):
            return value
        if not isinstance(value, Mapping):
            raise TypeMismatchError(
                f"'{self.name}' must be an object, not {type(value).__name__}.",
                self.name, self.expected, value)
        return self.dto_type.from_dict(value)

    def encode(self, value):
        return None if value is None else value.to_dict()


class DtoListField(Field):
    """An ordered list of nested DTOs, travelling as an array of objects."""

    expected = 'list'

    def __init__(self, dto_type: Type['Dto'], key: Optional[str] = None):
        super().__init__(key)
        self.dto_type = dto_type

    def validate(self, value):
        ensure_null_or_list_of_type(self.name, value, self.dto_type)
        return value

    def decode(self, value):
        if value is None:
            return None
        if not isinstance(value, list):
            raise TypeMismatchError(
                f"'{self.name}' must be an array, not {type(value).__name__}.",
                self.name, self.expected, value)

        elements = []
        for element in value:
            if isinstance(element, self.dto_type):
                elements.append(element)
            elif isinstance(element, Mapping):
                elements.append(self.dto_type.from_dict(element))
            else:
                raise TypeMismatchError(
                    f"Elements of '{self.name}' must be objects, "
                    f"not {type(element).__name__}.",
                    self.name, 'object', element)
        return elements

    def encode(self, value):
        return None if value is None else [element.to_dict() for element in value]


class Dto:
    """
    Base class of all request and response objects.

    Subclasses only declare fields::

        class Pair(Dto):
            key = StringField()
            value = StringField()

    Keyword arguments of the constructor are assigned through the fields.
    """

    _fields: Tuple[Field, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        table: Dict[str, Field] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Field):
                    table[name] = attr

        cls._fields = tuple(table.values())

    def __init__(self, **kwargs):
        names = self.field_names()
        for name, value in kwargs.items():
            if name not in names:
                raise TypeError(
                    f"{type(self).__name__}() got an unexpected keyword argument '{name}'")
            setattr(self, name, value)

    @classmethod
    def fields(cls) -> Tuple[Field, ...]:
        """Fields in declaration order, inherited ones first."""
        return cls._fields

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in cls._fields]

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, keyed by wire key in declaration order."""
        return {f.key: f.encode(getattr(self, f.name)) for f in self._fields}

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> Optional[T]:
        """
        Build an instance from a wire representation.
        Unknown keys are ignored and absent keys keep the field default.
        """
        if data is None:
            return None

        if not isinstance(data, Mapping):
            raise TypeMismatchError(
                f"{cls.__name__} must be built from an object, "
                f"not {type(data).__name__}.",
                expected='object', actual=data)

        instance = cls()
        for f in cls._fields:
            if f.key in data:
                setattr(instance, f.name, f.decode(data[f.key]))

        return instance

    to_array = to_dict
    from_array = from_dict

    def to_json(self, pretty: bool = False) -> str:
        return encode_json(self.to_dict(), pretty)

    @classmethod
    def from_json(cls: Type[T], text: Optional[str]) -> Optional[T]:
        if text is None:
            return None
        return cls.from_dict(decode_json_object(text))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f.name) == getattr(other, f.name)
                   for f in self._fields)

    __hash__ = None

    def __repr__(self) -> str:
        values = ', '.join(
            f"{f.name}={getattr(self, f.name)!r}" for f in self._fields
            if getattr(self, f.name) is not None)
        return f"{type(self).__name__}({values})"


def to_json(dto: Optional[Dto], pretty: bool = False) -> Optional[str]:
    """JSON form of ``dto``; ``None`` when there is no DTO."""
    if dto is None:
        return None
    return dto.to_json(pretty)


class ApiResponse(Dto):
    """Fields common to every Authlete API response."""
    result_code = StringField()
    result_message = StringField()
