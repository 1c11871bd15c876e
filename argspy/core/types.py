"""Type definitions for ArgsPy."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from argspy.errors import UnsupportedTypeError


class ScalarType(Enum):
    """Scalar value types a parameter can be converted to."""

    STRING = ("s", "String")
    INTEGER = ("i", "Integer")
    DOUBLE = ("d", "Double")
    BOOLEAN = ("b", "Boolean")
    CHARACTER = ("c", "Character")
    PATH = ("p", "Path")

    def __init__(self, tag: str, display_name: str) -> None:
        self.tag = tag
        self.display_name = display_name


class ValueType(Enum):
    """Declared type of a parameter: a scalar type, single or array."""

    STRING = (ScalarType.STRING, False)
    INTEGER = (ScalarType.INTEGER, False)
    DOUBLE = (ScalarType.DOUBLE, False)
    BOOLEAN = (ScalarType.BOOLEAN, False)
    CHARACTER = (ScalarType.CHARACTER, False)
    PATH = (ScalarType.PATH, False)
    STRING_ARRAY = (ScalarType.STRING, True)
    INTEGER_ARRAY = (ScalarType.INTEGER, True)
    DOUBLE_ARRAY = (ScalarType.DOUBLE, True)
    BOOLEAN_ARRAY = (ScalarType.BOOLEAN, True)
    CHARACTER_ARRAY = (ScalarType.CHARACTER, True)
    PATH_ARRAY = (ScalarType.PATH, True)

    def __init__(self, scalar: ScalarType, is_array: bool) -> None:
        self.scalar = scalar
        self.is_array = is_array

    @property
    def tag(self) -> str:
        """Short marker used in help output, e.g. ``s`` or ``i+``."""
        return self.scalar.tag + ("+" if self.is_array else "")

    @property
    def display_name(self) -> str:
        return self.scalar.display_name

    @classmethod
    def of(cls, scalar: ScalarType, array: bool = False) -> ValueType:
        """Return the member for a scalar type and arity."""
        for member in cls:
            if member.scalar is scalar and member.is_array == array:
                return member
        raise UnsupportedTypeError(f"Unsupported type: {scalar!r}")


# Python types accepted as shorthand when declaring a parameter
_PYTHON_TYPES: dict[type, ScalarType] = {
    str: ScalarType.STRING,
    int: ScalarType.INTEGER,
    float: ScalarType.DOUBLE,
    bool: ScalarType.BOOLEAN,
    Path: ScalarType.PATH,
}


def resolve_value_type(declared: object, array: bool = False) -> ValueType:
    """Normalize a declared type into a ``ValueType``.

    Accepts a ``ValueType`` member, a ``ScalarType`` member or one of the Python
    types ``str``, ``int``, ``float``, ``bool`` and ``Path``.

    Args:
        declared: The type given by the host program
        array: Whether an array parameter is wanted (ignored for ``ValueType``)

    Returns:
        The matching ValueType member

    Raises:
        UnsupportedTypeError: If the type is not part of the supported set
    """
    if isinstance(declared, ValueType):
        return declared
    if isinstance(declared, ScalarType):
        return ValueType.of(declared, array)
    if isinstance(declared, type) and declared in _PYTHON_TYPES:
        return ValueType.of(_PYTHON_TYPES[declared], array)
    name = getattr(declared, "__name__", repr(declared))
    raise UnsupportedTypeError(f"Unsupported type: {name}")
