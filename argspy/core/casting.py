"""Conversion of raw command-line tokens into typed values."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import os
from pathlib import Path
import re
from typing import Any

from argspy.core.types import ScalarType, ValueType
from argspy.errors import InvalidArgTypeError, InvalidDefaultError

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DOUBLE_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_TRUE_WORDS = frozenset({"true"})
_FALSE_WORDS = frozenset({"false"})


def _to_string(raw: str) -> str:
    return raw


def _to_integer(raw: str) -> int:
    if not _INTEGER_RE.match(raw):
        raise ValueError(raw)
    return int(raw)


def _to_double(raw: str) -> float:
    if not _DOUBLE_RE.match(raw):
        raise ValueError(raw)
    return float(raw)


def _to_boolean(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(raw)


def _to_character(raw: str) -> str:
    if not raw:
        raise ValueError(raw)
    return raw[0]


def _to_path(raw: str) -> Path:
    if not raw:
        raise ValueError(raw)
    return Path(raw)


_CONVERTERS: dict[ScalarType, Callable[[str], Any]] = {
    ScalarType.STRING: _to_string,
    ScalarType.INTEGER: _to_integer,
    ScalarType.DOUBLE: _to_double,
    ScalarType.BOOLEAN: _to_boolean,
    ScalarType.CHARACTER: _to_character,
    ScalarType.PATH: _to_path,
}


def parse_scalar(raw: str, scalar: ScalarType, flag: str) -> Any:
    """Convert a single raw token to the given scalar type.

    Args:
        raw: The token as typed by the user
        scalar: Target scalar type
        flag: Flag the token belongs to, used for error reporting

    Returns:
        The converted value

    Raises:
        InvalidArgTypeError: If the token cannot be converted
    """
    try:
        return _CONVERTERS[scalar](raw)
    except ValueError as e:
        raise InvalidArgTypeError(flag, scalar.display_name, raw) from e


def parse_array(raws: Sequence[str], scalar: ScalarType, flag: str) -> tuple[Any, ...]:
    """Convert every token independently, failing on the first bad element."""
    return tuple(parse_scalar(raw, scalar, flag) for raw in raws)


def cast_arguments(raws: Sequence[str], value_type: ValueType, flag: str) -> Any:
    """Convert the raw tokens of a parameter according to its declared type."""
    if value_type.is_array:
        return parse_array(raws, value_type.scalar, flag)
    return parse_scalar(raws[0], value_type.scalar, flag)


def _normalize_scalar_default(value: Any, scalar: ScalarType) -> Any:
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if scalar is ScalarType.STRING and isinstance(value, str):
        return value
    if scalar is ScalarType.INTEGER and is_number and isinstance(value, int):
        return value
    if scalar is ScalarType.DOUBLE and is_number:
        return float(value)
    if scalar is ScalarType.BOOLEAN and isinstance(value, bool):
        return value
    if scalar is ScalarType.CHARACTER and isinstance(value, str) and len(value) == 1:
        return value
    if scalar is ScalarType.PATH and isinstance(value, (str, os.PathLike)) and str(value):
        return Path(value)
    raise ValueError(value)


def normalize_default(value: Any, value_type: ValueType, flag: str) -> Any:
    """Check a default value against the declared type and normalize it.

    Doubles accept ints, paths accept strings, arrays accept any non-empty
    list or tuple and are stored as tuples.

    Raises:
        InvalidDefaultError: If the value does not fit the declared type
    """
    try:
        if value_type.is_array:
            if not isinstance(value, (list, tuple)) or not value:
                raise ValueError(value)
            return tuple(_normalize_scalar_default(item, value_type.scalar) for item in value)
        return _normalize_scalar_default(value, value_type.scalar)
    except ValueError as e:
        raise InvalidDefaultError(
            f"Default value {value!r} of {flag} is not of type "
            f"{value_type.display_name}{'[]' if value_type.is_array else ''}"
        ) from e


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_value(value: Any, value_type: ValueType) -> str:
    """Render a typed value the way it is shown in help output."""
    if value_type.is_array:
        return "[" + ", ".join(_render_scalar(item) for item in value) + "]"
    return _render_scalar(value)
