"""Parameter entity: one declared flag and the value it resolves to."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from loguru import logger

from argspy.core.casting import cast_arguments, normalize_default, render_value
from argspy.core.types import ScalarType, ValueType, resolve_value_type
from argspy.errors import (
    AlreadyParsedError,
    InvalidMandatoryDefaultError,
    NotYetParsedError,
    UnsupportedTypeError,
)
from argspy.utils.helpers import make_flag

_NOT_CAST = object()


def _never_parsed() -> bool:
    return False


class Parameter:
    """A single flag declaration together with its resolved value.

    The parameter is created when it is registered, receives its raw tokens
    exactly once while the parser runs, and is read by the host afterwards.
    The typed value is converted on first use and cached, so every later read
    returns the very same object.

    Two parameters are equal when their full flags are equal; the short flag
    is not part of the identity.

    Attributes:
        full_flag: Canonical full flag, e.g. ``--file``
        short_flag: Canonical short flag, e.g. ``-f``, or None
        description: Free text for the help output, may contain line breaks
        value_type: Declared type of the value(s)
        mandatory: Whether parsing fails when the flag is missing
        path_check: For path parameters, whether the path must exist
    """

    def __init__(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        value_type: ValueType | ScalarType | type = ValueType.STRING,
        *,
        mandatory: bool = False,
        default: Any = None,
        path_check: bool = False,
    ) -> None:
        self.full_flag = make_flag(full_flag)
        self.short_flag = make_flag(short_flag, short=True) if short_flag else None
        self.description = description
        self.value_type = resolve_value_type(value_type)
        self.mandatory = mandatory

        if mandatory and default is not None:
            raise InvalidMandatoryDefaultError(
                f"{self.full_flag} cannot be mandatory and have a default value"
            )
        if path_check and self.value_type.scalar is not ScalarType.PATH:
            raise UnsupportedTypeError(
                f"path_check is only available for Path parameters, not {self.full_flag}"
            )
        self.path_check = path_check

        self.has_default = default is not None
        self.default_value = (
            normalize_default(default, self.value_type, self.full_flag)
            if self.has_default
            else None
        )
        self.default_as_string = (
            render_value(self.default_value, self.value_type) if self.has_default else None
        )

        self._raw: tuple[str, ...] = ()
        self._typed: Any = _NOT_CAST
        self._is_parsed: Callable[[], bool] = _never_parsed

    def bind(self, is_parsed: Callable[[], bool]) -> None:
        """Attach the probe telling whether parsing completed successfully."""
        self._is_parsed = is_parsed

    @property
    def flags(self) -> tuple[str, ...]:
        """All flags this parameter answers to, full flag first."""
        if self.short_flag:
            return (self.full_flag, self.short_flag)
        return (self.full_flag,)

    @property
    def is_array(self) -> bool:
        return self.value_type.is_array

    def assign(self, raw_arguments: Sequence[str]) -> None:
        """Store the raw tokens matched to this parameter.

        Raises:
            AlreadyParsedError: If tokens were already assigned
        """
        if self._raw:
            raise AlreadyParsedError(f"{self.full_flag} already received its arguments")
        self._raw = tuple(raw_arguments)
        logger.debug(f"  {self.full_flag} <- {list(self._raw)}")

    def cast(self) -> Any:
        """Convert the assigned tokens, caching the result.

        Returns:
            The typed value, a tuple for array parameters

        Raises:
            InvalidArgTypeError: If a token does not match the declared type
        """
        if self._typed is _NOT_CAST:
            self._typed = cast_arguments(self._raw, self.value_type, self.full_flag)
        return self._typed

    def _ensure_parsed(self) -> None:
        if not self._is_parsed():
            raise NotYetParsedError(
                f"parse() was not called before trying to access {self.full_flag}!"
            )

    @property
    def is_provided(self) -> bool:
        """Whether the flag was given on the command line."""
        self._ensure_parsed()
        return bool(self._raw)

    @property
    def has_argument(self) -> bool:
        """Whether a value is available, either provided or from the default."""
        self._ensure_parsed()
        return bool(self._raw) or self.has_default

    @property
    def raw(self) -> tuple[str, ...]:
        """Raw tokens as typed by the user, empty if the flag was not given."""
        self._ensure_parsed()
        return self._raw

    @property
    def value(self) -> Any:
        """Typed value: the provided one, else the default, else None."""
        self._ensure_parsed()
        if self._raw:
            return self.cast()
        return self.default_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self.full_flag == other.full_flag

    def __hash__(self) -> int:
        return hash(self.full_flag)

    def __repr__(self) -> str:
        return (
            f"Parameter({self.full_flag!r}, {self.short_flag!r}, "
            f"type={self.value_type.name}, mandatory={self.mandatory})"
        )
