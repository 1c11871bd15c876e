"""Exception hierarchy for ArgsPy.

Two disjoint families exist:

- ``ArgsError``: the end user supplied bad command-line input. Hosts are
  expected to show the message and exit with a non-zero status.
- ``ParserUsageError``: the host program misused the API (duplicate flags,
  reading values before parsing, ...). These are bugs, not usage errors.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path


class ArgsError(Exception):
    """Base class for errors caused by the provided command-line arguments."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"\n<!> {message}\n\n> Use --help for more information.\n")

    @property
    def message(self) -> str:
        """Fully framed message, ready to be shown to the user."""
        return str(self)


class UnknownFlagError(ArgsError):
    """A token could not be matched against any registered flag or command."""

    def __init__(
        self, flag: str, suggestion: str | None = None, first_position: bool = False
    ) -> None:
        self.flag = flag
        self.suggestion = suggestion
        self.first_position = first_position
        message = f"unknown flag or command: {flag}"
        if suggestion:
            message += f"\n> did you mean: {suggestion} ?"
        if first_position:
            message += "\n\n> flag or command expected in first position!"
        super().__init__(message)


class MissingArgError(ArgsError):
    """A flag was given without any argument following it."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Missing argument for flag: {flag}")


class TooManyArgumentsError(ArgsError):
    """A scalar flag was followed by more than one argument."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Too many arguments provided to flag: {flag}")


class FlagAlreadyProvidedError(ArgsError):
    """The same parameter or command was supplied twice."""

    def __init__(self, full_flag: str, short_flag: str | None = None) -> None:
        self.full_flag = full_flag
        self.short_flag = short_flag
        flags = f"{full_flag}/{short_flag}" if short_flag else full_flag
        super().__init__(f"Redundant specification of arguments to: {flags}")


class MandatoryArgNotProvidedError(ArgsError):
    """One or more mandatory parameters did not receive a value."""

    def __init__(self, missing_flags: Sequence[str], message: str | None = None) -> None:
        self.missing_flags = tuple(missing_flags)
        if message is None:
            message = "Mandatory parameters are missing:" + "".join(
                f"\n{flag}" for flag in self.missing_flags
            )
        super().__init__(message)


class NoArgumentsProvidedError(MandatoryArgNotProvidedError):
    """No tokens at all were given while mandatory parameters exist."""

    def __init__(self, missing_flags: Sequence[str]) -> None:
        super().__init__(missing_flags, message="No arguments provided")


class InvalidArgTypeError(ArgsError):
    """A raw token could not be converted to the declared parameter type."""

    def __init__(self, flag: str, type_name: str, raw_value: str) -> None:
        self.flag = flag
        self.type_name = type_name
        self.raw_value = raw_value
        super().__init__(
            f"Invalid argument type provided to: {flag}\n"
            f"> expected {type_name}, got: '{raw_value}'"
        )


class HelpAtWrongPositionError(ArgsError):
    """``--help``/``-h`` was used somewhere other than alone or behind a flag."""

    def __init__(self) -> None:
        super().__init__("use --help/-h alone or directly behind a flag!")


class NotExistingPathError(ArgsError):
    """A path parameter with existence checking received a missing path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} does not exist!")


class ToggleError(ArgsError):
    """Several commands of the same toggle group were provided together."""

    def __init__(self, commands: Iterable[object]) -> None:
        self.commands = tuple(commands)
        listing = "".join(f"\n{command}" for command in self.commands)
        super().__init__(f"The following commands cannot be combined: {listing}")


class ParserUsageError(Exception):
    """Base class for programmer errors when using the parser API."""


class DuplicateFlagError(ParserUsageError, ValueError):
    """A flag is already registered or reserved for help."""


class EmptyFlagError(DuplicateFlagError):
    """A flag or command name is empty after normalization."""


class InvalidMandatoryDefaultError(ParserUsageError, ValueError):
    """A parameter was declared both mandatory and with a default value."""


class UnsupportedTypeError(ParserUsageError, TypeError):
    """A parameter was declared with a type outside the supported set."""


class InvalidDefaultError(ParserUsageError, ValueError):
    """A default value does not match the declared parameter type."""


class AlreadyParsedError(ParserUsageError, RuntimeError):
    """``parse`` was called more than once, or registration happened too late."""


class NotYetParsedError(ParserUsageError, RuntimeError):
    """Values were read before parsing completed successfully."""


class UndefinedFlagError(ParserUsageError, KeyError):
    """A value was requested for a flag that is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
