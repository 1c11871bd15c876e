"""Host-facing parser API."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
import sys
from typing import Any

from loguru import logger

from argspy.core.command import Command
from argspy.core.config import ParserConfig
from argspy.core.parameter import Parameter
from argspy.core.registry import ParameterRegistry
from argspy.core.resolver import HelpRequested, ParseResult, ParseState, Resolver
from argspy.core.types import ScalarType, ValueType
from argspy.errors import AlreadyParsedError, ArgsError, UndefinedFlagError
from argspy.help.renderer import HelpRenderer
from argspy.utils.helpers import make_flag


class ArgsParser:
    """Parse command-line arguments into typed parameter values.

    Usage:

        parser = ArgsParser()
        file = parser.add_string("file", "f", "input file", mandatory=True)
        sizes = parser.add_integer("sizes", "s", "sizes to use", array=True)
        parser.parse(sys.argv[1:])
        print(file.value, sizes.value)

    ``parse`` prints help or error messages and exits the process;
    ``parse_unchecked`` returns a ParseResult and raises ArgsError instead,
    leaving process handling to the host.

    A parser is parsed at most once and is not meant to be shared between
    threads.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        exists: Callable[[Path], bool] | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self._registry = ParameterRegistry()
        self._renderer = HelpRenderer(
            width=self.config.console_width, title=self.config.help_title
        )
        self._resolver = Resolver(
            self._registry,
            self._renderer,
            exists=exists,
            suggestion_threshold=self.config.suggestion_threshold,
        )

    @property
    def state(self) -> ParseState:
        return self._resolver.state

    @property
    def registry(self) -> ParameterRegistry:
        return self._registry

    def _ensure_not_parsed(self) -> None:
        if self._resolver.state is not ParseState.NOT_STARTED:
            raise AlreadyParsedError("Cannot register new flags after parse() was called")

    # Registration

    def add_parameter(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        value_type: ValueType | ScalarType | type = ValueType.STRING,
        mandatory: bool = False,
        default: Any = None,
        path_check: bool = False,
    ) -> Parameter:
        """Declare a parameter and return its handle.

        Flags are normalized: ``file`` becomes ``--file`` and ``f`` becomes
        ``-f``; already prefixed flags are kept.

        Raises:
            DuplicateFlagError: If a flag is empty, taken or reserved
            InvalidMandatoryDefaultError: If mandatory and default are combined
            UnsupportedTypeError: If the type is not supported
            InvalidDefaultError: If the default does not match the type
            AlreadyParsedError: If parsing already started
        """
        self._ensure_not_parsed()
        parameter = Parameter(
            full_flag,
            short_flag,
            description,
            value_type,
            mandatory=mandatory,
            default=default,
            path_check=path_check,
        )
        self._registry.register(parameter)
        parameter.bind(self._resolver.is_completed)
        return parameter

    def _add_typed(
        self, scalar: ScalarType, array: bool, *args: Any, **kwargs: Any
    ) -> Parameter:
        return self.add_parameter(*args, value_type=ValueType.of(scalar, array), **kwargs)

    def add_string(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.STRING, array, full_flag, short_flag, description, **kwargs
        )

    def add_integer(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.INTEGER, array, full_flag, short_flag, description, **kwargs
        )

    def add_double(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.DOUBLE, array, full_flag, short_flag, description, **kwargs
        )

    def add_boolean(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.BOOLEAN, array, full_flag, short_flag, description, **kwargs
        )

    def add_character(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.CHARACTER, array, full_flag, short_flag, description, **kwargs
        )

    def add_path(
        self,
        full_flag: str,
        short_flag: str | None = None,
        description: str | None = None,
        *,
        array: bool = False,
        **kwargs: Any,
    ) -> Parameter:
        return self._add_typed(
            ScalarType.PATH, array, full_flag, short_flag, description, **kwargs
        )

    def add_command(
        self, full_name: str, short_name: str | None = None, description: str | None = None
    ) -> Command:
        """Declare a command, a switch that takes no argument."""
        self._ensure_not_parsed()
        command = self._registry.register_command(Command(full_name, short_name, description))
        command.bind(self._resolver.is_completed)
        return command

    def toggle(self, *commands: Command) -> None:
        """Allow at most one of the given commands per invocation."""
        self._ensure_not_parsed()
        self._registry.toggle(*commands)

    # Parsing

    def parse_unchecked(self, args: Sequence[str]) -> ParseResult:
        """Parse the tokens, returning the result and raising on bad input.

        Raises:
            ArgsError: If the provided arguments are invalid
            AlreadyParsedError: If the parser was already used
        """
        return self._resolver.resolve(args)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """Parse the tokens, exiting the process on help or bad input.

        Help text is printed and the process exits with status 0; an error
        message is printed and the process exits with status 1.

        Args:
            args: Tokens to parse, defaults to ``sys.argv[1:]``
        """
        if args is None:
            args = sys.argv[1:]
        try:
            result = self.parse_unchecked(args)
        except ArgsError as e:
            logger.debug(f"Invalid arguments: {e.detail}")
            print(e.message)
            sys.exit(1)

        if isinstance(result, HelpRequested):
            print(result.text)
            sys.exit(0)
        return result

    def help_text(self) -> str:
        """Full help text, available at any time."""
        return self._renderer.render_all(self._registry)

    # Queries

    def _parameter_for(self, flag: str) -> Parameter:
        parameter = self._registry.lookup(flag)
        if parameter is None and flag.strip("-"):
            # Accept bare names as well, e.g. "file" for "--file"
            parameter = self._registry.lookup(make_flag(flag))
        if parameter is None:
            raise UndefinedFlagError(f"Parameter '{flag}' not defined")
        return parameter

    def get_argument_of(self, flag: str) -> Any:
        """Typed value of the parameter registered under ``flag``."""
        return self._parameter_for(flag).value

    def get_raw_of(self, flag: str) -> tuple[str, ...]:
        """Raw tokens given to the parameter registered under ``flag``."""
        return self._parameter_for(flag).raw

    def is_command_provided(self, name: str) -> bool:
        command = self._registry.lookup_command(name)
        if command is None:
            raise UndefinedFlagError(f"Command '{name}' not defined")
        return command.is_provided

    def __contains__(self, flag: str) -> bool:
        return flag in self._registry

