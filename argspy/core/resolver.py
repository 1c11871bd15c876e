"""Single-pass resolution of raw tokens onto registered parameters."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from loguru import logger

from argspy.core.parameter import Parameter
from argspy.core.registry import ParameterRegistry
from argspy.core.types import ScalarType
from argspy.errors import (
    AlreadyParsedError,
    FlagAlreadyProvidedError,
    HelpAtWrongPositionError,
    MandatoryArgNotProvidedError,
    MissingArgError,
    NoArgumentsProvidedError,
    NotExistingPathError,
    ToggleError,
    TooManyArgumentsError,
    UnknownFlagError,
)
from argspy.help.renderer import HelpRenderer
from argspy.matching.suggestion import unknown_flag_error
from argspy.utils.constants import Constants
from argspy.utils.helpers import is_help_token


class ParseState(Enum):
    """Lifecycle of a resolver."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    HELP_REQUESTED = "help_requested"  # terminal, values stay unavailable
    FAILED = "failed"


@dataclass(frozen=True)
class Parsed:
    """Parsing succeeded; values can be read from the parameters."""

    provided: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HelpRequested:
    """The user asked for help; ``text`` holds the rendered help box."""

    text: str


ParseResult = Parsed | HelpRequested


class Resolver:
    """Walks the raw tokens once and assigns them to parameters.

    Scan rules:
    - a token must resolve to a registered flag or command, otherwise the
      parse fails with a suggestion of the closest known flag
    - all following tokens that are neither flags, commands nor help tokens
      are arguments of that flag: exactly one for scalar parameters, at least
      one for array parameters
    - a parameter or command can be given only once

    Resolution runs at most once. Not thread-safe: the caller must not share
    a resolver between threads.
    """

    def __init__(
        self,
        registry: ParameterRegistry,
        renderer: HelpRenderer,
        exists: Callable[[Path], bool] | None = None,
        suggestion_threshold: float = Constants.DEFAULT_SUGGESTION_THRESHOLD,
    ) -> None:
        self._registry = registry
        self._renderer = renderer
        self._exists = exists or Path.exists
        self._threshold = suggestion_threshold
        self._state = ParseState.NOT_STARTED

    @property
    def state(self) -> ParseState:
        return self._state

    def is_completed(self) -> bool:
        return self._state is ParseState.COMPLETED

    def resolve(self, args: Sequence[str]) -> ParseResult:
        """Resolve the raw tokens.

        Args:
            args: Raw command-line tokens, without the program name

        Returns:
            Parsed on success, HelpRequested if help was asked for

        Raises:
            AlreadyParsedError: If called a second time
            ArgsError: For any problem with the provided tokens
        """
        if args is None:
            raise ValueError("Args cannot be None!")
        if self._state is not ParseState.NOT_STARTED:
            raise AlreadyParsedError(".parse() was already called!")

        self._state = ParseState.IN_PROGRESS
        tokens = list(args)
        logger.debug(f"Resolving {len(tokens)} token(s): {tokens}")
        try:
            result = self._run(tokens)
        except Exception as e:
            # Host callbacks (the path predicate) may raise anything
            self._state = ParseState.FAILED
            logger.debug(f"Resolution failed: {type(e).__name__}")
            raise

        if isinstance(result, HelpRequested):
            self._state = ParseState.HELP_REQUESTED
        else:
            self._state = ParseState.COMPLETED
        logger.debug(f"Resolution finished: {self._state.value}")
        return result

    def _run(self, tokens: list[str]) -> ParseResult:
        if not tokens:
            mandatory = self._registry.mandatory_entities()
            if mandatory:
                raise NoArgumentsProvidedError([p.full_flag for p in mandatory])
            return Parsed()

        help_result = self._intercept_help(tokens)
        if help_result is not None:
            return help_result

        resolved = self._scan(tokens)
        self._check_mandatory(resolved)
        self._check_toggles()
        return Parsed(provided=tuple(p.full_flag for p in resolved))

    def _intercept_help(self, tokens: list[str]) -> HelpRequested | None:
        """Detect help requests and misplaced help tokens."""
        if len(tokens) == 1 and is_help_token(tokens[0]):
            return HelpRequested(self._renderer.render_all(self._registry))

        if len(tokens) >= 2 and is_help_token(tokens[-1]):
            target = tokens[-2]
            entry = self._registry.lookup(target) or self._registry.lookup_command(target)
            earlier_help = any(is_help_token(token) for token in tokens[:-1])
            if entry is not None and not earlier_help:
                return HelpRequested(self._renderer.render_single(self._registry, entry))
            if entry is None and len(tokens) == 2 and not is_help_token(target):
                raise self._unknown(target, 0)

        if any(is_help_token(token) for token in tokens):
            raise HelpAtWrongPositionError()
        return None

    def _unknown(self, token: str, position: int) -> UnknownFlagError:
        return unknown_flag_error(token, position, self._registry.known_names(), self._threshold)

    def _is_argument(self, token: str) -> bool:
        return not is_help_token(token) and token not in self._registry

    def _scan(self, tokens: list[str]) -> list[Parameter]:
        resolved: list[Parameter] = []
        seen_handles: set[int] = set()
        i = 0
        while i < len(tokens):
            token = tokens[i]

            command = self._registry.lookup_command(token)
            if command is not None:
                if command.was_seen:
                    raise FlagAlreadyProvidedError(command.full_name, command.short_name)
                command.mark_provided()
                logger.debug(f"  command {command.full_name} provided")
                i += 1
                continue

            parameter = self._registry.lookup(token)
            if parameter is None:
                raise self._unknown(token, i)
            handle = self._registry.handle_of(parameter)
            if handle in seen_handles:
                raise FlagAlreadyProvidedError(parameter.full_flag, parameter.short_flag)

            end = i + 1
            while end < len(tokens) and self._is_argument(tokens[end]):
                end += 1
            arguments = tokens[i + 1 : end]

            if not arguments:
                raise MissingArgError(token)
            if not parameter.is_array and len(arguments) > 1:
                extra = arguments[1]
                if extra.startswith("-"):
                    raise self._unknown(extra, i + 2)
                raise TooManyArgumentsError(token)

            parameter.assign(arguments)
            parameter.cast()
            self._check_paths(parameter)

            seen_handles.add(handle)
            resolved.append(parameter)
            i = end
        return resolved

    def _check_paths(self, parameter: Parameter) -> None:
        """Run the existence predicate on checked path parameters."""
        if not parameter.path_check or parameter.value_type.scalar is not ScalarType.PATH:
            return
        typed = parameter.cast()
        paths = typed if parameter.is_array else (typed,)
        for path in paths:
            if not self._exists(path):
                raise NotExistingPathError(path)

    def _check_mandatory(self, resolved: list[Parameter]) -> None:
        given = set(resolved)
        missing = [p.full_flag for p in self._registry.mandatory_entities() if p not in given]
        if missing:
            raise MandatoryArgNotProvidedError(missing)

    def _check_toggles(self) -> None:
        for group in self._registry.toggles():
            provided = [command for command in group if command.was_seen]
            if len(provided) > 1:
                raise ToggleError(group)
