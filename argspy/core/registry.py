"""Registry owning every declared parameter and command."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from argspy.core.command import Command
from argspy.core.parameter import Parameter
from argspy.errors import DuplicateFlagError, ParserUsageError
from argspy.utils.constants import Constants


class ParameterRegistry:
    """Store of parameters with lookup by full or short flag.

    Parameters live in a single list and are referred to by their index
    (handle). Both flag forms map to the same handle, so there is exactly one
    mutable entity per declared flag. Commands share the same name space:
    no flag or command name may be registered twice.

    Attributes:
        longest_full_flag: Length of the longest full flag / command name
        longest_short_flag: Length of the longest short flag / command alias
    """

    def __init__(self) -> None:
        self._parameters: list[Parameter] = []
        self._flag_index: dict[str, int] = {}
        self._mandatory: list[int] = []
        self._commands: list[Command] = []
        self._command_index: dict[str, int] = {}
        self._toggles: list[tuple[Command, ...]] = []
        self.longest_full_flag = 0
        self.longest_short_flag = 0

    def _check_names(self, names: Iterable[str]) -> None:
        """Ensure names are free and not reserved for the help output."""
        names = tuple(names)
        for name in names:
            if name in self._flag_index or name in self._command_index:
                raise DuplicateFlagError(f"Flag already exists: {name}")
        for name in names:
            if name in Constants.RESERVED_FLAGS:
                raise DuplicateFlagError("--help/-h is reserved!")

    def _update_name_sizes(self, full: str, short: str | None) -> None:
        self.longest_full_flag = max(self.longest_full_flag, len(full))
        if short:
            self.longest_short_flag = max(self.longest_short_flag, len(short))

    def register(self, parameter: Parameter) -> Parameter:
        """Add a parameter after checking that its flags are unique.

        Args:
            parameter: The parameter to add

        Returns:
            The same parameter instance

        Raises:
            DuplicateFlagError: If a flag is already taken or reserved
        """
        self._check_names(parameter.flags)

        handle = len(self._parameters)
        self._parameters.append(parameter)
        for flag in parameter.flags:
            self._flag_index[flag] = handle
        if parameter.mandatory:
            self._mandatory.append(handle)
        self._update_name_sizes(parameter.full_flag, parameter.short_flag)

        logger.debug(
            f"Registered {parameter.full_flag} "
            f"({parameter.value_type.name}, mandatory={parameter.mandatory})"
        )
        return parameter

    def register_command(self, command: Command) -> Command:
        """Add a command after checking that its names are unique."""
        self._check_names(command.names)

        handle = len(self._commands)
        self._commands.append(command)
        for name in command.names:
            self._command_index[name] = handle
        self._update_name_sizes(command.full_name, command.short_name)

        logger.debug(f"Registered command {command.full_name}")
        return command

    def toggle(self, *commands: Command) -> None:
        """Declare that at most one of the given commands may be provided."""
        if len(commands) < 2:
            raise ParserUsageError("A toggle needs at least two commands")
        for command in commands:
            if self.lookup_command(command.full_name) is not command:
                raise ParserUsageError(f"Command {command.full_name} is not registered")
        group = tuple(commands)
        self._toggles.append(group)
        for command in group:
            command.toggle_group = group

    def lookup(self, token: str) -> Parameter | None:
        """Exact lookup of a parameter by full or short flag."""
        handle = self._flag_index.get(token)
        return None if handle is None else self._parameters[handle]

    def lookup_command(self, token: str) -> Command | None:
        """Exact lookup of a command by name or alias."""
        handle = self._command_index.get(token)
        return None if handle is None else self._commands[handle]

    def handle_of(self, parameter: Parameter) -> int:
        return self._flag_index[parameter.full_flag]

    def all_entities(self) -> tuple[Parameter, ...]:
        """All parameters in registration order."""
        return tuple(self._parameters)

    def all_commands(self) -> tuple[Command, ...]:
        """All commands in registration order."""
        return tuple(self._commands)

    def mandatory_entities(self) -> tuple[Parameter, ...]:
        """Mandatory parameters in registration order."""
        return tuple(self._parameters[handle] for handle in self._mandatory)

    def toggles(self) -> tuple[tuple[Command, ...], ...]:
        return tuple(self._toggles)

    def known_names(self) -> list[str]:
        """Every flag and command name in registration order."""
        names = [flag for parameter in self._parameters for flag in parameter.flags]
        names.extend(name for command in self._commands for name in command.names)
        return names

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, token: object) -> bool:
        return token in self._flag_index or token in self._command_index
