"""Command entity: a value-less switch that is either given or not."""

from __future__ import annotations

from collections.abc import Callable

from argspy.errors import EmptyFlagError, NotYetParsedError


def _never_parsed() -> bool:
    return False


class Command:
    """A named command matched by its exact name.

    Unlike parameters, command names get no dash prefix and take no
    arguments. Commands can be grouped into toggles, meaning that at most one
    command of the group may be provided.
    """

    def __init__(
        self, full_name: str, short_name: str | None = None, description: str | None = None
    ) -> None:
        if not full_name or not full_name.strip():
            raise EmptyFlagError("No empty strings allowed for commands!")
        self.full_name = full_name.strip()
        self.short_name = short_name.strip() if short_name and short_name.strip() else None
        self.description = description
        self.toggle_group: tuple[Command, ...] = ()
        self._provided = False
        self._is_parsed: Callable[[], bool] = _never_parsed

    def bind(self, is_parsed: Callable[[], bool]) -> None:
        """Attach the probe telling whether parsing completed successfully."""
        self._is_parsed = is_parsed

    @property
    def names(self) -> tuple[str, ...]:
        if self.short_name:
            return (self.full_name, self.short_name)
        return (self.full_name,)

    @property
    def was_seen(self) -> bool:
        """Provided state during parsing, without the completed-parse check."""
        return self._provided

    def mark_provided(self) -> None:
        self._provided = True

    @property
    def is_provided(self) -> bool:
        """Whether the command was given on the command line.

        Raises:
            NotYetParsedError: If parsing did not complete yet
        """
        if not self._is_parsed():
            raise NotYetParsedError(
                f"parse() was not called before trying to check {self.full_name}!"
            )
        return self._provided

    @property
    def is_part_of_toggle(self) -> bool:
        return bool(self.toggle_group)

    def cannot_be_combined_with(self) -> str:
        """Names of the other commands in this command's toggle group."""
        return ", ".join(
            command.full_name for command in self.toggle_group if command is not self
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash(self.full_name)

    def __str__(self) -> str:
        if self.short_name:
            return f"[{self.full_name} / {self.short_name}]"
        return f"[{self.full_name}]"
