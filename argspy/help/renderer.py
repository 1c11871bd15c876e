"""Rendering of the help box listing parameters and commands."""

from __future__ import annotations

from collections.abc import Sequence

from argspy.core.command import Command
from argspy.core.parameter import Parameter
from argspy.core.registry import ParameterRegistry
from argspy.core.types import ValueType
from argspy.help.wrapping import indent_continuation, wrap_line, wrap_text
from argspy.utils.constants import Constants

ARRAY_NOTE = "('+' marks a flag that takes several arguments of the same type whitespace separated)"
# Space kept free on the right of the type legend
_LEGEND_MARGIN = 11
# Width of the "[s]  " / "[s+] " type column
_TYPE_COLUMN = 5
# Narrowest description column before rows switch to the stacked layout
_MIN_DESCRIPTION_WIDTH = 20
# Description indent of the stacked layout
_STACKED_COLUMN = 5


class HelpRenderer:
    """Formats parameters and commands into a '#'-bordered text box.

    The layout is:

        ############ HELP ############
        #   [s]=String | [i+]=Integer          <- types in use
        #   ('+' marks a flag that ...)         <- only if arrays are in use
        #   (!)=mandatory | (?)=optional
        #
        ###  --file  -f  [s]  (!)  description wrapped at the box width
        #                          continuation aligned to the description
        #                default:  default value
        #
        ##############################

    Width and title are fixed at construction, nothing is read from global
    state.
    """

    def __init__(
        self,
        width: int = Constants.DEFAULT_CONSOLE_WIDTH,
        title: str = Constants.DEFAULT_HELP_TITLE,
    ) -> None:
        self.width = width
        self.title = title

    def render_all(self, registry: ParameterRegistry) -> str:
        """Help text for every registered parameter and command."""
        return self.render(registry, registry.all_entities(), registry.all_commands())

    def render_single(self, registry: ParameterRegistry, entry: Parameter | Command) -> str:
        """Help text for a single parameter or command."""
        if isinstance(entry, Command):
            return self.render(registry, (), (entry,))
        return self.render(registry, (entry,), ())

    def render(
        self,
        registry: ParameterRegistry,
        parameters: Sequence[Parameter],
        commands: Sequence[Command],
    ) -> str:
        """Render the help box for the given entries.

        Flag columns are aligned using the longest names of the whole
        registry, so single-entry help lines up with the full listing.
        """
        lines = self._header(parameters, commands)
        lines.append("#")

        listing_all = len(parameters) + len(commands) > 1
        if listing_all and parameters:
            lines.extend([self._center("Available Parameters:"), "#"])
        for parameter in parameters:
            lines.extend([self._parameter_block(parameter, registry), "#"])

        if listing_all and commands:
            lines.extend([self._center("Available Commands:"), "#"])
        for command in commands:
            lines.extend([self._command_block(command, registry), "#"])

        lines.append("#" * self.width)
        return "\n".join(lines)

    def _header(self, parameters: Sequence[Parameter], commands: Sequence[Command]) -> list[str]:
        left = max(self.width // 2 - len(self.title) // 2, 0)
        right = max(self.width - left - len(self.title), 0)
        lines = ["#" * left + self.title + "#" * right]

        used_types: list[ValueType] = []
        for parameter in parameters:
            if parameter.value_type not in used_types:
                used_types.append(parameter.value_type)

        current = ""
        for value_type in used_types:
            info = f"[{value_type.tag}]={value_type.display_name}"
            if not current:
                current = info
            elif len(current) + len(info) + 3 > self.width - _LEGEND_MARGIN:
                lines.append(self._center(current))
                current = info
            else:
                current += " | " + info
        if current:
            lines.append(self._center(current))

        if any(value_type.is_array for value_type in used_types):
            lines.extend(self._centered_lines(ARRAY_NOTE))

        markers = f"{Constants.MANDATORY_MARKER}=mandatory | {Constants.OPTIONAL_MARKER}=optional"
        if commands:
            markers += f" | {Constants.COMMAND_MARKER}=command"
        lines.extend(self._centered_lines(markers))
        return lines

    def _center(self, text: str) -> str:
        free = max((self.width - len(text)) // 2 - 1, 0)
        return "#" + " " * free + text

    def _centered_lines(self, text: str) -> list[str]:
        # Notes longer than the box are wrapped, leaving room for the border
        return [self._center(line) for line in wrap_line(text, 2, self.width)]

    @staticmethod
    def _description(description: str | None) -> str:
        if description is None or not description.strip():
            return Constants.NO_DESCRIPTION
        return description.strip()

    def _wrapped(self, text: str, column: int) -> str:
        return indent_continuation(wrap_text(text, column, self.width), column)

    def _labelled_line(self, label: str, value: str, column: int) -> str:
        """A line like ``#        default:  value`` with the value at ``column``."""
        padding = column - len(label) - 1
        if padding < 0:
            padding = 0
            column = 1 + len(label)
        return "\n#" + " " * padding + label + self._wrapped(value, column)

    def _row(self, prefix: str, description: str | None) -> tuple[str, int]:
        """Flag columns followed by the wrapped description.

        When the flag columns leave less than ``_MIN_DESCRIPTION_WIDTH`` for
        the description, the columns are wrapped on their own and the
        description starts on the next line at ``_STACKED_COLUMN``.

        Returns:
            The rendered row and the column the description starts at
        """
        text = self._description(description)
        column = len(prefix)
        if self.width - column >= _MIN_DESCRIPTION_WIDTH:
            return prefix + self._wrapped(text, column), column

        columns = "  ".join(prefix.split()[1:])
        head = "###  " + indent_continuation(
            wrap_line(columns, _STACKED_COLUMN, self.width), _STACKED_COLUMN
        )
        body = "#" + " " * (_STACKED_COLUMN - 1) + self._wrapped(text, _STACKED_COLUMN)
        return head + "\n" + body, _STACKED_COLUMN

    def _parameter_block(self, parameter: Parameter, registry: ParameterRegistry) -> str:
        marker = Constants.MANDATORY_MARKER if parameter.mandatory else Constants.OPTIONAL_MARKER
        type_column = f"[{parameter.value_type.tag}]".ljust(_TYPE_COLUMN)
        prefix = (
            f"###  {parameter.full_flag.ljust(registry.longest_full_flag)}  "
            f"{(parameter.short_flag or '').ljust(registry.longest_short_flag)}  "
            f"{type_column}{marker}  "
        )
        block, column = self._row(prefix, parameter.description)
        if parameter.has_default:
            block += self._labelled_line(
                Constants.DEFAULT_LABEL, parameter.default_as_string, column
            )
        return block

    def _command_block(self, command: Command, registry: ParameterRegistry) -> str:
        prefix = (
            f"###  {command.full_name.ljust(registry.longest_full_flag)}  "
            f"{(command.short_name or '').ljust(registry.longest_short_flag)}  "
            f"{' ' * _TYPE_COLUMN}{Constants.COMMAND_MARKER}  "
        )
        block, column = self._row(prefix, command.description)
        if command.is_part_of_toggle:
            block += self._labelled_line(
                Constants.TOGGLE_LABEL, command.cannot_be_combined_with(), column
            )
        return block
