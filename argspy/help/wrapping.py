"""Word wrapping for the fixed-width help box."""

import re

_FORCED_BREAK = re.compile(r" *\n *")


def wrap_line(text: str, column: int, width: int) -> list[str]:
    """Wrap a single line of text starting at ``column`` into ``width``.

    Breaks at the last space that still fits, so words are never split. A
    word longer than the whole remaining budget is cut into budget-sized
    chunks instead (e.g. long paths used as default values). No produced line
    reaches past ``width``.

    Args:
        text: Text without line breaks
        column: Column at which the text starts
        width: Total width of the box

    Returns:
        The wrapped lines, without indentation
    """
    budget = max(width - column, 1)
    lines: list[str] = []
    remaining = text
    while len(remaining) > budget:
        cut = remaining.rfind(" ", 0, budget + 1)
        if cut > 0:
            lines.append(remaining[:cut].rstrip(" "))
            remaining = remaining[cut + 1 :].lstrip(" ")
        else:
            lines.append(remaining[:budget])
            remaining = remaining[budget:]
    lines.append(remaining)
    return lines


def wrap_text(text: str, column: int, width: int) -> list[str]:
    """Wrap text that may contain explicit line breaks.

    Author-inserted newlines are kept as forced breaks; spaces around them
    are dropped.
    """
    lines: list[str] = []
    for row in _FORCED_BREAK.split(text):
        lines.extend(wrap_line(row, column, width))
    return lines


def indent_continuation(lines: list[str], column: int) -> str:
    """Join wrapped lines, aligning continuation lines to ``column`` inside the box."""
    return ("\n#" + " " * max(column - 1, 0)).join(lines)
