"""Help output formatting."""

from argspy.help.renderer import HelpRenderer
from argspy.help.wrapping import indent_continuation, wrap_line, wrap_text

__all__ = [
    "HelpRenderer",
    "indent_continuation",
    "wrap_line",
    "wrap_text",
]
