"""Shared helper functions for flag handling."""

import re

from argspy.errors import EmptyFlagError
from argspy.utils.constants import Constants

_LEADING_DASHES = re.compile(r"^-+")


def strip_dashes(flag: str) -> str:
    """Remove all leading dashes, e.g. '--save' -> 'save', '-s' -> 's'."""
    return _LEADING_DASHES.sub("", flag)


def make_flag(flag: str, short: bool = False) -> str:
    """Bring a flag into its canonical form.

    Leading dashes are removed and replaced by the proper prefix:

        make_flag("example")        -> "--example"
        make_flag("--example")      -> "--example"
        make_flag("e", short=True)  -> "-e"
        make_flag("-e", short=True) -> "-e"

    Raises:
        EmptyFlagError: If nothing but dashes (or nothing at all) is given
    """
    name = strip_dashes(flag.strip())
    if not name:
        raise EmptyFlagError("No empty strings allowed for flags!")
    return ("-" if short else "--") + name


def is_help_token(token: str) -> bool:
    """Check whether a token requests the help output."""
    return token in Constants.HELP_FLAGS
