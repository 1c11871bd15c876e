"""Utility functions for ArgsPy."""

from argspy.utils.constants import Constants
from argspy.utils.helpers import is_help_token, make_flag, strip_dashes
from argspy.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_help_token",
    "make_flag",
    "strip_dashes",
    "setup_logger",
]
