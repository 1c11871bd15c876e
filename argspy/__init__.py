"""ArgsPy - command-line argument parsing with typed values and helpful errors.

Declare flags on an ArgsParser, parse the raw tokens once, then read the
typed values from the returned parameter handles.
"""

from loguru import logger

from argspy.core import (
    Command,
    HelpRequested,
    Parameter,
    ParseResult,
    Parsed,
    ParserConfig,
    ScalarType,
    ValueType,
    load_config,
)
from argspy.errors import ArgsError, ParserUsageError
from argspy.parser import ArgsParser
from argspy.utils.logging import setup_logger

# Silent unless the host opts in through setup_logger or logger.enable("argspy")
logger.disable("argspy")

__version__ = "0.3.0"
__all__ = [
    "ArgsError",
    "ArgsParser",
    "Command",
    "HelpRequested",
    "Parameter",
    "ParseResult",
    "Parsed",
    "ParserConfig",
    "ParserUsageError",
    "ScalarType",
    "ValueType",
    "load_config",
    "setup_logger",
]
