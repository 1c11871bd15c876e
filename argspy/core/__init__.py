"""Core domain logic for ArgsPy."""

from .command import Command
from .config import ParserConfig, load_config
from .parameter import Parameter
from .registry import ParameterRegistry
from .resolver import HelpRequested, Parsed, ParseResult, ParseState, Resolver
from .types import ScalarType, ValueType, resolve_value_type

__all__ = [
    "Command",
    "HelpRequested",
    "Parameter",
    "ParameterRegistry",
    "ParseResult",
    "ParseState",
    "Parsed",
    "ParserConfig",
    "Resolver",
    "ScalarType",
    "ValueType",
    "load_config",
    "resolve_value_type",
]
