"""Environment lookup, string parsers and the typed field resolver."""

from .parsers import (
    Parser,
    parse_bool,
    parse_float,
    parse_port,
    parse_seconds,
    parse_str,
    parse_uint,
)
from .resolver import EnvVar, FieldBinding, lookup, parser_for, resolve
from .source import EnvironmentSource, process_environment, source_or_process

__all__ = [
    # Sources
    "EnvironmentSource",
    "process_environment",
    "source_or_process",
    # Resolver
    "EnvVar",
    "FieldBinding",
    "lookup",
    "parser_for",
    "resolve",
    # Parsers
    "Parser",
    "parse_bool",
    "parse_float",
    "parse_port",
    "parse_seconds",
    "parse_str",
    "parse_uint",
]
