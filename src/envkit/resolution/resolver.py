"""Typed field resolution: ``parse(env[key]) if present and valid else default``."""

import enum
import types
import typing as t
from dataclasses import dataclass
from datetime import timedelta

from .parsers import (
    Parser,
    parse_bool,
    parse_float,
    parse_seconds,
    parse_str,
    parse_uint,
)
from .source import EnvironmentSource

T = t.TypeVar("T")

_DEFAULT_PARSERS: dict[type, Parser] = {
    str: parse_str,
    bool: parse_bool,
    int: parse_uint,
    float: parse_float,
    timedelta: parse_seconds,
}


class EnvVar:
    """Environment binding attached to a model field through ``Annotated``.

    Keys are tried in order and the first one present wins. When no parser is
    given, one is picked from the field annotation.

    Example:
        >>> host: Annotated[str, EnvVar("APP_HOST", "HOST_NAME")] = "0.0.0.0"
    """

    __slots__ = ("keys", "parser")

    def __init__(self, *keys: str, parser: Parser | None = None) -> None:
        if not keys:
            raise ValueError("EnvVar requires at least one key")
        self.keys: tuple[str, ...] = keys
        self.parser = parser

    def __repr__(self) -> str:
        keys = ", ".join(repr(key) for key in self.keys)
        return f"EnvVar({keys})"


@dataclass(frozen=True)
class FieldBinding:
    """Published contract of one field: keys, type, default and parser."""

    name: str
    keys: tuple[str, ...]
    annotation: t.Any
    default: t.Any
    parser: Parser

    @property
    def type_name(self) -> str:
        return _type_name(self.annotation)


def lookup(source: EnvironmentSource, keys: str | t.Sequence[str]) -> str | None:
    """Return the raw value of the first key present in ``source``."""
    if isinstance(keys, str):
        keys = (keys,)
    for key in keys:
        value = source.get(key)
        if value is not None:
            return value
    return None


def resolve(
    source: EnvironmentSource,
    keys: str | t.Sequence[str],
    default: T,
    parse: t.Callable[[str], T],
) -> T:
    """Resolve one field from the environment.

    Absent keys and values ``parse`` rejects both yield ``default``. Parse
    failures are never raised or logged.
    """
    raw = lookup(source, keys)
    if raw is None:
        return default
    try:
        return parse(raw)
    except (ValueError, TypeError):
        return default


def parser_for(annotation: t.Any) -> Parser:
    """Pick the parser for a field annotation.

    ``X | None`` uses the parser of ``X``. Enums must expose a ``parse``
    classmethod that raises ``ValueError`` for unknown tokens.
    """
    if t.get_origin(annotation) in (t.Union, types.UnionType):
        members = [arg for arg in t.get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            raise TypeError(f"Unsupported union annotation: {annotation!r}")
        return parser_for(members[0])

    if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
        parse = getattr(annotation, "parse", None)
        if parse is None:
            raise TypeError(f"{annotation.__name__} has no parse() classmethod")
        return parse

    parser = _DEFAULT_PARSERS.get(annotation)
    if parser is None:
        raise TypeError(f"No parser registered for {annotation!r}")
    return parser


def _type_name(annotation: t.Any) -> str:
    if t.get_origin(annotation) in (t.Union, types.UnionType):
        members = [arg for arg in t.get_args(annotation) if arg is not type(None)]
        return " | ".join(_type_name(arg) for arg in members) + " | None"
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation)
