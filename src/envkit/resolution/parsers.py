"""String parsers for environment values.

Every parser raises ``ValueError`` when the raw string is not a valid literal
for its type. The resolver turns that into a fallback to the field default.
"""

import re
from datetime import timedelta
from typing import Any, Callable, Final

Parser = Callable[[str], Any]

_UINT_PATTERN: Final = re.compile(r"\+?[0-9]+")

UINT_MAX: Final = 2**64 - 1
PORT_MAX: Final = 2**16 - 1


def parse_str(value: str) -> str:
    """Strings are taken as-is, including the empty string."""
    return value


def parse_uint(value: str) -> int:
    """Parse an unsigned 64-bit integer.

    Accepts ASCII digits with an optional leading ``+``. Whitespace, signs
    other than ``+``, underscores and out-of-range values are rejected.
    """
    if not _UINT_PATTERN.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")
    number = int(value)
    if number > UINT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_port(value: str) -> int:
    """Parse a TCP port number (0-65535)."""
    number = parse_uint(value)
    if number > PORT_MAX:
        raise ValueError(f"port out of range: {value!r}")
    return number


def parse_bool(value: str) -> bool:
    """Parse the lowercase literals ``true`` and ``false``.

    ``TRUE``, ``True`` and other truthy spellings such as ``1``, ``yes`` or
    ``on`` are rejected.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_float(value: str) -> float:
    """Parse a floating point literal (``0.8``, ``1e-3``, ``inf``)."""
    if value != value.strip() or "_" in value:
        raise ValueError(f"not a float: {value!r}")
    return float(value)


def parse_seconds(value: str) -> timedelta:
    """Parse a whole number of seconds into a ``timedelta``."""
    return timedelta(seconds=parse_uint(value))
