"""Environment-variable sources consulted during resolution."""

import os
from typing import Protocol


class EnvironmentSource(Protocol):
    """Key to optional string lookup.

    ``os.environ`` and plain dicts satisfy this protocol, so tests can pass a
    dict instead of mutating the process environment.
    """

    def get(self, key: str, /) -> str | None: ...


def process_environment() -> EnvironmentSource:
    """Return the live process environment."""
    return os.environ


def source_or_process(source: EnvironmentSource | None) -> EnvironmentSource:
    """Fall back to the process environment when no source is injected."""
    if source is None:
        return process_environment()
    return source
