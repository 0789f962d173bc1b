"""Deployment environment enum and its resolution from the environment."""

import enum
from typing import Final, Sequence

from ..resolution import EnvironmentSource, resolve, source_or_process

ENV_KEY: Final = "ENV"
LEGACY_ENV_KEY: Final = "RUST_ENV"
ENV_KEYS: Final = (ENV_KEY, LEGACY_ENV_KEY)


class Environment(enum.StrEnum):
    """Deployment stage the application runs in.

    Values are the short canonical tokens; ``parse`` also accepts the long
    spellings (``development``, ``staging``, ``production``, ...).
    """

    LOCAL = "local"
    DEV = "dev"
    STAGING = "stg"
    PROD = "prd"

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Case-insensitive token match. Raises ValueError for unknown tokens."""
        try:
            return _ALIASES[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown environment: {value!r}") from None

    @classmethod
    def resolve(
        cls, value: str | None, default: "Environment | None" = None
    ) -> "Environment":
        """Total variant of ``parse``: unknown or missing values give ``default``."""
        fallback = cls.LOCAL if default is None else default
        if value is None:
            return fallback
        try:
            return cls.parse(value)
        except ValueError:
            return fallback

    def is_local(self) -> bool:
        return self is Environment.LOCAL

    def is_dev(self) -> bool:
        return self is Environment.DEV

    def is_staging(self) -> bool:
        return self is Environment.STAGING

    def is_prod(self) -> bool:
        return self is Environment.PROD


_ALIASES: Final[dict[str, Environment]] = {
    "local": Environment.LOCAL,
    "dev": Environment.DEV,
    "develop": Environment.DEV,
    "development": Environment.DEV,
    "stg": Environment.STAGING,
    "staging": Environment.STAGING,
    "prd": Environment.PROD,
    "prod": Environment.PROD,
    "production": Environment.PROD,
}


def resolve_environment(
    source: EnvironmentSource | None = None,
    key: str | Sequence[str] = ENV_KEYS,
    default: Environment = Environment.LOCAL,
) -> Environment:
    """Read ``key`` from ``source`` and map it onto an ``Environment``.

    By default ``ENV`` is consulted first, then the legacy ``RUST_ENV``.
    """
    return resolve(source_or_process(source), key, default, Environment.parse)
