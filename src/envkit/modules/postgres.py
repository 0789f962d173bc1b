"""PostgreSQL connection settings."""

import enum
from typing import Annotated

from ..resolution import EnvVar, parse_port
from .base import BaseModule


class PostgresSslMode(enum.StrEnum):
    """libpq ``sslmode`` values supported by the connection URI."""

    DISABLE = "disable"
    REQUIRE = "require"

    @classmethod
    def parse(cls, value: str) -> "PostgresSslMode":
        """``require``/``required`` (any case) enable TLS, anything else disables it.

        Deliberately wider than the exact ``required`` token older deployments
        set: libpq's own ``require`` spelling and any casing are accepted too.
        """
        if value.lower() in ("require", "required"):
            return cls.REQUIRE
        return cls.DISABLE


class PostgresConfigs(BaseModule):
    """Connection parameters for a PostgreSQL server.

    Example:
        >>> PostgresConfigs(host="db", port=5432, user="u", password="p", db="app").uri()
        'postgres://u:p@db:5432/app?sslmode=disable'
    """

    host: Annotated[str, EnvVar("POSTGRES_HOST")] = "localhost"
    port: Annotated[int, EnvVar("POSTGRES_PORT", parser=parse_port)] = 0
    user: Annotated[str, EnvVar("POSTGRES_USER")] = ""
    password: Annotated[str, EnvVar("POSTGRES_PASSWORD")] = ""
    db: Annotated[str, EnvVar("POSTGRES_DB")] = ""
    ssl_mode: Annotated[PostgresSslMode, EnvVar("POSTGRES_SSL_MODE")] = (
        PostgresSslMode.DISABLE
    )
    ca_path: Annotated[str, EnvVar("POSTGRES_CA_PATH")] = ""

    def uri(self) -> str:
        """Connection URI understood by libpq-based drivers.

        Credentials are inserted verbatim, without percent-encoding.
        """
        return (
            f"postgres://{self.user}:{self.password}@{self.host}:{self.port}"
            f"/{self.db}?sslmode={self.ssl_mode}"
        )
