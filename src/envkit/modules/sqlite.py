"""SQLite database settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class SqliteConfigs(BaseModule):
    """Location of the SQLite database file."""

    file: Annotated[str, EnvVar("SQLITE_FILE_NAME")] = "local.db"

    def uri(self) -> str:
        return f"sqlite://{self.file}"
