"""InfluxDB settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class InfluxConfigs(BaseModule):
    """Server address, bucket and token for InfluxDB.

    ``host`` carries the scheme, so ``addr()`` is directly usable as a URL.
    """

    host: Annotated[str, EnvVar("INFLUX_HOST")] = "http://localhost"
    port: Annotated[int, EnvVar("INFLUX_PORT")] = 8086
    bucket: Annotated[str, EnvVar("INFLUX_BUCKET")] = "default"
    token: Annotated[str, EnvVar("INFLUX_TOKEN")] = "token"

    def addr(self) -> str:
        return f"{self.host}:{self.port}"
