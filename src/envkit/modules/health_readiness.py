"""Health and readiness probe server settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class HealthReadinessConfigs(BaseModule):
    """HTTP probe endpoint used by Kubernetes liveness/readiness checks."""

    port: Annotated[int, EnvVar("HEALTH_READINESS_PORT")] = 8888
    enable: Annotated[bool, EnvVar("ENABLE_HEALTH_READINESS")] = False

    def health_readiness_addr(self) -> str:
        """Probe server always binds every interface."""
        return f"0.0.0.0:{self.port}"
