"""Core application settings: identity, environment, bind address, logging."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule
from .environment import ENV_KEYS, Environment
from .secrets import SecretsManagerKind


class AppConfigs(BaseModule):
    """Settings most services need regardless of their integrations.

    Example:
        >>> AppConfigs.default().app_addr()
        '0.0.0.0:31033'
    """

    name: Annotated[str, EnvVar("APP_NAME")] = "default-name"
    env: Annotated[Environment, EnvVar(*ENV_KEYS)] = Environment.LOCAL
    namespace: Annotated[str, EnvVar("NAMESPACE")] = "local"
    secret_manager: Annotated[SecretsManagerKind, EnvVar("SECRET_MANAGER")] = (
        SecretsManagerKind.NONE
    )
    secret_key: Annotated[str, EnvVar("SECRET_KEY")] = "context"
    host: Annotated[str, EnvVar("APP_HOST", "HOST_NAME")] = "0.0.0.0"
    port: Annotated[int, EnvVar("APP_PORT")] = 31033
    log_level: Annotated[str, EnvVar("LOG_LEVEL")] = "debug"
    enable_external_creates_logging: Annotated[
        bool, EnvVar("ENABLE_EXTERNAL_CREATES_LOGGING")
    ] = False

    def app_addr(self) -> str:
        """Bind address in ``host:port`` form."""
        return f"{self.host}:{self.port}"
