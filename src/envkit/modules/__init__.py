"""Per-integration configuration modules and the module registry."""

from typing import Final

from ..domain.exceptions import UnknownModuleError
from .app import AppConfigs
from .aws import AwsConfigs
from .base import BaseModule
from .dynamo import DynamoConfigs
from .environment import (
    ENV_KEY,
    ENV_KEYS,
    LEGACY_ENV_KEY,
    Environment,
    resolve_environment,
)
from .health_readiness import HealthReadinessConfigs
from .identity_server import IdentityServerConfigs
from .influx import InfluxConfigs
from .kafka import KafkaConfigs
from .mqtt import (
    MqttBrokerEntry,
    MqttBrokerKind,
    MqttConfigs,
    MqttConnectionConfigs,
    MqttTransport,
)
from .otlp import OtlpConfigs, OtlpExporterType
from .postgres import PostgresConfigs, PostgresSslMode
from .rabbitmq import RabbitMQConfigs
from .secrets import SecretsManagerKind
from .sqlite import SqliteConfigs

# Keys match the attribute names on Configs.
MODULES: Final[dict[str, type[BaseModule]]] = {
    "app": AppConfigs,
    "otlp": OtlpConfigs,
    "identity": IdentityServerConfigs,
    "mqtt": MqttConfigs,
    "rabbitmq": RabbitMQConfigs,
    "kafka": KafkaConfigs,
    "postgres": PostgresConfigs,
    "dynamo": DynamoConfigs,
    "sqlite": SqliteConfigs,
    "influx": InfluxConfigs,
    "aws": AwsConfigs,
    "health_readiness": HealthReadinessConfigs,
}


def get_module(name: str) -> type[BaseModule]:
    """Look up a module class by its registry name.

    Raises:
        UnknownModuleError: If ``name`` is not registered.
    """
    try:
        return MODULES[name.lower()]
    except KeyError:
        raise UnknownModuleError(name, list(MODULES)) from None


__all__ = [
    "MODULES",
    "get_module",
    "BaseModule",
    # Environment
    "ENV_KEY",
    "ENV_KEYS",
    "LEGACY_ENV_KEY",
    "Environment",
    "resolve_environment",
    # Modules
    "AppConfigs",
    "AwsConfigs",
    "DynamoConfigs",
    "HealthReadinessConfigs",
    "IdentityServerConfigs",
    "InfluxConfigs",
    "KafkaConfigs",
    "MqttConfigs",
    "MqttBrokerEntry",
    "MqttConnectionConfigs",
    "OtlpConfigs",
    "PostgresConfigs",
    "RabbitMQConfigs",
    "SqliteConfigs",
    # Enumerated modes
    "MqttBrokerKind",
    "MqttTransport",
    "OtlpExporterType",
    "PostgresSslMode",
    "SecretsManagerKind",
]
