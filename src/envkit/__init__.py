"""envkit - typed service configuration resolved from environment variables."""

from .configs import Configs
from .dynamic import DynamicConfigs, Empty
from .modules import (
    MODULES,
    AppConfigs,
    AwsConfigs,
    DynamoConfigs,
    Environment,
    HealthReadinessConfigs,
    IdentityServerConfigs,
    InfluxConfigs,
    KafkaConfigs,
    MqttBrokerKind,
    MqttConfigs,
    MqttConnectionConfigs,
    MqttTransport,
    OtlpConfigs,
    OtlpExporterType,
    PostgresConfigs,
    PostgresSslMode,
    RabbitMQConfigs,
    SecretsManagerKind,
    SqliteConfigs,
    get_module,
    resolve_environment,
)
from .resolution import EnvironmentSource, EnvVar, resolve

__all__ = [
    # Aggregate
    "Configs",
    "DynamicConfigs",
    "Empty",
    # Resolution
    "EnvironmentSource",
    "EnvVar",
    "resolve",
    "resolve_environment",
    # Registry
    "MODULES",
    "get_module",
    # Modules
    "AppConfigs",
    "AwsConfigs",
    "DynamoConfigs",
    "HealthReadinessConfigs",
    "IdentityServerConfigs",
    "InfluxConfigs",
    "KafkaConfigs",
    "MqttConfigs",
    "MqttConnectionConfigs",
    "OtlpConfigs",
    "PostgresConfigs",
    "RabbitMQConfigs",
    "SqliteConfigs",
    # Enumerated modes
    "Environment",
    "MqttBrokerKind",
    "MqttTransport",
    "OtlpExporterType",
    "PostgresSslMode",
    "SecretsManagerKind",
]
