"""MQTT broker settings, single- or multi-broker."""

import enum
import typing as t

from pydantic import Field, TypeAdapter, field_validator

from ..resolution import EnvironmentSource, EnvVar, resolve, source_or_process
from .base import BaseModule

DEFAULT_CONNECTION_TAG: t.Final = "default"
MQTT_BROKERS_KEY: t.Final = "MQTT_BROKERS"


class MqttBrokerKind(enum.StrEnum):
    """Broker implementation the client talks to."""

    DEFAULT = "default"
    AWS_IOT_CORE = "aws_iot_core"

    @classmethod
    def parse(cls, value: str) -> "MqttBrokerKind":
        """``awsiotcore`` / ``aws_iot_core`` (any case) select AWS IoT Core."""
        if value.lower() in ("awsiotcore", cls.AWS_IOT_CORE.value):
            return cls.AWS_IOT_CORE
        return cls.DEFAULT


class MqttTransport(enum.StrEnum):
    """Transport protocol, doubling as the URI scheme."""

    TCP = "tcp"
    SSL = "ssl"
    WS = "ws"

    @classmethod
    def parse(cls, value: str) -> "MqttTransport":
        """Case-insensitive; unknown transports fall back to TCP."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.TCP


class MqttConnectionConfigs(BaseModule):
    """One broker connection.

    In single-broker mode it is resolved from the ``MQTT_*`` keys. In
    multi-broker mode each entry of the ``MQTT_BROKERS`` JSON array is
    validated as an ``MqttBrokerEntry`` and converted into one. Device name
    and certificate paths are only used with public cloud brokers.
    """

    tag: str = DEFAULT_CONNECTION_TAG
    broker_kind: t.Annotated[MqttBrokerKind, EnvVar("MQTT_BROKER_KIND")] = (
        MqttBrokerKind.DEFAULT
    )
    host: t.Annotated[str, EnvVar("MQTT_HOST")] = ""
    transport: t.Annotated[MqttTransport, EnvVar("MQTT_TRANSPORT")] = (
        MqttTransport.TCP
    )
    port: t.Annotated[int, EnvVar("MQTT_PORT")] = 0
    user: t.Annotated[str, EnvVar("MQTT_USER")] = ""
    password: t.Annotated[str, EnvVar("MQTT_PASSWORD")] = ""
    device_name: str = ""
    root_ca_path: t.Annotated[str, EnvVar("MQTT_CA_CERT_PATH")] = ""
    cert_path: t.Annotated[str, EnvVar("MQTT_CERT_PATH")] = ""
    private_key_path: t.Annotated[str, EnvVar("MQTT_PRIVATE_KEY_PATH")] = ""

    @field_validator("broker_kind", mode="before")
    @classmethod
    def _parse_broker_kind(cls, value: t.Any) -> t.Any:
        if isinstance(value, str):
            return MqttBrokerKind.parse(value)
        return value

    @field_validator("transport", mode="before")
    @classmethod
    def _parse_transport(cls, value: t.Any) -> t.Any:
        if isinstance(value, str):
            return MqttTransport.parse(value)
        return value

    def uri(self) -> str:
        return f"{self.transport}://{self.host}:{self.port}"


class MqttBrokerEntry(MqttConnectionConfigs):
    """One item of the ``MQTT_BROKERS`` array.

    Identity, address and credentials must be spelled out; broker kind,
    device name and certificate paths keep their defaults when omitted.
    """

    tag: str
    host: str
    transport: MqttTransport
    port: int
    user: str
    password: str

    def to_connection(self) -> MqttConnectionConfigs:
        return MqttConnectionConfigs.model_validate(self.model_dump())


def _default_connections() -> tuple[MqttConnectionConfigs, ...]:
    return (MqttConnectionConfigs(),)


_BROKERS_ADAPTER: t.Final = TypeAdapter(tuple[MqttBrokerEntry, ...])


def parse_brokers(value: str) -> tuple[MqttConnectionConfigs, ...]:
    """Validate the ``MQTT_BROKERS`` JSON array.

    Raises:
        ValidationError: If the JSON is malformed or an entry is invalid or
            incomplete (a ``ValueError`` subclass, so the resolver falls back).
    """
    entries = _BROKERS_ADAPTER.validate_json(value)
    return tuple(entry.to_connection() for entry in entries)


class MqttConfigs(BaseModule):
    """Single- or multi-broker MQTT settings.

    With ``multi_broker_enabled`` off (the default) there is exactly one
    connection, tagged ``default``, resolved from the ``MQTT_*`` keys. With it
    on, the connections come from the ``MQTT_BROKERS`` JSON array; an invalid
    array keeps the default connection.
    """

    multi_broker_enabled: t.Annotated[bool, EnvVar("MQTT_MULTI_BROKER_ENABLED")] = (
        False
    )
    brokers: t.Annotated[str, EnvVar(MQTT_BROKERS_KEY)] = "[]"
    connection_configs: tuple[MqttConnectionConfigs, ...] = Field(
        default_factory=_default_connections
    )

    @classmethod
    def from_environment(cls, source: EnvironmentSource | None = None) -> t.Self:
        source = source_or_process(source)
        values = cls.resolve_fields(source)

        if values["multi_broker_enabled"]:
            values["connection_configs"] = resolve(
                source, MQTT_BROKERS_KEY, _default_connections(), parse_brokers
            )
        else:
            values["connection_configs"] = (
                MqttConnectionConfigs.from_environment(source),
            )

        return cls(**values)

    def default_connection(self) -> MqttConnectionConfigs | None:
        """Connection tagged ``default``, else the first one, else None."""
        for connection in self.connection_configs:
            if connection.tag == DEFAULT_CONNECTION_TAG:
                return connection
        if self.connection_configs:
            return self.connection_configs[0]
        return None
