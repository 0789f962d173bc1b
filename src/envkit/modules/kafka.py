"""Apache Kafka broker settings."""

from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class KafkaConfigs(BaseModule):
    """Broker address, SASL credentials and TLS material for Kafka clients.

    ``timeout`` is in milliseconds.
    """

    host: Annotated[str, EnvVar("KAFKA_HOST")] = "localhost"
    port: Annotated[int, EnvVar("KAFKA_PORT")] = 9094
    timeout: Annotated[int, EnvVar("KAFKA_TIMEOUT")] = 6000
    security_protocol: Annotated[str, EnvVar("KAFKA_SECURITY_PROTOCOL")] = "SASL_SSL"
    sasl_mechanisms: Annotated[str, EnvVar("KAFKA_SASL_MECHANISMS")] = "PLAIN"

    # ========== TLS ==========
    certificate_path: Annotated[str, EnvVar("KAFKA_CERTIFICATE_PATH")] = ""
    ca_path: Annotated[str, EnvVar("KAFKA_CA_PATH")] = ""
    trust_store_path: Annotated[str, EnvVar("KAFKA_TRUST_STORE_PATH")] = ""
    trust_store_password: Annotated[str, EnvVar("KAFKA_TRUST_STORE_PASSWORD")] = ""
    key_store_path: Annotated[str, EnvVar("KAFKA_KEY_STORE_PATH")] = ""
    key_store_password: Annotated[str, EnvVar("KAFKA_KEY_STORE_PASSWORD")] = ""
    endpoint_identification_algorithm: Annotated[
        str, EnvVar("KAFKA_ENDPOINT_IDENTIFICATION_ALGORITHM")
    ] = ""

    # ========== SASL ==========
    user: Annotated[str, EnvVar("KAFKA_USER")] = ""
    password: Annotated[str, EnvVar("KAFKA_PASSWORD")] = ""

    def bootstrap_servers(self) -> str:
        """``bootstrap.servers`` value for a single broker."""
        return f"{self.host}:{self.port}"
