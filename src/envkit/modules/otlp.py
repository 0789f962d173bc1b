"""OpenTelemetry exporter settings for metrics and traces."""

import enum
from datetime import timedelta
from typing import Annotated

from ..resolution import EnvVar
from .base import BaseModule


class OtlpExporterType(enum.StrEnum):
    """Where telemetry is exported."""

    OTLP = "otlp"
    STDOUT = "stdout"

    @classmethod
    def parse(cls, value: str) -> "OtlpExporterType":
        """``otlp`` (any case) selects the OTLP exporter, anything else stdout."""
        if value.lower() == cls.OTLP:
            return cls.OTLP
        return cls.STDOUT


class OtlpConfigs(BaseModule):
    """Exporter endpoint, credentials, cadence and sampling for OTLP.

    Timeout and interval are read as whole seconds.
    """

    exporter_type: Annotated[OtlpExporterType, EnvVar("OTLP_EXPORTER_TYPE")] = (
        OtlpExporterType.STDOUT
    )
    endpoint: Annotated[str, EnvVar("OTLP_EXPORTER_ENDPOINT")] = (
        "http://localhost:4317"
    )
    access_key: Annotated[str, EnvVar("OTLP_ACCESS_KEY")] = "token"
    exporter_timeout: Annotated[timedelta, EnvVar("OTLP_EXPORTER_TIMEOUT")] = (
        timedelta(seconds=60)
    )
    exporter_interval: Annotated[timedelta, EnvVar("OTLP_EXPORTER_INTERVAL")] = (
        timedelta(seconds=60)
    )
    exporter_rate_base: Annotated[float, EnvVar("OTLP_EXPORTER_RATE_BASE")] = 0.8
    metric_exporter_rate_base: Annotated[
        float, EnvVar("OTLP_METRIC_EXPORTER_RATE_BASE")
    ] = 0.8
    trace_exporter_rate_base: Annotated[
        float, EnvVar("OTLP_TRACE_EXPORTER_RATE_BASE")
    ] = 0.8
    metrics_enabled: Annotated[bool, EnvVar("OTLP_METRICS_ENABLED")] = False
    traces_enabled: Annotated[bool, EnvVar("OTLP_TRACES_ENABLED")] = False
