"""Tests for AWS, identity server, OTLP and health/readiness settings."""

from datetime import timedelta

import pytest

from envkit.modules import (
    AwsConfigs,
    HealthReadinessConfigs,
    IdentityServerConfigs,
    OtlpConfigs,
    OtlpExporterType,
)


class TestAwsConfigs:
    """Test AWS credential resolution."""

    def test_defaults(self):
        aws = AwsConfigs.default()

        assert aws.access_key_id == "local"
        assert aws.secret_access_key == "local"
        assert aws.session_token is None
        assert aws.region == "us-east-1"

    def test_iam_keys_take_precedence(self):
        aws = AwsConfigs.from_environment(
            {
                "AWS_IAM_ACCESS_KEY_ID": "iam-id",
                "AWS_ACCESS_KEY_ID": "sdk-id",
                "AWS_IAM_SECRET_ACCESS_KEY": "iam-secret",
                "AWS_SECRET_ACCESS_KEY": "sdk-secret",
            }
        )

        assert aws.access_key_id == "iam-id"
        assert aws.secret_access_key == "iam-secret"

    def test_standard_sdk_keys(self):
        aws = AwsConfigs.from_environment(
            {
                "AWS_ACCESS_KEY_ID": "sdk-id",
                "AWS_SECRET_ACCESS_KEY": "sdk-secret",
                "AWS_SESSION_TOKEN": "session",
                "AWS_DEFAULT_REGION": "eu-central-1",
            }
        )

        assert aws.access_key_id == "sdk-id"
        assert aws.secret_access_key == "sdk-secret"
        assert aws.session_token == "session"
        assert aws.region == "eu-central-1"


class TestIdentityServerConfigs:
    def test_defaults(self):
        identity = IdentityServerConfigs.default()

        assert identity.url == ""
        assert identity.realm == ""
        assert identity.client_id == ""
        assert identity.client_secret == ""
        assert identity.grant_type == "client_credentials"

    def test_overrides(self):
        identity = IdentityServerConfigs.from_environment(
            {
                "IDENTITY_SERVER_URL": "https://auth.example.com",
                "IDENTITY_SERVER_REALM": "services",
                "IDENTITY_SERVER_AUDIENCE": "api",
                "IDENTITY_SERVER_ISSUER": "https://auth.example.com/realms/services",
                "IDENTITY_SERVER_CLIENT_ID": "billing",
                "IDENTITY_SERVER_CLIENT_SECRET": "s3cret",
                "IDENTITY_SERVER_GRANT_TYPE": "password",
            }
        )

        assert identity.url == "https://auth.example.com"
        assert identity.realm == "services"
        assert identity.audience == "api"
        assert identity.issuer.endswith("/realms/services")
        assert identity.client_id == "billing"
        assert identity.client_secret == "s3cret"
        assert identity.grant_type == "password"


class TestOtlpConfigs:
    """Test OpenTelemetry exporter settings."""

    @pytest.mark.parametrize("raw", ["otlp", "OTLP", "Otlp"])
    def test_exporter_type_otlp(self, raw):
        assert OtlpExporterType.parse(raw) is OtlpExporterType.OTLP

    def test_exporter_type_other_is_stdout(self):
        assert OtlpExporterType.parse("jaeger") is OtlpExporterType.STDOUT

    def test_defaults(self):
        otlp = OtlpConfigs.default()

        assert otlp.exporter_type is OtlpExporterType.STDOUT
        assert otlp.endpoint == "http://localhost:4317"
        assert otlp.access_key == "token"
        assert otlp.exporter_timeout == timedelta(seconds=60)
        assert otlp.exporter_interval == timedelta(seconds=60)
        assert otlp.exporter_rate_base == 0.8
        assert otlp.metric_exporter_rate_base == 0.8
        assert otlp.trace_exporter_rate_base == 0.8
        assert otlp.metrics_enabled is False
        assert otlp.traces_enabled is False

    def test_overrides(self):
        otlp = OtlpConfigs.from_environment(
            {
                "OTLP_EXPORTER_TYPE": "OTLP",
                "OTLP_EXPORTER_ENDPOINT": "http://collector:4317",
                "OTLP_EXPORTER_TIMEOUT": "5",
                "OTLP_EXPORTER_INTERVAL": "15",
                "OTLP_TRACE_EXPORTER_RATE_BASE": "0.25",
                "OTLP_METRICS_ENABLED": "true",
                "OTLP_TRACES_ENABLED": "true",
            }
        )

        assert otlp.exporter_type is OtlpExporterType.OTLP
        assert otlp.endpoint == "http://collector:4317"
        assert otlp.exporter_timeout == timedelta(seconds=5)
        assert otlp.exporter_interval == timedelta(seconds=15)
        assert otlp.trace_exporter_rate_base == 0.25
        assert otlp.metrics_enabled is True
        assert otlp.traces_enabled is True

    def test_invalid_values_fall_back(self):
        otlp = OtlpConfigs.from_environment(
            {
                "OTLP_EXPORTER_TIMEOUT": "5s",
                "OTLP_EXPORTER_RATE_BASE": "most",
                "OTLP_METRICS_ENABLED": "1",
                "OTLP_TRACES_ENABLED": "TRUE",
            }
        )

        assert otlp.exporter_timeout == timedelta(seconds=60)
        assert otlp.exporter_rate_base == 0.8
        assert otlp.metrics_enabled is False
        assert otlp.traces_enabled is False


class TestHealthReadinessConfigs:
    def test_defaults(self):
        health = HealthReadinessConfigs.default()

        assert health.enable is False
        assert health.health_readiness_addr() == "0.0.0.0:8888"

    def test_overrides(self):
        health = HealthReadinessConfigs.from_environment(
            {"HEALTH_READINESS_PORT": "9000", "ENABLE_HEALTH_READINESS": "true"}
        )

        assert health.enable is True
        assert health.health_readiness_addr() == "0.0.0.0:9000"
