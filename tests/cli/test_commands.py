"""Tests for the keys and addrs commands."""

from datetime import timedelta

import pytest

from envkit.cli.output.contract import format_binding, format_default
from envkit.modules import MODULES, AppConfigs


class TestKeysCommand:
    """Test `envkit keys`."""

    def test_lists_every_module(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["keys"])

        assert result.exit_code == 0
        for name in MODULES:
            assert f"[{name}]" in result.output

    def test_single_module(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["keys", "postgres"])

        assert result.exit_code == 0
        assert "[postgres]" in result.output
        assert "[kafka]" not in result.output
        assert "postgres.port: POSTGRES_PORT (int, default 0)" in result.output

    def test_module_name_case_insensitive(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["keys", "APP"])

        assert result.exit_code == 0
        assert "app.host: APP_HOST, HOST_NAME (str, default 0.0.0.0)" in result.output

    def test_unknown_module_fails(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["keys", "redis"])

        assert result.exit_code == 1
        assert "Unknown configuration module 'redis'" in result.output

    def test_does_not_resolve_environment(self, cli_runner, default_app, mocker):
        resolve = mocker.patch("envkit.cli.state.Configs.from_environment")

        result = cli_runner.invoke(default_app, ["keys"])

        assert result.exit_code == 0
        resolve.assert_not_called()


class TestAddrsCommand:
    """Test `envkit addrs`."""

    def test_injected_configs(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["addrs"])

        assert result.exit_code == 0
        assert "environment: prd" in result.output
        assert "app: 10.0.0.5:8080" in result.output
        assert "health_readiness: 0.0.0.0:9000" in result.output
        assert "kafka: kafka.example.com:9094" in result.output
        assert "mqtt: tcp://mqtt.example.com:1883" in result.output

    def test_credentials_not_printed(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["addrs"])

        assert "postgres://" not in result.output
        assert "amqp://" not in result.output

    def test_defaults_from_empty_environment(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["addrs"])

        assert result.exit_code == 0
        assert "environment: local" in result.output
        assert "app: 0.0.0.0:31033" in result.output
        assert "influx: http://localhost:8086" in result.output


class TestFormatting:
    """Test contract rendering helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "<unset>"),
            (True, "true"),
            (False, "false"),
            (timedelta(seconds=60), "60"),
            ("", '""'),
            (8086, "8086"),
            (0.8, "0.8"),
        ],
    )
    def test_format_default(self, value, expected):
        assert format_default(value) == expected

    def test_format_enum_default(self):
        env = next(b for b in AppConfigs.env_bindings() if b.name == "env")
        assert format_binding("app", env) == (
            "app.env: ENV, RUST_ENV (Environment, default local)"
        )
