"""Tests for CLI app factory and context wiring."""

import typer

from envkit.cli.state import CLIState
from envkit.infrastructure.logging import LogLevel


class TestCLIAppFactory:
    """Test create_cli_app factory."""

    def test_returns_typer_app(self, default_app):
        """create_cli_app returns a Typer instance."""
        assert isinstance(default_app, typer.Typer)
        assert default_app.info.name == "envkit"

    def test_no_args_shows_help(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, [])

        assert "keys" in result.output
        assert "addrs" in result.output


class TestContextInjection:
    """Test our context injection and state wiring."""

    def test_commands_receive_cli_state(self, cli_runner, default_app: typer.Typer):
        """Commands receive CLIState via context."""
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["test-cmd"])

        assert result.exit_code == 0
        assert isinstance(captured_state, CLIState)

    def test_injected_configs_available_in_context(
        self, cli_runner, test_app, test_configs
    ):
        """Injected configuration is returned as-is."""
        captured_state = None

        @test_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(test_app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state.configs is test_configs


class TestCLIState:
    """Test lazy configuration resolution."""

    def test_resolves_from_source_once(self):
        state = CLIState(source={"APP_PORT": "8080"})

        first = state.configs

        assert first.app_addr() == "0.0.0.0:8080"
        assert state.configs is first

    def test_injected_configs_skip_resolution(self, mocker, test_configs):
        resolve = mocker.patch("envkit.cli.state.Configs.from_environment")

        state = CLIState(configs=test_configs)

        assert state.configs is test_configs
        resolve.assert_not_called()


class TestGlobalOptions:
    """Test global CLI flag handling."""

    def test_verbose_flag_sets_debug_level(self, cli_runner, default_app, mocker):
        configure = mocker.patch("envkit.cli.app.configure_logger")

        result = cli_runner.invoke(default_app, ["--verbose", "keys", "sqlite"])

        assert result.exit_code == 0
        configure.assert_called_once_with(level=LogLevel.DEBUG)

    def test_default_level_is_warning(self, cli_runner, default_app, mocker):
        configure = mocker.patch("envkit.cli.app.configure_logger")

        result = cli_runner.invoke(default_app, ["keys", "sqlite"])

        assert result.exit_code == 0
        configure.assert_called_once_with(level=LogLevel.WARNING)
