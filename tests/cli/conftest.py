"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from envkit import Configs
from envkit.cli.app import create_cli_app


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_configs(production_env):
    """Provide Configs resolved from a known environment."""
    return Configs.from_environment(source=production_env)


@pytest.fixture
def test_app(test_configs):
    """Provide CLI app with resolved configuration injected."""
    return create_cli_app(configs=test_configs)


@pytest.fixture
def default_app():
    """Provide CLI app resolving from an empty environment."""
    return create_cli_app(source={})
