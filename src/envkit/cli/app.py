"""CLI application factory."""

import typer

from ..configs import Configs
from ..infrastructure.logging import LogLevel, configure_logger
from ..resolution import EnvironmentSource
from .commands.addrs import addrs
from .commands.keys import keys
from .state import CLIState


def create_cli_app(
    configs: Configs | None = None,
    source: EnvironmentSource | None = None,
) -> typer.Typer:
    """Create CLI application with optional configuration injection.

    Args:
        configs: Pre-resolved configuration (for testing)
        source: Environment source used when resolving lazily (for testing)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="envkit",
        help="envkit - inspect environment-driven service configuration",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        configure_logger(level=LogLevel.DEBUG if verbose else LogLevel.WARNING)
        ctx.obj = CLIState(configs=configs, source=source)

    app.command()(keys)
    app.command()(addrs)
    return app
