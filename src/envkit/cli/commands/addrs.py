"""``addrs`` command: show resolved, credential-free addresses."""

import typer

from ..output.contract import display_address
from ..state import CLIState


def addrs(ctx: typer.Context) -> None:
    """Resolve configuration from the environment and print listen/connect addresses.

    URIs that embed credentials (Postgres, RabbitMQ) are not printed.
    """
    state: CLIState = ctx.obj
    configs = state.configs

    display_address("environment", str(configs.app.env))
    display_address("app", configs.app_addr())
    display_address("health_readiness", configs.health_readiness_addr())
    display_address("influx", configs.influx_addr())
    display_address("kafka", configs.kafka_bootstrap_servers())
    connection = configs.mqtt.default_connection()
    if connection is not None:
        display_address("mqtt", connection.uri())
