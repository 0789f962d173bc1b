#!/usr/bin/env python3
"""
01_basic_configs.py - Resolve configuration from the environment

Demonstrates:
- Configs.default() versus Configs.from_environment()
- Injecting a dict instead of reading the process environment
- Silent fallback for values that do not parse
"""

from envkit import Configs
from envkit.infrastructure.logging import get_logger, setup_logging


def main() -> None:
    defaults = Configs.default()
    print(f"Default app address: {defaults.app_addr()}")

    configs = Configs.from_environment(
        source={
            "ENV": "production",
            "APP_NAME": "billing",
            "APP_PORT": "8080",
            "LOG_LEVEL": "info",
            "POSTGRES_HOST": "db.example.com",
            "POSTGRES_PORT": "5432",
            "POSTGRES_USER": "postgres",
            "POSTGRES_PASSWORD": "postgres",
            "POSTGRES_DB": "postgres",
            # Not a number: the default port is kept
            "RABBITMQ_PORT": "five-six-seven-two",
        }
    )

    setup_logging(configs.app)
    logger = get_logger(__name__)
    logger.info(f"Starting {configs.app.name} in {configs.app.env}")

    print(f"App address:  {configs.app_addr()}")
    print(f"Postgres URI: {configs.postgres_uri()}")
    print(f"RabbitMQ URI: {configs.rabbitmq_uri()}")
    print(f"Production:   {configs.app.env.is_prod()}")


if __name__ == "__main__":
    main()
