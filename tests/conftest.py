"""Pytest configuration and fixtures for envkit tests."""

import typing as t

import loguru
import pytest

from envkit.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging_state() -> t.Iterator[None]:
    """Start and finish every test without loguru sinks."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def env() -> dict[str, str]:
    """Empty environment source; tests fill in the keys they need."""
    return {}


@pytest.fixture
def production_env() -> dict[str, str]:
    """Environment resembling a production deployment."""
    return {
        "ENV": "production",
        "APP_NAME": "billing",
        "APP_HOST": "10.0.0.5",
        "APP_PORT": "8080",
        "POSTGRES_HOST": "db.example.com",
        "POSTGRES_PORT": "5432",
        "POSTGRES_USER": "postgres",
        "POSTGRES_PASSWORD": "postgres",
        "POSTGRES_DB": "postgres",
        "RABBITMQ_HOST": "mq.example.com",
        "KAFKA_HOST": "kafka.example.com",
        "MQTT_HOST": "mqtt.example.com",
        "MQTT_PORT": "1883",
        "HEALTH_READINESS_PORT": "9000",
        "ENABLE_HEALTH_READINESS": "true",
    }


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger
