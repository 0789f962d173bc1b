"""Loguru-based logging setup driven by ``AppConfigs``.

Library code only binds loggers through ``get_logger`` and never touches the
sinks. Sinks are installed by the application (``setup_logging``) or by the
CLI (``configure_logger``).
"""

import enum
import sys
import typing as t

from loguru import logger

from ..modules.app import AppConfigs
from ..modules.environment import Environment

if t.TYPE_CHECKING:
    import loguru

_DEV_FORMAT: t.Final = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_configured = False


class LogLevel(enum.StrEnum):
    """Loguru severity names."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def parse(cls, value: str, default: "LogLevel | None" = None) -> "LogLevel":
        """Case-insensitive; ``warn`` maps to WARNING, unknown names to ``default``."""
        normalized = value.strip().upper()
        if normalized == "WARN":
            return cls.WARNING
        try:
            return cls(normalized)
        except ValueError:
            return cls.INFO if default is None else default


def _internal_only(record: "loguru.Record") -> bool:
    """Keep records emitted through ``get_logger``; drop third-party ones."""
    return "component" in record["extra"]


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.LOCAL,
    include_external: bool = True,
) -> None:
    """Replace all loguru sinks with a single stderr sink.

    Production gets JSON records (``serialize=True``); every other
    environment gets the coloured human-readable format.
    """
    global _configured

    handler: dict[str, t.Any] = {"sink": sys.stderr, "level": str(level)}
    if environment.is_prod():
        handler["serialize"] = True
    else:
        handler["format"] = _DEV_FORMAT
        handler["colorize"] = True
    if not include_external:
        handler["filter"] = _internal_only

    logger.configure(handlers=[handler])
    _configured = True


def setup_logging(app: AppConfigs) -> None:
    """Configure logging from resolved application settings."""
    configure_logger(
        level=LogLevel.parse(app.log_level),
        environment=app.env,
        include_external=app.enable_external_creates_logging,
    )


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``.

    Records go to whatever sinks the host application installed.
    """
    return logger.bind(component=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget configuration (used by tests)."""
    global _configured
    logger.remove()
    _configured = False
