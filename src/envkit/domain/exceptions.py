"""Custom exceptions for envkit.

Resolution itself never raises; these cover programming errors at the seams
(unknown module names, invalid dynamic configuration types).
"""


class EnvkitError(Exception):
    """Base exception for envkit errors."""

    pass


class UnknownModuleError(EnvkitError, KeyError):
    """Raised when a configuration module name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown configuration module '{name}'. "
            f"Available: {', '.join(available)}"
        )

    def __str__(self) -> str:
        return self.args[0]


class DynamicConfigsError(EnvkitError, TypeError):
    """Raised when the dynamic slot type does not implement DynamicConfigs."""

    pass
