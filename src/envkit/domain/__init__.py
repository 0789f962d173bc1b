"""Domain errors shared across envkit."""

from .exceptions import DynamicConfigsError, EnvkitError, UnknownModuleError

__all__ = ["EnvkitError", "UnknownModuleError", "DynamicConfigsError"]
