"""Base interface for application-specific configuration."""

from abc import ABC, abstractmethod


class DynamicConfigs(ABC):
    """Extension point for configuration the built-in modules do not cover.

    Subclasses must be constructible without arguments; that instance is the
    default value stored in ``Configs.dynamic``. ``load`` fills it in place
    from whatever source the subclass chooses. ``Configs`` never calls
    ``load`` itself.
    """

    @abstractmethod
    def load(self) -> None:
        """Populate this instance in place."""
