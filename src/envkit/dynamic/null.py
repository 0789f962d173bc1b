"""Null Object implementation of dynamic configuration."""

from .base import DynamicConfigs


class Empty(DynamicConfigs):
    """No-op dynamic configuration used when an application needs none."""

    def load(self) -> None:
        pass

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Empty)

    def __hash__(self) -> int:
        return hash(Empty)

    def __repr__(self) -> str:
        return "Empty()"
