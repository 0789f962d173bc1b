"""Dynamic configuration slot - interface and null implementation."""

from .base import DynamicConfigs
from .null import Empty

__all__ = ["DynamicConfigs", "Empty"]
