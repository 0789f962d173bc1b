#!/usr/bin/env python3
"""
02_dynamic_configs.py - Application-specific configuration slot

Demonstrates:
- Implementing DynamicConfigs for settings the built-in modules lack
- Loading the dynamic slot explicitly after resolution
"""

import os

from envkit import Configs, DynamicConfigs


class FeatureFlags(DynamicConfigs):
    """Feature toggles read from FEATURE_* variables."""

    def __init__(self) -> None:
        self.flags: dict[str, bool] = {}

    def load(self) -> None:
        self.flags = {
            key.removeprefix("FEATURE_").lower(): value.lower() == "true"
            for key, value in os.environ.items()
            if key.startswith("FEATURE_")
        }

    def enabled(self, name: str) -> bool:
        return self.flags.get(name, False)


def main() -> None:
    os.environ.setdefault("FEATURE_NEW_CHECKOUT", "true")

    configs = Configs.from_environment(dynamic=FeatureFlags)
    print(f"Before load: {configs.dynamic.flags}")

    # Never loaded automatically
    configs.dynamic.load()
    print(f"After load:  {configs.dynamic.flags}")
    print(f"new_checkout enabled: {configs.dynamic.enabled('new_checkout')}")


if __name__ == "__main__":
    main()
