"""Rendering of module key contracts and resolved addresses."""

from datetime import timedelta
from typing import Any

import typer

from ...modules import BaseModule
from ...resolution import FieldBinding


def format_default(value: Any) -> str:
    """Render a default the way it would be written in the environment."""
    if value is None:
        return "<unset>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, timedelta):
        return str(int(value.total_seconds()))
    if isinstance(value, str) and value == "":
        return '""'
    return str(value)


def format_binding(module_name: str, binding: FieldBinding) -> str:
    keys = ", ".join(binding.keys)
    return (
        f"{module_name}.{binding.name}: {keys} "
        f"({binding.type_name}, default {format_default(binding.default)})"
    )


def display_module_contract(module_name: str, module: type[BaseModule]) -> None:
    """Print every bound field of a module, one per line."""
    typer.secho(f"[{module_name}]", bold=True)
    for binding in module.env_bindings():
        typer.echo(f"  {format_binding(module_name, binding)}")


def display_address(label: str, value: str) -> None:
    typer.echo(f"{label}: {value}")
