"""``keys`` command: publish the environment-variable contract."""

from typing import Optional

import typer

from ...domain.exceptions import UnknownModuleError
from ...infrastructure.logging import get_logger
from ...modules import MODULES, get_module
from ..output.contract import display_module_contract


def keys(
    module: Optional[str] = typer.Argument(
        None,
        help="Module name (app, postgres, kafka, ...). Omit to list every module.",
    ),
) -> None:
    """List environment keys, types and defaults per module."""
    logger = get_logger(__name__)

    if module is None:
        selected = list(MODULES.items())
    else:
        try:
            selected = [(module.lower(), get_module(module))]
        except UnknownModuleError as e:
            typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    logger.debug(f"Describing {len(selected)} module(s)")
    for name, module_cls in selected:
        display_module_contract(name, module_cls)
