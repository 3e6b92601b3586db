"""Command: list the menu."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from conectl.commands._base import ConeCommand
from conectl.domain.types import IngredientKind

if TYPE_CHECKING:
    from conectl.commands._context import AppContext


@click.command(
    cls=ConeCommand,
    examples="""\
  conectl menu
  conectl menu --kind topping
  conectl --json menu""",
)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in IngredientKind]),
    default=None,
    help="Only list one kind of ingredient.",
)
@click.pass_obj
def menu(app: AppContext, kind: str | None) -> None:
    """List every ingredient the shop sells."""
    from conectl.services.menu import MenuService

    app.emit(MenuService(app.catalog, app.settings.shop).list_menu(kind))
