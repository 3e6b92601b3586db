"""Command: take and serve a single order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from conectl.commands._base import ConeCommand

if TYPE_CHECKING:
    from conectl.commands._context import AppContext


@click.command(
    cls=ConeCommand,
    examples="""\
  conectl order Sam Cherries ScoopOfChocolate WaffleCone CandySprinkles
  conectl order Martha SugarCone ScoopOfTuna --engineer Ralph
  conectl order Sam MandMs SugarCone --preview
  conectl --quiet order Sam WaffleCone ScoopOfVanilla""",
)
@click.argument("customer")
@click.argument("ingredients", nargs=-1)
@click.option("--engineer", "-e", default=None, help="Who builds the cone.")
@click.option("--preview", is_flag=True, help="Only show the assembly order.")
@click.pass_obj
def order(
    app: AppContext,
    customer: str,
    ingredients: tuple[str, ...],
    engineer: str | None,
    preview: bool,
) -> None:
    """Build CUSTOMER a cone from INGREDIENTS, listed in any order."""
    from conectl.services.order import OrderService

    svc = OrderService(app.catalog, app.settings.shop)
    if preview:
        app.emit(svc.preview(list(ingredients)))
    else:
        app.emit(svc.take_order(customer, list(ingredients), engineer=engineer))
