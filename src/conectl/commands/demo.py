"""Command: serve the reference orders."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from conectl.commands._base import ConeCommand

if TYPE_CHECKING:
    from conectl.commands._context import AppContext


@click.command(cls=ConeCommand, examples="  conectl demo\n  conectl --json demo")
@click.pass_obj
def demo(app: AppContext) -> None:
    """Open for business: Julie serves Sam, then Ralph serves Martha."""
    from conectl.services.order import OrderService

    app.emit(OrderService(app.catalog, app.settings.shop).run_demo())
