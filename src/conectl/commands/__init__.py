"""Subcommand modules for conectl.

register_commands() imports lazily so ``conectl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from conectl.commands.demo import demo
    from conectl.commands.menu import menu
    from conectl.commands.order import order

    cli.add_command(order)
    cli.add_command(menu)
    cli.add_command(demo)
