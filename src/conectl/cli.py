"""Root CLI group for conectl with global flags and command registration."""

from __future__ import annotations

import click

from conectl import __version__
from conectl.commands import register_commands
from conectl.commands._base import ConeGroup
from conectl.commands._context import AppContext
from conectl.config.settings import ConeSettings


@click.group(
    cls=ConeGroup,
    invoke_without_command=True,
    examples="""\
  conectl menu
  conectl order Sam Cherries ScoopOfChocolate WaffleCone
  conectl --json order Martha SugarCone ScoopOfTuna MandMs
  conectl -c shop.toml demo""",
)
@click.version_option(version=__version__, prog_name="conectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only the served lines.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """conectl — build ice cream cones in the right order."""
    ctx.ensure_object(dict)
    settings = ConeSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
