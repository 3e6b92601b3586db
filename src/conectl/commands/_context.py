"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Builds the catalog lazily and owns result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from conectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from conectl.config.settings import ConeSettings
    from conectl.domain.catalog import Catalog
    from conectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is built on first use, so ``--help`` never touches the
    ``[menu]`` config.
    """

    def __init__(self, settings: ConeSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None

        from conectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from conectl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def catalog(self) -> Catalog:
        """Stock menu plus configured ingredients (built lazily)."""
        if self._catalog is None:
            from conectl.domain.errors import ConeError

            try:
                self._catalog = self.settings.build_catalog()
            except ConeError as exc:
                raise click.ClickException(f"Invalid [menu] config: {exc.message}") from exc
        return self._catalog

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode.
        * Failure: stderr, exit code 1.  Nothing reaches stdout.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
