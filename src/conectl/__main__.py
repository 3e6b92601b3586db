from conectl.cli import cli

cli()
