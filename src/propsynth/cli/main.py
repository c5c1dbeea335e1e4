"""Propsynth CLI entry point: Click group with subcommands."""

import click

from propsynth import __version__
from propsynth.events import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="propsynth")
@click.option("-v", "--verbose", is_flag=True, help="Log incremental stage activity.")
def cli(verbose: bool) -> None:
    """Propsynth - generate observable properties from annotated fields."""
    configure_logging(verbose=verbose)


# Import and register subcommands
from propsynth.cli.check import check  # noqa: E402
from propsynth.cli.generate import generate  # noqa: E402
from propsynth.cli.inspect import inspect  # noqa: E402

cli.add_command(check)
cli.add_command(generate)
cli.add_command(inspect)
