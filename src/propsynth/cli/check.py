"""CLI command: propsynth check -- report generator diagnostics."""

from __future__ import annotations

import sys

import click

from propsynth.cli.loading import (
    echo_diagnostics,
    feature_level_option,
    load_or_exit,
    max_workers_option,
    no_prelude_option,
    run_generator,
)
from propsynth.config import GeneratorConfig


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@feature_level_option
@max_workers_option
@no_prelude_option
def check(files: tuple[str, ...], feature_level: int, max_workers: int, no_prelude: bool) -> None:
    """Run the generator over declaration files without writing output.

    Prints diagnostics and exits with code 1 if any of them is an error.
    """
    config = GeneratorConfig(max_workers=max_workers, include_prelude=not no_prelude)
    compilation = load_or_exit(files, feature_level, config.include_prelude)
    result = run_generator(config, compilation)

    if not result.diagnostics:
        click.echo(f"OK: {len(compilation.fields)} field(s) checked (0 diagnostics)")
        sys.exit(0)

    echo_diagnostics(result)
    sys.exit(1 if result.has_errors else 0)
