"""CLI command: propsynth generate -- write generated sources."""

from __future__ import annotations

import sys
from pathlib import Path

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
@click.option(
    "-o",
    "--output",
    "output_dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory for generated sources.",
)
@click.option(
    "--extension",
    default=".g.cs",
    show_default=True,
    help="File extension of generated sources.",
)
@feature_level_option
@max_workers_option
@no_prelude_option
def generate(
    files: tuple[str, ...],
    output_dir: str,
    extension: str,
    feature_level: int,
    max_workers: int,
    no_prelude: bool,
) -> None:
    """Generate observable properties for annotated fields.

    Sources are written for every valid field even when other fields
    report errors; the exit code is 1 if any error was reported.
    """
    try:
        config = GeneratorConfig(
            max_workers=max_workers,
            source_extension=extension,
            include_prelude=not no_prelude,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--extension") from exc

    compilation = load_or_exit(files, feature_level, config.include_prelude)
    result = run_generator(config, compilation)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    for source in result.sources:
        (out / source.hint_name).write_text(source.text, encoding="utf-8")
        click.echo(f"wrote {source.hint_name}")

    echo_diagnostics(result)
    sys.exit(1 if result.has_errors else 0)
