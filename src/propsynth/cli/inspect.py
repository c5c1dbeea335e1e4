"""CLI command: propsynth inspect -- display declared types and fields."""

from __future__ import annotations

from typing import Iterable

import click

from propsynth.cli.loading import feature_level_option, load_or_exit
from propsynth.host.prelude import PRELUDE_PATH
from propsynth.model.symbols import Annotation


def _format_annotations(annotations: Iterable[Annotation]) -> str:
    return " ".join(f"[{a.name}]" for a in annotations)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@feature_level_option
def inspect(files: tuple[str, ...], feature_level: int) -> None:
    """Parse declaration files and display the resolved types and fields.

    Library types from the built-in prelude are not listed.
    """
    compilation = load_or_exit(files, feature_level, include_prelude=True)
    symbols = compilation.symbols

    user_types = [
        t for t in symbols.types if t.location is None or t.location.path != PRELUDE_PATH
    ]
    click.echo(f"Types:  {len(user_types)}")
    click.echo(f"Fields: {len(compilation.fields)}")
    click.echo()

    for symbol in user_types:
        parts = [f"{symbol.kind.value} {symbol.full_name}"]
        bases = list(symbols.iter_bases(symbol))
        if bases:
            parts.append(": " + " -> ".join(bases))
        click.echo(" ".join(parts))
        if symbol.annotations:
            click.echo(f"  {_format_annotations(symbol.annotations)}")
        for field in compilation.fields_of(symbol.full_name):
            line = f"  {field.type.display} {field.name}"
            if field.annotations:
                line += f"  {_format_annotations(field.annotations)}"
            click.echo(line)
