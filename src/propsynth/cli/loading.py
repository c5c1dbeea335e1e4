"""Shared helpers for commands that read declaration files."""

from __future__ import annotations

import sys
from typing import Sequence

import click

from propsynth.config import GeneratorConfig
from propsynth.events import EventBus, logging_listener
from propsynth.generator import DuplicateSourceError, GeneratorDriver, GeneratorRunResult
from propsynth.host import ParseError, load_files
from propsynth.model.diagnostic import Severity
from propsynth.semantic import Compilation

DEFAULT_FEATURE_LEVEL = 12

feature_level_option = click.option(
    "--feature-level",
    type=int,
    default=DEFAULT_FEATURE_LEVEL,
    show_default=True,
    help="Language feature level of the build.",
)
max_workers_option = click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Threads used to evaluate independent fields.",
)
no_prelude_option = click.option(
    "--no-prelude",
    is_flag=True,
    help="Do not load the built-in library declarations.",
)


def load_or_exit(files: Sequence[str], feature_level: int, include_prelude: bool) -> Compilation:
    """Load *files*, exiting with code 1 on a parse error."""
    try:
        return load_files(files, feature_level=feature_level, include_prelude=include_prelude)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


def run_generator(config: GeneratorConfig, compilation: Compilation) -> GeneratorRunResult:
    """Run the generator once, exiting with code 1 if two sources share a name."""
    bus = EventBus()
    bus.on_all(logging_listener())
    driver = GeneratorDriver(config, event_bus=bus)
    try:
        return driver.run(compilation)
    except DuplicateSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def echo_diagnostics(result: GeneratorRunResult) -> None:
    """Print every diagnostic followed by a severity summary."""
    errors = [d for d in result.diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in result.diagnostics if d.severity is Severity.WARNING]

    for diag in result.diagnostics:
        click.echo(str(diag))
    if result.diagnostics:
        click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), "
        f"{len(result.sources)} generated source(s)"
    )
