"""Observable property generator: rules, gate, emitter and pipeline."""

from propsynth.generator.naming import derive_name
from propsynth.generator.pipeline import (
    DuplicateSourceError,
    GeneratedSource,
    GeneratorDriver,
    GeneratorRunResult,
    ObservablePropertyGenerator,
)
from propsynth.generator.rules import evaluate

__all__ = [
    "DuplicateSourceError",
    "GeneratedSource",
    "GeneratorDriver",
    "GeneratorRunResult",
    "ObservablePropertyGenerator",
    "derive_name",
    "evaluate",
]
