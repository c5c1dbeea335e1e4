"""Propsynth: incremental generator for observable properties."""
from __future__ import annotations

__version__ = "0.1.0"

from propsynth.config import GeneratorConfig  # noqa: E402
from propsynth.generator import GeneratorDriver, GeneratorRunResult  # noqa: E402

__all__ = [
    "GeneratorConfig",
    "GeneratorDriver",
    "GeneratorRunResult",
    "__version__",
]
