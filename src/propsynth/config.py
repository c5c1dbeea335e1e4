"""Generator settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    minimum_feature_level: int = 8
    max_workers: int = 1  # >1 evaluates independent candidates on a thread pool
    source_extension: str = ".g.cs"
    include_prelude: bool = True

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if not self.source_extension.startswith("."):
            raise ValueError(f"source_extension must start with '.': {self.source_extension!r}")
