"""Event types emitted while the incremental graph runs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunStarted:
    version: int


@dataclass(frozen=True)
class StageEvaluated:
    name: str
    kind: str
    skipped: bool
    evaluated: int
    reused: int


@dataclass(frozen=True)
class RunCompleted:
    version: int
    evaluations: int
    reused: int


@dataclass(frozen=True)
class RunDiscarded:
    version: int
    latest_version: int
