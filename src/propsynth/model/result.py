"""Value-or-diagnostics result carried through the generator pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from propsynth.model.diagnostic import Diagnostic

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """A value together with the diagnostics produced while computing it.

    A missing value must always be explained by at least one diagnostic. A
    present value may still come with advisory diagnostics.
    """

    value: T | None
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        if self.value is None and not self.diagnostics:
            raise ValueError("A failed Result must carry at least one diagnostic")

    @classmethod
    def failure(cls, *diagnostics: Diagnostic) -> Result[T]:
        return cls(None, tuple(diagnostics))

    @property
    def succeeded(self) -> bool:
        return self.value is not None

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)
