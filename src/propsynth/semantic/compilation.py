"""Compilation snapshot: the inputs of one generator run."""

from __future__ import annotations

from dataclasses import dataclass

from propsynth.model.symbols import FieldDeclaration
from propsynth.semantic.table import SymbolTable


@dataclass(frozen=True)
class Compilation:
    """Everything the host knows about the program at one point in time.

    Attributes:
        fields: Field declarations in source order.
        symbols: Every declared type, including referenced library types.
        feature_level: Effective language feature level of the build.
        version: Monotonic snapshot version; ``None`` lets the executor pick
            the next one.
    """

    fields: tuple[FieldDeclaration, ...] = ()
    symbols: SymbolTable = SymbolTable()
    feature_level: int = 0
    version: int | None = None

    def fields_of(self, container: str) -> tuple[FieldDeclaration, ...]:
        return tuple(f for f in self.fields if f.container == container)
