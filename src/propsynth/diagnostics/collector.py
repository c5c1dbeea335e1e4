"""Append-only diagnostic collection."""

from __future__ import annotations

from typing import Iterable, Iterator

from propsynth.model.diagnostic import Diagnostic, DiagnosticDescriptor, Location


class DiagnosticCollector:
    """Accumulates diagnostics in report order.

    Entries are never rewritten once added; :meth:`to_tuple` freezes the
    current contents.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def add(
        self, descriptor: DiagnosticDescriptor, location: Location | None, *args: object
    ) -> Diagnostic:
        diagnostic = descriptor.create(location, *args)
        self._items.append(diagnostic)
        return diagnostic

    def append(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self._items.extend(diagnostics)

    def to_tuple(self) -> tuple[Diagnostic, ...]:
        return tuple(self._items)

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def merge_diagnostics(*groups: Iterable[Diagnostic]) -> tuple[Diagnostic, ...]:
    """Concatenate diagnostic groups, keeping group order and in-group order."""
    collector = DiagnosticCollector()
    for group in groups:
        collector.extend(group)
    return collector.to_tuple()
