"""Annotation matching over declarations and bound types.

All checks are total: a missing annotation or an unresolved base is a plain
``False``, never an error.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from propsynth.model.symbols import Annotation, NamedType


class Annotated(Protocol):
    """Anything that carries an ordered annotation tuple."""

    @property
    def annotations(self) -> tuple[Annotation, ...]: ...


def has_annotation(entity: Annotated, name: str) -> bool:
    """True if *entity* itself carries an annotation named exactly *name*."""
    return any(a.name == name for a in entity.annotations)


def has_any_annotation(entity: Annotated, names: Iterable[str]) -> bool:
    wanted = frozenset(names)
    return any(a.name in wanted for a in entity.annotations)


def find_annotation(entity: Annotated, name: str) -> Annotation | None:
    for annotation in entity.annotations:
        if annotation.name == name:
            return annotation
    return None


def has_or_inherits_annotation(named_type: NamedType, name: str) -> bool:
    """True if the type or any of its resolved bases carries *name*."""
    return find_inherited_annotation(named_type, name) is not None


def find_inherited_annotation(named_type: NamedType, name: str) -> Annotation | None:
    """Return the nearest *name* annotation walking from the type to its bases."""
    for symbol in named_type.lineage:
        annotation = find_annotation(symbol, name)
        if annotation is not None:
            return annotation
    return None


def inherits_from(named_type: NamedType, name: str) -> bool:
    """True if *name* appears anywhere in the base chain (not the type itself)."""
    return name in named_type.base_names
