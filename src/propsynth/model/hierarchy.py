"""Hierarchy descriptor: the nesting chain needed to reopen a partial type."""

from __future__ import annotations

from dataclasses import dataclass

from propsynth.model.symbols import NamedType, TypeKind, TypeSymbol


@dataclass(frozen=True)
class TypeInfo:
    """One level of a type hierarchy."""

    qualified_name: str
    kind: TypeKind

    @property
    def keyword(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class HierarchyInfo:
    """Stable description of a container and its enclosing types.

    Attributes:
        filename_hint: Full metadata name made safe for use in file names.
        metadata_name: Metadata name of the container itself (``Box`1``).
        namespace: Containing namespace, empty for the global namespace.
        hierarchy: The container followed by its enclosing types, innermost
            first.
    """

    filename_hint: str
    metadata_name: str
    namespace: str
    hierarchy: tuple[TypeInfo, ...]

    @classmethod
    def from_type(cls, named_type: NamedType) -> HierarchyInfo:
        """Describe *named_type*; equal inputs always give equal values."""
        symbol = named_type.symbol
        chain: list[TypeSymbol] = [symbol, *reversed(named_type.enclosing)]
        hierarchy = tuple(TypeInfo(t.display_name, t.kind) for t in chain)
        return cls(
            filename_hint=full_metadata_name_for_file_name(named_type),
            metadata_name=symbol.metadata_name,
            namespace=symbol.namespace,
            hierarchy=hierarchy,
        )

    @property
    def name(self) -> str:
        return self.hierarchy[0].qualified_name


def full_metadata_name_for_file_name(named_type: NamedType) -> str:
    """Return ``Namespace.Outer.Inner-1`` style names usable as file names.

    Generic arity markers (`````) become ``-`` and nested types are joined
    with ``.`` rather than ``+``.
    """
    parts: list[str] = []
    if named_type.symbol.namespace:
        parts.append(named_type.symbol.namespace)
    parts.extend(t.metadata_name for t in named_type.enclosing)
    parts.append(named_type.symbol.metadata_name)
    return ".".join(parts).replace("`", "-").replace("+", ".")
