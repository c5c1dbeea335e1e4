"""Symbol table: name lookup and ancestor walks over declared types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from propsynth.model.symbols import TypeSymbol


@dataclass(frozen=True)
class SymbolTable:
    """Immutable index of every type known to a compilation snapshot.

    Base types and containing types are referenced by name and resolved
    lazily, so walks guard against cycles instead of trusting the input.
    """

    types: tuple[TypeSymbol, ...] = ()
    _index: dict[str, TypeSymbol] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _hash: list[int] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, TypeSymbol] = {}
        for symbol in self.types:
            index.setdefault(symbol.full_name, symbol)
        object.__setattr__(self, "_index", index)

    def __hash__(self) -> int:
        # The table is hashed once per candidate in the incremental cache.
        if not self._hash:
            self._hash.append(hash(self.types))
        return self._hash[0]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._index)

    def get(self, name: str | None) -> TypeSymbol | None:
        if name is None:
            return None
        return self._index.get(name)

    def iter_bases(self, symbol: TypeSymbol) -> Iterator[str]:
        """Yield base type names of *symbol*, nearest first.

        The walk stops at the first base that cannot be resolved (after
        yielding its name) or when a name repeats.
        """
        visited = {symbol.full_name}
        name = symbol.base_name
        while name is not None and name not in visited:
            visited.add(name)
            yield name
            base = self._index.get(name)
            if base is None:
                return
            name = base.base_name

    def ancestors(self, symbol: TypeSymbol) -> tuple[TypeSymbol, ...]:
        """Resolved base types of *symbol*, nearest first."""
        resolved = (self._index.get(name) for name in self.iter_bases(symbol))
        return tuple(base for base in resolved if base is not None)

    def lineage_names(self, name: str) -> tuple[str, ...]:
        """*name* followed by the names of all its bases."""
        symbol = self._index.get(name)
        if symbol is None:
            return (name,)
        return (name, *self.iter_bases(symbol))

    def enclosing(self, symbol: TypeSymbol) -> tuple[TypeSymbol, ...]:
        """Containing types of *symbol*, outermost first."""
        chain: list[TypeSymbol] = []
        visited = {symbol.full_name}
        name = symbol.containing_type
        while name is not None and name not in visited:
            visited.add(name)
            outer = self._index.get(name)
            if outer is None:
                break
            chain.append(outer)
            name = outer.containing_type
        chain.reverse()
        return tuple(chain)
