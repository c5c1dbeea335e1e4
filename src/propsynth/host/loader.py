"""Build a :class:`Compilation` snapshot from declaration sources.

Loading happens in two passes. The first walks every parsed unit and
records each type under its fully-qualified name, merging the parts of
partial types. The second resolves base types, annotation names and field
types against the complete set of declared names, so declaration order
across files does not matter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from propsynth.events.listeners import get_logger
from propsynth.host.parser import parse_declarations
from propsynth.host.prelude import PRELUDE, PRELUDE_PATH
from propsynth.host.syntax import (
    DeclarationUnit,
    RawAnnotation,
    RawField,
    RawNamespace,
    RawType,
    RawUsing,
    Statement,
)
from propsynth.model.symbols import (
    Annotation,
    FieldDeclaration,
    TypeKind,
    TypeOf,
    TypeRef,
    TypeSymbol,
)
from propsynth.semantic.compilation import Compilation
from propsynth.semantic.table import SymbolTable

logger = get_logger("host")

ATTRIBUTE_SUFFIX = "Attribute"


@dataclass(frozen=True)
class _Scope:
    namespace: str = ""
    usings: tuple[str, ...] = ()
    containers: tuple[str, ...] = ()

    def qualify(self, name: str) -> str:
        prefix = self.containers[-1] if self.containers else self.namespace
        return f"{prefix}.{name}" if prefix else name

    def candidates(self, name: str) -> Iterator[str]:
        """Names *name* may refer to from this scope, in lookup order."""
        for container in reversed(self.containers):
            yield f"{container}.{name}"
        parts = self.namespace.split(".") if self.namespace else []
        while parts:
            yield ".".join(parts + [name])
            parts.pop()
        yield name
        for using in self.usings:
            yield f"{using}.{name}"


@dataclass
class _PendingType:
    full_name: str
    raw: RawType
    scope: _Scope
    parts: list[tuple[RawType, _Scope]] = field(default_factory=list)


class _Resolver:
    def __init__(self, known: Iterable[str]) -> None:
        self.known = set(known)

    def type_name(self, name: str, scope: _Scope) -> str:
        for candidate in scope.candidates(name):
            if candidate in self.known:
                return candidate
        return name

    def annotation_name(self, name: str, scope: _Scope) -> str:
        if not name.endswith(ATTRIBUTE_SUFFIX):
            suffixed = name + ATTRIBUTE_SUFFIX
            for candidate in scope.candidates(suffixed):
                if candidate in self.known:
                    return candidate
        return self.type_name(name, scope)

    def type_ref(self, ref: TypeRef, scope: _Scope) -> TypeRef:
        return TypeRef(
            name=self.type_name(ref.name, scope),
            arguments=tuple(self.type_ref(a, scope) for a in ref.arguments),
            nullable=ref.nullable,
            array=ref.array,
        )

    def value(self, value: object, scope: _Scope) -> object:
        if isinstance(value, TypeOf):
            return TypeOf(self.type_name(value.name, scope))
        return value

    def annotation(self, raw: RawAnnotation, scope: _Scope) -> Annotation:
        return Annotation(
            name=self.annotation_name(raw.name, scope),
            arguments=tuple(self.value(v, scope) for v in raw.arguments),
            named_arguments=tuple((k, self.value(v, scope)) for k, v in raw.named_arguments),
            location=raw.location,
        )


class _Collector:
    """First pass: index declared types and remember where fields live."""

    def __init__(self) -> None:
        self.types: dict[str, _PendingType] = {}
        self.fields: list[tuple[RawField, str, _Scope]] = []

    def visit_unit(self, unit: DeclarationUnit) -> None:
        self._visit_statements(unit.statements, _Scope())

    def _visit_statements(self, statements: list[Statement], scope: _Scope) -> None:
        usings = tuple(s.name for s in statements if isinstance(s, RawUsing))
        if usings:
            scope = _Scope(scope.namespace, scope.usings + usings, scope.containers)
        for statement in statements:
            if isinstance(statement, RawNamespace):
                namespace = (
                    f"{scope.namespace}.{statement.name}" if scope.namespace else statement.name
                )
                self._visit_statements(
                    statement.statements, _Scope(namespace, scope.usings, scope.containers)
                )
            elif isinstance(statement, RawType):
                self._visit_type(statement, scope)

    def _visit_type(self, raw: RawType, scope: _Scope) -> None:
        full_name = scope.qualify(raw.name)
        pending = self.types.get(full_name)
        if pending is None:
            pending = self.types[full_name] = _PendingType(full_name, raw, scope)
        elif "partial" not in raw.modifiers:
            logger.warning("type %s declared more than once; merging declarations", full_name)
        pending.parts.append((raw, scope))

        inner = _Scope(scope.namespace, scope.usings, scope.containers + (full_name,))
        for member in raw.members:
            if isinstance(member, RawType):
                self._visit_type(member, inner)
            else:
                self.fields.append((member, full_name, inner))


def _base_name(
    pending: _PendingType, resolver: _Resolver, kinds: dict[str, TypeKind]
) -> str | None:
    """The base class of *pending*, skipping interfaces.

    An unresolved name is only taken as the base class when it is listed
    first in its declaration.
    """
    for raw, scope in pending.parts:
        for position, base in enumerate(raw.bases):
            name = resolver.type_name(base.name, scope)
            kind = kinds.get(name)
            if kind is None:
                if position == 0:
                    return name
                continue
            if kind is not TypeKind.INTERFACE:
                return name
    return None


def _build_symbol(
    pending: _PendingType, resolver: _Resolver, kinds: dict[str, TypeKind]
) -> TypeSymbol:
    raw, scope = pending.raw, pending.scope
    annotations = tuple(
        resolver.annotation(a, part_scope)
        for part, part_scope in pending.parts
        for a in part.annotations
    )
    type_parameters = next((p.type_parameters for p, _ in pending.parts if p.type_parameters), ())
    return TypeSymbol(
        full_name=pending.full_name,
        name=raw.name,
        kind=raw.kind,
        namespace=scope.namespace,
        containing_type=scope.containers[-1] if scope.containers else None,
        base_name=_base_name(pending, resolver, kinds),
        annotations=annotations,
        type_parameters=type_parameters,
        location=raw.location,
    )


def build_compilation(
    units: Iterable[DeclarationUnit], *, feature_level: int, version: int | None = None
) -> Compilation:
    """Resolve parsed *units* into one compilation snapshot."""
    collector = _Collector()
    for unit in units:
        collector.visit_unit(unit)

    resolver = _Resolver(collector.types)
    kinds = {name: pending.raw.kind for name, pending in collector.types.items()}
    symbols = tuple(
        _build_symbol(pending, resolver, kinds) for pending in collector.types.values()
    )

    fields: list[FieldDeclaration] = []
    for raw_field, container, scope in collector.fields:
        type_ref = resolver.type_ref(raw_field.type, scope)
        annotations = tuple(resolver.annotation(a, scope) for a in raw_field.annotations)
        for name, location in raw_field.names:
            fields.append(
                FieldDeclaration(
                    name=name,
                    type=type_ref,
                    container=container,
                    annotations=annotations,
                    location=location,
                )
            )

    logger.debug("loaded %d type(s), %d field(s)", len(symbols), len(fields))
    return Compilation(
        fields=tuple(fields),
        symbols=SymbolTable(symbols),
        feature_level=feature_level,
        version=version,
    )


def load_compilation(
    sources: Iterable[tuple[str, str]],
    *,
    feature_level: int,
    version: int | None = None,
    include_prelude: bool = True,
) -> Compilation:
    """Parse ``(path, text)`` pairs and build a compilation snapshot.

    Raises:
        ParseError: if any source is not a valid declaration file.
    """
    units: list[DeclarationUnit] = []
    if include_prelude:
        units.append(parse_declarations(PRELUDE, PRELUDE_PATH))
    units.extend(parse_declarations(text, path) for path, text in sources)
    return build_compilation(units, feature_level=feature_level, version=version)


def load_files(
    paths: Iterable[str | Path],
    *,
    feature_level: int,
    version: int | None = None,
    include_prelude: bool = True,
) -> Compilation:
    """Read declaration files from disk and build a compilation snapshot."""
    sources = [(str(p), Path(p).read_text(encoding="utf-8")) for p in paths]
    return load_compilation(
        sources, feature_level=feature_level, version=version, include_prelude=include_prelude
    )
