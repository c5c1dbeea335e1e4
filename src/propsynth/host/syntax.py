"""Raw syntax produced by the declaration parser, before name resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from propsynth.model.diagnostic import Location
from propsynth.model.symbols import TypeKind, TypeRef


@dataclass(frozen=True)
class RawAnnotation:
    name: str
    arguments: tuple[object, ...] = ()
    named_arguments: tuple[tuple[str, object], ...] = ()
    location: Location | None = None


@dataclass(frozen=True)
class RawField:
    type: TypeRef
    names: tuple[tuple[str, Location], ...]
    annotations: tuple[RawAnnotation, ...] = ()
    modifiers: tuple[str, ...] = ()


@dataclass
class RawType:
    kind: TypeKind
    name: str
    type_parameters: tuple[str, ...] = ()
    bases: tuple[TypeRef, ...] = ()
    annotations: tuple[RawAnnotation, ...] = ()
    modifiers: tuple[str, ...] = ()
    members: list[Union[RawType, RawField]] = field(default_factory=list)
    location: Location | None = None


@dataclass
class RawNamespace:
    name: str
    statements: list[Statement] = field(default_factory=list)


@dataclass(frozen=True)
class RawUsing:
    name: str


Statement = Union[RawUsing, RawNamespace, RawType]


@dataclass
class DeclarationUnit:
    """One parsed declaration file."""

    path: str
    statements: list[Statement] = field(default_factory=list)
