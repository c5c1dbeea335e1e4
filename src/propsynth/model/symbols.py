"""Declaration model: the immutable snapshot values handed over by the host.

Everything here is a frozen dataclass built from tuples, so two values that
describe the same declaration with the same content compare (and hash)
equal across snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from propsynth.model.diagnostic import Location


def literal_kinds(
    arguments: tuple[object, ...], named_arguments: tuple[tuple[str, object], ...] = ()
) -> tuple[str, ...]:
    """Type names of annotation argument values, positional first.

    Equality alone cannot tell ``0``, ``False`` and ``0.0`` apart, so values
    holding literal arguments also compare these kinds.
    """
    return tuple(type(v).__name__ for v in arguments) + tuple(
        type(v).__name__ for _, v in named_arguments
    )


class TypeKind(Enum):
    """Kind of a declared container type."""

    CLASS = "class"
    RECORD = "record"
    STRUCT = "struct"
    INTERFACE = "interface"


@dataclass(frozen=True)
class TypeRef:
    """A reference to a type as written on a field, with nullability."""

    name: str
    arguments: tuple[TypeRef, ...] = ()
    nullable: bool = False
    array: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TypeRef name must be a non-empty string")

    @property
    def display(self) -> str:
        """Render the type the way it is written, e.g. ``List<int>?``."""
        text = self.name
        if self.arguments:
            text += "<" + ", ".join(a.display for a in self.arguments) + ">"
        if self.array:
            text += "[]"
        if self.nullable:
            text += "?"
        return text


@dataclass(frozen=True)
class Annotation:
    """An annotation applied to a declaration.

    ``name`` is the fully-qualified name of the annotation class. Positional
    arguments are kept in declaration order; named arguments as
    ``(key, value)`` pairs.
    """

    name: str
    arguments: tuple[object, ...] = ()
    named_arguments: tuple[tuple[str, object], ...] = ()
    location: Location | None = None
    argument_kinds: tuple[str, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        kinds = literal_kinds(self.arguments, self.named_arguments)
        object.__setattr__(self, "argument_kinds", kinds)

    @property
    def short_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class TypeSymbol:
    """A declared type: class, record, struct or interface."""

    full_name: str
    name: str
    kind: TypeKind = TypeKind.CLASS
    namespace: str = ""
    containing_type: str | None = None
    base_name: str | None = None
    annotations: tuple[Annotation, ...] = ()
    type_parameters: tuple[str, ...] = ()
    location: Location | None = None

    @property
    def metadata_name(self) -> str:
        """Name with generic arity, e.g. ``Box`1``."""
        if self.type_parameters:
            return f"{self.name}`{len(self.type_parameters)}"
        return self.name

    @property
    def display_name(self) -> str:
        """Name with type parameters, e.g. ``Box<T>``."""
        if self.type_parameters:
            return f"{self.name}<{', '.join(self.type_parameters)}>"
        return self.name


@dataclass(frozen=True)
class FieldDeclaration:
    """A field declared inside a container type (the Declaration Node)."""

    name: str
    type: TypeRef
    container: str
    annotations: tuple[Annotation, ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Field name must be a non-empty string")
        if not self.container:
            raise ValueError(f"Field {self.name!r} has no containing type")


# ---------------------------------------------------------------------------
# Bound values: declarations joined with what the symbol table knows about them
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AttributeData:
    """An annotation bound to its class lineage.

    ``lineage`` starts with the annotation class itself followed by its
    base classes, nearest first.
    """

    name: str
    arguments: tuple[object, ...] = ()
    named_arguments: tuple[tuple[str, object], ...] = ()
    lineage: tuple[str, ...] = ()
    argument_kinds: tuple[str, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        kinds = literal_kinds(self.arguments, self.named_arguments)
        object.__setattr__(self, "argument_kinds", kinds)

    def has_fully_qualified_name(self, name: str) -> bool:
        return self.name == name

    def inherits_from(self, name: str) -> bool:
        return name in self.lineage[1:]

    def has_or_inherits_from(self, name: str) -> bool:
        return self.name == name or self.inherits_from(name)


@dataclass(frozen=True)
class NamedType:
    """A container type bound to its ancestry.

    Attributes:
        symbol: The type itself.
        bases: Resolved base types, nearest first.
        base_names: Names of every base, nearest first, including a trailing
            base the symbol table could not resolve.
        enclosing: Containing types, outermost first.
    """

    symbol: TypeSymbol
    bases: tuple[TypeSymbol, ...] = ()
    base_names: tuple[str, ...] = ()
    enclosing: tuple[TypeSymbol, ...] = ()

    @property
    def full_name(self) -> str:
        return self.symbol.full_name

    @property
    def lineage(self) -> tuple[TypeSymbol, ...]:
        """The type followed by its resolved bases."""
        return (self.symbol,) + self.bases


@dataclass(frozen=True)
class FieldSymbol:
    """A candidate field bound to its container and annotation classes."""

    declaration: FieldDeclaration
    containing_type: NamedType
    attributes: tuple[AttributeData, ...] = ()
    type_lineage: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def type(self) -> TypeRef:
        return self.declaration.type

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return self.declaration.annotations

    @property
    def location(self) -> Location | None:
        return self.declaration.location


@dataclass(frozen=True)
class TypeOf:
    """A ``typeof(Name)`` annotation argument."""

    name: str

    def __str__(self) -> str:
        return f"typeof({self.name})"
