"""Binding: join field declarations with what the symbol table knows."""

from __future__ import annotations

from propsynth.model.symbols import (
    Annotation,
    AttributeData,
    FieldDeclaration,
    FieldSymbol,
    NamedType,
    TypeSymbol,
)
from propsynth.semantic.errors import HostContractError
from propsynth.semantic.table import SymbolTable


def bind_type(symbol: TypeSymbol, table: SymbolTable) -> NamedType:
    """Attach the resolved ancestry and enclosing chain to *symbol*."""
    return NamedType(
        symbol=symbol,
        bases=table.ancestors(symbol),
        base_names=tuple(table.iter_bases(symbol)),
        enclosing=table.enclosing(symbol),
    )


def bind_attribute(annotation: Annotation, table: SymbolTable) -> AttributeData:
    return AttributeData(
        name=annotation.name,
        arguments=annotation.arguments,
        named_arguments=annotation.named_arguments,
        lineage=table.lineage_names(annotation.name),
    )


def bind_field(declaration: FieldDeclaration, table: SymbolTable) -> FieldSymbol:
    """Bind *declaration* against *table*.

    Raises:
        HostContractError: if the containing type is not in the table.
    """
    container = table.get(declaration.container)
    if container is None:
        raise HostContractError(
            f"Field '{declaration.name}' refers to unknown containing type "
            f"'{declaration.container}'",
            name=declaration.container,
        )
    return FieldSymbol(
        declaration=declaration,
        containing_type=bind_type(container, table),
        attributes=tuple(bind_attribute(a, table) for a in declaration.annotations),
        type_lineage=table.lineage_names(declaration.type.name),
    )
