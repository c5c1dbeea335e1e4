"""Propsynth model layer -- public type re-exports."""

from propsynth.model.diagnostic import Diagnostic, DiagnosticDescriptor, Location, Severity
from propsynth.model.hierarchy import HierarchyInfo, TypeInfo
from propsynth.model.property_info import AttributeInfo, PropertyInfo
from propsynth.model.result import Result
from propsynth.model.symbols import (
    Annotation,
    AttributeData,
    FieldDeclaration,
    FieldSymbol,
    NamedType,
    TypeKind,
    TypeOf,
    TypeRef,
    TypeSymbol,
)

__all__ = [
    # diagnostic
    "Severity",
    "Location",
    "DiagnosticDescriptor",
    "Diagnostic",
    # result
    "Result",
    # symbols
    "TypeKind",
    "TypeOf",
    "TypeRef",
    "Annotation",
    "TypeSymbol",
    "FieldDeclaration",
    "AttributeData",
    "NamedType",
    "FieldSymbol",
    # hierarchy
    "TypeInfo",
    "HierarchyInfo",
    # property info
    "AttributeInfo",
    "PropertyInfo",
]
