"""Semantic layer: symbol lookup, binding and annotation matching."""

from propsynth.semantic.binder import bind_field, bind_type
from propsynth.semantic.compilation import Compilation
from propsynth.semantic.errors import HostContractError
from propsynth.semantic.matching import (
    find_annotation,
    find_inherited_annotation,
    has_annotation,
    has_any_annotation,
    has_or_inherits_annotation,
    inherits_from,
)
from propsynth.semantic.table import SymbolTable

__all__ = [
    "SymbolTable",
    "Compilation",
    "HostContractError",
    "bind_field",
    "bind_type",
    "find_annotation",
    "find_inherited_annotation",
    "has_annotation",
    "has_any_annotation",
    "has_or_inherits_annotation",
    "inherits_from",
]
