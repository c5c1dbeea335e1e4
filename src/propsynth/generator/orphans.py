"""Detection of dependent annotations used without [ObservableProperty]."""

from __future__ import annotations

from propsynth.diagnostics import descriptors
from propsynth.generator import names
from propsynth.model.diagnostic import Diagnostic
from propsynth.model.symbols import FieldSymbol
from propsynth.semantic.matching import has_annotation, has_any_annotation


def has_orphaned_dependent_attributes(field: FieldSymbol) -> bool:
    """True if *field* uses a dependent annotation but lacks the primary one."""
    return has_any_annotation(field, names.DEPENDENT_ATTRIBUTES) and not has_annotation(
        field, names.OBSERVABLE_PROPERTY
    )


def orphaned_attribute_diagnostic(field: FieldSymbol) -> Diagnostic:
    return descriptors.ORPHANED_DEPENDENT_ATTRIBUTE.create(
        field.location, field.containing_type.symbol.display_name, field.name
    )
