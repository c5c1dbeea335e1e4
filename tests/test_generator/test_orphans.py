"""Tests for dependent annotations used without [ObservableProperty]."""

import pytest

from propsynth.generator.orphans import (
    has_orphaned_dependent_attributes,
    orphaned_attribute_diagnostic,
)
from propsynth.host import load_compilation
from propsynth.model.symbols import FieldSymbol
from propsynth.semantic import bind_field


def _field(annotations: str, name: str = "value") -> FieldSymbol:
    source = (
        "using mvvm; namespace app { class Model : ObservableObject"
        f" {{ {annotations} int {name}; }} }}"
    )
    compilation = load_compilation([("orphans.decl", source)], feature_level=12)
    return bind_field(compilation.fields[0], compilation.symbols)


class TestOrphanedAttributes:
    @pytest.mark.parametrize(
        "annotations",
        [
            '[NotifyPropertyChangedFor("Other")]',
            '[NotifyCanExecuteChangedFor("SaveCommand")]',
            "[NotifyPropertyChangedRecipients]",
            "[NotifyDataErrorInfo]",
        ],
    )
    def test_each_dependent_annotation_is_orphaned(self, annotations):
        assert has_orphaned_dependent_attributes(_field(annotations))

    def test_with_primary_annotation_is_not_orphaned(self):
        field = _field('[ObservableProperty] [NotifyPropertyChangedFor("Other")]')
        assert not has_orphaned_dependent_attributes(field)

    def test_unrelated_annotations_are_not_orphaned(self):
        assert not has_orphaned_dependent_attributes(_field("[annotations.Required]"))

    def test_single_diagnostic_per_field(self):
        field = _field('[NotifyPropertyChangedFor("A")] [NotifyCanExecuteChangedFor("B")]')
        diag = orphaned_attribute_diagnostic(field)
        assert diag.code == "OrphanedDependentAttribute"
        assert diag.arguments == ("Model", "value")
        assert diag.location.path == "orphans.decl"
