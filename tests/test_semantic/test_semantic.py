"""Tests for the symbol table, annotation matching and binding."""

import pytest

from propsynth.model.symbols import Annotation, FieldDeclaration, TypeRef, TypeSymbol
from propsynth.semantic import (
    HostContractError,
    SymbolTable,
    bind_field,
    bind_type,
    find_inherited_annotation,
    has_annotation,
    has_any_annotation,
    has_or_inherits_annotation,
    inherits_from,
)

OBSERVABLE = "mvvm.ObservablePropertyAttribute"
MARKER = "mvvm.INotifyPropertyChangedAttribute"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _type(name: str, base: str | None = None, *annotations: str, **kwargs) -> TypeSymbol:
    return TypeSymbol(
        full_name=name,
        name=name.rsplit(".", 1)[-1],
        base_name=base,
        annotations=tuple(Annotation(a) for a in annotations),
        **kwargs,
    )


def _table(*types: TypeSymbol) -> SymbolTable:
    return SymbolTable(types)


# ---------------------------------------------------------------------------
# SymbolTable
# ---------------------------------------------------------------------------


class TestSymbolTable:
    def test_lookup(self):
        table = _table(_type("a.A"), _type("a.B", "a.A"))
        assert "a.B" in table
        assert table.get("a.B").base_name == "a.A"
        assert table.get("missing") is None
        assert table.get(None) is None
        assert len(table) == 2

    def test_bases_nearest_first(self):
        table = _table(_type("C", "B"), _type("B", "A"), _type("A"))
        assert list(table.iter_bases(table.get("C"))) == ["B", "A"]
        assert [t.full_name for t in table.ancestors(table.get("C"))] == ["B", "A"]

    def test_unresolved_base_is_yielded_then_walk_stops(self):
        table = _table(_type("C", "B"), _type("B", "external.Base"))
        assert list(table.iter_bases(table.get("C"))) == ["B", "external.Base"]
        assert [t.full_name for t in table.ancestors(table.get("C"))] == ["B"]

    def test_cycle_terminates(self):
        table = _table(_type("A", "B"), _type("B", "A"))
        assert list(table.iter_bases(table.get("A"))) == ["B"]

    def test_self_cycle_terminates(self):
        table = _table(_type("A", "A"))
        assert list(table.iter_bases(table.get("A"))) == []

    def test_lineage_names(self):
        table = _table(_type("B", "A"), _type("A"))
        assert table.lineage_names("B") == ("B", "A")
        assert table.lineage_names("int") == ("int",)

    def test_enclosing_outermost_first(self):
        table = _table(
            _type("n.Outer"),
            _type("n.Outer.Mid", containing_type="n.Outer"),
            _type("n.Outer.Mid.Inner", containing_type="n.Outer.Mid"),
        )
        chain = table.enclosing(table.get("n.Outer.Mid.Inner"))
        assert [t.name for t in chain] == ["Outer", "Mid"]

    def test_equal_tables_hash_equal(self):
        assert _table(_type("A")) == _table(_type("A"))
        assert hash(_table(_type("A"))) == hash(_table(_type("A")))
        assert _table(_type("A")) != _table(_type("A", "B"))


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestMatching:
    def test_has_annotation_exact_only(self):
        symbol = _type("M", None, OBSERVABLE)
        assert has_annotation(symbol, OBSERVABLE)
        assert not has_annotation(symbol, "ObservablePropertyAttribute")

    def test_has_any_annotation(self):
        symbol = _type("M", None, OBSERVABLE)
        assert has_any_annotation(symbol, ["x", OBSERVABLE])
        assert not has_any_annotation(symbol, [])

    def test_inherited_annotation_found_on_base(self):
        table = _table(_type("Child", "Base"), _type("Base", None, MARKER))
        named = bind_type(table.get("Child"), table)
        assert has_or_inherits_annotation(named, MARKER)

    def test_missing_annotation_is_false(self):
        table = _table(_type("Child", "Missing"))
        named = bind_type(table.get("Child"), table)
        assert not has_or_inherits_annotation(named, MARKER)
        assert find_inherited_annotation(named, MARKER) is None

    def test_nearest_annotation_wins(self):
        table = _table(
            _type("Child", "Base", MARKER),
            TypeSymbol(
                "Base",
                "Base",
                annotations=(Annotation(MARKER, arguments=(False,)),),
            ),
        )
        found = find_inherited_annotation(bind_type(table.get("Child"), table), MARKER)
        assert found is not None
        assert found.arguments == ()

    def test_inherits_from_includes_unresolved_base(self):
        table = _table(_type("Child", "mvvm.ObservableObject"))
        named = bind_type(table.get("Child"), table)
        assert inherits_from(named, "mvvm.ObservableObject")
        assert not inherits_from(named, "Child")


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------


class TestBindField:
    def test_binds_container_and_annotations(self):
        table = _table(
            _type("app.Model", "mvvm.ObservableObject"),
            _type("annotations.RequiredAttribute", "annotations.ValidationAttribute"),
        )
        declaration = FieldDeclaration(
            name="name",
            type=TypeRef("string"),
            container="app.Model",
            annotations=(Annotation("annotations.RequiredAttribute"),),
        )
        field = bind_field(declaration, table)
        assert field.containing_type.full_name == "app.Model"
        assert field.attributes[0].lineage == (
            "annotations.RequiredAttribute",
            "annotations.ValidationAttribute",
        )
        assert field.type_lineage == ("string",)

    def test_unknown_container_raises(self):
        declaration = FieldDeclaration(name="x", type=TypeRef("int"), container="app.Missing")
        with pytest.raises(HostContractError) as exc_info:
            bind_field(declaration, _table())
        assert exc_info.value.name == "app.Missing"

    def test_binding_is_deterministic(self):
        table = _table(_type("app.Model"))
        declaration = FieldDeclaration(name="x", type=TypeRef("int"), container="app.Model")
        assert bind_field(declaration, table) == bind_field(declaration, table)
