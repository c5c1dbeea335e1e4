"""Tests for the default partial declaration emitter."""

from propsynth.generator.emitter import (
    PartialDeclarationEmitter,
    format_attribute,
    format_literal,
)
from propsynth.model.hierarchy import HierarchyInfo, TypeInfo
from propsynth.model.property_info import AttributeInfo, PropertyInfo
from propsynth.model.symbols import TypeKind, TypeOf


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _hierarchy(namespace: str = "app") -> HierarchyInfo:
    return HierarchyInfo(
        filename_hint=f"{namespace}.Outer.Model" if namespace else "Outer.Model",
        metadata_name="Model",
        namespace=namespace,
        hierarchy=(
            TypeInfo("Model", TypeKind.CLASS),
            TypeInfo("Outer", TypeKind.RECORD),
        ),
    )


def _info(**overrides) -> PropertyInfo:
    defaults = dict(
        type_name_with_nullability="string?",
        field_name="_name",
        property_name="Name",
        property_changing_names=("Name",),
        property_changed_names=("Name", "FullName"),
    )
    defaults.update(overrides)
    return PropertyInfo(**defaults)


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_literals(self):
        assert format_literal(None) == "null"
        assert format_literal(True) == "true"
        assert format_literal(3) == "3"
        assert format_literal('say "hi"') == '"say \\"hi\\""'
        assert format_literal(TypeOf("app.Model")) == "typeof(app.Model)"

    def test_attribute_without_arguments(self):
        assert format_attribute(AttributeInfo("annotations.KeyAttribute")) == (
            "[annotations.KeyAttribute]"
        )

    def test_attribute_with_arguments(self):
        attribute = AttributeInfo(
            "annotations.RangeAttribute", (1, 10), (("ErrorMessage", "bad"),)
        )
        assert format_attribute(attribute) == (
            '[annotations.RangeAttribute(1, 10, ErrorMessage = "bad")]'
        )


# ---------------------------------------------------------------------------
# PartialDeclarationEmitter
# ---------------------------------------------------------------------------


class TestPartialDeclarationEmitter:
    def test_reopens_nested_types_outermost_first(self):
        text = PartialDeclarationEmitter().render(_hierarchy(), _info())
        assert text.startswith("// <auto-generated/>\n#nullable enable\n")
        assert text.index("namespace app") < text.index("partial record Outer")
        assert text.index("partial record Outer") < text.index("partial class Model")
        assert "public string? Name" in text

    def test_global_namespace(self):
        text = PartialDeclarationEmitter().render(_hierarchy(namespace=""), _info())
        assert "namespace" not in text

    def test_setter_notification_order(self):
        info = _info(
            notified_command_names=("SaveCommand",),
            notify_recipients=True,
            notify_data_error_info=True,
        )
        text = PartialDeclarationEmitter().render(_hierarchy(), info)
        lines = [line.strip() for line in text.splitlines()]
        order = [
            "string? __oldValue = _name;",
            'OnPropertyChanging("Name");',
            "_name = value;",
            'ValidateProperty(value, "Name");',
            'OnPropertyChanged("Name");',
            'OnPropertyChanged("FullName");',
            "SaveCommand.NotifyCanExecuteChanged();",
            'Broadcast(__oldValue, value, "Name");',
        ]
        positions = [lines.index(line) for line in order]
        assert positions == sorted(positions)

    def test_optional_calls_absent_by_default(self):
        text = PartialDeclarationEmitter().render(_hierarchy(), _info())
        assert "Broadcast" not in text
        assert "ValidateProperty" not in text
        assert "__oldValue" not in text

    def test_forwarded_attributes_precede_property(self):
        info = _info(forwarded_attributes=(AttributeInfo("annotations.RequiredAttribute"),))
        text = PartialDeclarationEmitter().render(_hierarchy(), info)
        assert text.index("[annotations.RequiredAttribute]") < text.index("public string? Name")

    def test_custom_header(self):
        text = PartialDeclarationEmitter(header="// generated").render(_hierarchy(), _info())
        assert text.startswith("// generated\n")

    def test_braces_balance(self):
        text = PartialDeclarationEmitter().render(_hierarchy(), _info())
        assert text.count("{") == text.count("}")
