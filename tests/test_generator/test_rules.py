"""Tests for the [ObservableProperty] validation rules."""

from propsynth.diagnostics import descriptors
from propsynth.generator import names
from propsynth.generator.rules import (
    evaluate,
    get_class_level_setting,
    is_generated_property_invalid,
    is_target_type_valid,
)
from propsynth.host import load_compilation
from propsynth.model.symbols import FieldSymbol
from propsynth.semantic import bind_field


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _field(source: str, name: str) -> FieldSymbol:
    """Load *source* and bind the field called *name*."""
    compilation = load_compilation([("test.decl", source)], feature_level=12)
    declaration = next(f for f in compilation.fields if f.name == name)
    return bind_field(declaration, compilation.symbols)


def _codes(result) -> list[str]:
    return [d.code for d in result.diagnostics]


def _model(body: str, header: str = "class Model : ObservableObject") -> str:
    return f"using mvvm; using annotations; namespace app {{ {header} {{ {body} }} }}"


# ---------------------------------------------------------------------------
# Container eligibility
# ---------------------------------------------------------------------------


class TestTargetType:
    def test_observable_object_base(self):
        field = _field(_model("[ObservableProperty] int count;"), "count")
        assert is_target_type_valid(field.containing_type) == (True, True)

    def test_transitive_base(self):
        field = _field(
            "using mvvm; namespace app { class Base : ObservableValidator { }"
            " class Model : Base { [ObservableProperty] int count; } }",
            "count",
        )
        assert is_target_type_valid(field.containing_type) == (True, True)

    def test_observable_object_marker(self):
        source = _model("[ObservableProperty] int count;", "[ObservableObject] class Model")
        assert is_target_type_valid(_field(source, "count").containing_type) == (True, True)

    def test_notify_marker_alone_skips_changing(self):
        source = _model("[ObservableProperty] int count;", "[INotifyPropertyChanged] class Model")
        assert is_target_type_valid(_field(source, "count").containing_type) == (True, False)

    def test_marker_on_base_type(self):
        field = _field(
            "using mvvm; namespace app { [INotifyPropertyChanged] class Base { }"
            " class Model : Base { [ObservableProperty] int count; } }",
            "count",
        )
        assert is_target_type_valid(field.containing_type) == (True, False)

    def test_plain_type_is_invalid(self):
        field = _field(_model("[ObservableProperty] int count;", "class Model"), "count")
        assert is_target_type_valid(field.containing_type) == (False, False)


# ---------------------------------------------------------------------------
# Class-level settings
# ---------------------------------------------------------------------------


class TestClassLevelSetting:
    def test_absent_is_none(self):
        field = _field(_model("[ObservableProperty] int count;"), "count")
        assert get_class_level_setting(field.containing_type, names.NOTIFY_DATA_ERROR_INFO) is None

    def test_no_argument_means_true(self):
        source = _model(
            "[ObservableProperty] int count;", "[NotifyDataErrorInfo] class Model : ObservableObject"
        )
        field = _field(source, "count")
        assert get_class_level_setting(field.containing_type, names.NOTIFY_DATA_ERROR_INFO) is True

    def test_explicit_false(self):
        source = _model(
            "[ObservableProperty] int count;",
            "[NotifyPropertyChangedRecipients(false)] class Model : ObservableObject",
        )
        field = _field(source, "count")
        setting = get_class_level_setting(
            field.containing_type, names.NOTIFY_PROPERTY_CHANGED_RECIPIENTS
        )
        assert setting is False

    def test_nearest_declaration_wins(self):
        field = _field(
            "using mvvm; namespace app {"
            " [NotifyPropertyChangedRecipients] class Base : ObservableRecipient { }"
            " [NotifyPropertyChangedRecipients(false)] class Model : Base"
            " { [ObservableProperty] int count; } }",
            "count",
        )
        setting = get_class_level_setting(
            field.containing_type, names.NOTIFY_PROPERTY_CHANGED_RECIPIENTS
        )
        assert setting is False


# ---------------------------------------------------------------------------
# Property shape
# ---------------------------------------------------------------------------


class TestGeneratedPropertyShape:
    def test_property_of_object_is_invalid(self):
        assert is_generated_property_invalid("Property", ("object",))

    def test_property_of_event_args_is_invalid(self):
        lineage = (names.PROPERTY_CHANGED_EVENT_ARGS, "system.EventArgs")
        assert is_generated_property_invalid("Property", lineage)

    def test_derived_event_args_is_invalid(self):
        lineage = ("app.MyArgs", names.PROPERTY_CHANGING_EVENT_ARGS, "system.EventArgs")
        assert is_generated_property_invalid("Property", lineage)

    def test_other_names_are_valid(self):
        assert not is_generated_property_invalid("Value", ("object",))

    def test_property_of_int_is_valid(self):
        assert not is_generated_property_invalid("Property", ("int",))


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------


class TestEvaluate:
    def test_minimal_field(self):
        result = evaluate(_field(_model("[ObservableProperty] int _count;"), "_count"))
        info = result.value
        assert result.diagnostics == ()
        assert info.property_name == "Count"
        assert info.field_name == "_count"
        assert info.type_name_with_nullability == "int"
        assert info.property_changed_names == ("Count",)
        assert info.property_changing_names == ("Count",)
        assert info.notified_command_names == ()
        assert info.notify_recipients is False
        assert info.notify_data_error_info is False
        assert info.forwarded_attributes == ()

    def test_notify_marker_has_no_changing_names(self):
        source = _model("[ObservableProperty] int count;", "[INotifyPropertyChanged] class Model")
        info = evaluate(_field(source, "count")).value
        assert info.property_changing_names == ()
        assert info.property_changed_names == ("Count",)

    def test_invalid_container(self):
        result = evaluate(_field(_model("[ObservableProperty] int count;", "class Model"), "count"))
        assert result.value is None
        assert _codes(result) == ["InvalidContainingType"]
        assert result.diagnostics[0].arguments == ("Model", "count")

    def test_name_collision(self):
        result = evaluate(_field(_model("[ObservableProperty] int Count;"), "Count"))
        assert result.value is None
        assert _codes(result) == ["NameCollision"]

    def test_invalid_container_checked_before_collision(self):
        source = _model("[ObservableProperty] int Count;", "class Model")
        assert _codes(evaluate(_field(source, "Count"))) == ["InvalidContainingType"]

    def test_reserved_property_shape(self):
        result = evaluate(_field(_model("[ObservableProperty] object property;"), "property"))
        assert result.value is None
        assert _codes(result) == ["InvalidGeneratedProperty"]

    def test_reserved_event_args_shape(self):
        source = _model(
            "[ObservableProperty] events.PropertyChangedEventArgs _property;"
        )
        assert _codes(evaluate(_field(source, "_property"))) == ["InvalidGeneratedProperty"]

    def test_notification_lists_keep_declaration_order(self):
        source = _model(
            '[ObservableProperty] [NotifyPropertyChangedFor("B")]'
            ' [NotifyCanExecuteChangedFor("SaveCommand")]'
            ' [NotifyPropertyChangedFor("A", "C")] string? _name;'
        )
        info = evaluate(_field(source, "_name")).value
        assert info.property_changed_names == ("Name", "B", "A", "C")
        assert info.notified_command_names == ("SaveCommand",)
        assert info.type_name_with_nullability == "string?"

    def test_forwarded_attributes(self):
        source = _model(
            '[ObservableProperty] [Display(Name = "Title")] [UIHint("text")]'
            " [Key] string _title;",
            "class Model : ObservableValidator",
        )
        info = evaluate(_field(source, "_title")).value
        assert [a.type_name for a in info.forwarded_attributes] == [
            "annotations.DisplayAttribute",
            "annotations.UIHintAttribute",
            "annotations.KeyAttribute",
        ]
        assert info.forwarded_attributes[0].named_arguments == (("Name", "Title"),)
        assert info.forwarded_attributes[1].constructor_arguments == ("text",)

    def test_derived_ui_hint_is_forwarded_but_derived_display_is_not(self):
        source = (
            "using mvvm; using annotations; namespace app {"
            " class MyHint : UIHintAttribute { }"
            " class MyDisplay : DisplayAttribute { }"
            " class Model : ObservableObject"
            " { [ObservableProperty] [MyHint] [MyDisplay] int _x; } }"
        )
        info = evaluate(_field(source, "_x")).value
        assert [a.type_name for a in info.forwarded_attributes] == ["app.MyHint"]

    def test_validation_attributes_forwarded(self):
        source = _model(
            "[ObservableProperty] [Required] [Range(1, 10)] int _size;",
            "class Model : ObservableValidator",
        )
        result = evaluate(_field(source, "_size"))
        assert result.diagnostics == ()
        assert [a.type_name for a in result.value.forwarded_attributes] == [
            "annotations.RequiredAttribute",
            "annotations.RangeAttribute",
        ]
        assert result.value.forwarded_attributes[1].constructor_arguments == (1, 10)

    def test_missing_validator_base_is_advisory(self):
        result = evaluate(_field(_model("[ObservableProperty] [Required] int _size;"), "_size"))
        assert result.value is not None
        assert _codes(result) == ["MissingValidatorBase"]
        assert result.diagnostics[0].arguments == ("Model", "_size", "1")

    def test_class_validation_without_validation_attributes(self):
        source = _model(
            "[ObservableProperty] int _size;",
            "[NotifyDataErrorInfo] class Model : ObservableValidator",
        )
        result = evaluate(_field(source, "_size"))
        assert result.value.notify_data_error_info is True
        assert _codes(result) == ["MissingValidationAttributes"]
        assert result.diagnostics[0].severity is descriptors.MISSING_VALIDATION_ATTRIBUTES.severity

    def test_field_setting_overrides_class_setting(self):
        source = _model(
            "[ObservableProperty] [NotifyDataErrorInfo(false)] int _size;",
            "[NotifyDataErrorInfo] class Model : ObservableValidator",
        )
        result = evaluate(_field(source, "_size"))
        assert result.value.notify_data_error_info is False
        assert result.diagnostics == ()

    def test_recipients_from_field(self):
        source = _model(
            "[ObservableProperty] [NotifyPropertyChangedRecipients] int _size;",
            "class Model : ObservableRecipient",
        )
        assert evaluate(_field(source, "_size")).value.notify_recipients is True

    def test_recipients_inherited_from_base_class(self):
        source = (
            "using mvvm; namespace app {"
            " [NotifyPropertyChangedRecipients] class Base : ObservableRecipient { }"
            " class Model : Base { [ObservableProperty] int _size; } }"
        )
        assert evaluate(_field(source, "_size")).value.notify_recipients is True

    def test_evaluate_is_deterministic(self):
        source = _model('[ObservableProperty] [NotifyPropertyChangedFor("B")] int _a;')
        assert evaluate(_field(source, "_a")) == evaluate(_field(source, "_a"))
