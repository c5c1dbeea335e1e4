"""Validation rules for [ObservableProperty] fields.

:func:`evaluate` runs the checks in order and stops at the first fatal one;
advisory checks only run once a property can be generated and ride along
with the resulting metadata.
"""

from __future__ import annotations

from propsynth.diagnostics import descriptors
from propsynth.diagnostics.collector import DiagnosticCollector
from propsynth.generator import names
from propsynth.generator.naming import derive_name
from propsynth.model.property_info import AttributeInfo, PropertyInfo
from propsynth.model.result import Result
from propsynth.model.symbols import Annotation, AttributeData, FieldSymbol, NamedType
from propsynth.semantic.matching import (
    find_inherited_annotation,
    has_or_inherits_annotation,
    inherits_from,
)


# ---------------------------------------------------------------------------
# Container checks
# ---------------------------------------------------------------------------


def is_target_type_valid(containing_type: NamedType) -> tuple[bool, bool]:
    """Check that *containing_type* exposes the change notification hooks.

    Returns ``(is_valid, should_invoke_on_property_changing)``. Changing
    notifications are only available through the ObservableObject base or
    the [ObservableObject] marker; [INotifyPropertyChanged] alone does not
    provide them.
    """
    is_observable_object = inherits_from(containing_type, names.OBSERVABLE_OBJECT)
    has_observable_object_attribute = has_or_inherits_annotation(
        containing_type, names.OBSERVABLE_OBJECT_ATTRIBUTE
    )
    has_notify_attribute = has_or_inherits_annotation(
        containing_type, names.INOTIFY_PROPERTY_CHANGED_ATTRIBUTE
    )
    should_invoke_changing = is_observable_object or has_observable_object_attribute
    return should_invoke_changing or has_notify_attribute, should_invoke_changing


def _setting_value(annotation: Annotation | AttributeData) -> bool:
    """A setting annotation is on unless its first argument is ``false``."""
    if annotation.arguments and isinstance(annotation.arguments[0], bool):
        return annotation.arguments[0]
    return True


def get_class_level_setting(containing_type: NamedType, attribute_name: str) -> bool | None:
    """Resolve a tri-state class-level setting.

    The nearest type in the lineage that declares *attribute_name* decides;
    ``None`` means no type declares it.
    """
    annotation = find_inherited_annotation(containing_type, attribute_name)
    if annotation is None:
        return None
    return _setting_value(annotation)


# ---------------------------------------------------------------------------
# Property shape checks
# ---------------------------------------------------------------------------


def is_generated_property_invalid(property_name: str, type_lineage: tuple[str, ...]) -> bool:
    """A property named ``Property`` clashes with the generated change hooks
    when its type is object or one of the change event argument types.
    """
    if property_name != "Property":
        return False
    if type_lineage and type_lineage[0] == names.OBJECT:
        return True
    return (
        names.PROPERTY_CHANGED_EVENT_ARGS in type_lineage
        or names.PROPERTY_CHANGING_EVENT_ARGS in type_lineage
    )


def is_validation_attribute(attribute: AttributeData) -> bool:
    return attribute.inherits_from(names.VALIDATION_ATTRIBUTE)


def is_forwarded_attribute(attribute: AttributeData) -> bool:
    """Display-style annotations copied onto the generated property."""
    if any(attribute.has_or_inherits_from(n) for n in names.FORWARDED_INHERITED):
        return True
    return any(attribute.has_fully_qualified_name(n) for n in names.FORWARDED_EXACT)


def _string_arguments(attribute: AttributeData) -> list[str]:
    return [a for a in attribute.arguments if isinstance(a, str) and a]


# ---------------------------------------------------------------------------
# Rule engine
# ---------------------------------------------------------------------------


def evaluate(field: FieldSymbol) -> Result[PropertyInfo]:
    """Validate *field* and build the metadata for its generated property."""
    diagnostics = DiagnosticCollector()
    containing_type = field.containing_type
    container_name = containing_type.symbol.display_name

    is_valid, should_invoke_changing = is_target_type_valid(containing_type)
    if not is_valid:
        diagnostics.add(
            descriptors.INVALID_CONTAINING_TYPE, field.location, container_name, field.name
        )
        return Result.failure(*diagnostics)

    property_name = derive_name(field.name)

    # Report the collision instead of generating a duplicate member, so the
    # user never sees a confusing "already defined" error downstream.
    if property_name == field.name:
        diagnostics.add(descriptors.NAME_COLLISION, field.location, container_name, field.name)
        return Result.failure(*diagnostics)

    if is_generated_property_invalid(property_name, field.type_lineage):
        diagnostics.add(
            descriptors.INVALID_GENERATED_PROPERTY, field.location, container_name, field.name
        )
        return Result.failure(*diagnostics)

    changing_names: list[str] = [property_name] if should_invoke_changing else []
    changed_names: list[str] = [property_name]
    command_names: list[str] = []
    forwarded: list[AttributeInfo] = []
    has_validation_attributes = False

    class_recipients = get_class_level_setting(
        containing_type, names.NOTIFY_PROPERTY_CHANGED_RECIPIENTS
    )
    class_validation = get_class_level_setting(containing_type, names.NOTIFY_DATA_ERROR_INFO)
    notify_recipients = bool(class_recipients)
    notify_data_error_info = bool(class_validation)

    for attribute in field.attributes:
        if attribute.has_fully_qualified_name(names.NOTIFY_PROPERTY_CHANGED_FOR):
            changed_names.extend(_string_arguments(attribute))
            continue
        if attribute.has_fully_qualified_name(names.NOTIFY_CAN_EXECUTE_CHANGED_FOR):
            command_names.extend(_string_arguments(attribute))
            continue

        # Field-level settings override whatever the class hierarchy resolved.
        if attribute.has_fully_qualified_name(names.NOTIFY_PROPERTY_CHANGED_RECIPIENTS):
            notify_recipients = _setting_value(attribute)
            continue
        if attribute.has_fully_qualified_name(names.NOTIFY_DATA_ERROR_INFO):
            notify_data_error_info = _setting_value(attribute)
            continue

        if is_validation_attribute(attribute):
            has_validation_attributes = True
            forwarded.append(AttributeInfo.from_attribute(attribute))
        elif is_forwarded_attribute(attribute):
            forwarded.append(AttributeInfo.from_attribute(attribute))

    if has_validation_attributes and not inherits_from(
        containing_type, names.OBSERVABLE_VALIDATOR
    ):
        diagnostics.add(
            descriptors.MISSING_VALIDATOR_BASE,
            field.location,
            container_name,
            field.name,
            len(forwarded),
        )

    if notify_data_error_info and not has_validation_attributes:
        diagnostics.add(
            descriptors.MISSING_VALIDATION_ATTRIBUTES, field.location, container_name, field.name
        )

    info = PropertyInfo(
        type_name_with_nullability=field.type.display,
        field_name=field.name,
        property_name=property_name,
        property_changing_names=tuple(changing_names),
        property_changed_names=tuple(changed_names),
        notified_command_names=tuple(command_names),
        notify_recipients=notify_recipients,
        notify_data_error_info=notify_data_error_info,
        forwarded_attributes=tuple(forwarded),
    )
    return Result(info, diagnostics.to_tuple())
