"""Catalog of diagnostics reported by the observable property generator."""

from __future__ import annotations

from propsynth.model.diagnostic import DiagnosticDescriptor, Severity

_CATEGORY = "propsynth.generator.ObservablePropertyGenerator"


INVALID_CONTAINING_TYPE = DiagnosticDescriptor(
    id="PSG0019",
    code="InvalidContainingType",
    title="Invalid containing type for [ObservableProperty] field",
    message_format=(
        "The field {0}.{1} cannot be used to generate an observable property, as its "
        "containing type doesn't inherit from ObservableObject, nor does it use "
        "[ObservableObject] or [INotifyPropertyChanged]"
    ),
    category=_CATEGORY,
    severity=Severity.ERROR,
    description=(
        "Fields annotated with [ObservableProperty] must be contained in a type that "
        "inherits from ObservableObject or that is annotated with [ObservableObject] "
        "or [INotifyPropertyChanged] (including base types)."
    ),
)

NAME_COLLISION = DiagnosticDescriptor(
    id="PSG0014",
    code="NameCollision",
    title="Name collision for generated property",
    message_format=(
        "The field {0}.{1} cannot be used to generate an observable property, as its "
        "name would collide with the field name (instance fields should use the "
        "\"lowerCamel\", \"_lowerCamel\" pattern)"
    ),
    category=_CATEGORY,
    severity=Severity.ERROR,
    description=(
        "The name of fields annotated with [ObservableProperty] should use \"lowerCamel\" "
        "or \"_lowerCamel\", so that the generated property does not collide with them."
    ),
)

INVALID_GENERATED_PROPERTY = DiagnosticDescriptor(
    id="PSG0024",
    code="InvalidGeneratedProperty",
    title="Invalid generated property declaration",
    message_format=(
        "The field {0}.{1} cannot be used to generate an observable property, as its "
        "name or type would cause conflicts with other generated members"
    ),
    category=_CATEGORY,
    severity=Severity.ERROR,
    description=(
        "A field named \"property\" (or \"_property\") cannot be annotated with "
        "[ObservableProperty] when its type is object, PropertyChangedEventArgs or "
        "PropertyChangingEventArgs, as the generated change hooks would clash."
    ),
)

ORPHANED_DEPENDENT_ATTRIBUTE = DiagnosticDescriptor(
    id="PSG0020",
    code="OrphanedDependentAttribute",
    title="Invalid use of attributes dependent on [ObservableProperty]",
    message_format=(
        "The field {0}.{1} needs to be annotated with [ObservableProperty] in order to "
        "enable using [NotifyPropertyChangedFor], [NotifyCanExecuteChangedFor], "
        "[NotifyPropertyChangedRecipients] and [NotifyDataErrorInfo]"
    ),
    category=_CATEGORY,
    severity=Severity.ERROR,
    description=(
        "Fields not annotated with [ObservableProperty] cannot use "
        "[NotifyPropertyChangedFor], [NotifyCanExecuteChangedFor], "
        "[NotifyPropertyChangedRecipients] and [NotifyDataErrorInfo]."
    ),
)

MISSING_VALIDATOR_BASE = DiagnosticDescriptor(
    id="PSG0006",
    code="MissingValidatorBase",
    title="Missing ObservableValidator inheritance",
    message_format=(
        "The field {0}.{1} cannot be used to generate an observable property, as it has "
        "{2} validation attribute(s) but is declared in a type that doesn't inherit "
        "from ObservableValidator"
    ),
    category=_CATEGORY,
    severity=Severity.WARNING,
    description=(
        "Fields with validation attributes should be declared in a type inheriting "
        "from ObservableValidator, otherwise the attributes are never checked."
    ),
)

MISSING_VALIDATION_ATTRIBUTES = DiagnosticDescriptor(
    id="PSG0026",
    code="MissingValidationAttributes",
    title="Missing validation attributes",
    message_format=(
        "The field {0}.{1} cannot be annotated with [NotifyDataErrorInfo], as it doesn't "
        "have any validation attributes to forward"
    ),
    category=_CATEGORY,
    severity=Severity.WARNING,
    description=(
        "Fields using [NotifyDataErrorInfo] (directly or through their containing "
        "type) should have at least one validation attribute."
    ),
)

UNSUPPORTED_FEATURE_LEVEL = DiagnosticDescriptor(
    id="PSG0008",
    code="UnsupportedFeatureLevel",
    title="Unsupported language feature level",
    message_format=(
        "The property generator requires the consuming build to use at least "
        "feature level {0}"
    ),
    category="propsynth.generator.gate",
    severity=Severity.ERROR,
    description=(
        "Raise the build's language feature level to the required minimum, or no "
        "properties are generated."
    ),
)


ALL_DESCRIPTORS = (
    INVALID_CONTAINING_TYPE,
    NAME_COLLISION,
    INVALID_GENERATED_PROPERTY,
    ORPHANED_DEPENDENT_ATTRIBUTE,
    MISSING_VALIDATOR_BASE,
    MISSING_VALIDATION_ATTRIBUTES,
    UNSUPPORTED_FEATURE_LEVEL,
)

BY_CODE = {d.code: d for d in ALL_DESCRIPTORS}
