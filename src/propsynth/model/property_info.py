"""Metadata for a generated observable property."""

from __future__ import annotations

from dataclasses import dataclass, field

from propsynth.model.symbols import AttributeData, literal_kinds


@dataclass(frozen=True)
class AttributeInfo:
    """An annotation to be copied onto the generated property."""

    type_name: str
    constructor_arguments: tuple[object, ...] = ()
    named_arguments: tuple[tuple[str, object], ...] = ()
    argument_kinds: tuple[str, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        kinds = literal_kinds(self.constructor_arguments, self.named_arguments)
        object.__setattr__(self, "argument_kinds", kinds)

    @classmethod
    def from_attribute(cls, attribute: AttributeData) -> AttributeInfo:
        return cls(
            type_name=attribute.name,
            constructor_arguments=attribute.arguments,
            named_arguments=attribute.named_arguments,
        )


@dataclass(frozen=True)
class PropertyInfo:
    """Everything the emitter needs to synthesize one property.

    The notification name tuples preserve annotation declaration order, which
    is the order of the generated notification calls.
    """

    type_name_with_nullability: str
    field_name: str
    property_name: str
    property_changing_names: tuple[str, ...] = ()
    property_changed_names: tuple[str, ...] = ()
    notified_command_names: tuple[str, ...] = ()
    notify_recipients: bool = False
    notify_data_error_info: bool = False
    forwarded_attributes: tuple[AttributeInfo, ...] = ()
