"""Rendering of generated property declarations.

Only the metadata contract matters to the rest of the generator; the default
emitter produces a readable partial declaration without any formatting
guarantees.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol

from propsynth.model.hierarchy import HierarchyInfo
from propsynth.model.property_info import AttributeInfo, PropertyInfo
from propsynth.model.symbols import TypeOf


class CodeEmitter(Protocol):
    """Turns one property's metadata into source text."""

    def render(self, hierarchy: HierarchyInfo, info: PropertyInfo) -> str: ...


class _SourceWriter:
    def __init__(self, indent: str = "    ") -> None:
        self._lines: list[str] = []
        self._indent = indent
        self._depth = 0

    def line(self, text: str = "") -> None:
        self._lines.append(f"{self._indent * self._depth}{text}" if text else "")

    @contextmanager
    def block(self, header: str | None = None) -> Iterator[None]:
        if header is not None:
            self.line(header)
        self.line("{")
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            self.line("}")

    def text(self) -> str:
        return "\n".join(self._lines) + "\n"


def format_literal(value: object) -> str:
    """Render an annotation argument as a source literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, TypeOf):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return str(value)


def format_attribute(attribute: AttributeInfo) -> str:
    args = [format_literal(a) for a in attribute.constructor_arguments]
    args.extend(f"{k} = {format_literal(v)}" for k, v in attribute.named_arguments)
    if args:
        return f"[{attribute.type_name}({', '.join(args)})]"
    return f"[{attribute.type_name}]"


class PartialDeclarationEmitter:
    """Emit the property as a member of the reopened partial container."""

    def __init__(self, header: str = "// <auto-generated/>") -> None:
        self.header = header

    def render(self, hierarchy: HierarchyInfo, info: PropertyInfo) -> str:
        writer = _SourceWriter()
        writer.line(self.header)
        writer.line("#nullable enable")
        # Open the outermost type first
        types = list(reversed(hierarchy.hierarchy))

        def _open(depth: int) -> None:
            if depth == len(types):
                self._write_property(writer, info)
                return
            type_info = types[depth]
            with writer.block(f"partial {type_info.keyword} {type_info.qualified_name}"):
                _open(depth + 1)

        if hierarchy.namespace:
            with writer.block(f"namespace {hierarchy.namespace}"):
                _open(0)
        else:
            _open(0)
        return writer.text()

    def _write_property(self, writer: _SourceWriter, info: PropertyInfo) -> None:
        type_name = info.type_name_with_nullability
        field = info.field_name
        for attribute in info.forwarded_attributes:
            writer.line(format_attribute(attribute))
        with writer.block(f"public {type_name} {info.property_name}"):
            writer.line(f"get => {field};")
            with writer.block("set"):
                condition = f"!EqualityComparer<{type_name}>.Default.Equals({field}, value)"
                with writer.block(f"if ({condition})"):
                    if info.notify_recipients:
                        writer.line(f"{type_name} __oldValue = {field};")
                    for name in info.property_changing_names:
                        writer.line(f'OnPropertyChanging("{name}");')
                    writer.line(f"{field} = value;")
                    if info.notify_data_error_info:
                        writer.line(f'ValidateProperty(value, "{info.property_name}");')
                    for name in info.property_changed_names:
                        writer.line(f'OnPropertyChanged("{name}");')
                    for command in info.notified_command_names:
                        writer.line(f"{command}.NotifyCanExecuteChanged();")
                    if info.notify_recipients:
                        writer.line(f'Broadcast(__oldValue, value, "{info.property_name}");')
