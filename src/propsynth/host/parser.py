"""Lark transformer that converts a declaration parse tree into raw syntax."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError

from propsynth.host.errors import ParseError
from propsynth.host.syntax import (
    DeclarationUnit,
    RawAnnotation,
    RawField,
    RawNamespace,
    RawType,
    RawUsing,
)
from propsynth.model.diagnostic import Location
from propsynth.model.symbols import TypeKind, TypeOf, TypeRef

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def _unescape(match: re.Match[str]) -> str:
    char = match.group(1)
    return _ESCAPES.get(char, char)


class _NamedArgument:
    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value


class _TypeParameters(tuple):
    """Type parameter names of a type declaration."""


class _BaseList(tuple):
    """Base type references of a type declaration."""


class _Body(list):
    """Members of a type declaration."""


class DeclarationTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into :mod:`propsynth.host.syntax` objects."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def _location(self, line: int | None, column: int | None) -> Location:
        return Location(self.path, line or 0, column or 0)

    # ---- values ----

    def string_value(self, items: list[Token]) -> str:
        return _ESCAPE.sub(_unescape, str(items[0])[1:-1])

    def number_value(self, items: list[Token]) -> int | float:
        raw = str(items[0])
        if any(c in raw for c in ".eE"):
            return float(raw)
        return int(raw)

    def true_value(self, items: list[Token]) -> bool:
        return True

    def false_value(self, items: list[Token]) -> bool:
        return False

    def null_value(self, items: list[Token]) -> None:
        return None

    def typeof_value(self, items: list[str]) -> TypeOf:
        return TypeOf(items[0])

    def named_argument(self, items: list[object]) -> _NamedArgument:
        return _NamedArgument(str(items[0]), items[1])

    def positional_argument(self, items: list[object]) -> object:
        return items[0]

    # ---- names and types ----

    def qualified_name(self, items: list[Token]) -> str:
        return ".".join(str(t) for t in items)

    def type_args(self, items: list[TypeRef]) -> tuple[TypeRef, ...]:
        return tuple(items)

    def type_ref(self, items: list[object]) -> TypeRef:
        arguments: tuple[TypeRef, ...] = ()
        array = nullable = False
        for item in items[1:]:
            if isinstance(item, tuple):
                arguments = item
            elif isinstance(item, Token) and item.type == "ARRAY":
                array = True
            elif isinstance(item, Token) and item.type == "NULLABLE":
                nullable = True
        return TypeRef(str(items[0]), arguments=arguments, nullable=nullable, array=array)

    def type_kind(self, items: list[Token]) -> TypeKind:
        return TypeKind(str(items[0]))

    def type_params(self, items: list[Token]) -> _TypeParameters:
        return _TypeParameters(str(t) for t in items)

    def base_list(self, items: list[TypeRef]) -> _BaseList:
        return _BaseList(items)

    def modifier(self, items: list[Token]) -> str:
        return str(items[0])

    def modifiers(self, items: list[str]) -> tuple[str, ...]:
        return tuple(items)

    # ---- annotations ----

    def attribute_args(self, items: list[object]) -> list[object]:
        return list(items)

    @v_args(meta=True)
    def attribute(self, meta, items: list[object]) -> RawAnnotation:
        arguments: list[object] = []
        named: list[tuple[str, object]] = []
        if len(items) > 1:
            for arg in items[1]:  # type: ignore[union-attr]
                if isinstance(arg, _NamedArgument):
                    named.append((arg.key, arg.value))
                else:
                    arguments.append(arg)
        return RawAnnotation(
            name=str(items[0]),
            arguments=tuple(arguments),
            named_arguments=tuple(named),
            location=self._location(getattr(meta, "line", None), getattr(meta, "column", None)),
        )

    def attribute_list(self, items: list[RawAnnotation]) -> list[RawAnnotation]:
        return list(items)

    def attributes(self, items: list[list[RawAnnotation]]) -> tuple[RawAnnotation, ...]:
        return tuple(a for group in items for a in group)

    # ---- declarations ----

    def field_decl(self, items: list[object]) -> RawField:
        annotations, modifiers, type_ref, *names = items
        return RawField(
            type=type_ref,  # type: ignore[arg-type]
            names=tuple(
                (str(tok), self._location(tok.line, tok.column))  # type: ignore[union-attr]
                for tok in names
            ),
            annotations=annotations,  # type: ignore[arg-type]
            modifiers=modifiers,  # type: ignore[arg-type]
        )

    def type_body(self, items: list[object]) -> _Body:
        return _Body(item for item in items if isinstance(item, (RawType, RawField)))

    def type_decl(self, items: list[object]) -> RawType:
        annotations, modifiers, kind, name_token = items[:4]
        decl = RawType(
            kind=kind,  # type: ignore[arg-type]
            name=str(name_token),
            annotations=annotations,  # type: ignore[arg-type]
            modifiers=modifiers,  # type: ignore[arg-type]
            location=self._location(name_token.line, name_token.column),  # type: ignore[union-attr]
        )
        for item in items[4:]:
            if isinstance(item, _TypeParameters):
                decl.type_parameters = tuple(item)
            elif isinstance(item, _BaseList):
                decl.bases = tuple(item)
            elif isinstance(item, _Body):
                decl.members = list(item)
        return decl

    def using_stmt(self, items: list[str]) -> RawUsing:
        return RawUsing(items[0])

    def namespace_decl(self, items: list[object]) -> RawNamespace:
        return RawNamespace(str(items[0]), list(items[1:]))  # type: ignore[arg-type]

    def start(self, items: list[object]) -> list[object]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_declarations(source: str, path: str = "<memory>") -> DeclarationUnit:
    """Parse declaration *source* into a :class:`DeclarationUnit`."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(f"{path}: {e}", line=line, column=column, path=path) from e
    statements = DeclarationTransformer(path).transform(tree)
    return DeclarationUnit(path=path, statements=statements)
