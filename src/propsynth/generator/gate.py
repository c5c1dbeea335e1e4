"""Feature-level gate for the generator pipeline."""

from __future__ import annotations

from typing import Any, TypeVar

from propsynth.incremental.graph import ValueProvider, ValuesProvider
from propsynth.model.diagnostic import Diagnostic, DiagnosticDescriptor

T = TypeVar("T")


def filter_with_feature_level(
    source: ValuesProvider[T],
    feature_level: ValueProvider[int],
    minimum: int,
    descriptor: DiagnosticDescriptor,
) -> tuple[ValuesProvider[T], ValuesProvider[Diagnostic]]:
    """Gate *source* on the build's feature level.

    Returns the items that may proceed and a diagnostics provider. When the
    level is below *minimum* every item is dropped (not failed) and exactly
    one diagnostic is produced for the whole run, and only if some item was
    actually dropped.
    """
    is_supported = feature_level.select(
        lambda level: level >= minimum, name="feature_level_supported"
    )
    with_support: ValuesProvider[tuple[T, bool]] = source.combine(
        is_supported, name="with_feature_level"
    )

    is_unsupported_used = (
        with_support.where(lambda item: not item[1], name="unsupported_items")
        .collect(name="unsupported_collected")
        .select(lambda items: len(items) > 0, name="unsupported_used")
    )

    def _report(used: bool) -> tuple[Diagnostic, ...]:
        return (descriptor.create(None, minimum),) if used else ()

    diagnostics = is_unsupported_used.select_many(_report, name="feature_level_diagnostics")
    supported = with_support.where(lambda item: item[1], name="supported_items").select(
        _first, name="gated"
    )
    return supported, diagnostics


def _first(item: tuple[Any, Any]) -> Any:
    return item[0]
