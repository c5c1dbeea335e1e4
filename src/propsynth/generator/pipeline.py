"""Observable property generator: graph wiring and the per-session driver."""

from __future__ import annotations

from dataclasses import dataclass

from propsynth.config import GeneratorConfig
from propsynth.diagnostics import descriptors
from propsynth.diagnostics.collector import merge_diagnostics
from propsynth.events.bus import EventBus
from propsynth.events.listeners import get_logger
from propsynth.generator import names
from propsynth.generator.emitter import CodeEmitter, PartialDeclarationEmitter
from propsynth.generator.gate import filter_with_feature_level
from propsynth.generator.orphans import (
    has_orphaned_dependent_attributes,
    orphaned_attribute_diagnostic,
)
from propsynth.generator.rules import evaluate
from propsynth.incremental.cache import StageCache
from propsynth.incremental.executor import GraphExecutor, RunReport
from propsynth.incremental.graph import IncrementalGraph
from propsynth.model.diagnostic import Diagnostic
from propsynth.model.hierarchy import HierarchyInfo
from propsynth.model.property_info import PropertyInfo
from propsynth.model.result import Result
from propsynth.model.symbols import FieldDeclaration, FieldSymbol, TypeKind
from propsynth.semantic.binder import bind_field
from propsynth.semantic.compilation import Compilation
from propsynth.semantic.matching import has_annotation
from propsynth.semantic.table import SymbolTable

logger = get_logger("generator")

# Graph inputs
FIELDS = "fields"
SYMBOLS = "symbols"
FEATURE_LEVEL = "feature_level"

# Graph outputs, diagnostics listed in report order
ORPHANED_DIAGNOSTICS = "orphaned_diagnostics"
FEATURE_LEVEL_DIAGNOSTICS = "feature_level_diagnostics"
PROPERTY_DIAGNOSTICS = "property_diagnostics"
SOURCES = "sources"

DIAGNOSTIC_OUTPUTS = (ORPHANED_DIAGNOSTICS, FEATURE_LEVEL_DIAGNOSTICS, PROPERTY_DIAGNOSTICS)

CandidateInfo = tuple[HierarchyInfo, Result[PropertyInfo]]

CONTAINER_KINDS = frozenset({TypeKind.CLASS, TypeKind.RECORD})


class DuplicateSourceError(Exception):
    """Raised when two generated units of one run share a hint name."""

    def __init__(self, hint_name: str) -> None:
        self.hint_name = hint_name
        super().__init__(f"more than one generated source named {hint_name!r}")


@dataclass(frozen=True)
class GeneratedSource:
    """One generated code unit."""

    hint_name: str
    text: str


@dataclass(frozen=True)
class GeneratorRunResult:
    """Everything one run hands back to the host."""

    sources: tuple[GeneratedSource, ...]
    diagnostics: tuple[Diagnostic, ...]
    report: RunReport

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)


def _has_annotations(field: FieldDeclaration) -> bool:
    return bool(field.annotations)


def _bind(item: tuple[FieldDeclaration, SymbolTable]) -> FieldSymbol:
    declaration, table = item
    return bind_field(declaration, table)


def _in_class_or_record(field: FieldSymbol) -> bool:
    return field.containing_type.symbol.kind in CONTAINER_KINDS


def _is_observable_property(field: FieldSymbol) -> bool:
    return has_annotation(field, names.OBSERVABLE_PROPERTY)


def _gather_info(field: FieldSymbol) -> CandidateInfo:
    return HierarchyInfo.from_type(field.containing_type), evaluate(field)


def _candidate_diagnostics(item: CandidateInfo) -> tuple[Diagnostic, ...]:
    return item[1].diagnostics


def _has_property(item: CandidateInfo) -> bool:
    return item[1].value is not None


def _check_unique_hints(sources: tuple[GeneratedSource, ...]) -> None:
    seen: set[str] = set()
    for source in sources:
        if source.hint_name in seen:
            raise DuplicateSourceError(source.hint_name)
        seen.add(source.hint_name)


class ObservablePropertyGenerator:
    """Declares the generator's stages on an :class:`IncrementalGraph`."""

    def __init__(
        self, config: GeneratorConfig | None = None, emitter: CodeEmitter | None = None
    ) -> None:
        self.config = config or GeneratorConfig()
        self.emitter = emitter or PartialDeclarationEmitter()

    def initialize(self, graph: IncrementalGraph) -> None:
        fields = graph.values_input(FIELDS)
        symbols = graph.value_input(SYMBOLS)
        feature_level = graph.value_input(FEATURE_LEVEL)

        field_symbols = (
            fields.where(_has_annotations, name="annotated_fields")
            .combine(symbols, name="fields_with_symbols")
            .select(_bind, name="field_symbols")
            .where(_in_class_or_record, name="class_or_record_fields")
        )

        orphaned = field_symbols.where(
            has_orphaned_dependent_attributes, name="orphaned_fields"
        ).select(orphaned_attribute_diagnostic, name="orphaned_diagnostics")
        graph.register_output(ORPHANED_DIAGNOSTICS, orphaned)

        candidates = field_symbols.where(_is_observable_property, name="observable_fields")
        candidates, gate_diagnostics = filter_with_feature_level(
            candidates,
            feature_level,
            self.config.minimum_feature_level,
            descriptors.UNSUPPORTED_FEATURE_LEVEL,
        )
        graph.register_output(FEATURE_LEVEL_DIAGNOSTICS, gate_diagnostics)

        infos = candidates.select(_gather_info, name="property_infos")
        graph.register_output(
            PROPERTY_DIAGNOSTICS,
            infos.select_many(_candidate_diagnostics, name="property_diagnostics"),
        )
        graph.register_output(
            SOURCES,
            infos.where(_has_property, name="valid_properties").select(
                self._render, name="generated_sources"
            ),
        )

    def _render(self, item: CandidateInfo) -> GeneratedSource:
        hierarchy, result = item
        info = result.value
        if info is None:
            raise ValueError(f"no property to render for {hierarchy.filename_hint}")
        return GeneratedSource(
            hint_name=(
                f"{hierarchy.filename_hint}.{info.property_name}{self.config.source_extension}"
            ),
            text=self.emitter.render(hierarchy, info),
        )


class GeneratorDriver:
    """Runs the generator against successive compilations of one session.

    The driver owns the graph, the executor and its cache; discard the
    driver to discard the cache.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        emitter: CodeEmitter | None = None,
        event_bus: EventBus | None = None,
        cache: StageCache | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.graph = IncrementalGraph()
        self.generator = ObservablePropertyGenerator(self.config, emitter)
        self.generator.initialize(self.graph)
        self.executor = GraphExecutor(
            self.graph, cache, max_workers=self.config.max_workers, event_bus=event_bus
        )

    def announce(self, version: int) -> None:
        """Signal that a newer compilation exists; older in-flight runs stop."""
        self.executor.announce(version)

    def run(self, compilation: Compilation) -> GeneratorRunResult:
        """Run the generator for one snapshot.

        Raises:
            RunAbandoned: if a newer snapshot was announced or already ran.
            DuplicateSourceError: if two properties of one container would be
                generated under the same hint name.
        """
        report = self.executor.run(
            {
                FIELDS: compilation.fields,
                SYMBOLS: compilation.symbols,
                FEATURE_LEVEL: compilation.feature_level,
            },
            version=compilation.version,
        )
        diagnostics = merge_diagnostics(*(report.outputs[name] for name in DIAGNOSTIC_OUTPUTS))
        sources = report.outputs[SOURCES]
        _check_unique_hints(sources)
        logger.debug(
            "v%d: %d source(s), %d diagnostic(s), %d stage evaluation(s)",
            report.version,
            len(sources),
            len(diagnostics),
            report.evaluations,
        )
        return GeneratorRunResult(sources=sources, diagnostics=diagnostics, report=report)
