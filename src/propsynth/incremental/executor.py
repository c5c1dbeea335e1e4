"""Graph executor: pull-based evaluation with stage-level and item-level reuse."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from propsynth.events import types as events
from propsynth.events.bus import EventBus
from propsynth.incremental.cache import ItemMemo, StageCache, StageEntry, serial_map
from propsynth.incremental.graph import IncrementalGraph, Node, NodeKind


class RunAbandoned(Exception):
    """Raised when a run is superseded by a newer snapshot version."""

    def __init__(self, version: int, latest_version: int) -> None:
        self.version = version
        self.latest_version = latest_version
        super().__init__(
            f"Run for snapshot v{version} abandoned: v{latest_version} is newer"
        )


@dataclass(frozen=True)
class StageStats:
    """How a stage was satisfied during one run."""

    name: str
    kind: str
    skipped: bool
    evaluated: int = 0
    reused: int = 0


@dataclass(frozen=True)
class RunReport:
    """Outputs and per-stage statistics of one completed run."""

    version: int
    outputs: dict[str, tuple[Any, ...]] = field(default_factory=dict)
    stages: tuple[StageStats, ...] = ()

    @property
    def evaluations(self) -> int:
        """Total number of transform invocations in the run."""
        return sum(s.evaluated for s in self.stages)

    @property
    def reused(self) -> int:
        return sum(s.reused for s in self.stages)

    def stage(self, name: str) -> StageStats:
        for stats in self.stages:
            if stats.name == name:
                return stats
        raise KeyError(name)

    def value(self, name: str) -> Any:
        """The single item produced by a value output."""
        return self.outputs[name][0]


class _RunState:
    def __init__(self, version: int, inputs: Mapping[str, Any]) -> None:
        self.version = version
        self.inputs = inputs
        self.results: dict[int, tuple[Any, ...]] = {}
        self.entries: dict[tuple[int, str], StageEntry] = {}
        self.stats: list[StageStats] = []


class GraphExecutor:
    """Evaluates an :class:`IncrementalGraph` against successive snapshots.

    The executor exclusively owns its :class:`StageCache`. Only one run per
    snapshot version is meaningful: announcing a newer version makes any
    run for an older one raise :class:`RunAbandoned` at the next stage
    boundary, and such a run leaves the cache untouched.
    """

    def __init__(
        self,
        graph: IncrementalGraph,
        cache: StageCache | None = None,
        *,
        max_workers: int = 1,
        event_bus: EventBus | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.graph = graph
        self.cache = cache if cache is not None else StageCache()
        self.max_workers = max_workers
        self.event_bus = event_bus or EventBus()
        self._latest_version = 0

    @property
    def latest_version(self) -> int:
        return self._latest_version

    def announce(self, version: int) -> None:
        """Record that a snapshot with *version* exists."""
        if version > self._latest_version:
            self._latest_version = version

    def run(self, inputs: Mapping[str, Any], version: int | None = None) -> RunReport:
        """Evaluate every registered output for one snapshot.

        Args:
            inputs: Values for every declared input, by name.
            version: Snapshot version; defaults to one past the latest known.

        Raises:
            RunAbandoned: if *version* is, or becomes, older than the latest
                announced version.
        """
        if version is None:
            version = self._latest_version + 1
        self.announce(version)
        self._check_current(version)

        missing = [name for name in self.graph.inputs if name not in inputs]
        if missing:
            raise ValueError(f"Missing graph inputs: {', '.join(missing)}")

        self.event_bus.emit(events.RunStarted(version=version))
        state = _RunState(version, inputs)
        outputs: dict[str, tuple[Any, ...]] = {}
        try:
            for name, node in self.graph.outputs.items():
                outputs[name] = self._pull(node, state)
            self._check_current(version)
        except RunAbandoned as exc:
            self.event_bus.emit(
                events.RunDiscarded(version=version, latest_version=exc.latest_version)
            )
            raise

        self.cache.commit(state.entries, version)
        report = RunReport(version=version, outputs=outputs, stages=tuple(state.stats))
        self.event_bus.emit(
            events.RunCompleted(
                version=version, evaluations=report.evaluations, reused=report.reused
            )
        )
        return report

    # ------------------------------------------------------------------
    # Internal helpers

    def _check_current(self, version: int) -> None:
        if version < self._latest_version:
            raise RunAbandoned(version, self._latest_version)

    def _pull(self, node: Node, state: _RunState) -> tuple[Any, ...]:
        if node.id in state.results:
            return state.results[node.id]
        parent_outputs = tuple(self._pull(parent, state) for parent in node.parents)
        self._check_current(state.version)

        previous = self.cache.get(node.key)
        if node.kind is NodeKind.INPUT:
            provided = state.inputs[node.name]
            output = (provided,) if node.single else tuple(provided)
            unchanged = previous is not None and previous.output == output
            if unchanged:
                output = previous.output
            entry = StageEntry(inputs=(), output=output)
            stats = StageStats(node.name, node.kind.value, skipped=unchanged)
        elif previous is not None and previous.inputs == parent_outputs:
            entry = previous
            stats = StageStats(node.name, node.kind.value, skipped=True)
        else:
            memo = ItemMemo(previous.memo if previous is not None else None, self._mapper())
            output = node.compute(parent_outputs, memo)
            if previous is not None and previous.output == output:
                # Keep the old object so downstream identity checks stay cheap.
                output = previous.output
            entry = StageEntry(inputs=parent_outputs, output=output, memo=memo.current)
            stats = StageStats(
                node.name,
                node.kind.value,
                skipped=False,
                evaluated=memo.evaluated,
                reused=memo.reused,
            )

        state.entries[node.key] = entry
        state.results[node.id] = entry.output
        state.stats.append(stats)
        self.event_bus.emit(
            events.StageEvaluated(
                name=stats.name,
                kind=stats.kind,
                skipped=stats.skipped,
                evaluated=stats.evaluated,
                reused=stats.reused,
            )
        )
        return entry.output

    def _mapper(self) -> Callable[[Callable[[Any], Any], Sequence[Any]], list[Any]]:
        if self.max_workers == 1:
            return serial_map
        workers = self.max_workers

        def _parallel_map(fn: Callable[[Any], Any], items: Sequence[Any]) -> list[Any]:
            if len(items) < 2:
                return serial_map(fn, items)
            with ThreadPoolExecutor(max_workers=min(workers, len(items))) as pool:
                return list(pool.map(fn, items))

        return _parallel_map
