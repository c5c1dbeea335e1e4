"""Per-session cache of stage inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

Mapper = Callable[[Callable[[Any], Any], Sequence[Any]], Iterable[Any]]


def serial_map(fn: Callable[[Any], Any], items: Sequence[Any]) -> list[Any]:
    return [fn(item) for item in items]


@dataclass(frozen=True)
class StageEntry:
    """What a stage saw and produced on its last completed run."""

    inputs: tuple[tuple[Any, ...], ...]
    output: tuple[Any, ...]
    memo: dict[Any, Any] = field(default_factory=dict, compare=False)


class StageCache:
    """In-memory cache owned by one executor for one build session.

    Entries are keyed by stage identity. The cache is replaced as a whole
    when a run completes, so a stage that was not evaluated in the latest
    run is forgotten.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[int, str], StageEntry] = {}
        self.version: int | None = None

    def get(self, key: tuple[int, str]) -> StageEntry | None:
        return self._entries.get(key)

    def commit(self, entries: dict[tuple[int, str], StageEntry], version: int) -> None:
        self._entries = dict(entries)
        self.version = version

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class ItemMemo:
    """Item-level reuse for per-item stages.

    Items equal to one seen on the previous run reuse its result; only new
    items are handed to *mapper*, whose results come back in input order.
    """

    def __init__(self, previous: dict[Any, Any] | None = None, mapper: Mapper = serial_map) -> None:
        self._previous = previous or {}
        self._mapper = mapper
        self.current: dict[Any, Any] = {}
        self.evaluated = 0
        self.reused = 0

    def apply(self, fn: Callable[[Any], Any], items: Sequence[Any]) -> list[Any]:
        pending: list[Any] = []
        queued: set[Any] = set()
        for item in items:
            if item in self.current or item in queued:
                continue
            if item in self._previous:
                self.current[item] = self._previous[item]
                self.reused += 1
            else:
                queued.add(item)
                pending.append(item)
        if pending:
            for item, result in zip(pending, self._mapper(fn, pending)):
                self.current[item] = result
            self.evaluated += len(pending)
        return [self.current[item] for item in items]
