"""Incremental computation graph and its executor."""

from propsynth.incremental.cache import ItemMemo, StageCache, StageEntry
from propsynth.incremental.executor import GraphExecutor, RunAbandoned, RunReport, StageStats
from propsynth.incremental.graph import (
    IncrementalGraph,
    Node,
    NodeKind,
    ValueProvider,
    ValuesProvider,
)

__all__ = [
    "IncrementalGraph",
    "Node",
    "NodeKind",
    "ValueProvider",
    "ValuesProvider",
    "GraphExecutor",
    "RunAbandoned",
    "RunReport",
    "StageStats",
    "StageCache",
    "StageEntry",
    "ItemMemo",
]
