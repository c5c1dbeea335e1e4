"""Incremental computation graph: stage nodes and the providers that build them.

A graph is declared once and evaluated many times by a
:class:`~propsynth.incremental.executor.GraphExecutor`. Every stage is a pure
transform; the executor decides whether a stage has to run again by
comparing its inputs with the previous run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

if TYPE_CHECKING:
    from propsynth.incremental.cache import ItemMemo

T = TypeVar("T")
U = TypeVar("U")


class NodeKind(Enum):
    """Kind of transform a node applies."""

    INPUT = "input"
    SELECT = "select"
    SELECT_MANY = "select_many"
    WHERE = "where"
    COMBINE = "combine"
    COLLECT = "collect"


@dataclass(frozen=True, eq=False)
class Node:
    """A single stage of the graph.

    Every node produces a tuple of items; ``single`` nodes always produce
    exactly one.
    """

    id: int
    name: str
    kind: NodeKind
    parents: tuple[Node, ...] = ()
    fn: Callable[[Any], Any] | None = None
    single: bool = False

    @property
    def key(self) -> tuple[int, str]:
        return (self.id, self.name)

    def compute(self, inputs: tuple[tuple[Any, ...], ...], memo: ItemMemo) -> tuple[Any, ...]:
        """Apply the transform to the parents' outputs."""
        if self.kind is NodeKind.SELECT:
            return tuple(memo.apply(self.fn, inputs[0]))
        if self.kind is NodeKind.SELECT_MANY:
            fn = self.fn
            groups = memo.apply(lambda item: tuple(fn(item)), inputs[0])
            return tuple(out for group in groups for out in group)
        if self.kind is NodeKind.WHERE:
            predicate = self.fn
            flags = memo.apply(lambda item: bool(predicate(item)), inputs[0])
            return tuple(item for item, keep in zip(inputs[0], flags) if keep)
        if self.kind is NodeKind.COMBINE:
            memo.evaluated += 1
            right = inputs[1][0]
            return tuple((item, right) for item in inputs[0])
        if self.kind is NodeKind.COLLECT:
            memo.evaluated += 1
            return (inputs[0],)
        raise ValueError(f"Node {self.name!r} of kind {self.kind.value} cannot be computed")


class IncrementalGraph:
    """Builder and container for the nodes of one pipeline."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._inputs: dict[str, Node] = {}
        self._outputs: dict[str, Node] = {}

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def inputs(self) -> dict[str, Node]:
        return dict(self._inputs)

    @property
    def outputs(self) -> dict[str, Node]:
        return dict(self._outputs)

    def add_node(
        self,
        kind: NodeKind,
        *,
        name: str | None = None,
        parents: tuple[Node, ...] = (),
        fn: Callable[[Any], Any] | None = None,
        single: bool = False,
    ) -> Node:
        node_id = len(self._nodes)
        node = Node(
            id=node_id,
            name=name or f"{kind.value}#{node_id}",
            kind=kind,
            parents=parents,
            fn=fn,
            single=single,
        )
        self._nodes.append(node)
        return node

    def values_input(self, name: str) -> ValuesProvider[Any]:
        """Declare an input fed with a sequence of items on every run."""
        return ValuesProvider(self, self._add_input(name, single=False))

    def value_input(self, name: str) -> ValueProvider[Any]:
        """Declare an input fed with a single value on every run."""
        return ValueProvider(self, self._add_input(name, single=True))

    def register_output(self, name: str, provider: ValuesProvider[Any] | ValueProvider[Any]) -> None:
        if name in self._outputs:
            raise ValueError(f"Output {name!r} is already registered")
        self._outputs[name] = provider.node

    def _add_input(self, name: str, *, single: bool) -> Node:
        if name in self._inputs:
            raise ValueError(f"Input {name!r} is already declared")
        node = self.add_node(NodeKind.INPUT, name=name, single=single)
        self._inputs[name] = node
        return node


class ValuesProvider(Generic[T]):
    """Handle on a node producing any number of items."""

    def __init__(self, graph: IncrementalGraph, node: Node) -> None:
        self.graph = graph
        self.node = node

    def select(self, fn: Callable[[T], U], name: str | None = None) -> ValuesProvider[U]:
        node = self.graph.add_node(NodeKind.SELECT, name=name, parents=(self.node,), fn=fn)
        return ValuesProvider(self.graph, node)

    def select_many(
        self, fn: Callable[[T], Iterable[U]], name: str | None = None
    ) -> ValuesProvider[U]:
        node = self.graph.add_node(NodeKind.SELECT_MANY, name=name, parents=(self.node,), fn=fn)
        return ValuesProvider(self.graph, node)

    def where(self, predicate: Callable[[T], bool], name: str | None = None) -> ValuesProvider[T]:
        node = self.graph.add_node(NodeKind.WHERE, name=name, parents=(self.node,), fn=predicate)
        return ValuesProvider(self.graph, node)

    def combine(
        self, other: ValueProvider[U], name: str | None = None
    ) -> ValuesProvider[tuple[T, U]]:
        """Pair every item with the single value of *other*."""
        node = self.graph.add_node(NodeKind.COMBINE, name=name, parents=(self.node, other.node))
        return ValuesProvider(self.graph, node)

    def collect(self, name: str | None = None) -> ValueProvider[tuple[T, ...]]:
        node = self.graph.add_node(
            NodeKind.COLLECT, name=name, parents=(self.node,), single=True
        )
        return ValueProvider(self.graph, node)


class ValueProvider(Generic[T]):
    """Handle on a node producing exactly one item."""

    def __init__(self, graph: IncrementalGraph, node: Node) -> None:
        self.graph = graph
        self.node = node

    def select(self, fn: Callable[[T], U], name: str | None = None) -> ValueProvider[U]:
        node = self.graph.add_node(
            NodeKind.SELECT, name=name, parents=(self.node,), fn=fn, single=True
        )
        return ValueProvider(self.graph, node)

    def select_many(
        self, fn: Callable[[T], Iterable[U]], name: str | None = None
    ) -> ValuesProvider[U]:
        node = self.graph.add_node(NodeKind.SELECT_MANY, name=name, parents=(self.node,), fn=fn)
        return ValuesProvider(self.graph, node)

    def combine(
        self, other: ValueProvider[U], name: str | None = None
    ) -> ValueProvider[tuple[T, U]]:
        node = self.graph.add_node(
            NodeKind.COMBINE, name=name, parents=(self.node, other.node), single=True
        )
        return ValueProvider(self.graph, node)
