"""Generic, insertion-ordered dependency graph abstraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ._algorithms import reachable_from, topological_sort

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DependencyGraph(Generic[T]):
    """A directed graph of "requires" relationships between nodes.

    This is a pure, immutable data structure with query methods. Unlike a
    plain set-based graph it preserves insertion order everywhere, so that
    anything printed from it is deterministic for a given input order.

    The graph represents "depends on" relationships:
    - dependencies[a] = (b,) means "a requires b"
    - dependents[b] = (a,) means "b is required by a"

    Cycles are allowed; use `has_cycle` to detect them.

    Attributes:
        _nodes: Every node in order of first appearance.
        _dependencies: Mapping from node to its direct dependencies.
        _dependents: Mapping from node to the nodes that require it.

    """

    _nodes: tuple[T, ...] = ()
    _dependencies: dict[T, tuple[T, ...]] = field(default_factory=dict)
    _dependents: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DependencyGraph[T]:
        """Build a graph from (dependent, dependency) pairs.

        Repeated edges are collapsed onto their first occurrence. Only nodes
        with at least one dependency get an entry in the adjacency mapping.

        Args:
            edges: Iterable of (dependent, dependency) tuples.

        Returns:
            A new DependencyGraph instance.

        Example:
            >>> graph = DependencyGraph.from_edges([("a", "b"), ("a", "c")])
            >>> graph.dependencies("a")
            ('b', 'c')

        """
        nodes: dict[T, None] = {}
        dependencies: dict[T, dict[T, None]] = {}
        dependents: dict[T, dict[T, None]] = {}

        for src, dst in edges:
            nodes.setdefault(src, None)
            nodes.setdefault(dst, None)
            dependencies.setdefault(src, {})[dst] = None
            dependents.setdefault(dst, {})[src] = None

        return cls(
            _nodes=tuple(nodes),
            _dependencies={k: tuple(v) for k, v in dependencies.items()},
            _dependents={k: tuple(v) for k, v in dependents.items()},
        )

    @property
    def nodes(self) -> tuple[T, ...]:
        """All nodes in the graph, in order of first appearance."""
        return self._nodes

    @property
    def edge_count(self) -> int:
        """Number of distinct edges."""
        return sum(len(deps) for deps in self._dependencies.values())

    def dependencies(self, node: T) -> tuple[T, ...]:
        """Get the direct dependencies of a node, in insertion order.

        Args:
            node: The node to query.

        Returns:
            Nodes that this node directly requires. Empty for leaves and for
            unknown nodes.

        """
        return self._dependencies.get(node, ())

    def dependents(self, node: T) -> tuple[T, ...]:
        """Get the direct dependents of a node (nodes that require it).

        Args:
            node: The node to query.

        Returns:
            Nodes that directly require this node.

        """
        return self._dependents.get(node, ())

    def roots(self, *, sort: bool = False) -> tuple[T, ...]:
        """Get nodes that nothing depends on (traversal entry points).

        Args:
            sort: Return roots sorted instead of in first-appearance order.

        Returns:
            Tuple of root nodes.

        """
        roots = [n for n in self._nodes if n not in self._dependents]
        if sort:
            roots.sort()  # type: ignore[type-var]
        return tuple(roots)

    def leaves(self) -> tuple[T, ...]:
        """Get nodes that depend on nothing."""
        return tuple(n for n in self._nodes if not self._dependencies.get(n))

    def transitive_dependencies(self, node: T) -> frozenset[T]:
        """Get all nodes reachable from `node` through dependency edges.

        The node itself is included only if it lies on a cycle.
        """
        return frozenset(reachable_from(self._dependencies, self.dependencies(node)))

    def unreachable(self) -> tuple[T, ...]:
        """Get nodes that no root reaches.

        These nodes only take part in cycles that have no entry point, so a
        forest rendered from the roots never shows them.
        """
        reached = reachable_from(self._dependencies, self.roots())
        return tuple(n for n in self._nodes if n not in reached)

    def topological_order(self) -> list[T]:
        """Return nodes with every dependent before its dependencies.

        Raises:
            ValueError: If the graph contains a cycle.

        """
        edges = {n: self.dependencies(n) for n in self._nodes}
        return topological_sort(edges)

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.topological_order()
        except ValueError:
            return True
        return False

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._dependencies or node in self._dependents or node in self._nodes
