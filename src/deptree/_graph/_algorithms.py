"""Graph algorithms for dependency graph operations."""

from collections import defaultdict, deque
from collections.abc import Collection, Hashable, Mapping
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def topological_sort(edges: Mapping[T, Collection[T]]) -> list[T]:
    """Sort a graph topologically (edge sources before edge targets).

    Args:
        edges: Mapping from node to the nodes its outgoing edges point at.
            Nodes that only appear as targets are included in the result.

    Returns:
        List of nodes in topological order. Ties keep first-seen order.

    Raises:
        ValueError: If the graph contains a cycle.

    Example:
        >>> # a requires b, b requires c
        >>> topological_sort({"a": ["b"], "b": ["c"]})
        ['a', 'b', 'c']

    """
    indegree: defaultdict[T, int] = defaultdict(int)
    for node, targets in edges.items():
        indegree[node] = indegree.get(node, 0)
        for target in targets:
            indegree[target] += 1

    queue = deque([node for node, deg in indegree.items() if deg == 0])
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for target in edges.get(node, ()):
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)

    if len(order) != len(indegree):
        msg = "Cycle detected in graph"
        raise ValueError(msg)

    return order


def reachable_from(edges: Mapping[T, Collection[T]], starts: Collection[T]) -> set[T]:
    """Collect every node reachable from `starts`, the starts included."""
    visited: set[T] = set()
    stack = list(starts)
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            stack.extend(edges.get(current, ()))
    return visited
