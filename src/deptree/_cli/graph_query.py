"""Graph query functions for CLI commands.

This module provides pure functions for querying the dependency graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deptree._graph import DependencyGraph


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Summary of a graph's shape for the `check` command."""

    node_count: int
    edge_count: int
    roots: tuple[str, ...]
    leaves: tuple[str, ...]
    has_cycle: bool
    unreachable: tuple[str, ...]


def summarize_graph(graph: DependencyGraph[str], *, sort_roots: bool = False) -> GraphSummary:
    """Summarize a dependency graph.

    Args:
        graph: The graph to analyze.
        sort_roots: Report roots in sorted order instead of first appearance.

    Returns:
        GraphSummary with counts, roots, leaves and cycle information.

    """
    return GraphSummary(
        node_count=len(graph),
        edge_count=graph.edge_count,
        roots=graph.roots(sort=sort_roots),
        leaves=graph.leaves(),
        has_cycle=graph.has_cycle(),
        unreachable=graph.unreachable(),
    )
