"""Nested tree models for structured (JSON / Rich) output.

The models are assembled from the same traversal that produces the text
output, so both views always agree on structure and cycle markers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ._render import CYCLE_LEGEND, CycleMode, iter_tree_entries, resolve_starts

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._graph import DependencyGraph


class TreeNode(BaseModel):
    """A rendered entity and the dependencies expanded beneath it."""

    model_config = ConfigDict(frozen=True)

    name: str
    circular: bool = False
    children: tuple[TreeNode, ...] = ()


class DependencyForest(BaseModel):
    """The trees of every start entity plus the cycle legend."""

    model_config = ConfigDict(frozen=True)

    trees: tuple[TreeNode, ...] = ()
    legend: str = CYCLE_LEGEND


def build_tree(
    graph: DependencyGraph[str],
    start: str,
    *,
    cycle_mode: CycleMode = CycleMode.SKIP,
) -> TreeNode:
    """Build the nested tree of `start`.

    Args:
        graph: The graph to walk.
        start: Entity at the top of the tree.
        cycle_mode: Whether a cyclic child ends the expansion of its parent.

    Returns:
        TreeNode for `start` with its expanded dependencies.

    """
    # Pre-order entries arrive parent first; children are collected per depth
    # and folded into their parent once the walk moves back up.
    names: list[tuple[str, bool]] = [(start, False)]
    pending: list[list[TreeNode]] = [[]]

    def fold() -> None:
        name, circular = names.pop()
        children = pending.pop()
        pending[-1].append(TreeNode(name=name, circular=circular, children=tuple(children)))

    for entry in iter_tree_entries(graph, start, cycle_mode=cycle_mode):
        while len(names) > entry.depth:
            fold()
        names.append((entry.name, entry.circular))
        pending.append([])

    while len(names) > 1:
        fold()

    return TreeNode(name=start, children=tuple(pending[0]))


def build_forest(
    graph: DependencyGraph[str],
    roots: Iterable[str] | None = None,
    *,
    cycle_mode: CycleMode = CycleMode.SKIP,
    sort_roots: bool = False,
) -> DependencyForest:
    """Build the trees of every root (or of the given start entities).

    Raises:
        UnknownEntityError: If an explicit start entity is not in the graph.

    """
    starts = resolve_starts(graph, roots, sort_roots=sort_roots)
    return DependencyForest(trees=tuple(build_tree(graph, s, cycle_mode=cycle_mode) for s in starts))
