"""Depth-first rendering of dependency trees with cycle detection.

Each tree is printed as the start entity's name followed by one line per
dependency edge, using connector glyphs::

    A
    |_B
    | \\_C
    \\_C

A dependency that is already being expanded further up the current path is
printed with a trailing ``*`` and is not expanded again.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from ._errors import UnknownEntityError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._graph import DependencyGraph

CYCLE_MARKER = "*"
CYCLE_LEGEND = f"{CYCLE_MARKER} denotes a circular dependency"

BRANCH = "|_"
LAST_BRANCH = "\\_"
BRANCH_INDENT = "| "
LAST_BRANCH_INDENT = "  "


class CycleMode(StrEnum):
    """What to do with the siblings of a child that closes a cycle.

    SKIP: Mark the cyclic child and carry on with its remaining siblings.
    ABORT: Mark the cyclic child and stop expanding its parent altogether.
    """

    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single dependency edge as it appears in a rendered tree.

    Attributes:
        name: The dependency's entity name.
        prefix: Indentation glyphs inherited from the ancestors.
        is_last: Whether this is the last child of its parent.
        depth: 1 for direct dependencies of the start entity.
        circular: Whether the entity is already on the current path.

    """

    name: str
    prefix: str
    is_last: bool
    depth: int
    circular: bool = False

    @property
    def connector(self) -> str:
        return LAST_BRANCH if self.is_last else BRANCH

    @property
    def line(self) -> str:
        """The formatted output line for this entry."""
        suffix = CYCLE_MARKER if self.circular else ""
        return f"{self.prefix}{self.connector}{self.name}{suffix}"


@dataclass(slots=True)
class _Frame:
    node: str
    dependencies: tuple[str, ...]
    prefix: str
    index: int = 0


def iter_tree_entries(
    graph: DependencyGraph[str],
    start: str,
    *,
    cycle_mode: CycleMode = CycleMode.SKIP,
) -> Iterator[TreeEntry]:
    """Walk the dependency tree below `start` depth-first, in pre-order.

    The walk keeps an explicit worklist instead of recursing, so its depth is
    not bounded by the interpreter's recursion limit. The path of entities
    currently being expanded (the start entity included) is used only for
    cycle detection; shared subtrees are expanded again under every parent.

    Args:
        graph: The graph to walk.
        start: Entity to expand. Its own line is not produced.
        cycle_mode: Whether a cyclic child ends the expansion of its parent.

    Yields:
        One TreeEntry per printed dependency edge.

    """
    stack = [_Frame(node=start, dependencies=graph.dependencies(start), prefix="")]
    on_path = {start}

    while stack:
        frame = stack[-1]
        if frame.index >= len(frame.dependencies):
            stack.pop()
            on_path.discard(frame.node)
            continue

        dep = frame.dependencies[frame.index]
        frame.index += 1
        is_last = frame.index == len(frame.dependencies)

        if dep in on_path:
            yield TreeEntry(name=dep, prefix=frame.prefix, is_last=is_last, depth=len(stack), circular=True)
            if cycle_mode == CycleMode.ABORT:
                # Legacy scoping: the parent's remaining siblings are dropped too
                frame.index = len(frame.dependencies)
            continue

        yield TreeEntry(name=dep, prefix=frame.prefix, is_last=is_last, depth=len(stack))
        child_prefix = frame.prefix + (LAST_BRANCH_INDENT if is_last else BRANCH_INDENT)
        stack.append(_Frame(node=dep, dependencies=graph.dependencies(dep), prefix=child_prefix))
        on_path.add(dep)


def render_tree(
    graph: DependencyGraph[str],
    start: str,
    *,
    cycle_mode: CycleMode = CycleMode.SKIP,
) -> Iterator[str]:
    """Lazily render the tree of `start`, beginning with its own name."""
    yield start
    for entry in iter_tree_entries(graph, start, cycle_mode=cycle_mode):
        yield entry.line


def resolve_starts(
    graph: DependencyGraph[str],
    roots: Iterable[str] | None = None,
    *,
    sort_roots: bool = False,
) -> tuple[str, ...]:
    """Pick the entities to render: the graph's roots unless given explicitly.

    Raises:
        UnknownEntityError: If an explicit start entity is not in the graph.

    """
    if roots is None:
        return graph.roots(sort=sort_roots)
    starts = tuple(roots)
    for name in starts:
        if name not in graph:
            raise UnknownEntityError(name)
    return tuple(sorted(starts)) if sort_roots else starts


def render_forest(
    graph: DependencyGraph[str],
    roots: Iterable[str] | None = None,
    *,
    cycle_mode: CycleMode = CycleMode.SKIP,
    sort_roots: bool = False,
) -> Iterator[str]:
    """Lazily render every root's tree, followed by the cycle legend.

    A graph without roots (every entity is depended upon) renders only the
    legend line.

    Args:
        graph: The graph to render.
        roots: Explicit start entities. Defaults to the graph's roots.
        cycle_mode: Whether a cyclic child ends the expansion of its parent.
        sort_roots: Render start entities in sorted order.

    Yields:
        Output lines without line terminators.

    Raises:
        UnknownEntityError: If an explicit start entity is not in the graph.

    """
    for start in resolve_starts(graph, roots, sort_roots=sort_roots):
        yield from render_tree(graph, start, cycle_mode=cycle_mode)
    yield CYCLE_LEGEND
