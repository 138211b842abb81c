"""Build a dependency graph from raw relation lines."""

import logging
from collections.abc import Iterable

from ._errors import EmptyInputError
from ._graph import DependencyGraph
from ._relations import Relation

logger = logging.getLogger(__name__)


def parse_relations(lines: Iterable[str], *, strict: bool = False) -> list[Relation]:
    """Parse every line into a Relation, failing on the first malformed one.

    Args:
        lines: Relation tokens, one per element.
        strict: Enforce the legacy single-character format.

    Returns:
        The parsed relations, in input order.

    Raises:
        MalformedRelationError: If any line is not a well-formed relation.

    """
    return [Relation.parse(line, strict=strict, line_number=n) for n, line in enumerate(lines, start=1)]


def build_graph(lines: Iterable[str], *, strict: bool = False) -> DependencyGraph[str]:
    """Build a DependencyGraph from relation tokens.

    This is a pure function: no partial graph is ever returned, and no
    caller-owned collection is modified.

    Args:
        lines: Relation tokens such as ``"A->B"``, one per element.
        strict: Enforce the legacy single-character format.

    Returns:
        The graph. Its roots are the dependents that never appear as a dependency.

    Raises:
        MalformedRelationError: If any token is malformed.
        EmptyInputError: If there are no tokens at all.

    """
    relations = parse_relations(lines, strict=strict)
    if not relations:
        msg = "No relations to build a graph from"
        raise EmptyInputError(msg)

    graph = DependencyGraph.from_edges((r.dependent, r.dependency) for r in relations)
    logger.debug(f"Built graph with {len(graph)} nodes and {graph.edge_count} edges from {len(relations)} relations")
    return graph
