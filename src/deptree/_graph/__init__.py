"""Graph module providing dependency graph abstractions.

This module contains:
- DependencyGraph[T]: A generic, immutable, insertion-ordered graph
- topological_sort / reachable_from: Traversal algorithms over adjacency mappings
"""

from ._algorithms import reachable_from, topological_sort
from ._dependency_graph import DependencyGraph

__all__ = ["DependencyGraph", "reachable_from", "topological_sort"]
