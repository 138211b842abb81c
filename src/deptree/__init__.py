"""Dependency tree printer for files of `A->B` relations."""

__all__ = [
    "CYCLE_LEGEND",
    "CycleMode",
    "DependencyForest",
    "DependencyGraph",
    "DeptreeError",
    "EmptyInputError",
    "FileUnreadableError",
    "MalformedRelationError",
    "Relation",
    "TreeEntry",
    "TreeNode",
    "UnknownEntityError",
    "build_forest",
    "build_graph",
    "build_tree",
    "iter_tree_entries",
    "parse_relations",
    "read_relation_lines",
    "render_forest",
    "render_tree",
]

from ._builder import build_graph, parse_relations
from ._errors import (
    DeptreeError,
    EmptyInputError,
    FileUnreadableError,
    MalformedRelationError,
    UnknownEntityError,
)
from ._graph import DependencyGraph
from ._io import read_relation_lines
from ._models import DependencyForest, TreeNode, build_forest, build_tree
from ._relations import Relation
from ._render import CYCLE_LEGEND, CycleMode, TreeEntry, iter_tree_entries, render_forest, render_tree
