"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from deptree._render import CYCLE_MARKER

if TYPE_CHECKING:
    from rich.console import Console

    from deptree._models import DependencyForest, TreeNode

    from .graph_query import GraphSummary


def render_forest(forest: DependencyForest, console: Console) -> None:
    """Render every tree of a forest using Rich Tree, then the legend.

    Args:
        forest: DependencyForest to render.
        console: Rich Console to output to.

    """
    for tree_node in forest.trees:
        rich_tree = Tree(f"[bold]{escape(tree_node.name)}[/bold]")
        _add_tree_children(rich_tree, tree_node.children)
        console.print(rich_tree)
    console.print(f"[dim]{escape(forest.legend)}[/dim]")


def _add_tree_children(parent: Tree, children: tuple[TreeNode, ...]) -> None:
    """Recursively add children to a Rich Tree.

    Args:
        parent: Parent Tree node to add children to.
        children: TreeNode children.

    """
    for child in children:
        if child.circular:
            parent.add(f"[yellow]{escape(child.name)}{CYCLE_MARKER}[/yellow]")
            continue
        child_tree = parent.add(escape(child.name))
        _add_tree_children(child_tree, child.children)


def _format_names(names: tuple[str, ...]) -> str:
    if not names:
        return "[dim]None[/dim]"
    return escape(", ".join(names))


def render_summary_table(summary: GraphSummary, console: Console) -> None:
    """Render a graph summary as a Rich table.

    Args:
        summary: GraphSummary to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("Entities", str(summary.node_count))
    table.add_row("Relations", str(summary.edge_count))
    table.add_row("Roots", _format_names(summary.roots))
    table.add_row("Leaves", _format_names(summary.leaves))
    cycle_status = "[yellow]yes[/yellow]" if summary.has_cycle else "[green]no[/green]"
    table.add_row("Circular dependencies", cycle_status)
    table.add_row("Unreachable from roots", _format_names(summary.unreachable))

    console.print(table)
