import logging
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from deptree._builder import build_graph
from deptree._errors import DeptreeError
from deptree._graph import DependencyGraph
from deptree._io import DEFAULT_INPUT, read_relation_lines
from deptree._models import build_forest
from deptree._render import CycleMode, render_forest

from .config import ConfigError, DeptreeConfig, get_config
from .graph_query import summarize_graph
from .graph_render import render_forest as render_forest_rich
from .graph_render import render_summary_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


class OutputFormat(StrEnum):
    """Output format of the `render` command."""

    TEXT = "text"
    RICH = "rich"
    JSON = "json"


PathArgument = Annotated[
    Path | None,
    typer.Argument(help=f"Path to the relations file (defaults to {DEFAULT_INPUT})", show_default=False),
]
StrictOption = Annotated[
    bool | None,
    typer.Option(
        "--strict/--no-strict",
        help="Only accept single-character entities (legacy A->B format)",
        show_default=False,
    ),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Print the dependency trees described by a file of A->B relations."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str, code: int = 1) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False)
    return typer.Exit(code=code)


def _load_config() -> DeptreeConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from None


def _resolve_input(path: Path | None, config: DeptreeConfig) -> Path:
    """Pick the input file: explicit argument, then config, then the default."""
    if path is not None:
        err_console.print(
            f"[cyan]Using[/cyan] {escape(str(path))} [cyan]as input[/cyan]",
            soft_wrap=True,
            highlight=False,
        )
        return path
    if config.input is not None:
        err_console.print(
            f"[cyan]Using[/cyan] {escape(str(config.input))} [cyan]as input (from pyproject.toml)[/cyan]",
            soft_wrap=True,
            highlight=False,
        )
        return config.input
    err_console.print(
        f"[cyan]No file provided, using default {DEFAULT_INPUT} as input[/cyan]",
        soft_wrap=True,
        highlight=False,
    )
    return DEFAULT_INPUT


def _load_graph(path: Path, *, strict: bool) -> DependencyGraph[str]:
    """Read and build the graph, turning deptree errors into a clean exit."""
    try:
        lines = read_relation_lines(path)
        return build_graph(lines, strict=strict)
    except DeptreeError as e:
        raise _fail(str(e), e.exit_code) from None


@app.command()
def render(
    path: PathArgument = None,
    *,
    strict: StrictOption = None,
    cycle_mode: Annotated[
        CycleMode | None,
        typer.Option(
            "--cycle-mode",
            help="'skip' continues with the siblings of a circular dependency, 'abort' drops them",
            show_default=False,
        ),
    ] = None,
    sort_roots: Annotated[
        bool | None,
        typer.Option(
            "--sort-roots/--no-sort-roots",
            help="Print roots in sorted order instead of input order",
            show_default=False,
        ),
    ] = None,
    root: Annotated[
        list[str] | None,
        typer.Option("--root", help="Render only this entity (repeatable)", show_default=False),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format"),
    ] = OutputFormat.TEXT,
) -> None:
    """Print the dependency tree of every root entity."""
    config = _load_config()
    input_path = _resolve_input(path, config)

    if strict is None:
        strict = bool(config.strict)
    if sort_roots is None:
        sort_roots = bool(config.sort_roots)
    if cycle_mode is None:
        cycle_mode = config.cycle_mode or CycleMode.SKIP
    logger.debug(f"Rendering with strict={strict}, cycle_mode={cycle_mode}, sort_roots={sort_roots}")

    graph = _load_graph(input_path, strict=strict)
    roots = root or None

    try:
        match output_format:
            case OutputFormat.TEXT:
                for line in render_forest(graph, roots, cycle_mode=cycle_mode, sort_roots=sort_roots):
                    typer.echo(line)
            case OutputFormat.RICH:
                forest = build_forest(graph, roots, cycle_mode=cycle_mode, sort_roots=sort_roots)
                render_forest_rich(forest, out_console)
            case OutputFormat.JSON:
                forest = build_forest(graph, roots, cycle_mode=cycle_mode, sort_roots=sort_roots)
                typer.echo(forest.model_dump_json(indent=2))
    except DeptreeError as e:
        raise _fail(str(e), e.exit_code) from None


@app.command()
def check(
    path: PathArgument = None,
    *,
    strict: StrictOption = None,
) -> None:
    """Validate a relations file and summarize its graph without rendering trees."""
    config = _load_config()
    input_path = _resolve_input(path, config)
    if strict is None:
        strict = bool(config.strict)

    err_console.print("[cyan]Validating relations...[/cyan]")
    graph = _load_graph(input_path, strict=strict)
    summary = summarize_graph(graph, sort_roots=bool(config.sort_roots))

    err_console.print()
    render_summary_table(summary, err_console)
    err_console.print()

    if summary.unreachable:
        err_console.print("[yellow]⚠ Some entities are only reachable through cycles without a root[/yellow]")
    err_console.print("[green]✓ Relations are valid[/green]")


def main() -> None:
    app()
