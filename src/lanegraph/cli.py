"""CLI for lanegraph."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from lanegraph import __version__
from lanegraph.layout import (
    assign_columns,
    compute_layout,
    modulo_columns,
    nodes_from_columns,
    nodes_from_graph,
    spacing_sequence,
)
from lanegraph.layout.constants import (
    DEMO_COLUMNS,
    DEMO_NODES,
    GAP,
    NODE_HEIGHT,
    NODE_WIDTH,
    STROKE_WIDTH,
)
from lanegraph.parser import LaneGraph, parse_lanes
from lanegraph.render import render_html, render_svg
from lanegraph.themes import THEMES


def _load(input_file: Path) -> tuple[LaneGraph, dict[str, int]]:
    """Parse a lanes file and assign its columns, exiting on bad input."""
    try:
        graph = parse_lanes(input_file.read_text())
        columns = assign_columns(graph)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    return graph, columns


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """lanegraph: Lay out column-assigned graphs as SVG lane diagrams."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to <input>.svg or <input>.html")
@click.option("--format", "fmt", type=click.Choice(["svg", "html"]), default="svg",
              help="Output format (default: svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
@click.option("--node-height", type=int, default=NODE_HEIGHT,
              help=f"Node height in pixels (default: {NODE_HEIGHT})")
@click.option("--node-width", type=int, default=NODE_WIDTH,
              help=f"Node width in pixels (default: {NODE_WIDTH})")
@click.option("--gap", type=int, default=GAP,
              help=f"Gap between nodes and columns (default: {GAP})")
@click.option("--stroke-width", type=int, default=STROKE_WIDTH,
              help=f"Smallest edge fan-out offset (default: {STROKE_WIDTH})")
def render(
    input_file: Path,
    output: Path | None,
    fmt: str,
    theme: str,
    node_height: int,
    node_width: int,
    gap: int,
    stroke_width: int,
) -> None:
    """Render a lanes file to SVG or HTML."""
    graph, columns = _load(input_file)

    try:
        layout = compute_layout(
            nodes_from_graph(graph, columns),
            node_height=node_height,
            node_width=node_width,
            gap=gap,
            stroke_width=stroke_width,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    theme_obj = THEMES[theme]
    title = graph.title or None
    if fmt == "html":
        content = render_html(layout, theme_obj, title=title)
    else:
        content = render_svg(layout, theme_obj, title=title)

    if output is None:
        output = input_file.with_suffix(f".{fmt}")

    output.write_text(content)
    click.echo(f"Rendered {len(layout.nodes)} nodes, "
               f"{len(layout.paths)} edges, "
               f"{len(set(columns.values()))} columns -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a lanes file."""
    graph, columns = _load(input_file)
    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.links)} links, "
               f"{len(set(columns.values()))} columns")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a lanes file and its layout."""
    graph, columns = _load(input_file)
    layout = compute_layout(nodes_from_graph(graph, columns))

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Nodes: {len(layout.nodes)}")
    click.echo(f"Links: {len(graph.links)}")
    click.echo(f"Columns: {len(set(columns.values()))}")
    for column in sorted(set(columns.values())):
        names = [name for name in graph.nodes if columns[name] == column]
        click.echo(f"  [{column}] {', '.join(names)}")
    click.echo(f"Edges: {len(layout.paths)}")
    click.echo(f"Lanes: {len(layout.lanes)}")
    for lane, count in sorted(layout.lanes.items()):
        click.echo(f"  x={lane}: {count} edges")
    click.echo(f"Canvas: {layout.max_width} x {layout.max_height}")


@cli.command()
@click.option("-o", "--output", type=click.Path(path_type=Path),
              default=Path("index.html"), show_default=True,
              help="Output HTML file path.")
@click.option("--nodes", "count", type=click.IntRange(min=0), default=DEMO_NODES,
              show_default=True, help="Number of nodes.")
@click.option("--columns", type=click.IntRange(min=1), default=DEMO_COLUMNS,
              show_default=True, help="Number of columns.")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
def demo(output: Path, count: int, columns: int, theme: str) -> None:
    """Render nodes spread round-robin across columns to an HTML page."""
    layout = compute_layout(nodes_from_columns(modulo_columns(count, columns)))
    output.write_text(render_html(layout, THEMES[theme], title="lanegraph demo"))
    click.echo(f"Rendered {len(layout.nodes)} nodes, "
               f"{len(layout.paths)} edges -> {output}")


@cli.command()
@click.argument("max_offset", type=int)
@click.argument("min_offset", type=int)
def spacing(max_offset: int, min_offset: int) -> None:
    """Print the edge fan-out offsets for MAX_OFFSET and MIN_OFFSET."""
    try:
        seq = spacing_sequence(max_offset, min_offset)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    click.echo(" ".join(str(v) for v in seq))
