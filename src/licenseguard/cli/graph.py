"""CLI command: licenseguard graph <root> — DOT dependency graph."""

from __future__ import annotations

from pathlib import Path

import click

from licenseguard.cli.common import console, get_config, run_scan
from licenseguard.report.graph import to_dot


@click.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file ('-' for stdout). Default: graph/dependency-graph.dot",
)
@click.pass_context
def graph(ctx: click.Context, root: str, output: str | None) -> None:
    """Write a Graphviz DOT graph of dependencies under ROOT."""
    dot = to_dot(run_scan(ctx, root))

    if output == "-":
        click.echo(dot, nl=False)
        return

    out = Path(output) if output else get_config(ctx).graph_dir / "dependency-graph.dot"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dot, encoding="utf-8")
    console.print(f"DOT graph -> [cyan]{out.resolve()}[/cyan]")
