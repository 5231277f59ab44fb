"""CLI command: licenseguard report <root> — HTML compliance report."""

from __future__ import annotations

import sys

import click

from licenseguard.cli.common import (
    EXIT_NON_COMPLIANT,
    console,
    evaluate,
    get_config,
    run_scan,
)
from licenseguard.report.html import write_report


@click.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--output-dir",
    "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the report. Default: reports/",
)
@click.pass_context
def report(ctx: click.Context, root: str, output_dir: str | None) -> None:
    """Render an HTML compliance report for ROOT."""
    scan_result = run_scan(ctx, root)
    result = evaluate(ctx, scan_result)

    out = write_report(scan_result, result, output_dir or get_config(ctx).report_dir)
    console.print(f"Report -> [cyan]{out.resolve()}[/cyan]")

    if not result.compliant:
        sys.exit(EXIT_NON_COMPLIANT)
