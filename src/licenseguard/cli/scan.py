"""CLI command: licenseguard scan <root> — dependency inventory."""

from __future__ import annotations

import click
from rich.table import Table

from licenseguard.cli.common import console, print_json, run_scan
from licenseguard.scanner.models import ScanResult


@click.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="File or directory names to exclude from the scan.",
)
@click.option("--workers", "-w", type=int, default=None, help="Parser threads.")
@click.option("--json", "as_json", is_flag=True, help="Print the scan result as JSON.")
@click.pass_context
def scan(
    ctx: click.Context,
    root: str,
    exclude: tuple[str, ...],
    workers: int | None,
    as_json: bool,
) -> None:
    """List declared dependencies found in manifests under ROOT."""
    result = run_scan(ctx, root, exclude=exclude, workers=workers)

    if as_json:
        print_json(result.to_dict())
        return

    if not result.dependencies:
        console.print("[green]No dependencies found.[/green]")
        _print_summary(result)
        return

    table = Table(title="Dependencies", show_lines=False)
    table.add_column("Ecosystem", style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Version")
    table.add_column("License")
    table.add_column("Source")

    for dep in result.dependencies:
        table.add_row(
            dep.ecosystem,
            dep.name,
            dep.version,
            dep.license,
            _shorten_path(dep.source_file, result.root),
        )

    console.print(table)
    _print_summary(result)


def _print_summary(result: ScanResult) -> None:
    console.print(
        f"\nScanned {result.files_scanned} files "
        f"({len(result.failures)} parse failures) "
        f"in {result.duration:.2f}s"
    )
    console.print(f"Total dependencies: {len(result.dependencies)}")


def _shorten_path(file_path: str, base_dir: str) -> str:
    """Shorten file path relative to scan directory."""
    if file_path.startswith(base_dir):
        return file_path[len(base_dir) :].lstrip("/")
    return file_path
