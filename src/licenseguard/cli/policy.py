"""CLI command: licenseguard policy <root> — compliance check."""

from __future__ import annotations

import sys

import click

from licenseguard.cli.common import (
    EXIT_NON_COMPLIANT,
    console,
    evaluate,
    print_json,
    run_scan,
)


@click.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option("--exclude", "-e", multiple=True, help="Names to exclude from the scan.")
@click.option("--json", "as_json", is_flag=True, help="Print the policy result as JSON.")
@click.pass_context
def policy(
    ctx: click.Context,
    root: str,
    exclude: tuple[str, ...],
    as_json: bool,
) -> None:
    """Evaluate dependencies under ROOT against the license policy.

    Exits 1 when a denied license is not covered by an exception.
    """
    scan_result = run_scan(ctx, root, exclude=exclude)
    result = evaluate(ctx, scan_result)

    if as_json:
        print_json(result.to_dict())
    else:
        for violation in result.violations:
            color = "red" if violation.startswith("Denied") else "yellow"
            console.print(f"[{color}]{violation}[/{color}]")
        for dep in result.waived:
            console.print(f"[dim]waived: {dep.license} on {dep.coordinate}[/dim]")
        status = "[green]compliant[/green]" if result.compliant else "[red]non-compliant[/red]"
        console.print(
            f"\n{len(scan_result.dependencies)} dependencies, "
            f"{len(result.violations)} violation(s): {status}"
        )

    if not result.compliant:
        sys.exit(EXIT_NON_COMPLIANT)
