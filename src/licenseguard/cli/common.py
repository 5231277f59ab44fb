"""Helpers shared by CLI commands."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click
from rich.console import Console

from licenseguard.config import LicenseGuardConfig, resolve_policy
from licenseguard.policy.evaluator import PolicyEvaluator
from licenseguard.policy.loader import PolicyError
from licenseguard.policy.models import Policy, PolicyResult
from licenseguard.scanner.engine import ScanEngine, ScanError
from licenseguard.scanner.models import ScanResult

console = Console(stderr=True)

EXIT_NON_COMPLIANT = 1
EXIT_FATAL = 2


def get_config(ctx: click.Context) -> LicenseGuardConfig:
    return ctx.obj["config"]


def fatal(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    sys.exit(EXIT_FATAL)


def run_scan(
    ctx: click.Context,
    root: str,
    exclude: tuple[str, ...] = (),
    workers: int | None = None,
) -> ScanResult:
    """Scan ``root`` or exit with a fatal error."""
    config = get_config(ctx)
    engine = ScanEngine(
        exclude_patterns=list(exclude),
        workers=workers if workers is not None else config.workers,
    )
    try:
        result = engine.scan(root)
    except ScanError as e:
        fatal(str(e))

    for failure in result.failures:
        console.print(
            f"[yellow]warning:[/yellow] {failure.parser} could not parse "
            f"{failure.file_path}: {failure.error}"
        )
    return result


def load_context_policy(ctx: click.Context) -> Policy:
    """Resolve the policy for this invocation or exit with a fatal error."""
    try:
        return resolve_policy(get_config(ctx))
    except PolicyError as e:
        fatal(str(e))


def evaluate(ctx: click.Context, scan: ScanResult) -> PolicyResult:
    policy = load_context_policy(ctx)
    evaluator = PolicyEvaluator(policy, strict_expiry=get_config(ctx).strict_expiry)
    return evaluator.evaluate(scan)


def print_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2))
