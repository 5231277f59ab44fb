"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from licenseguard import __version__
from licenseguard.cli.common import fatal
from licenseguard.config import ConfigError, LicenseGuardConfig


@click.group()
@click.version_option(version=__version__, prog_name="licenseguard")
@click.option(
    "--policy",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON or YAML policy file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option(
    "--strict-expiry",
    is_flag=True,
    help="Treat exceptions with unparsable expiry dates as expired.",
)
@click.pass_context
def main(
    ctx: click.Context,
    policy: str | None,
    verbose: bool,
    strict_expiry: bool,
) -> None:
    """licenseguard — dependency inventory and license compliance checks."""
    try:
        config = LicenseGuardConfig.load()
    except ConfigError as e:
        fatal(str(e))
    if policy:
        config.policy_path = Path(policy)
    if strict_expiry:
        config.strict_expiry = True

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from licenseguard.cli.graph import graph  # noqa: F811
    from licenseguard.cli.policy import policy  # noqa: F811
    from licenseguard.cli.report import report  # noqa: F811
    from licenseguard.cli.scan import scan  # noqa: F811
    from licenseguard.cli.server import server  # noqa: F811

    main.add_command(scan)
    main.add_command(policy)
    main.add_command(graph)
    main.add_command(report)
    main.add_command(server)


_register_commands()
