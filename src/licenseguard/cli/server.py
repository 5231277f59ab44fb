"""CLI command: licenseguard server — start the web API."""

from __future__ import annotations

import click

from licenseguard.cli.common import console, get_config, load_context_policy


@click.command()
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on (default: 8471).",
)
@click.pass_context
def server(ctx: click.Context, port: int | None) -> None:
    """Start the licenseguard web API."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]Web dependencies not installed.[/red]\n"
            "Install with: pip install licenseguard[web]"
        )
        raise SystemExit(1)

    config = get_config(ctx)
    if port is not None:
        config.web_port = port

    console.print(
        f"[bold]licenseguard[/bold] API starting on "
        f"[cyan]http://{config.web_host}:{config.web_port}[/cyan]"
    )
    console.print("  [dim]Bound to 127.0.0.1 only[/dim]\n")

    from licenseguard.web.app import create_app

    app = create_app(config, policy=load_context_policy(ctx))
    uvicorn.run(app, host=config.web_host, port=config.web_port, log_level="info")
