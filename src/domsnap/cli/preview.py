"""CLI command: domsnap preview -- serve a snapshot in the browser."""

from __future__ import annotations

import sys

import click

from domsnap.config import PreviewConfig
from domsnap.errors import DomsnapError
from domsnap.serde import load_snapshot


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def preview(snapshot: str, host: str, port: int, debug: bool) -> None:
    """Start a preview server for a saved snapshot."""
    from domsnap.web.app import create_app

    try:
        data = load_snapshot(snapshot)
    except DomsnapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    config = PreviewConfig(host=host, port=port)
    app = create_app(data, config=config)
    click.echo(f"Previewing {snapshot} on http://{host}:{port}/")
    app.run(host=config.host, port=config.port, debug=debug)
