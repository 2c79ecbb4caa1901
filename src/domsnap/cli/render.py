"""CLI command: domsnap render -- write a snapshot as a standalone HTML page."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from domsnap.errors import DomsnapError
from domsnap.serde import hydrate, load_snapshot
from domsnap.stylesheet import minify_css


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output HTML file")
@click.option("--minify/--no-minify", default=False, help="Minify the CSS")
@click.option("--title", default="domsnap preview", show_default=True)
def render(snapshot: str, output: str | None, minify: bool, title: str) -> None:
    """Bundle a saved {html, css} snapshot into one HTML document."""
    try:
        data = load_snapshot(snapshot)
    except DomsnapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    css = minify_css(data["css"]) if minify else data["css"]
    document = hydrate(data["html"], css, title=title)
    if output:
        Path(output).write_text(document, encoding="utf-8")
        click.echo(f"Rendered {output}")
    else:
        click.echo(document, nl=False)
