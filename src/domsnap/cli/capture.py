"""CLI command: domsnap capture -- snapshot an element of a live page."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from domsnap.config import SnapshotConfig
from domsnap.errors import DomsnapError
from domsnap.model.snapshot import SerdeMode
from domsnap.relay import SubprocessClipboard, clipboard_coordinator, copy_request
from domsnap.serde import hydrate, serialize_element
from domsnap.stylesheet import minify_css


@click.command()
@click.argument("url")
@click.argument("selector")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the JSON snapshot here")
@click.option("--prefix", default="ds", show_default=True, help="Generated class prefix")
@click.option("--minify/--no-minify", default=False, help="Minify the CSS")
@click.option("--copy", "copy_", is_flag=True, help="Copy the hydrated document to the clipboard")
@click.option("--headful", is_flag=True, help="Show the browser window")
@click.option("--timeout", default=30.0, type=float, show_default=True, help="Page load timeout (s)")
def capture(
    url: str,
    selector: str,
    output: str | None,
    prefix: str,
    minify: bool,
    copy_: bool,
    headful: bool,
    timeout: float,
) -> None:
    """Load URL, snapshot the element matching SELECTOR, print {html, css}."""
    from domsnap.browser.capture import capture_url

    try:
        config = SnapshotConfig(class_prefix=prefix)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--prefix") from exc

    try:
        element = capture_url(
            url, selector, headless=not headful, timeout_ms=int(timeout * 1000)
        )
    except DomsnapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    snapshot = json.loads(serialize_element(element, SerdeMode.INLINE_STYLES, config))
    if minify:
        snapshot["css"] = minify_css(snapshot["css"])
    rendered = json.dumps(snapshot, ensure_ascii=False, indent=2)

    if output:
        Path(output).write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Snapshot written to {output}")
    else:
        click.echo(rendered)

    if copy_:
        relay = clipboard_coordinator(SubprocessClipboard())
        response = relay.handle(copy_request(hydrate(snapshot["html"], snapshot["css"])))
        if response and response["success"]:
            click.echo("Copied!", err=True)
        else:
            error = (response or {}).get("error") or "Unknown error"
            click.echo(f"Copy failed: {error}", err=True)
            sys.exit(1)
