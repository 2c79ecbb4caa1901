"""CLI command: domsnap inspect -- summarize a saved snapshot."""

from __future__ import annotations

import sys

import click

from domsnap.errors import DomsnapError
from domsnap.serde import load_snapshot
from domsnap.stylesheet import parse_stylesheet


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
def inspect(snapshot: str) -> None:
    """Show the rules and markup size of a saved snapshot."""
    try:
        data = load_snapshot(snapshot)
        stylesheet = parse_stylesheet(data["css"])
    except DomsnapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    declarations = sum(len(rule.declarations) for rule in stylesheet.rules)
    pseudo_rules = [r for r in stylesheet.rules if any(s.pseudo for s in r.selectors)]
    click.echo(f"HTML:  {len(data['html'])} chars")
    click.echo(f"Rules: {len(stylesheet.rules)} ({len(pseudo_rules)} pseudo-element)")
    click.echo(f"Declarations: {declarations}")
    click.echo()

    click.echo("Rules:")
    for rule in stylesheet.rules:
        names = ", ".join(sorted(rule.properties))
        if len(names) > 60:
            names = names[:60] + "..."
        click.echo(f"  {rule.selector_text}  ({len(rule.declarations)}) {names}")
