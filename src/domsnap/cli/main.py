"""domsnap CLI entry point: Click group with subcommands."""

import logging

import click

from domsnap import __version__


@click.group()
@click.version_option(version=__version__, prog_name="domsnap")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline details to stderr")
def cli(verbose: bool) -> None:
    """domsnap - snapshot a DOM subtree into self-contained HTML and CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from domsnap.cli.capture import capture  # noqa: E402
from domsnap.cli.inspect import inspect  # noqa: E402
from domsnap.cli.preview import preview  # noqa: E402
from domsnap.cli.render import render  # noqa: E402

cli.add_command(capture)
cli.add_command(inspect)
cli.add_command(render)
cli.add_command(preview)
