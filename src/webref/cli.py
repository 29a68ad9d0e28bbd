"""CLI module for webref."""

from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn, Optional

try:
    import click
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
except ImportError:
    raise ImportError("Please install CLI dependencies: pip install click rich")

from webref import __version__
from webref.config import CONFIG
from webref.exceptions import WebDriverError
from webref.logging_config import setup_logging
from webref.reference import ReferenceKind, WebReference, generate_uuid

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

KIND_CHOICES = [kind.value for kind in ReferenceKind]


@click.group()
@click.version_option(version=__version__, prog_name="webref")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool):
    """webref - web element, window and frame references."""
    setup_logging(logging.DEBUG if verbose else None)


@cli.command()
@click.option(
    "--kind",
    "-k",
    type=click.Choice(KIND_CHOICES),
    default=None,
    help="Kind of reference (defaults to WEBREF_DEFAULT_REFERENCE_KIND)",
)
@click.option("--uuid", "uuid_", default=None, help="Use this identifier instead of a fresh one")
def generate(kind: Optional[str], uuid_: Optional[str]):
    """Print a new reference in its wire representation.

    Example:
        >>> webref generate --kind window
        {"window-fcc6-11e5-b4f8-330a88ab9d7f": "..."}
    """
    try:
        ref = WebReference.from_uuid(uuid_ or generate_uuid(), kind or CONFIG.DEFAULT_REFERENCE_KIND)
    except WebDriverError as e:
        _fail(e)
    click.echo(json.dumps(ref.to_json()))


@cli.command()
@click.argument("payload")
def decode(payload: str):
    """Decode a JSON reference payload and print its kind and UUID."""
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        err_console.print(Panel.fit(f"[bold red]invalid JSON[/bold red]\n{escape(str(e))}", title="Error"))
        sys.exit(1)

    try:
        ref = WebReference.from_json(data)
    except WebDriverError as e:
        _fail(e)

    logger.debug(f"Decoded {ref!r}")
    click.echo(json.dumps({"kind": ref.KIND.value, "uuid": ref.uuid}))


def _fail(error: WebDriverError) -> NoReturn:
    err_console.print(Panel.fit(
        f"[bold red]{error.status}[/bold red]\n{escape(error.message)}",
        title="Error",
    ))
    sys.exit(1)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
