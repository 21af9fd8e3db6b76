"""Shared CLI app objects and helpers."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="jsaudit",
    help="Discover JavaScript assets and audit them for secrets, endpoints and vulnerabilities",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
