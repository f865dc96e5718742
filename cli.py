#!/usr/bin/env python3
"""
Pokedex CLI - interactive explorer for the PokeAPI catalog

Browse location areas, see which Pokemon appear there, and catch them.
Responses are kept in a timed in-memory cache for the session.
"""

import random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pokedex import PokeAPIClient, Session, TimedCache, build_commands, run_repl
from pokedex.config import settings
from pokedex.utils import get_logger, setup_logging

app = typer.Typer(
    name="pokedex",
    help="Interactive Pokedex backed by the PokeAPI",
    add_completion=False,
)
console = Console()
logger = get_logger("pokedex.cli")


def start_session(
    retention: float,
    base_url: Optional[str],
    seed: Optional[int],
) -> None:
    """Open the cache and client for one session and run the REPL."""
    rng = random.Random(seed)
    with TimedCache(retention=retention) as cache, PokeAPIClient(cache, base_url=base_url) as client:
        logger.info(f"Session started (retention={retention}s, api={client.base_url})")
        session = Session(client=client, cache=cache, console=console, rng=rng)
        run_repl(session, build_commands())
    logger.info("Session closed")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    retention: float = typer.Option(settings.CACHE_RETENTION_SECONDS, "-r", "--retention", help="Seconds to keep cached responses"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the PokeAPI base URL"),
    seed: Optional[int] = typer.Option(settings.CATCH_SEED, "--seed", help="Seed the catch RNG"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Start the REPL when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        setup_logging(level="DEBUG" if verbose else None)
        start_session(retention, base_url, seed)


@app.command()
def repl(
    retention: float = typer.Option(settings.CACHE_RETENTION_SECONDS, "-r", "--retention", help="Seconds to keep cached responses"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the PokeAPI base URL"),
    seed: Optional[int] = typer.Option(settings.CATCH_SEED, "--seed", help="Seed the catch RNG"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """
    Start the interactive Pokedex.

    Example:
        python cli.py repl --retention 60
    """
    setup_logging(level="DEBUG" if verbose else None)
    start_session(retention, base_url, seed)


@app.command()
def commands():
    """List the commands available inside the REPL."""
    table = Table(title="REPL Commands")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description")
    for command in build_commands().values():
        table.add_row(command.signature, command.description)
    console.print(table)


if __name__ == "__main__":
    app()
