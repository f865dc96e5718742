"""
REPL commands.

Each command is a callback taking the session and its arguments. Fetches go
through the session's client (and so through the response cache); errors are
raised as PokedexError subclasses and reported by the REPL.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from .cache import TimedCache
from .client import Fetched, PokeAPIClient
from .collection import Pokedex, attempt_catch
from .errors import CommandError, ExitRequested
from .models import LocationArea, LocationAreaPage, PokemonDetail
from .utils import get_logger

logger = get_logger(__name__)


@dataclass
class Session:
    """State owned by one interactive session."""
    client: PokeAPIClient
    cache: TimedCache
    console: Console = field(default_factory=Console)
    pokedex: Pokedex = field(default_factory=Pokedex)
    rng: random.Random = field(default_factory=random.Random)
    # Pagination for map/mapb
    has_page: bool = False
    next_url: Optional[str] = None
    previous_url: Optional[str] = None

    def fetch(self, url: str) -> Fetched:
        fetched = self.client.fetch(url)
        if fetched.from_cache:
            self.console.print("Using cached data.", style="dim")
        return fetched


@dataclass
class Command:
    name: str
    description: str
    callback: Callable[[Session, List[str]], None]
    usage: str = ""

    @property
    def signature(self) -> str:
        return f"{self.name} {self.usage}".strip()


def _require_arg(args: List[str], message: str) -> str:
    if not args:
        raise CommandError(message)
    return args[0]


# ========== Commands ==========

def command_help(session: Session, args: List[str]) -> None:
    session.console.print("Welcome to the Pokedex!")
    session.console.print("Usage:")
    for command in build_commands().values():
        session.console.print(f"{command.signature}: {command.description}", highlight=False)


def command_exit(session: Session, args: List[str]) -> None:
    session.console.print("Exiting the Pokedex...")
    raise ExitRequested()


def _show_page(session: Session, url: str) -> None:
    page = LocationAreaPage.from_bytes(session.fetch(url).payload)
    session.has_page = True
    session.next_url = page.next
    session.previous_url = page.previous
    for location in page.results:
        session.console.print(location.name, highlight=False)


def command_map(session: Session, args: List[str]) -> None:
    if not session.has_page:
        url = session.client.location_areas_url()
    elif session.next_url:
        url = session.next_url
    else:
        raise CommandError("no more location areas to display")
    _show_page(session, url)


def command_mapb(session: Session, args: List[str]) -> None:
    if not session.previous_url:
        raise CommandError("no previous locations available")
    _show_page(session, session.previous_url)


def command_explore(session: Session, args: List[str]) -> None:
    name = _require_arg(args, "please provide a location area name to explore")
    area = LocationArea.from_bytes(session.fetch(session.client.location_area_url(name)).payload)

    session.console.print("Found Pokemon:")
    for encounter in area.pokemon_encounters:
        session.console.print(f" - {encounter.pokemon.name}", highlight=False)


def command_catch(session: Session, args: List[str]) -> None:
    name = _require_arg(args, "please provide a Pokemon name to catch")
    pokemon = PokemonDetail.from_bytes(session.fetch(session.client.pokemon_url(name)).payload)

    session.console.print(f"Throwing a Pokeball at {pokemon.name}...")
    if attempt_catch(pokemon.base_experience, session.rng):
        session.pokedex.add(pokemon)
        logger.debug(f"Caught {pokemon.name} (base_experience={pokemon.base_experience})")
        session.console.print(f"{pokemon.name} was caught!")
    else:
        session.console.print(f"{pokemon.name} escaped!")


def command_inspect(session: Session, args: List[str]) -> None:
    name = _require_arg(args, "please provide a Pokemon name to inspect").strip().lower()
    pokemon = session.pokedex.get(name)
    if pokemon is None:
        session.console.print("you have not caught that pokemon")
        return

    out = session.console
    out.print(f"Name: {pokemon.name}", highlight=False)
    out.print(f"Height: {pokemon.height}", highlight=False)
    out.print(f"Weight: {pokemon.weight}", highlight=False)
    out.print("Stats:")
    for stat in pokemon.stats:
        out.print(f"  -{stat.stat.name}: {stat.base_stat}", highlight=False)
    out.print("Types:")
    for slot in pokemon.types:
        out.print(f"  - {slot.type.name}", highlight=False)


def command_pokedex(session: Session, args: List[str]) -> None:
    names = session.pokedex.names()
    if not names:
        session.console.print("Your Pokedex is empty.")
        return
    session.console.print("Your Pokedex:")
    for name in names:
        session.console.print(f" - {name}", highlight=False)


def command_cache(session: Session, args: List[str]) -> None:
    stats = session.cache.get_stats()

    table = Table(title="Response Cache")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Entries", str(stats["entries"]))
    table.add_row("Retention (s)", f"{stats['retention_seconds']:g}")
    table.add_row("Hits", str(stats["hits"]))
    table.add_row("Misses", str(stats["misses"]))
    table.add_row("Evictions", str(stats["evictions"]))
    table.add_row("Hit rate", f"{stats['hit_rate']:.0%}")
    session.console.print(table)


def build_commands() -> Dict[str, Command]:
    """Return the command registry in display order."""
    commands = [
        Command("help", "Displays a help message", command_help),
        Command("exit", "Exit the Pokedex", command_exit),
        Command("map", "Displays the next page of location areas", command_map),
        Command("mapb", "Displays the previous page of location areas", command_mapb),
        Command("explore", "Explore a location area and list all Pokemon found there",
                command_explore, usage="<location_name>"),
        Command("catch", "Try to catch a Pokemon and store it in your Pokedex",
                command_catch, usage="<pokemon_name>"),
        Command("inspect", "Inspect a Pokemon you have caught",
                command_inspect, usage="<pokemon_name>"),
        Command("pokedex", "Lists the Pokemon currently stored in your Pokedex", command_pokedex),
        Command("cache", "Show response cache statistics", command_cache),
    ]
    return {command.name: command for command in commands}
