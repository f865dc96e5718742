# Pokedex package exports
from .cache import TimedCache, CacheEntry
from .client import PokeAPIClient, Fetched
from .collection import Pokedex, attempt_catch
from .commands import Command, Session, build_commands
from .errors import PokedexError, FetchError, DecodeError, CommandError, ExitRequested
from .repl import run_repl

__version__ = "0.1.0"
