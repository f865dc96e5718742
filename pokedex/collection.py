"""Creatures caught during a session, and the catch roll."""

import random
import threading
from typing import Dict, List, Optional

from .models import PokemonDetail


class Pokedex:
    """
    Caught creatures keyed by name.

    Owned by the REPL session and passed to the commands that need it.
    """

    def __init__(self):
        self._caught: Dict[str, PokemonDetail] = {}
        self._lock = threading.Lock()

    def add(self, pokemon: PokemonDetail) -> None:
        with self._lock:
            self._caught[pokemon.name] = pokemon

    def get(self, name: str) -> Optional[PokemonDetail]:
        with self._lock:
            return self._caught.get(name)

    def names(self) -> List[str]:
        """Names in the order they were first caught."""
        with self._lock:
            return list(self._caught)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._caught

    def __len__(self) -> int:
        with self._lock:
            return len(self._caught)


def attempt_catch(base_experience: Optional[int], rng: random.Random) -> bool:
    """
    Roll for a catch. Higher base experience means a lower chance.

    Chance is ``100 - base_experience`` out of 100, so anything at or above
    100 base experience always escapes.
    """
    chance = 100 - (base_experience or 0)
    return rng.randrange(100) < chance
