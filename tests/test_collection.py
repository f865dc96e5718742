import random
from unittest.mock import MagicMock

from pokedex.collection import Pokedex, attempt_catch
from pokedex.models import PokemonDetail


def fixed_rng(value: int) -> MagicMock:
    rng = MagicMock(spec=random.Random)
    rng.randrange.return_value = value
    return rng


def test_attempt_catch_threshold():
    # base_experience 60 -> 40% chance: rolls 0..39 succeed
    assert attempt_catch(60, fixed_rng(39))
    assert not attempt_catch(60, fixed_rng(40))


def test_attempt_catch_high_experience_always_escapes():
    assert not attempt_catch(100, fixed_rng(0))
    assert not attempt_catch(255, fixed_rng(0))


def test_attempt_catch_missing_experience_counts_as_zero():
    assert attempt_catch(None, fixed_rng(99))


def test_attempt_catch_seeded_is_reproducible():
    rolls_a = [attempt_catch(50, r) for r in [random.Random(7)] for _ in range(20)]
    rolls_b = [attempt_catch(50, r) for r in [random.Random(7)] for _ in range(20)]
    assert rolls_a == rolls_b


def test_pokedex_add_get_names():
    dex = Pokedex()
    assert len(dex) == 0
    assert dex.get("pidgey") is None

    dex.add(PokemonDetail(name="pidgey", base_experience=50))
    dex.add(PokemonDetail(name="abra", base_experience=62))
    dex.add(PokemonDetail(name="pidgey", base_experience=50, height=3))

    assert len(dex) == 2
    assert "abra" in dex
    assert dex.names() == ["pidgey", "abra"]
    assert dex.get("pidgey").height == 3
