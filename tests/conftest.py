"""Pytest configuration and fixtures."""

import pytest

from platypor.engine.rng import RandomSource
from platypor.models.balance import GameBalance
from platypor.models.catalog import ActionDefinition, Catalog, ProductDefinition
from platypor.models.player import PlayerState


class ScriptedGenerator:
    """Generator that replays fixed draws; the last value repeats once exhausted."""

    def __init__(self, floats=(0.5,), ints=(0,)):
        self._floats = list(floats)
        self._ints = list(ints)
        self.float_calls = 0
        self.int_calls = 0

    def random(self) -> float:
        value = self._floats[min(self.float_calls, len(self._floats) - 1)]
        self.float_calls += 1
        return value

    def randrange(self, stop: int) -> int:
        value = self._ints[min(self.int_calls, len(self._ints) - 1)]
        self.int_calls += 1
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_rng():
    """Factory for a RandomSource replaying fixed draws."""

    def _make(floats=(0.5,), ints=(0,)) -> RandomSource:
        return RandomSource(ScriptedGenerator(floats=floats, ints=ints))

    return _make


@pytest.fixture
def neutral_rng(scripted_rng):
    """Random source whose variation draws are all zero."""
    return scripted_rng(floats=(0.5,))


@pytest.fixture
def seeded_rng():
    """Real generator with a fixed seed."""
    return RandomSource.seeded(1234)


@pytest.fixture
def balance():
    """Default balance configuration."""
    return GameBalance()


@pytest.fixture
def player():
    """Fresh player with full vigor and some money."""
    return PlayerState(money=100.0)


@pytest.fixture
def catalog():
    """Catalog with every known action and product."""
    return Catalog(
        actions=[
            ActionDefinition(id="action_peck", text="Peck"),
            ActionDefinition(id="action_glow", text="Glow"),
            ActionDefinition(id="action_poison", text="Poison"),
            ActionDefinition(id="action_smoke", text="Smoke"),
            ActionDefinition(id="action_drink", text="Drink"),
            ActionDefinition(id="action_gamble", text="Gamble"),
            ActionDefinition(id="action_pokemon", text="Pokemon"),
            ActionDefinition(id="action_read", text="Read"),
        ],
        products=[
            ProductDefinition(id="product_beer", text="Beer", price=5),
            ProductDefinition(id="product_cigarettes", text="Cigarettes", price=8),
            ProductDefinition(id="product_instructions", text="Instructions", price=40),
            ProductDefinition(id="product_purse", text="Purse", price=25),
            ProductDefinition(id="product_sword", text="Sword", price=60),
            ProductDefinition(id="product_shield", text="Shield", price=50),
            ProductDefinition(id="product_vision", text="Vision", price=30),
            ProductDefinition(id="product_brain", text="Brain", price=30),
            ProductDefinition(id="product_reach", text="Reach", price=30),
            ProductDefinition(id="product_acid", text="Acid", price=30),
            ProductDefinition(id="product_property", text="Property", price=90),
            ProductDefinition(id="product_freedom", text="Freedom", price=48750),
            ProductDefinition(id="product_mystery", text="Mystery", price=1),
        ],
    )
