import random
import sys
from dataclasses import replace
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cellarena.config.settings import DEFAULT_CONFIG  # noqa: E402
from cellarena.models.world import World  # noqa: E402


@pytest.fixture
def empty_config():
    """Default parameters with no food or bots to top up."""
    return replace(DEFAULT_CONFIG, food_count=0, ai_count=0)


@pytest.fixture
def make_world(empty_config):
    def _make_world(config=None, seed=1234, **entities):
        world = World(config=config or empty_config, rng=random.Random(seed))
        world.player_cells = list(entities.get("player_cells", []))
        world.ai_players = list(entities.get("ai_players", []))
        world.food = list(entities.get("food", []))
        return world

    return _make_world


@pytest.fixture
def world(make_world):
    return make_world()
