"""Keeps food, bots and the player at their target counts."""

import logging
import math

from ..models.entities import AIPlayer, Food, new_ai_player, new_player_cell
from ..models.world import World
from ..utils.helpers import find_safe_spawn, random_color, random_position
from .collisions import respawn_player

logger = logging.getLogger(__name__)


def get_unused_ai_name(world: World) -> str:
    """First pool name no living bot uses, or the first pool name."""
    names = world.config.ai_names
    used_names = {ai.name for ai in world.ai_players}
    return next((name for name in names if name not in used_names), names[0])


def spawn_food(world: World) -> Food:
    """Add one pellet at a random position."""
    x, y = random_position(world.rng, world.size)
    food = Food(x=x, y=y, color=random_color(world.rng, 50, 50))
    world.food.append(food)
    return food


def create_ai(world: World, x: float, y: float) -> AIPlayer:
    """Build a bot with a fresh identity. The caller adds it to the world."""
    return new_ai_player(
        x=x,
        y=y,
        mass=world.config.ai_starting_mass,
        color=random_color(world.rng, 70, 50),
        direction=world.rng.random() * math.pi * 2,
        name=get_unused_ai_name(world),
    )


def respawn_entities(world: World):
    """Top every population back up to its target.

    Does nothing when all targets are already met.
    """
    config = world.config

    while len(world.food) < config.food_count:
        spawn_food(world)

    while len(world.ai_players) < config.ai_count:
        x, y = find_safe_spawn(world)
        ai = create_ai(world, x, y)
        world.ai_players.append(ai)
        logger.debug("Spawned bot %s at (%.1f, %.1f)", ai.name, x, y)

    if not world.player_cells:
        respawn_player(world)


def init_entities(world: World):
    """Populate a world as at game start.

    Food and bots go to plain random positions; the player starts with a
    single cell in the middle of the world.
    """
    config = world.config
    world.food = []
    world.ai_players = []
    world.player_cells = []

    for _ in range(config.food_count):
        spawn_food(world)

    for _ in range(config.ai_count):
        x, y = random_position(world.rng, world.size)
        world.ai_players.append(create_ai(world, x, y))

    center = world.size / 2
    world.player_cells.append(
        new_player_cell(center, center, config.starting_mass)
    )

    logger.info(
        "Entities initialized: food=%d ai=%d player_cells=%d",
        len(world.food),
        len(world.ai_players),
        len(world.player_cells),
    )
