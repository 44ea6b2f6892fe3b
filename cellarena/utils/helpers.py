"""Utility functions and helpers."""

import math
import random
from typing import Iterable, Tuple

from ..config.settings import BASE_RADIUS

SPAWN_ATTEMPTS = 50
FALLBACK_SAMPLES = 20


def calculate_radius(mass: float, base_radius: float = BASE_RADIUS) -> float:
    """Calculate the drawn and collision radius of a cell from its mass.

    Negative masses have no meaningful radius and give ``nan``, which makes
    every comparison against them false instead of raising mid-tick.
    """
    if mass < 0:
        return math.nan
    return math.sqrt(mass) + base_radius


def calculate_distance(a, b) -> float:
    """Calculate distance between two objects exposing ``x`` and ``y``."""
    return math.hypot(a.x - b.x, a.y - b.y)


def clamp_to_world(x: float, y: float, world_size: float) -> tuple:
    """Clamp position to world boundaries."""
    return (
        max(0, min(world_size, x)),
        max(0, min(world_size, y)),
    )


def random_position(rng: random.Random, world_size: float) -> Tuple[float, float]:
    """Uniform random point inside the world square."""
    return rng.random() * world_size, rng.random() * world_size


def random_color(rng: random.Random, saturation: int, lightness: int) -> str:
    """Random hue at the given saturation and lightness, as a CSS hsl() string."""
    return f"hsl({rng.random() * 360}, {saturation}%, {lightness}%)"


def center_of_mass(cells: Iterable) -> Tuple[float, float]:
    """Mass-weighted centroid of ``cells``.

    Returns the world origin when there is nothing to weigh.
    """
    cells = list(cells)
    total_mass = sum(cell.mass for cell in cells)
    if total_mass == 0:
        return 0.0, 0.0
    return (
        sum(cell.x * cell.mass for cell in cells) / total_mass,
        sum(cell.y * cell.mass for cell in cells) / total_mass,
    )


class _Point:
    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y


def _is_position_safe(pos, entities, min_distance: float, base_radius: float) -> bool:
    for entity in entities:
        safe_distance = calculate_radius(entity.mass, base_radius) + min_distance
        if calculate_distance(pos, entity) < safe_distance:
            return False
    return True


def _find_furthest_position(rng, world_size, entities) -> Tuple[float, float]:
    best = _Point(*random_position(rng, world_size))
    max_min_distance = 0.0

    for _ in range(FALLBACK_SAMPLES):
        pos = _Point(*random_position(rng, world_size))
        min_distance_to_entity = min(
            (calculate_distance(pos, entity) for entity in entities),
            default=math.inf,
        )
        if min_distance_to_entity > max_min_distance:
            max_min_distance = min_distance_to_entity
            best = pos

    return best.x, best.y


def find_safe_spawn(world, min_distance: float = None) -> Tuple[float, float]:
    """Find a spawn point clear of every bot and player cell.

    Tries random points first and falls back to the most isolated of a
    handful of samples, so it always returns.
    """
    config = world.config
    if min_distance is None:
        min_distance = config.spawn_min_distance
    entities = [*world.ai_players, *world.player_cells]

    for _ in range(SPAWN_ATTEMPTS):
        pos = _Point(*random_position(world.rng, config.world_size))
        if _is_position_safe(pos, entities, min_distance, config.base_radius):
            return pos.x, pos.y

    return _find_furthest_position(world.rng, config.world_size, entities)
