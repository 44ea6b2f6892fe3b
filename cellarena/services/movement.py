"""Per-tick movement of player cells and bots."""

import math
from typing import Tuple

from ..models.world import World
from ..utils.helpers import calculate_radius, clamp_to_world

INERTIA = 0.9
STEERING = 0.1


def cell_speed(mass: float, base_speed: float, base_radius: float) -> float:
    """Bigger cells move proportionally slower."""
    return base_speed / (calculate_radius(mass, base_radius) / base_radius)


def update_player_cells(world: World, direction: Tuple[float, float]):
    """Steer every player cell toward ``direction`` with inertia.

    ``direction`` is a unit vector; a zero vector leaves all cells untouched.
    """
    dx, dy = direction
    if dx == 0 and dy == 0:
        return

    config = world.config
    for cell in world.player_cells:
        speed = cell_speed(cell.mass, config.base_speed, config.base_radius)

        cell.vx = cell.vx * INERTIA + dx * speed * STEERING
        cell.vy = cell.vy * INERTIA + dy * speed * STEERING

        cell.x, cell.y = clamp_to_world(
            cell.x + cell.vx, cell.y + cell.vy, config.world_size
        )


def update_ai_players(world: World):
    """Advance every bot along its heading, occasionally picking a new one."""
    config = world.config
    rng = world.rng
    for ai in world.ai_players:
        if rng.random() < config.ai_turn_chance:
            ai.direction = rng.random() * math.pi * 2

        speed = cell_speed(ai.mass, config.base_speed, config.base_radius)
        ai.x, ai.y = clamp_to_world(
            ai.x + math.cos(ai.direction) * speed,
            ai.y + math.sin(ai.direction) * speed,
            config.world_size,
        )
