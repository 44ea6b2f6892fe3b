"""Collision detection and consumption between cells, bots and food."""

import logging
from collections import defaultdict
from typing import Dict, Set

from ..models.entities import new_player_cell
from ..models.world import World
from ..utils.helpers import calculate_distance, calculate_radius, find_safe_spawn

logger = logging.getLogger(__name__)


def _eat_food(world: World, consumer):
    config = world.config
    consumer_radius = calculate_radius(consumer.mass, config.base_radius)
    remaining = []

    for food in world.food:
        if calculate_distance(consumer, food) < consumer_radius + config.food_radius:
            consumer.mass += config.food_score
        else:
            remaining.append(food)

    world.food = remaining


def handle_food_collisions(world: World):
    """Let every player cell, then every bot, eat the food it overlaps.

    Each pellet is removed as soon as it is eaten, so it is only counted once.
    """
    for cell in world.player_cells:
        _eat_food(world, cell)

    for ai in world.ai_players:
        _eat_food(world, ai)


def _remove_indices(entities: list, indices: Set[int]):
    for index in sorted(indices, reverse=True):
        del entities[index]


def respawn_player(world: World):
    """Place a fresh starting cell at a safe spot."""
    x, y = find_safe_spawn(world)
    world.player_cells.append(new_player_cell(x, y, world.config.starting_mass))
    logger.info("Player respawned at (%.1f, %.1f)", x, y)


def handle_player_ai_collisions(world: World):
    """Resolve consumption between the player's cells and the bots.

    Every pair is scored before anything is applied; the player respawns
    if it loses its last cell.
    """
    config = world.config
    ai_to_remove: Set[int] = set()
    cells_to_remove: Set[int] = set()
    cell_gains: Dict[int, float] = defaultdict(float)
    ai_gains: Dict[int, float] = defaultdict(float)

    for cell_index, cell in enumerate(world.player_cells):
        for ai_index, ai in enumerate(world.ai_players):
            if ai_index in ai_to_remove or cell_index in cells_to_remove:
                continue

            cell_radius = calculate_radius(cell.mass, config.base_radius)
            ai_radius = calculate_radius(ai.mass, config.base_radius)

            if calculate_distance(cell, ai) >= cell_radius + ai_radius:
                continue

            if cell_radius > ai_radius * config.collision_threshold:
                cell_gains[cell_index] += ai.mass + config.consume_bonus
                ai_to_remove.add(ai_index)
            elif ai_radius > cell_radius * config.collision_threshold:
                ai_gains[ai_index] += cell.mass + config.consume_bonus
                cells_to_remove.add(cell_index)

    for ai_index, gain in ai_gains.items():
        if ai_index not in ai_to_remove:
            world.ai_players[ai_index].mass += gain

    for cell_index, gain in cell_gains.items():
        if cell_index not in cells_to_remove:
            world.player_cells[cell_index].mass += gain

    _remove_indices(world.ai_players, ai_to_remove)
    _remove_indices(world.player_cells, cells_to_remove)

    if ai_to_remove or cells_to_remove:
        logger.debug(
            "Player ate %d bots, lost %d cells", len(ai_to_remove), len(cells_to_remove)
        )

    if not world.player_cells:
        respawn_player(world)


def handle_ai_ai_collisions(world: World):
    """Resolve consumption between bots.

    Once ``ai[i]`` has been eaten it is not compared any further. A winner
    may still be eaten by a later bot in the same pass, in which case its
    pending gain is dropped.
    """
    config = world.config
    ais = world.ai_players
    ais_to_remove: Set[int] = set()
    gains: Dict[int, float] = defaultdict(float)

    for i in range(len(ais)):
        if i in ais_to_remove:
            continue

        for j in range(i + 1, len(ais)):
            if j in ais_to_remove:
                continue

            ai1 = ais[i]
            ai2 = ais[j]
            ai1_radius = calculate_radius(ai1.mass, config.base_radius)
            ai2_radius = calculate_radius(ai2.mass, config.base_radius)

            if calculate_distance(ai1, ai2) >= ai1_radius + ai2_radius:
                continue

            if ai1_radius > ai2_radius * config.collision_threshold:
                gains[i] += ai2.mass + config.consume_bonus
                ais_to_remove.add(j)
            elif ai2_radius > ai1_radius * config.collision_threshold:
                gains[j] += ai1.mass + config.consume_bonus
                ais_to_remove.add(i)
                break

    for index, gain in gains.items():
        if index not in ais_to_remove:
            ais[index].mass += gain

    _remove_indices(ais, ais_to_remove)


def check_collisions(world: World):
    """Run all consumption passes in their fixed order."""
    handle_food_collisions(world)
    handle_player_ai_collisions(world)
    handle_ai_ai_collisions(world)
