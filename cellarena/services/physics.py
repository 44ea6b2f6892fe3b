"""Split and merge physics for the player's cells."""

import logging
import math
from typing import List, Tuple

from ..models.entities import Cell
from ..models.world import World
from ..utils.helpers import calculate_distance, calculate_radius

logger = logging.getLogger(__name__)

RECOIL_FACTOR = 0.5
MERGE_TOUCH_FACTOR = 0.5


def split_player_cell(
    world: World, cell: Cell, direction: Tuple[float, float], now: float
) -> bool:
    """Split ``cell`` in two, ejecting the new half along ``direction``.

    Returns False without touching anything when the cell is too small,
    the player already has the maximum number of cells, or there is no
    direction to eject along.
    """
    config = world.config
    if (
        cell.mass < config.min_split_score
        or len(world.player_cells) >= config.max_player_cells
    ):
        return False

    dx, dy = direction
    if dx == 0 and dy == 0:
        return False

    new_cell = Cell(
        x=cell.x,
        y=cell.y,
        mass=cell.mass / 2,
        vx=dx * config.split_velocity,
        vy=dy * config.split_velocity,
        splitTime=now,
    )

    cell.mass /= 2
    cell.vx = -dx * config.split_velocity * RECOIL_FACTOR
    cell.vy = -dy * config.split_velocity * RECOIL_FACTOR
    cell.splitTime = now

    world.player_cells.append(new_cell)
    return True


def handle_player_split(
    world: World, direction: Tuple[float, float], now: float
) -> int:
    """Split every eligible cell while there is room. Returns the split count."""
    config = world.config
    cells_to_split = [
        cell
        for cell in world.player_cells
        if cell.mass >= config.min_split_score
        and len(world.player_cells) < config.max_player_cells
    ]

    splits = sum(
        1 for cell in cells_to_split if split_player_cell(world, cell, direction, now)
    )
    if splits:
        logger.debug("Split %d cells, player now has %d", splits, len(world.player_cells))
    return splits


def _apply_pair_force(cell1: Cell, cell2: Cell, dx: float, dy: float, factor: float):
    cell1.vx += dx * factor
    cell1.vy += dy * factor
    cell2.vx -= dx * factor
    cell2.vy -= dy * factor


def _group_adjacent(indices: List[int]) -> List[List[int]]:
    """Chain descending unique indices into runs of consecutive integers."""
    unique_indices = list(dict.fromkeys(sorted(indices, reverse=True)))
    groups = []
    current_group = [unique_indices[0]]

    for index in unique_indices[1:]:
        if current_group[-1] - index == 1:
            current_group.append(index)
        else:
            groups.append(current_group)
            current_group = [index]
    groups.append(current_group)

    return groups


def _weighted_average(values: List[float], weights: List[float], total: float) -> float:
    # nan rather than ZeroDivisionError when nothing has mass
    if total == 0:
        return math.nan
    return sum(value * weight for value, weight in zip(values, weights)) / total


def _merge_group(world: World, group: List[int]):
    cells = [world.player_cells[index] for index in group]
    masses = [cell.mass for cell in cells]
    total_mass = sum(masses)

    x = _weighted_average([cell.x for cell in cells], masses, total_mass)
    y = _weighted_average([cell.y for cell in cells], masses, total_mass)
    vx = _weighted_average([cell.vx for cell in cells], masses, total_mass)
    vy = _weighted_average([cell.vy for cell in cells], masses, total_mass)

    merged = Cell(x=x, y=y, mass=total_mass, vx=vx, vy=vy, splitTime=0)

    for index in sorted(group, reverse=True):
        del world.player_cells[index]

    world.player_cells.append(merged)


def update_cell_merging(world: World, now: float):
    """Pull split cells together, push overlapping ones apart, and merge.

    Pairs are scored first and merges are applied afterwards. Only cells
    that are adjacent in the cell list at scoring time end up in the same
    merged group.
    """
    config = world.config
    cells = world.player_cells
    cells_to_merge: List[int] = []

    for i in range(len(cells)):
        cell1 = cells[i]
        if i in cells_to_merge:
            continue

        for j in range(i + 1, len(cells)):
            if j in cells_to_merge:
                continue
            cell2 = cells[j]

            distance = calculate_distance(cell1, cell2)
            touch_distance = calculate_radius(
                cell1.mass, config.base_radius
            ) + calculate_radius(cell2.mass, config.base_radius)
            merge_distance = touch_distance * config.merge_distance_factor

            can_merge = (
                now - (cell1.splitTime or 0) > config.merge_cooldown
                and now - (cell2.splitTime or 0) > config.merge_cooldown
            )

            dx = cell2.x - cell1.x
            dy = cell2.y - cell1.y

            if distance < merge_distance and can_merge:
                if distance < touch_distance * MERGE_TOUCH_FACTOR:
                    cells_to_merge.extend((i, j))
                else:
                    factor = config.merge_force / max(1, distance)
                    _apply_pair_force(cell1, cell2, dx, dy, factor)
            else:
                if distance < touch_distance:
                    repulsion = (
                        (touch_distance - distance)
                        / touch_distance
                        * config.repulsion_strength
                    )
                    _apply_pair_force(cell1, cell2, dx, dy, -repulsion)

                if distance > touch_distance:
                    force = config.merge_force if can_merge else config.merge_start_force
                    factor = force / max(1, distance)
                    _apply_pair_force(cell1, cell2, dx, dy, factor)

    if not cells_to_merge:
        return

    groups = _group_adjacent(cells_to_merge)
    for group in groups:
        _merge_group(world, group)
    logger.debug("Merged %d cells into %d", len(set(cells_to_merge)), len(groups))
