"""Game entity models and data classes."""

import math
from dataclasses import dataclass


@dataclass
class Cell:
    """Represents one player-controlled mass unit."""

    x: float
    y: float
    mass: float
    vx: float = 0.0
    vy: float = 0.0
    splitTime: float = 0  # ms timestamp of the last split, 0 = never split


@dataclass
class AIPlayer:
    """Represents a wandering bot. Bots never split."""

    x: float
    y: float
    mass: float
    color: str
    direction: float
    name: str


@dataclass
class Food:
    """Represents a food pellet with a fixed radius."""

    x: float
    y: float
    color: str


def _validate_mass(mass: float):
    if not math.isfinite(mass) or mass < 0:
        raise ValueError(f"Entity mass must be a finite non-negative number, got {mass!r}")


def new_player_cell(x: float, y: float, mass: float) -> Cell:
    """Create a resting player cell, rejecting invalid masses."""
    _validate_mass(mass)
    return Cell(x=x, y=y, mass=mass, vx=0.0, vy=0.0)


def new_ai_player(
    x: float, y: float, mass: float, color: str, direction: float, name: str
) -> AIPlayer:
    """Create a bot, rejecting invalid masses."""
    _validate_mass(mass)
    return AIPlayer(x=x, y=y, mass=mass, color=color, direction=direction, name=name)
