"""Mutable simulation state shared by every update stage."""

import random
from dataclasses import dataclass, field
from typing import List

from ..config.settings import DEFAULT_CONFIG, GameConfig
from .entities import AIPlayer, Cell, Food


@dataclass
class Camera:
    """View-only offset derived from the player's cells."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class World:
    """Holds all entities of one game.

    Stage functions receive the same instance in order and mutate it in
    place; nothing keeps a private copy.
    """

    config: GameConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)
    player_cells: List[Cell] = field(default_factory=list)
    ai_players: List[AIPlayer] = field(default_factory=list)
    food: List[Food] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    player_name: str = ""

    def __post_init__(self):
        if not self.player_name:
            self.player_name = self.config.player_name

    @property
    def size(self) -> float:
        """Side length of the square world."""
        return self.config.world_size
