"""Core game logic and state management."""

import logging
import math
import random
import time
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Tuple

from ..config.settings import DEFAULT_CONFIG, GameConfig, PLAYER_COLOR
from ..models.world import World
from ..utils.helpers import center_of_mass
from .collisions import check_collisions
from .movement import update_ai_players, update_player_cells
from .physics import handle_player_split, update_cell_merging
from .population import init_entities, respawn_entities

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.time() * 1000


@dataclass
class InputState:
    """Latest input written by the host. Read at the start of each tick."""

    pointer_x: float = 0.0
    pointer_y: float = 0.0
    viewport_width: float = 0.0
    viewport_height: float = 0.0
    split_requested: bool = False


class GameService:
    """Main game service that owns one world and advances it frame by frame."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        clock: Callable[[], float] = _now_ms,
    ):
        self.config = config
        self.world = World(config=config, rng=random.Random(seed))
        self.input = InputState()
        self.clock = clock
        self.ticks = 0

        init_entities(self.world)

    def reset(self):
        """Start the game over with fresh entities."""
        init_entities(self.world)
        self.input.split_requested = False
        self.ticks = 0

    # Input
    def set_pointer(self, x: float, y: float):
        """Record the pointer position in viewport coordinates."""
        self.input.pointer_x = x
        self.input.pointer_y = y

    def resize(self, width: float, height: float):
        """Record the viewport size."""
        self.input.viewport_width = width
        self.input.viewport_height = height

    def request_split(self):
        """Ask for a split on the next tick."""
        self.input.split_requested = True

    def target_direction(self) -> Tuple[float, float]:
        """Unit vector from the viewport centre to the pointer."""
        dx = self.input.pointer_x - self.input.viewport_width / 2
        dy = self.input.pointer_y - self.input.viewport_height / 2
        distance = math.hypot(dx, dy)
        if distance == 0:
            return 0.0, 0.0
        return dx / distance, dy / distance

    # Simulation
    def tick(self, now: Optional[float] = None):
        """Run one full update: movement, physics, collisions, population."""
        if now is None:
            now = self.clock()
        world = self.world
        direction = self.target_direction()

        update_player_cells(world, direction)
        update_ai_players(world)

        if self.input.split_requested:
            self.input.split_requested = False
            handle_player_split(world, direction, now)
        update_cell_merging(world, now)

        check_collisions(world)
        respawn_entities(world)

        self.ticks += 1

    def update_camera(self):
        """Centre the camera on the player's mass."""
        x, y = center_of_mass(self.world.player_cells)
        self.world.camera.x = x - self.input.viewport_width / 2
        self.world.camera.y = y - self.input.viewport_height / 2

    # Getter methods for game state
    def get_player_mass(self) -> float:
        return sum(cell.mass for cell in self.world.player_cells)

    def get_leaderboard(self, limit: Optional[int] = None) -> List[dict]:
        """Player and bots ranked by score, highest first."""
        entries = [
            {
                "name": self.world.player_name,
                "score": self.get_player_mass(),
                "isPlayer": True,
            }
        ]
        entries.extend(
            {"name": ai.name, "score": ai.mass, "isPlayer": False}
            for ai in self.world.ai_players
        )
        entries.sort(key=lambda entry: entry["score"], reverse=True)
        return entries[:limit] if limit is not None else entries

    def get_snapshot(self) -> dict:
        """Read-only view of the world for a renderer."""
        world = self.world
        return {
            "tick": self.ticks,
            "worldSize": world.size,
            "playerName": world.player_name,
            "playerColor": PLAYER_COLOR,
            "playerCells": [asdict(cell) for cell in world.player_cells],
            "aiPlayers": [asdict(ai) for ai in world.ai_players],
            "food": [asdict(food) for food in world.food],
            "camera": asdict(world.camera),
            "score": self.get_player_mass(),
            "leaderboard": self.get_leaderboard(limit=5),
        }
