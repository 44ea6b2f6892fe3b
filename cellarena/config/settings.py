"""Game configuration constants and settings."""

import os
from dataclasses import dataclass

# World settings
WORLD_SIZE = 2000

# Food settings
FOOD_COUNT = 100
FOOD_RADIUS = 5
FOOD_SCORE = 10

# AI settings
AI_COUNT = 10
AI_STARTING_MASS = 50
AI_TURN_CHANCE = 0.02
AI_NAMES = (
    "Cursor",
    "Zed",
    "VSCode",
    "Visual Studio",
    "Eclipse",
    "JetBrains",
    "XCode",
    "Sublime",
    "Neovim",
    "Emacs",
)

# Player settings
STARTING_MASS = 100
PLAYER_NAME = "Windsurf"
PLAYER_COLOR = "#008080"
BASE_RADIUS = 20
BASE_SPEED = 5

# Collision settings
COLLISION_THRESHOLD = 1.1
CONSUME_BONUS = 100
SPAWN_MIN_DISTANCE = 100

# Split settings
MIN_SPLIT_SCORE = 40
SPLIT_VELOCITY = 12
MAX_PLAYER_CELLS = 16

# Merge settings
MERGE_COOLDOWN = 10000  # ms
MERGE_DISTANCE_FACTOR = 2
MERGE_FORCE = 0.3
MERGE_START_FORCE = 0.1
REPULSION_STRENGTH = 0.3

# Server settings
HOST = os.getenv("CELLARENA_HOST", "0.0.0.0")
PORT = int(os.getenv("CELLARENA_PORT", "8000"))
UPDATE_RATE = 60  # FPS for the frame loop
LOG_LEVEL = os.getenv("CELLARENA_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class GameConfig:
    """The tunable parameter surface of one simulation."""

    world_size: float = WORLD_SIZE
    food_count: int = FOOD_COUNT
    food_radius: float = FOOD_RADIUS
    food_score: float = FOOD_SCORE
    ai_count: int = AI_COUNT
    ai_starting_mass: float = AI_STARTING_MASS
    ai_turn_chance: float = AI_TURN_CHANCE
    ai_names: tuple = AI_NAMES
    starting_mass: float = STARTING_MASS
    player_name: str = PLAYER_NAME
    base_radius: float = BASE_RADIUS
    base_speed: float = BASE_SPEED
    collision_threshold: float = COLLISION_THRESHOLD
    consume_bonus: float = CONSUME_BONUS
    spawn_min_distance: float = SPAWN_MIN_DISTANCE
    min_split_score: float = MIN_SPLIT_SCORE
    split_velocity: float = SPLIT_VELOCITY
    max_player_cells: int = MAX_PLAYER_CELLS
    merge_cooldown: float = MERGE_COOLDOWN
    merge_distance_factor: float = MERGE_DISTANCE_FACTOR
    merge_force: float = MERGE_FORCE
    merge_start_force: float = MERGE_START_FORCE
    repulsion_strength: float = REPULSION_STRENGTH


DEFAULT_CONFIG = GameConfig()


def get_game_config():
    """Get the complete game configuration as a dictionary."""
    return {
        "worldSize": WORLD_SIZE,
        "foodCount": FOOD_COUNT,
        "foodRadius": FOOD_RADIUS,
        "foodScore": FOOD_SCORE,
        "aiCount": AI_COUNT,
        "aiStartingMass": AI_STARTING_MASS,
        "startingMass": STARTING_MASS,
        "playerName": PLAYER_NAME,
        "playerColor": PLAYER_COLOR,
        "baseRadius": BASE_RADIUS,
        "baseSpeed": BASE_SPEED,
        "collisionThreshold": COLLISION_THRESHOLD,
        "consumeBonus": CONSUME_BONUS,
        "minSplitScore": MIN_SPLIT_SCORE,
        "splitVelocity": SPLIT_VELOCITY,
        "maxPlayerCells": MAX_PLAYER_CELLS,
        "mergeCooldown": MERGE_COOLDOWN,
        "mergeDistanceFactor": MERGE_DISTANCE_FACTOR,
        "mergeForce": MERGE_FORCE,
        "mergeStartForce": MERGE_START_FORCE,
        "updateRate": UPDATE_RATE,
    }
