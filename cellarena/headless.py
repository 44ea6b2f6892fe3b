"""Run the simulation without a browser, driven by a scripted pointer."""

import argparse
import json
import logging
import math
from typing import Optional

from .config.logging_config import configure_logging
from .config.settings import UPDATE_RATE
from .services.game_service import GameService

logger = logging.getLogger(__name__)

VIEWPORT_WIDTH = 1280
VIEWPORT_HEIGHT = 720
POINTER_ORBIT_RADIUS = 200
POINTER_ORBIT_STEP = 0.02  # radians per tick


def run_headless(
    ticks: int, seed: Optional[int] = None, split_every: int = 0
) -> GameService:
    """Advance a fresh game ``ticks`` times and return it.

    Time is simulated at ``UPDATE_RATE`` frames per second so runs with the
    same seed are reproducible.
    """
    frame_ms = 1000 / UPDATE_RATE
    service = GameService(seed=seed, clock=lambda: service.ticks * frame_ms)
    service.resize(VIEWPORT_WIDTH, VIEWPORT_HEIGHT)

    for tick in range(ticks):
        angle = tick * POINTER_ORBIT_STEP
        service.set_pointer(
            VIEWPORT_WIDTH / 2 + math.cos(angle) * POINTER_ORBIT_RADIUS,
            VIEWPORT_HEIGHT / 2 + math.sin(angle) * POINTER_ORBIT_RADIUS,
        )
        if split_every and tick % split_every == 0:
            service.request_split()

        service.tick()
        service.update_camera()

        if tick and tick % (UPDATE_RATE * 10) == 0:
            logger.info(
                "tick=%d mass=%.1f cells=%d",
                tick,
                service.get_player_mass(),
                len(service.world.player_cells),
            )

    return service


def main(argv=None):
    parser = argparse.ArgumentParser(description="Headless cellarena simulation")
    parser.add_argument("--ticks", type=int, default=3600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--split-every",
        type=int,
        default=0,
        help="Raise a split request every N ticks (0 disables splitting).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    args = parser.parse_args(argv)

    if args.ticks < 0:
        parser.error("--ticks must be non-negative")
    if args.split_every < 0:
        parser.error("--split-every must be non-negative")

    configure_logging(args.log_level, include_uvicorn=False)
    service = run_headless(args.ticks, args.seed, args.split_every)
    print(json.dumps(service.get_leaderboard(), indent=2))


if __name__ == "__main__":
    main()
