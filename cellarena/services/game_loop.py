"""Frame loop that drives a game service."""

import asyncio
import logging
from typing import Callable, Optional

from ..config.settings import UPDATE_RATE
from .game_service import GameService

logger = logging.getLogger(__name__)


class GameLoop:
    """Runs one tick and one render call per frame until cancelled."""

    def __init__(
        self,
        game_service: GameService,
        render: Optional[Callable[[dict], None]] = None,
        frame_rate: float = UPDATE_RATE,
    ):
        self.game_service = game_service
        self.render = render
        self.frame_rate = frame_rate
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        """True while the frame loop task is alive."""
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Start the loop on the running event loop."""
        if not self.running:
            self._task = asyncio.create_task(self._frame_loop())
        return self._task

    def stop(self):
        """Cancel the frame loop if it is running."""
        if self._task:
            self._task.cancel()
            self._task = None

    async def _frame_loop(self):
        logger.info("Starting game loop at %s FPS", self.frame_rate)

        while True:
            await asyncio.sleep(1 / self.frame_rate)
            try:
                self.game_service.tick()
                self.game_service.update_camera()
                if self.render:
                    self.render(self.game_service.get_snapshot())
            except Exception:
                logger.exception(
                    "Game loop halted on tick %d", self.game_service.ticks
                )
                raise
