"""API routes for the game server."""

from fastapi import APIRouter

from ..config.settings import get_game_config


class GameAPI:
    """API routes for game-related endpoints."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Set up all API routes."""

        @self.router.get("/")
        async def root():
            """Root endpoint."""
            return {"message": "Cellarena Server Running"}

        @self.router.get("/api/game/config")
        async def get_game_config_endpoint():
            """Get the simulation parameters the browser client runs with."""
            return get_game_config()
