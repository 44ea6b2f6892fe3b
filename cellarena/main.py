"""Thin HTTP backend for the browser client."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import GameAPI
from .config.logging_config import configure_logging
from .config.settings import HOST, PORT

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Cellarena")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify your client URL
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    app.include_router(GameAPI().router)
    return app


app = create_app()


def run():
    """Serve the app with uvicorn."""
    import uvicorn

    configure_logging()
    logger.info("Starting Cellarena server on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
