"""Logging setup shared by the server and the headless runner."""

import logging
from typing import Optional

from .settings import LOG_LEVEL

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[str] = None, include_uvicorn: bool = True
) -> logging.Logger:
    """Configure root logging and return the ``cellarena`` logger.

    The level falls back to ``CELLARENA_LOG_LEVEL`` (or INFO) when not given.
    """
    resolved_level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=resolved_level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT
    )

    app_logger = logging.getLogger("cellarena")
    app_logger.setLevel(resolved_level)

    if include_uvicorn:
        for uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(uvicorn_logger).setLevel(resolved_level)

    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
