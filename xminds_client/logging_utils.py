from __future__ import annotations

import logging
import os

_LOGGER_NAME = "xminds_client"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ClientLogHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging``."""


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the library logger.

    The level comes from ``level`` or ``XMINDS_LOG_LEVEL`` (default INFO).
    Calling it again only adjusts the level.
    """
    if level is None:
        level = os.getenv("XMINDS_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(handler, ClientLogHandler) for handler in logger.handlers):
        handler = ClientLogHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    return logger
