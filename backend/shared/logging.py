"""
Logging setup for the application and its uvicorn integration.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger and align uvicorn's loggers with it.

    Args:
        level: Level name such as "DEBUG" or "INFO". Unknown names fall
            back to INFO.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved)
