"""Console logging for the ARES backend."""

import logging

from config import settings

_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Attach a single console handler to the ``ares`` logger tree."""
    global _configured
    root = logging.getLogger("ares")
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"ares.{area}")
