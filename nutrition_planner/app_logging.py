"""Logging configuration helpers."""

import logging
from typing import Optional

from nutrition_planner.config import LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("nutrition_planner")
    logger.setLevel((level or LOG_LEVEL).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
