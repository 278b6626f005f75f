"""Logging configuration helpers."""

import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure application logging with a single stderr handler.

    Logs always go to stderr so the stdio transport keeps stdout clean.
    """
    logger = logging.getLogger("foundation_foods")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
