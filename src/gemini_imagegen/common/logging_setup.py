"""Central logging setup for the project."""
from __future__ import annotations
import logging
import os
import sys

FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def setup_logging(level: int | str | None = None) -> None:
    """
    Send all records to stdout in one format.

    Args:
        level: Logging level; falls back to ``LOG_LEVEL`` then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    # httpx logs every request at INFO, including the model URL.
    logging.getLogger("httpx").setLevel(logging.WARNING)
