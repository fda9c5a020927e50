"""Logging setup for the application entry point."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level_name: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
    logging.getLogger(__name__).debug("log level set to %s", logging.getLevelName(level))
