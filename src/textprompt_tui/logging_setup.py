"""File-based logging setup.

The prompt draws on the terminal, so log records go to a file instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "textprompt_tui"


def setup_logging(level: str, log_file: Path) -> None:
    """Attach a file handler to the package logger."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.debug("Logging started -> %s", log_file)
