"""Logger setup for the legend layout package.

Everything logs under the ``legend_layout`` namespace: the engine reports
skip decisions and each division pass at DEBUG, and the ReportLab measurer
warns about font fallbacks. ``LOG_LEVEL`` and ``LOG_FILE`` set the defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_log_env = os.getenv("LOG_FILE", "").strip()
# File logging is opt-in for a library; console only unless LOG_FILE is set
DEFAULT_LOG_FILE: Optional[str] = str(Path(_log_env).expanduser()) if _log_env else None
DEFAULT_LOGGER_NAME = "legend_layout"


def setup_logging(
    *,
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str | Path] = DEFAULT_LOG_FILE,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> logging.Logger:
    """Attach handlers to the ``legend_layout`` logger and set its level.

    A console handler is always present; a file handler is added when
    ``log_file`` is given and its directory can be created. Calling again
    reuses existing handlers of each kind.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    # Console handler (FileHandler subclasses StreamHandler, so exclude it)
    if not any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    ):
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        logger.addHandler(console)

    if log_file:
        try:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            # Best-effort directory creation; fallback to console-only
            log_file = None

    if log_file and not any(
        isinstance(h, logging.FileHandler) for h in logger.handlers
    ):
        file_handler = logging.FileHandler(str(log_file))
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``legend_layout.<name>``, configuring the parent on first use."""
    parent = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not parent.handlers:
        setup_logging()
    return parent.getChild(name)
