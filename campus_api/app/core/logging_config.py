"""
Logging for the ``campus_api`` package.

``configure_logging`` attaches handlers to the package logger rather
than the root logger, so every module logger created with
``logging.getLogger(__name__)`` inherits them while uvicorn and other
libraries keep their own setup.  Output goes to stderr and, when
``LOG_FILE`` is set, to that file as well.  Calling it again replaces
the previous handlers.
"""

import logging.config
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "campus_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    ``level`` is a level name such as ``"DEBUG"``; unknown names fall
    back to ``INFO``.  ``logfile`` is created (with its parent
    directory) if it does not exist.
    """
    level = level.upper() if isinstance(logging.getLevelName(level.upper()), int) else "INFO"
    handlers = {
        "console": {"class": "logging.StreamHandler", "formatter": "campus"},
    }
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "campus",
            "filename": str(log_path),
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"campus": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"}},
            "handlers": handlers,
            "loggers": {
                PACKAGE_LOGGER: {"level": level, "handlers": list(handlers), "propagate": False},
            },
        }
    )
    return logging.getLogger(PACKAGE_LOGGER)
