"""
Logging configuration for the Event Manager API.

``setup_logging`` configures the root logger once with a console
handler and, when ``LOG_FILE`` is set, a file handler.  Log format
includes the timestamp, logger name, log level and message.

The level comes from ``LOG_LEVEL`` and is resolved by ``resolve_level``
for both the application loggers and uvicorn, so that a name uvicorn
does not know (``WARN``, ``FATAL``) or a typo falls back consistently
instead of stopping the server at start‑up.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Level names accepted by uvicorn's ``log_level`` option.
UVICORN_LEVELS = ("critical", "error", "warning", "info", "debug")


def resolve_level(level: str) -> int:
    """Return the numeric level for ``level``; unknown names map to INFO."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def uvicorn_log_level(level: str) -> str:
    """Return the uvicorn level name matching ``level``.

    Aliases are normalised (``WARN`` -> ``warning``) and anything uvicorn
    would reject becomes ``info``.
    """
    name = logging.getLevelName(resolve_level(level)).lower()
    return name if name in UVICORN_LEVELS else "info"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to (``settings.log_file``).  If
        omitted, no file handler is added.  Paths are resolved relative
        to the current working directory.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by uvicorn, pytest or an earlier
        # call to ``create_app``.
        return

    logger.setLevel(resolve_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
