import logging
import os
from typing import Dict


_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger.

    Respects NAVAUDIT_DEBUG env var to set DEBUG/INFO level.
    Ensures we don't duplicate handlers across multiple imports.
    """
    lg = _LOGGER_CACHE.get(name)
    if lg:
        return lg
    lg = logging.getLogger(name)
    if not lg.handlers:
        level = logging.DEBUG if str(os.getenv("NAVAUDIT_DEBUG", "false")).lower() == "true" else logging.INFO
        lg.setLevel(level)
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        lg.addHandler(handler)
        lg.propagate = False
    _LOGGER_CACHE[name] = lg
    return lg


def enable_diagnostics(level: str = "INFO") -> None:
    """
    Enable diagnostics logging for the whole process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("navaudit_core").setLevel(resolved)
    logging.getLogger(__name__).debug(f"Diagnostics enabled at {logging.getLevelName(resolved)} level")
