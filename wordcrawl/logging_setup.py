import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS = {
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def get_log_level(level: Optional[str]) -> int:
    """Map a level name (case-insensitive) to a logging level; unknown names mean INFO."""
    if not level:
        return logging.INFO
    return _LEVELS.get(level.strip().lower(), logging.INFO)


def configure_logging(level: Optional[str] = "information", log_file: Optional[str] = None) -> int:
    """Log to the console and, if `log_file` is set, to a file rotated daily."""
    resolved = get_log_level(level)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(TimedRotatingFileHandler(log_file, when="midnight", encoding="utf-8"))
    logging.basicConfig(level=resolved, format=LOG_FORMAT, handlers=handlers, force=True)
    return resolved
