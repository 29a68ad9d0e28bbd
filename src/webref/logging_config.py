"""Logging setup for the webref logger tree."""

import logging

from webref.config import CONFIG

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or CONFIG.LOGGING_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the ``webref`` logger.

    Calling this again only updates the level; handlers are added once.

    Args:
        level: Level name or number. Defaults to ``WEBREF_LOGGING_LEVEL``.

    Returns:
        The configured ``webref`` logger.
    """
    logger = logging.getLogger("webref")
    logger.setLevel(_resolve_level(level))

    if not getattr(logger, "_webref_configured", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        debug_log_file = CONFIG.DEBUG_LOG_FILE
        if debug_log_file is not None:
            debug_log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(debug_log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

        logger.propagate = False
        logger._webref_configured = True  # type: ignore[attr-defined]

    return logger
