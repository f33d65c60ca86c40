"""Logging helpers shared by the whole package."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure the root logger once and return the package logger.

    Calling this again only adjusts the level; handlers are never duplicated.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    logger = logging.getLogger("intercom-oauth")
    logger.setLevel(level)
    return logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only its first *keep_chars* characters.

    >>> mask_sensitive("abcdef123456", 4)
    'abcd****'
    """
    if not value:
        return ""
    if len(value) <= keep_chars:
        return "*" * len(value)
    return f"{value[:keep_chars]}****"
