"""Logging setup for hosts embedding the compositor."""

from __future__ import annotations

import logging
import os

from compositor import config


def resolve_level(name: str | None = None) -> int:
    """Map a level name (or the environment setting) to a logging level."""
    if name is None:
        name = os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(config.DEFAULT_LOG_LEVEL)


def compositor_handlers(logger: logging.Logger | None = None) -> list[logging.Handler]:
    """Handlers installed by setup_logging() on a logger (root by default)."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if h.get_name() == config.LOG_HANDLER_NAME]


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger.

    Installs one named stream handler. Calling again only updates the
    level; handlers added by the host are left alone.

    Args:
        level: Level name; read from the environment when omitted
    """
    resolved = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(resolved)

    if compositor_handlers(root):
        return

    handler = logging.StreamHandler()
    handler.set_name(config.LOG_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    )
    root.addHandler(handler)
