"""Loguru setup; routes discord.py's stdlib logging through loguru."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from loguru import logger

from discord_addons.config import Config, cfg, load_config_with_env

_INTERCEPTED_LIBRARIES = ["discord", "discord.http", "discord.client", "discord.gateway", "discord.webhook"]


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, keeping the origin logger name and line."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        # no args are passed, so loguru leaves braces in msg untouched
        msg = record.getMessage()
        logger.patch(
            lambda r: r.update(
                name=record.name,
                function=record.funcName,
                line=record.lineno,
            ),
        ).opt(exception=record.exc_info).log(level, msg)


def _intercept_logging(level: str) -> None:
    for lib in _INTERCEPTED_LIBRARIES:
        lib_logger = logging.getLogger(lib)
        lib_logger.handlers = [InterceptHandler()]
        lib_logger.propagate = False
        lib_logger.setLevel(level)


def setup_logging(verbose: bool = False, config: Config | None = None) -> None:
    """Replace loguru's default sink. verbose=True forces DEBUG, otherwise config log_level."""
    level = "DEBUG" if verbose else (config or cfg).log_level

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )
    # stdlib logging has no TRACE or SUCCESS
    _intercept_logging({"TRACE": "DEBUG", "SUCCESS": "INFO"}.get(level, level))


def configure(config_path: str | Path, *, verbose: bool = False) -> Config:
    """Load config (with .env) into the global cfg and set up logging."""
    cfg.reload(load_config_with_env(config_path))
    setup_logging(verbose, cfg)
    return cfg
