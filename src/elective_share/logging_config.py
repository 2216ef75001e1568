"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from .config import ElectiveShareConfig


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog for the engine.

    Args:
        level: Standard logging level name.
        json_logs: Render JSON lines instead of the console renderer.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
    )


def configure_from_config(config: Optional[ElectiveShareConfig] = None) -> None:
    config = config or ElectiveShareConfig()
    configure_logging(config.log_level, json_logs=config.json_logs)
