"""
Logging utilities for flag-parser.

This module provides:
- Structured logger access through structlog
- Test/production environment tagging on log records
- Root logger setup driven by LoggingConfig
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal

import structlog

from flag_parser.config import LoggingConfig

DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Return 'test' under pytest, 'prod' otherwise."""
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds an ``env_tag`` attribute to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Formatter whose default format includes the environment tag."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        super().__init__(fmt or DEFAULT_LOG_FORMAT, datefmt, style=style)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def configure_logging(
    level: int = logging.INFO,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure the root logger with environment tagging.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format)
    env_filter = EnvironmentTaggingFilter()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(env_filter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    if file_error is not None:
        logging.getLogger(__name__).warning(
            "Cannot open log file %s, logging to console only: %s",
            log_file,
            file_error,
        )


def configure_logging_from_config(config: LoggingConfig) -> None:
    """Apply a LoggingConfig to the root logger."""
    configure_logging(
        level=config.level.to_logging_level(),
        log_file=config.log_file,
    )
