from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ConfigDict, Field, ValidationError, field_validator

from flag_parser.exceptions import ConfigurationError
from flag_parser.model_bases import DomainModel

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        return int(getattr(logging, self.value))


class LoggingConfig(DomainModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ExtractorConfig(DomainModel):
    """Configuration for flag extraction.

    ``reject_empty_names`` turns bare ``-`` and ``--`` tokens into errors
    instead of empty flag names. It is off by default.
    """

    model_config = ConfigDict(frozen=True)

    reject_empty_names: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path | None = None) -> ExtractorConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Optional path to configuration file

    Returns:
        ExtractorConfig instance; defaults when no file is given or found
    """
    if not config_path:
        return ExtractorConfig()

    path = Path(config_path)
    if not path.exists():
        logger.warning("Configuration file not found: %s", config_path)
        return ExtractorConfig()

    if path.suffix.lower() not in (".yaml", ".yml"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            details={"path": str(path), "type": type(file_config).__name__},
        )

    try:
        config = ExtractorConfig.model_validate(file_config)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration in {path}",
            details={"path": str(path), "errors": exc.errors(include_url=False)},
        ) from exc

    logger.debug("Loaded configuration from %s", path)
    return config
