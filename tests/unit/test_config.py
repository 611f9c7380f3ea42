from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml
from flag_parser.config import (
    ExtractorConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)
from flag_parser.exceptions import ConfigurationError
from flag_parser.extractor import FlagExtractor
from pydantic import ValidationError


def _write_yaml(path: Path, data: object) -> Path:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return path


def test_defaults() -> None:
    config = ExtractorConfig()
    assert config.reject_empty_names is False
    assert config.logging.level is LogLevel.INFO
    assert config.logging.log_file is None


def test_load_config_without_path_returns_defaults() -> None:
    assert load_config() == ExtractorConfig()


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "flags.yaml",
        {
            "reject_empty_names": True,
            "logging": {"level": "debug", "log_file": "flags.log"},
        },
    )

    config = load_config(path)

    assert config.reject_empty_names is True
    assert config.logging.level is LogLevel.DEBUG
    assert config.logging.log_file == "flags.log"
    assert FlagExtractor(config).config.reject_empty_names is True


def test_empty_yaml_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ExtractorConfig()


def test_missing_file_logs_warning_and_uses_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    missing = tmp_path / "absent.yaml"
    with caplog.at_level(logging.WARNING, logger="flag_parser.config"):
        config = load_config(missing)
    assert config == ExtractorConfig()
    assert "Configuration file not found" in caplog.text


def test_unsupported_suffix_raises(tmp_path: Path) -> None:
    path = tmp_path / "flags.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Unsupported configuration file"):
        load_config(path)


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "list.yaml", ["a", "b"])
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(path)
    assert exc_info.value.details["type"] == "list"


def test_malformed_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("reject_empty_names: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(path)


def test_invalid_values_raise(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "bad.yaml", {"logging": {"level": "LOUD"}})
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(path)
    assert exc_info.value.details["errors"]


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.CRITICAL, logging.CRITICAL),
    ],
)
def test_log_level_maps_to_logging_constants(level: LogLevel, expected: int) -> None:
    assert level.to_logging_level() == expected


def test_logging_config_accepts_lowercase_level() -> None:
    assert LoggingConfig(level="warning").level is LogLevel.WARNING  # type: ignore[arg-type]


def test_loaded_config_is_frozen(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "flags.yaml", {"logging": {"level": "DEBUG"}})
    config = load_config(path)

    with pytest.raises(ValidationError):
        config.reject_empty_names = True  # type: ignore[misc]
    with pytest.raises(ValidationError):
        config.logging.log_file = "other.log"  # type: ignore[misc]

    assert config.reject_empty_names is False
    assert config.logging.log_file is None
