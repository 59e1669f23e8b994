"""Configuration loading, validation, and access."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from pricebook.core.exceptions import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_FILE = "pricebook.yml"


class CsvConfig(BaseModel):
    """CSV price import configuration."""

    model_config = ConfigDict(frozen=True)

    date_format: str = "%Y-%m-%d"
    delimiter: str = ","

    @field_validator("delimiter")
    @classmethod
    def delimiter_single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}")
        return v


class DisplayConfig(BaseModel):
    """How prices are rendered by the CLI."""

    model_config = ConfigDict(frozen=True)

    price_places: int = 4

    @field_validator("price_places")
    @classmethod
    def places_in_range(cls, v: int) -> int:
        if v < 0 or v > 12:
            raise ValueError("price_places must be between 0 and 12")
        return v


class LoggingConfig(BaseModel):
    """Log level applied by the CLI entry point."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def level_is_known(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return upper

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level)


class PricebookConfig(BaseModel):
    """Root configuration for pricebook."""

    model_config = ConfigDict(frozen=True)

    csv: CsvConfig = CsvConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(
    config_path: str | None = None,
    env_prefix: str = "PRICEBOOK_",
) -> PricebookConfig:
    """Build the configuration from defaults, a YAML file and the environment.

    Later sources win: built-in defaults, then the YAML file, then
    ``PRICEBOOK_<SECTION>__<KEY>`` variables, e.g.
    ``PRICEBOOK_CSV__DATE_FORMAT=%d.%m.%Y`` sets ``csv.date_format``.

    Environment values are passed to pydantic as the strings they are, so
    each field converts (or rejects) them according to its own type.
    """
    path = _find_config_file(config_path)
    settings = _read_yaml(path) if path is not None else {}
    settings = _overlay(settings, _env_settings(env_prefix))
    try:
        return PricebookConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigError(str(e), context={"source": "load_config"}) from e


def _find_config_file(explicit: str | None) -> Path | None:
    """The explicit path, else $PRICEBOOK_CONFIG, else ./pricebook.yml if present."""
    if explicit is not None:
        origin, raw = "Config file", explicit
    elif os.environ.get("PRICEBOOK_CONFIG"):
        origin, raw = "Config file from PRICEBOOK_CONFIG", os.environ["PRICEBOOK_CONFIG"]
    else:
        default = Path(_DEFAULT_FILE)
        return default if default.is_file() else None

    path = Path(raw)
    if not path.is_file():
        raise ConfigError(f"{origin} not found: {raw}", context={"source": "config_path", "value": raw})
    return path


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse YAML config {path}: {e}",
            context={"source": "config_file", "value": str(path)},
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"YAML config must be a mapping, got {type(data).__name__}",
            context={"source": "config_file", "value": str(path)},
        )
    return data


def _env_settings(prefix: str) -> dict[str, Any]:
    """Nested settings from ``<prefix>SECTION__KEY`` variables, values untouched."""
    found: dict[str, Any] = {}
    for name, value in os.environ.items():
        if not name.startswith(prefix) or name == "PRICEBOOK_CONFIG":
            continue
        keys = name[len(prefix) :].lower().split("__")
        if not all(keys):
            continue
        node = found
        for key in keys[:-1]:
            node = node.setdefault(key, {})
            if not isinstance(node, dict):
                raise ConfigError(
                    f"{name} conflicts with another {prefix}* variable",
                    context={"source": "environment", "value": name},
                )
        node[keys[-1]] = value
    return found


def _overlay(base: dict[str, Any], top: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``top`` over ``base`` without mutating either."""
    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(value, dict) and isinstance(below, dict):
            merged[key] = _overlay(below, value)
        else:
            merged[key] = value
    return merged
