"""Driver configuration handling."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PXID_"
DEFAULT_CONFIG_PATH = Path("~/.config/prefixed-id/config.yaml")

_YAML_KEY_MAP: Mapping[tuple[str, str], str] = {
    ("generate", "count"): "count",
    ("generate", "keep_going"): "keep_going",
    ("output", "json"): "json_output",
    ("logging", "level"): "log_level",
    ("logging", "json"): "json_logs",
}


class Settings(BaseModel):
    """Runtime configuration loaded from YAML file and environment variables."""

    count: int = Field(default=1, ge=1)
    keep_going: bool = False
    json_output: bool = False
    log_level: str = "WARNING"
    json_logs: bool = True

    model_config = {
        "validate_assignment": True,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        if isinstance(value, str):
            return value.strip().upper()
        raise TypeError("log_level must be a string")

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "Settings":
        """Build settings from defaults, then the YAML file, then PXID_* variables."""
        data: dict[str, Any] = {}
        config_path = _config_path(path)
        if config_path is not None:
            data.update(_read_yaml(config_path))
        data.update(
            (name, value)
            for name, value in _env_values().items()
            if name in cls.model_fields
        )
        return cls(**data)


def _config_path(path: Path | None) -> Path | None:
    """Explicit path wins, then $PXID_CONFIG, then the default file if present."""
    candidate = path or os.environ.get(f"{ENV_PREFIX}CONFIG")
    if candidate:
        return Path(candidate).expanduser()
    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Pick Settings fields out of a YAML document.

    Sections listed in ``_YAML_KEY_MAP`` are looked up by path; field names
    may also appear at the top level. Anything else is ignored.
    """
    if not config_path.exists():
        return {}
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    values = {key: value for key, value in raw.items() if key in Settings.model_fields}
    for (section, key), field_name in _YAML_KEY_MAP.items():
        block = raw.get(section)
        if isinstance(block, Mapping) and key in block:
            values[field_name] = block[key]
    return values


def _env_values() -> dict[str, str]:
    return {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings accessor for the CLI."""
    return Settings.from_yaml()


__all__ = ["Settings", "get_settings"]
