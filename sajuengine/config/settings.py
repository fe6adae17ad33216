"""Configuration models and helpers for sajuengine settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2

# -------------------- Settings Schema --------------------


def _capped_int(value: object, lower: int, upper: int) -> int:
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"expected an integer, got {value!r}") from exc
    return max(lower, min(upper, number))


class CalendarCfg(BaseModel):
    """Calendar arithmetic used for every pillar in one report."""

    month_strategy: Literal["fast", "solar_term"] = "fast"
    timeline_before: int = 5
    timeline_after: int = 5
    daily_range_days: int = 7

    @field_validator("timeline_before", "timeline_after", mode="before")
    @classmethod
    def _cap_timeline(cls, value: object) -> int:
        return _capped_int(value, 0, 60)

    @field_validator("daily_range_days", mode="before")
    @classmethod
    def _cap_daily_range(cls, value: object) -> int:
        return _capped_int(value, 1, 366)


class ScoringCfg(BaseModel):
    """Composite scoring policy selection and overrides."""

    policy_path: Optional[str] = None
    policy_overrides: Dict[str, Any] = Field(default_factory=dict)
    max_candidates: int = 8

    @field_validator("max_candidates", mode="before")
    @classmethod
    def _cap_candidates(cls, value: object) -> int:
        return _capped_int(value, 1, 50)


class RolesCfg(BaseModel):
    """Default role overrides applied when a chart does not supply its own."""

    heeshin: Optional[Literal["WOOD", "FIRE", "EARTH", "METAL", "WATER"]] = None
    gishin: Optional[Literal["WOOD", "FIRE", "EARTH", "METAL", "WATER"]] = None
    gushin: Optional[Literal["WOOD", "FIRE", "EARTH", "METAL", "WATER"]] = None

    @field_validator("heeshin", "gishin", "gushin", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    calendar: CalendarCfg = Field(default_factory=CalendarCfg)
    scoring: ScoringCfg = Field(default_factory=ScoringCfg)
    roles: RolesCfg = Field(default_factory=RolesCfg)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("SAJUENGINE_HOME", str(Path.home() / ".sajuengine")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Apply upgrades required for older settings payloads."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < 2:
        # v1 stored the month strategy at the top level.
        legacy = upgraded.pop("month_strategy", None)
        if legacy is not None:
            calendar = dict(upgraded.get("calendar") or {})
            calendar.setdefault("month_strategy", legacy)
            upgraded["calendar"] = calendar
        version = 2
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        LOG.info("upgraded settings at %s to schema v%d", source_path, settings.schema_version)
        save_settings(settings, source_path)
    return settings


__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "CalendarCfg",
    "RolesCfg",
    "ScoringCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
