"""Configuration helpers for the unit value controller."""
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from unit_value.constants import DEFAULT_MIN, DEFAULT_STEP, PERCENT_MAX, Unit
from unit_value.controller.unit_controller import UnitValueConfig

SETTINGS_FILE = "unit_value_settings.json"
SETTINGS_PATH_ENV_VAR = "UNIT_VALUE_SETTINGS_PATH"
LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20
DEFAULT_LOG_RETENTION = 5

LOGGER = logging.getLogger("UnitValue.Settings")


@dataclass
class UnitValueSettings:
    """Values used to bootstrap a controller and its host."""

    initial_value: float = 0.0
    initial_unit: Unit = Unit.PERCENT
    min_value: float = DEFAULT_MIN
    step: float = DEFAULT_STEP
    log_level: Optional[str] = None
    log_retention: int = DEFAULT_LOG_RETENTION

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "UnitValueSettings":
        """Build settings from a decoded JSON mapping, falling back per field."""

        defaults = cls()

        def _float(key: str, fallback: float) -> float:
            value = payload.get(key)
            if value is None:
                return fallback
            try:
                numeric = float(value)
            except (TypeError, ValueError):
                LOGGER.warning("Ignoring %s=%r: not a number", key, value)
                return fallback
            if not math.isfinite(numeric):
                LOGGER.warning("Ignoring %s=%r: not finite", key, value)
                return fallback
            return numeric

        unit = defaults.initial_unit
        raw_unit = payload.get("unit")
        if raw_unit is not None:
            try:
                unit = Unit.coerce(raw_unit)
            except ValueError:
                LOGGER.warning("Ignoring unit=%r: expected %% or px", raw_unit)

        min_value = _float("min", defaults.min_value)
        if min_value >= PERCENT_MAX:
            LOGGER.warning("Ignoring min=%s: must be below %s", min_value, PERCENT_MAX)
            min_value = defaults.min_value

        step = _float("step", defaults.step)
        if step <= 0:
            LOGGER.warning("Ignoring step=%s: must be positive", step)
            step = defaults.step

        level = payload.get("log_level")
        log_level: Optional[str] = None
        if isinstance(level, str) and level.strip():
            log_level = level.strip().upper()

        try:
            retention = int(payload.get("log_retention", defaults.log_retention))
        except (TypeError, ValueError):
            retention = defaults.log_retention
        retention = max(LOG_RETENTION_MIN, min(retention, LOG_RETENTION_MAX))

        return cls(
            initial_value=_float("value", defaults.initial_value),
            initial_unit=unit,
            min_value=min_value,
            step=step,
            log_level=log_level,
            log_retention=retention,
        )

    def to_config(self) -> UnitValueConfig:
        return UnitValueConfig(
            initial_value=self.initial_value,
            initial_unit=self.initial_unit,
            min_value=self.min_value,
            step=self.step,
        )


def resolve_settings_path(explicit: Optional[Path] = None, *, root: Optional[Path] = None) -> Path:
    if explicit is not None:
        return Path(explicit).expanduser()
    env_override = os.getenv(SETTINGS_PATH_ENV_VAR)
    if env_override:
        return Path(env_override).expanduser()
    base = root or Path(__file__).resolve().parents[2]
    return base / SETTINGS_FILE


def load_settings(settings_path: Optional[Path] = None) -> UnitValueSettings:
    """Read bootstrap defaults from unit_value_settings.json if it exists."""

    path = resolve_settings_path(settings_path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return UnitValueSettings()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        LOGGER.warning("Settings file %s is not valid JSON (%s); using defaults", path, exc)
        return UnitValueSettings()
    if not isinstance(data, dict):
        LOGGER.warning("Settings file %s must contain a JSON object; using defaults", path)
        return UnitValueSettings()
    return UnitValueSettings.from_payload(data)
