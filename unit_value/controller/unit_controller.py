"""Authoritative (value, unit) state with bound-aware stepping."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from unit_value.constants import (
    DEFAULT_MIN,
    DEFAULT_STEP,
    HINT_MAX_PERCENT,
    HINT_MIN_VALUE,
    PERCENT_MAX,
    Bounds,
    Unit,
    bounds_for,
)
from unit_value.controller.edit_buffer import CommitResult, ValueEditBuffer, format_value

LOGGER = logging.getLogger("UnitValue.Controller")


class UnitValueConfigError(ValueError):
    """Raised when a controller is constructed with unusable settings."""


@dataclass(frozen=True)
class ChangeEvent:
    value: float
    unit: Unit

    def as_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit.value}


@dataclass(frozen=True)
class ControllerState:
    """Read-only view handed to hosts for rendering."""

    value: float
    unit: Unit
    text: str
    editing: bool
    decrement_disabled: bool
    increment_disabled: bool
    decrement_hint: Optional[str]
    increment_hint: Optional[str]


def _finite(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnitValueConfigError(f"{field} must be a number")
    numeric = float(value)
    if not math.isfinite(numeric):
        raise UnitValueConfigError(f"{field} must be finite")
    return numeric


@dataclass(frozen=True)
class UnitValueConfig:
    initial_value: float = 0.0
    initial_unit: Unit = Unit.PERCENT
    min_value: float = DEFAULT_MIN
    step: float = DEFAULT_STEP

    def __post_init__(self) -> None:
        try:
            unit = Unit.coerce(self.initial_unit)
        except ValueError as exc:
            raise UnitValueConfigError(str(exc)) from exc
        min_value = _finite(self.min_value, "min_value")
        if min_value >= PERCENT_MAX:
            raise UnitValueConfigError(f"min_value must be below {format_value(PERCENT_MAX)}")
        step = _finite(self.step, "step")
        if step <= 0:
            raise UnitValueConfigError("step must be positive")
        initial = bounds_for(unit, min_value).clamp(_finite(self.initial_value, "initial_value"))
        object.__setattr__(self, "initial_unit", unit)
        object.__setattr__(self, "min_value", min_value)
        object.__setattr__(self, "step", step)
        object.__setattr__(self, "initial_value", initial)


ChangeCallback = Callable[[ChangeEvent], None]


class UnitValueController:
    """Owns the committed value and selected unit.

    Every mutating call returns the notifications it produced (zero or one)
    and also hands them to ``on_change``.
    """

    def __init__(
        self,
        config: Optional[UnitValueConfig] = None,
        *,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self._config = config or UnitValueConfig()
        self._on_change = on_change
        self._value = self._config.initial_value
        self._unit = self._config.initial_unit
        self._buffer = ValueEditBuffer(self._value, min_value=self._config.min_value)

    # Accessors ----------------------------------------------------------
    @property
    def config(self) -> UnitValueConfig:
        return self._config

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def step(self) -> float:
        return self._config.step

    @property
    def buffer(self) -> ValueEditBuffer:
        return self._buffer

    @property
    def bounds(self) -> Bounds:
        return bounds_for(self._unit, self._config.min_value)

    def set_change_callback(self, callback: Optional[ChangeCallback]) -> None:
        self._on_change = callback

    # Text entry ---------------------------------------------------------
    def focus(self) -> None:
        self._buffer.on_focus()

    def type_text(self, text: str) -> None:
        self._buffer.on_text_change(text)

    def blur(self) -> List[ChangeEvent]:
        result: CommitResult = self._buffer.on_blur(self._unit, self.bounds)
        LOGGER.debug(
            "Blur commit: text=%r outcome=%s reason=%s",
            result.text,
            result.outcome.value,
            result.reason.value if result.reason else None,
        )
        return self._commit(result.value)

    # Stepping -----------------------------------------------------------
    def is_decrement_disabled(self) -> bool:
        return self._value <= self._config.min_value

    def is_increment_disabled(self) -> bool:
        return self._unit is Unit.PERCENT and self._value >= PERCENT_MAX

    def decrement_hint(self) -> Optional[str]:
        return HINT_MIN_VALUE if self.is_decrement_disabled() else None

    def increment_hint(self) -> Optional[str]:
        return HINT_MAX_PERCENT if self.is_increment_disabled() else None

    def increment(self) -> List[ChangeEvent]:
        if self.is_increment_disabled():
            return []
        return self._step(self._config.step)

    def decrement(self) -> List[ChangeEvent]:
        if self.is_decrement_disabled():
            return []
        return self._step(-self._config.step)

    def _step(self, delta: float) -> List[ChangeEvent]:
        candidate = self._value + delta
        if self._unit is Unit.PERCENT:
            candidate = min(candidate, PERCENT_MAX)
        candidate = max(candidate, self._config.min_value)
        self._buffer.resync(candidate)
        LOGGER.debug("Step %+g: %s -> %s", delta, format_value(self._value), self._buffer.text)
        return self._commit(self._buffer.previous_valid_value)

    # Units --------------------------------------------------------------
    def set_unit(self, new_unit: Any) -> List[ChangeEvent]:
        unit = Unit.coerce(new_unit)
        if unit is self._unit:
            return []
        previous = self._unit
        self._unit = unit
        value = self._value
        if unit is Unit.PERCENT and value > PERCENT_MAX:
            value = PERCENT_MAX
        LOGGER.debug(
            "Unit switch %s -> %s: value %s -> %s",
            previous.value,
            unit.value,
            format_value(self._value),
            format_value(value),
        )
        self._buffer.on_external_value_change(value)
        return self._commit(value)

    # Rendering ----------------------------------------------------------
    def snapshot(self) -> ControllerState:
        return ControllerState(
            value=self._value,
            unit=self._unit,
            text=self._buffer.text,
            editing=self._buffer.editing,
            decrement_disabled=self.is_decrement_disabled(),
            increment_disabled=self.is_increment_disabled(),
            decrement_hint=self.decrement_hint(),
            increment_hint=self.increment_hint(),
        )

    def _commit(self, value: float) -> List[ChangeEvent]:
        self._value = float(value) + 0.0
        event = ChangeEvent(value=self._value, unit=self._unit)
        if self._on_change is not None:
            self._on_change(event)
        return [event]
