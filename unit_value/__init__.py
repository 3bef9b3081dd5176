"""Bounded, unit-aware numeric value controller."""

from .constants import DEFAULT_MIN, DEFAULT_STEP, PERCENT_MAX, Bounds, Unit, bounds_for
from .controller import (
    ChangeEvent,
    CommitOutcome,
    CommitResult,
    ControllerState,
    RevertReason,
    UnitValueConfig,
    UnitValueConfigError,
    UnitValueController,
    ValueEditBuffer,
    format_value,
    parse_input_value,
)

__all__ = [
    "Bounds",
    "ChangeEvent",
    "CommitOutcome",
    "CommitResult",
    "ControllerState",
    "DEFAULT_MIN",
    "DEFAULT_STEP",
    "PERCENT_MAX",
    "RevertReason",
    "Unit",
    "UnitValueConfig",
    "UnitValueConfigError",
    "UnitValueController",
    "ValueEditBuffer",
    "bounds_for",
    "format_value",
    "parse_input_value",
]
