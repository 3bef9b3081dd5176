"""Input reconciliation and unit-aware value state."""

from .edit_buffer import (
    CommitOutcome,
    CommitResult,
    RevertReason,
    ValueEditBuffer,
    format_value,
    parse_input_value,
)
from .unit_controller import (
    ChangeEvent,
    ControllerState,
    UnitValueConfig,
    UnitValueConfigError,
    UnitValueController,
)

__all__ = [
    "ChangeEvent",
    "CommitOutcome",
    "CommitResult",
    "ControllerState",
    "RevertReason",
    "UnitValueConfig",
    "UnitValueConfigError",
    "UnitValueController",
    "ValueEditBuffer",
    "format_value",
    "parse_input_value",
]
