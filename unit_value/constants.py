"""Units, bounds and defaults shared by the unit value controller."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_MIN = 0.0
DEFAULT_STEP = 1.0
PERCENT_MAX = 100.0

HINT_MIN_VALUE = "Value must greater than 0"
HINT_MAX_PERCENT = "Value must smaller than 100"


class Unit(str, Enum):
    """Measurement mode governing the upper bound policy."""

    PERCENT = "%"
    PIXEL = "px"

    @classmethod
    def coerce(cls, value: Any) -> "Unit":
        """Accept a Unit, its symbol ("%", "px") or its name ("percent", "pixel")."""

        if isinstance(value, cls):
            return value
        try:
            token = str(value).strip()
        except Exception as exc:
            raise ValueError(f"Unknown unit: {value!r}") from exc
        for unit in cls:
            if token == unit.value or token.lower() in {unit.value, unit.name.lower()}:
                return unit
        raise ValueError(f"Unknown unit: {value!r}")

    def __str__(self) -> str:
        return self.value


UNIT_OPTIONS: tuple[Unit, ...] = (Unit.PERCENT, Unit.PIXEL)


@dataclass(frozen=True)
class Bounds:
    min_value: float
    max_value: float

    def clamp(self, value: float) -> float:
        return max(self.min_value, min(self.max_value, value))

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


def bounds_for(unit: Unit, min_value: float = DEFAULT_MIN) -> Bounds:
    """Derive the bounds for ``unit``; Pixel is unbounded above."""

    if unit is Unit.PERCENT:
        return Bounds(min_value, PERCENT_MAX)
    return Bounds(min_value, math.inf)
