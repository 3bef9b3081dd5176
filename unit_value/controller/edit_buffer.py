"""Text buffer mediating between free-form entry and validated commits."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from unit_value.constants import DEFAULT_MIN, Bounds, Unit, bounds_for

LOGGER = logging.getLogger("UnitValue.Controller")

# Leading-prefix match only: "12a3" yields "12", "a123" yields "".
_NUMERIC_PREFIX = re.compile(r"-?[0-9]*\.?[0-9]*")


class CommitOutcome(str, Enum):
    ACCEPTED = "accepted"
    CLAMPED = "clamped"
    REVERTED = "reverted"


class RevertReason(str, Enum):
    UNPARSABLE_TEXT = "unparsable_text"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a blur-time commit attempt."""

    value: float
    text: str
    outcome: CommitOutcome
    reason: Optional[RevertReason] = None

    @property
    def reverted(self) -> bool:
        return self.outcome is CommitOutcome.REVERTED


def format_value(value: float) -> str:
    """Render a committed value for display: ``12`` rather than ``12.0``, never ``-0``.

    Always positional (``0.0000001``, not ``1e-07``) so the text parses back
    to the same float.
    """

    numeric = float(value)
    if numeric == 0:
        return "0"
    text = format(Decimal(repr(numeric)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_input_value(text: str) -> Optional[float]:
    """Parse raw field text; return None when it cannot be committed."""

    if not text or not text.strip():
        return None
    cleaned = text.replace(",", ".")
    if cleaned.count(".") > 1:
        return None
    match = _NUMERIC_PREFIX.match(cleaned)
    token = match.group(0) if match else ""
    if not token or token in {"-", "."} or token.endswith("."):
        return None
    try:
        numeric = float(token)
    except ValueError:
        return None
    if not math.isfinite(numeric):
        return None
    return numeric


class ValueEditBuffer:
    """Owns the in-progress text while the field has focus.

    External value changes only reach the text while the buffer is not
    editing; in-flight keystrokes survive until blur.
    """

    def __init__(self, value: float = 0.0, *, min_value: float = DEFAULT_MIN) -> None:
        self._min_value = float(min_value)
        self._editing = False
        self._previous_valid_value = float(value)
        self._text = format_value(value)

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def text(self) -> str:
        return self._text

    @property
    def previous_valid_value(self) -> float:
        return self._previous_valid_value

    def on_focus(self) -> None:
        self._editing = True

    def on_text_change(self, text: str) -> None:
        self._text = "" if text is None else str(text)

    def on_blur(self, unit: Unit, bounds: Optional[Bounds] = None) -> CommitResult:
        self._editing = False
        bounds = bounds or bounds_for(unit, self._min_value)
        # Revert target stays inside the current unit's bounds even if the
        # unit changed while editing.
        revert_value = bounds.clamp(self._previous_valid_value)

        parsed = parse_input_value(self._text)
        if parsed is None:
            LOGGER.debug("Reverting unparsable text %r to %s", self._text, format_value(revert_value))
            return self._settle(revert_value, CommitOutcome.REVERTED, RevertReason.UNPARSABLE_TEXT)

        if parsed < bounds.min_value:
            LOGGER.debug("Clamping %s up to minimum %s", format_value(parsed), format_value(bounds.min_value))
            return self._settle(bounds.min_value, CommitOutcome.CLAMPED)
        if unit is Unit.PERCENT and parsed > bounds.max_value:
            LOGGER.debug(
                "Discarding %s%s above maximum; reverting to %s",
                format_value(parsed),
                unit.value,
                format_value(revert_value),
            )
            return self._settle(revert_value, CommitOutcome.REVERTED, RevertReason.OUT_OF_RANGE)
        return self._settle(parsed, CommitOutcome.ACCEPTED)

    def on_external_value_change(self, value: float) -> bool:
        """Resync to ``value`` unless the user is mid-edit. Returns True when applied."""

        if self._editing:
            return False
        self.resync(value)
        return True

    def resync(self, value: float) -> None:
        # Adding 0.0 folds -0.0 into 0.0.
        self._previous_valid_value = float(value) + 0.0
        self._text = format_value(self._previous_valid_value)

    def _settle(
        self,
        value: float,
        outcome: CommitOutcome,
        reason: Optional[RevertReason] = None,
    ) -> CommitResult:
        self.resync(value)
        return CommitResult(value=self._previous_valid_value, text=self._text, outcome=outcome, reason=reason)
