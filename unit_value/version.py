"""Version identifier for the unit value controller."""
from __future__ import annotations

import os
from typing import Optional

__version__ = "0.3.0"
DEV_MODE_ENV_VAR = "UNIT_VALUE_DEV_MODE"

_TRUE_TOKENS = {"1", "true", "yes", "on"}
_FALSE_TOKENS = {"0", "false", "no", "off"}


def is_dev_build(version: Optional[str] = None) -> bool:
    """Return True for "-dev"/".devN" builds unless UNIT_VALUE_DEV_MODE says otherwise."""

    override = (os.getenv(DEV_MODE_ENV_VAR) or "").strip().lower()
    if override in _TRUE_TOKENS:
        return True
    if override in _FALSE_TOKENS:
        return False
    identifier = (version or __version__).strip().lower()
    return ".dev" in identifier or "dev" in identifier.replace(".", "-").split("-")
