"""Settings and logging services for the unit value host."""

from .settings import UnitValueSettings, load_settings, resolve_settings_path

__all__ = ["UnitValueSettings", "load_settings", "resolve_settings_path"]
