"""Stand-alone host for the unit value widget."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from unit_value.constants import Unit
from unit_value.controller.unit_controller import ChangeEvent, UnitValueConfig
from unit_value.services.logging_utils import ensure_logger
from unit_value.services.settings import UnitValueSettings, load_settings
from unit_value.version import __version__

PROJECT_ROOT = Path(__file__).resolve().parents[1]
LOGGER = logging.getLogger("UnitValue.Launcher")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unit-value", description="Bounded, unit-aware value editor.")
    parser.add_argument("--settings", type=Path, default=None, help="Path to unit_value_settings.json")
    parser.add_argument("--unit", default=None, help="Initial unit: %% or px")
    parser.add_argument("--value", type=float, default=None, help="Initial value")
    parser.add_argument("--min", dest="min_value", type=float, default=None, help="Lower bound")
    parser.add_argument("--step", type=float, default=None, help="Stepper increment")
    parser.add_argument("--log-level", default=None, help="Logging level name (DEBUG, INFO, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace, settings: UnitValueSettings) -> UnitValueConfig:
    """Command-line values win over the settings file."""

    unit = Unit.coerce(args.unit) if args.unit is not None else settings.initial_unit
    return UnitValueConfig(
        initial_value=settings.initial_value if args.value is None else args.value,
        initial_unit=unit,
        min_value=settings.min_value if args.min_value is None else args.min_value,
        step=settings.step if args.step is None else args.step,
    )


def log_change(event: ChangeEvent) -> None:
    LOGGER.info("Unit: %s | Value: %s", event.unit.value, event.value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = load_settings(args.settings)
    ensure_logger(PROJECT_ROOT, level_hint=args.log_level or settings.log_level, retention=settings.log_retention)
    try:
        config = resolve_config(args, settings)
    except ValueError as exc:
        parser.error(str(exc))

    from PyQt6.QtWidgets import QApplication

    from unit_value.widgets import UnitValueWidget

    app = QApplication.instance() or QApplication(sys.argv[:1])
    widget = UnitValueWidget(config=config, on_change=log_change)
    widget.setWindowTitle("Unit Value")
    widget.show()
    LOGGER.debug("Launching widget: unit=%s value=%s step=%s", config.initial_unit.value, config.initial_value, config.step)
    return int(app.exec())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
