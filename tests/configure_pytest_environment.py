"""Run pytest with the project root importable.

Usage:
    python tests/configure_pytest_environment.py [pytest args...]

The widget tests need PyQt6 and an offscreen Qt platform; this script selects
the offscreen platform unless one is already configured.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path


def _check_pyqt6() -> None:
    try:
        import PyQt6  # noqa: F401
    except ImportError:
        print("PyQt6 is not installed; widget tests will be skipped. Install with: pip install -e .[test]", file=sys.stderr)


def main(argv: list[str]) -> int:
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    try:
        import pytest  # type: ignore
    except ImportError as exc:  # pragma: no cover
        print("pytest is not installed in this environment.", file=sys.stderr)
        raise SystemExit(1) from exc

    _check_pyqt6()

    return pytest.main(argv or [str(root)])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
