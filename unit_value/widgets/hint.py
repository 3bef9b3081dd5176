from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QWidget


class DisabledHint:
    """Hint text attached to a control that only shows while it is disabled."""

    def __init__(self, widget: QWidget, text: str = "") -> None:
        self._widget = widget
        self._text = text
        self._disabled = not widget.isEnabled()
        self._sync()

    @property
    def text(self) -> str:
        return self._text

    @property
    def visible_text(self) -> str:
        return self._widget.toolTip()

    def apply(self, disabled: bool, text: Optional[str] = None) -> None:
        if text is not None:
            self._text = text
        self._disabled = bool(disabled)
        self._widget.setEnabled(not self._disabled)
        self._sync()

    def _sync(self) -> None:
        self._widget.setToolTip(self._text if self._disabled and self._text else "")
