from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QLabel, QPushButton, QWidget

from unit_value.constants import UNIT_OPTIONS, Unit

LOGGER = logging.getLogger("UnitValue.Widgets")


class UnitToggleWidget(QWidget):
    """Segmented "%" / "px" selector."""

    def __init__(self, parent: Optional[QWidget] = None, *, selected: Unit = Unit.PERCENT) -> None:
        super().__init__(parent)
        self._change_callback: Optional[Callable[[Unit], None]] = None
        self._buttons: dict[Unit, QPushButton] = {}
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        label = QLabel("Unit", self)
        label.setMinimumWidth(48)
        layout.addWidget(label)
        for unit in UNIT_OPTIONS:
            button = QPushButton(unit.value, self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, u=unit: self._handle_click(u))
            self._group.addButton(button)
            layout.addWidget(button)
            self._buttons[unit] = button
        self.set_selected(selected)

    def set_change_callback(self, callback: Optional[Callable[[Unit], None]]) -> None:
        self._change_callback = callback

    def set_selected(self, unit: Unit) -> None:
        button = self._buttons.get(unit)
        if button is not None and not button.isChecked():
            button.setChecked(True)

    def selected(self) -> Unit:
        for unit, button in self._buttons.items():
            if button.isChecked():
                return unit
        return Unit.PERCENT

    def button_for(self, unit: Unit) -> QPushButton:
        return self._buttons[unit]

    def _handle_click(self, unit: Unit) -> None:
        LOGGER.debug("Unit button clicked: %s", unit.value)
        if self._change_callback is not None:
            self._change_callback(unit)
