"""Composite widget hosting a UnitValueController."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from unit_value.constants import Unit
from unit_value.controller.unit_controller import ChangeEvent, UnitValueConfig, UnitValueController
from unit_value.widgets.unit_input import UnitInputWidget
from unit_value.widgets.unit_toggle import UnitToggleWidget

LOGGER = logging.getLogger("UnitValue.Widgets")


class UnitValueWidget(QWidget):
    """Unit toggle stacked over the stepper input, both driven by one controller."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        config: Optional[UnitValueConfig] = None,
        controller: Optional[UnitValueController] = None,
        on_change: Optional[Callable[[ChangeEvent], None]] = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller or UnitValueController(config)
        self._change_callback = on_change

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        self._toggle = UnitToggleWidget(self, selected=self._controller.unit)
        self._input = UnitInputWidget(self)
        layout.addWidget(self._toggle)
        layout.addWidget(self._input)

        self._toggle.set_change_callback(self._handle_unit)
        self._input.set_callbacks(
            on_focus=self._controller.focus,
            on_text=self._controller.type_text,
            on_blur=lambda: self._dispatch(self._controller.blur()),
            on_increment=lambda: self._dispatch(self._controller.increment()),
            on_decrement=lambda: self._dispatch(self._controller.decrement()),
        )
        self.refresh()

    @property
    def controller(self) -> UnitValueController:
        return self._controller

    @property
    def toggle(self) -> UnitToggleWidget:
        return self._toggle

    @property
    def value_input(self) -> UnitInputWidget:
        return self._input

    def set_change_callback(self, callback: Optional[Callable[[ChangeEvent], None]]) -> None:
        self._change_callback = callback

    def refresh(self) -> None:
        state = self._controller.snapshot()
        self._toggle.set_selected(state.unit)
        self._input.apply_state(state)

    def _handle_unit(self, unit: Unit) -> None:
        self._dispatch(self._controller.set_unit(unit))

    def _dispatch(self, events: List[ChangeEvent]) -> None:
        self.refresh()
        for event in events:
            LOGGER.debug("Change emitted: value=%s unit=%s", event.value, event.unit.value)
            if self._change_callback is not None:
                self._change_callback(event)
