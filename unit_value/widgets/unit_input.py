from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFocusEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QToolButton, QWidget

from unit_value.controller.unit_controller import ControllerState
from unit_value.widgets.hint import DisabledHint


class _FocusLineEdit(QLineEdit):
    """QLineEdit that reports focus transitions through plain callbacks."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.focus_in_callback: Optional[Callable[[], None]] = None
        self.focus_out_callback: Optional[Callable[[], None]] = None

    def focusInEvent(self, event: QFocusEvent) -> None:  # noqa: N802 - Qt override
        super().focusInEvent(event)
        if self.focus_in_callback is not None:
            self.focus_in_callback()

    def focusOutEvent(self, event: QFocusEvent) -> None:  # noqa: N802 - Qt override
        super().focusOutEvent(event)
        if self.focus_out_callback is not None:
            self.focus_out_callback()


class UnitInputWidget(QWidget):
    """Minus button, free-text field and plus button.

    The widget holds no value state; it forwards events and renders a
    ControllerState.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_focus: Optional[Callable[[], None]] = None
        self._on_text: Optional[Callable[[str], None]] = None
        self._on_blur: Optional[Callable[[], None]] = None
        self._on_increment: Optional[Callable[[], None]] = None
        self._on_decrement: Optional[Callable[[], None]] = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        label = QLabel("Value", self)
        label.setMinimumWidth(48)
        layout.addWidget(label)

        self._minus = self._make_button("-")
        self._minus.clicked.connect(self._handle_decrement)
        layout.addWidget(self._minus)

        entry = _FocusLineEdit(self)
        entry.setAlignment(Qt.AlignmentFlag.AlignCenter)
        entry.focus_in_callback = self._handle_focus_in
        entry.focus_out_callback = self._handle_focus_out
        entry.textEdited.connect(self._handle_text_edited)
        layout.addWidget(entry)
        self._entry = entry

        self._plus = self._make_button("+")
        self._plus.clicked.connect(self._handle_increment)
        layout.addWidget(self._plus)

        self._minus_hint = DisabledHint(self._minus)
        self._plus_hint = DisabledHint(self._plus)

    def _make_button(self, text: str) -> QToolButton:
        button = QToolButton(self)
        button.setText(text)
        # Clicking a stepper must take focus so a pending edit blurs (and commits) first.
        button.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        return button

    def set_callbacks(
        self,
        *,
        on_focus: Optional[Callable[[], None]] = None,
        on_text: Optional[Callable[[str], None]] = None,
        on_blur: Optional[Callable[[], None]] = None,
        on_increment: Optional[Callable[[], None]] = None,
        on_decrement: Optional[Callable[[], None]] = None,
    ) -> None:
        self._on_focus = on_focus
        self._on_text = on_text
        self._on_blur = on_blur
        self._on_increment = on_increment
        self._on_decrement = on_decrement

    @property
    def entry(self) -> QLineEdit:
        return self._entry

    @property
    def increment_button(self) -> QToolButton:
        return self._plus

    @property
    def decrement_button(self) -> QToolButton:
        return self._minus

    @property
    def increment_hint(self) -> DisabledHint:
        return self._plus_hint

    @property
    def decrement_hint(self) -> DisabledHint:
        return self._minus_hint

    def apply_state(self, state: ControllerState) -> None:
        if self._entry.text() != state.text:
            self._entry.setText(state.text)
        self._minus_hint.apply(state.decrement_disabled, state.decrement_hint or "")
        self._plus_hint.apply(state.increment_disabled, state.increment_hint or "")

    def _handle_focus_in(self) -> None:
        if self._on_focus is not None:
            self._on_focus()

    def _handle_focus_out(self) -> None:
        if self._on_blur is not None:
            self._on_blur()

    def _handle_text_edited(self, text: str) -> None:
        if self._on_text is not None:
            self._on_text(text)

    def _handle_increment(self) -> None:
        if self._on_increment is not None:
            self._on_increment()

    def _handle_decrement(self) -> None:
        if self._on_decrement is not None:
            self._on_decrement()
