from __future__ import annotations

import os

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QEvent, Qt  # noqa: E402
from PyQt6.QtGui import QFocusEvent  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from unit_value.constants import HINT_MAX_PERCENT, HINT_MIN_VALUE, Unit  # noqa: E402
from unit_value.controller.unit_controller import ChangeEvent, UnitValueConfig  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        app = QApplication.instance() or QApplication([])
    except Exception as exc:  # pragma: no cover - headless guard
        pytest.skip(f"QApplication unavailable: {exc}")
    yield app


@pytest.fixture()
def events() -> list[ChangeEvent]:
    return []


@pytest.fixture()
def widget(qapp, events):
    from unit_value.widgets import UnitValueWidget

    instance = UnitValueWidget(on_change=events.append)
    yield instance
    instance.deleteLater()


def _type(widget, text: str) -> None:
    entry = widget.value_input.entry
    QApplication.sendEvent(entry, QFocusEvent(QEvent.Type.FocusIn))
    entry.setText(text)
    entry.textEdited.emit(text)
    QApplication.sendEvent(entry, QFocusEvent(QEvent.Type.FocusOut))


def test_initial_render(widget) -> None:
    value_input = widget.value_input
    assert value_input.entry.text() == "0"
    assert widget.toggle.selected() is Unit.PERCENT
    assert value_input.decrement_button.isEnabled() is False
    assert value_input.decrement_button.toolTip() == HINT_MIN_VALUE
    assert value_input.increment_button.isEnabled() is True
    assert value_input.increment_button.toolTip() == ""


def test_typing_commits_on_focus_out(widget, events) -> None:
    _type(widget, "12,3")

    assert [event.as_dict() for event in events] == [{"value": pytest.approx(12.3), "unit": "%"}]
    assert widget.value_input.entry.text() == "12.3"
    assert widget.value_input.decrement_button.isEnabled() is True


def test_invalid_text_snaps_back(widget, events) -> None:
    _type(widget, "50")
    events.clear()

    _type(widget, "12.4.5")

    assert [event.as_dict() for event in events] == [{"value": 50, "unit": "%"}]
    assert widget.value_input.entry.text() == "50"


def test_increment_button_disabled_with_hint_at_hundred(widget, events) -> None:
    _type(widget, "100")
    events.clear()
    plus = widget.value_input.increment_button

    assert plus.isEnabled() is False
    assert plus.toolTip() == HINT_MAX_PERCENT
    plus.click()
    assert events == []


def test_stepper_buttons_update_text(widget, events) -> None:
    _type(widget, "50")
    events.clear()

    widget.value_input.increment_button.click()
    widget.value_input.decrement_button.click()
    widget.value_input.decrement_button.click()

    assert [event.value for event in events] == [51, 50, 49]
    assert widget.value_input.entry.text() == "49"


def test_stepper_buttons_take_focus(widget) -> None:
    value_input = widget.value_input

    assert value_input.increment_button.focusPolicy() == Qt.FocusPolicy.StrongFocus
    assert value_input.decrement_button.focusPolicy() == Qt.FocusPolicy.StrongFocus


def test_pending_edit_commits_before_stepper_click(widget, events) -> None:
    entry = widget.value_input.entry
    plus = widget.value_input.increment_button
    QApplication.sendEvent(entry, QFocusEvent(QEvent.Type.FocusIn))
    entry.setText("50")
    entry.textEdited.emit("50")
    assert events == []

    # Pressing the stepper moves focus off the field before the click lands.
    QApplication.sendEvent(entry, QFocusEvent(QEvent.Type.FocusOut, Qt.FocusReason.MouseFocusReason))
    plus.click()

    assert [event.as_dict() for event in events] == [{"value": 50, "unit": "%"}, {"value": 51, "unit": "%"}]
    assert entry.text() == "51"
    assert widget.controller.buffer.editing is False


def test_unit_switch_clamps_and_rerenders(widget, events) -> None:
    widget.toggle.button_for(Unit.PIXEL).click()
    _type(widget, "500")
    assert widget.value_input.increment_button.isEnabled() is True
    events.clear()

    widget.toggle.button_for(Unit.PERCENT).click()

    assert [event.as_dict() for event in events] == [{"value": 100, "unit": "%"}]
    assert widget.value_input.entry.text() == "100"
    assert widget.toggle.selected() is Unit.PERCENT
    assert widget.value_input.increment_button.isEnabled() is False


def test_reselecting_current_unit_is_silent(widget, events) -> None:
    widget.toggle.button_for(Unit.PERCENT).click()

    assert events == []


def test_widget_honours_config(qapp) -> None:
    from unit_value.widgets import UnitValueWidget

    widget = UnitValueWidget(config=UnitValueConfig(initial_value=640, initial_unit=Unit.PIXEL, step=10))

    assert widget.toggle.selected() is Unit.PIXEL
    assert widget.value_input.entry.text() == "640"
    widget.value_input.increment_button.click()
    assert widget.controller.value == 650
    widget.deleteLater()


def test_disabled_hint_only_visible_when_disabled(qapp) -> None:
    from PyQt6.QtWidgets import QToolButton

    from unit_value.widgets import DisabledHint

    button = QToolButton()
    hint = DisabledHint(button, "limit reached")
    assert hint.visible_text == ""

    hint.apply(True)
    assert button.isEnabled() is False
    assert hint.visible_text == "limit reached"

    hint.apply(False, "other")
    assert button.isEnabled() is True
    assert hint.visible_text == ""
    assert hint.text == "other"
    button.deleteLater()
