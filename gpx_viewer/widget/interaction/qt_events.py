"""Translate Qt input events into plot input events."""
from __future__ import annotations

from PyQt5 import QtCore, QtGui

from gpx_viewer.widget.interaction.events import (
    KeyAction,
    KeyPressed,
    PointerButton,
    PointerMoved,
    PointerPressed,
    PointerReleased,
    WheelScrolled,
)

KEY_BINDINGS: dict[int, KeyAction] = {
    QtCore.Qt.Key_Up: KeyAction.INCREASE_THRESHOLD,
    QtCore.Qt.Key_Down: KeyAction.DECREASE_THRESHOLD,
    QtCore.Qt.Key_P: KeyAction.TOGGLE_POINTS,
    QtCore.Qt.Key_S: KeyAction.TOGGLE_COLOR,
    QtCore.Qt.Key_F: KeyAction.TOGGLE_FULLSCREEN,
    QtCore.Qt.Key_Escape: KeyAction.QUIT,
}

_BUTTONS = {
    QtCore.Qt.LeftButton: PointerButton.PRIMARY,
    QtCore.Qt.RightButton: PointerButton.SECONDARY,
    QtCore.Qt.MiddleButton: PointerButton.MIDDLE,
}


def pointer_button(button: int) -> PointerButton:
    return _BUTTONS.get(button, PointerButton.OTHER)


def key_event(event: QtGui.QKeyEvent) -> KeyPressed | None:
    if event.isAutoRepeat() and event.key() not in (
        QtCore.Qt.Key_Up,
        QtCore.Qt.Key_Down,
    ):
        return None
    action = KEY_BINDINGS.get(event.key())
    if action is None:
        return None
    return KeyPressed(action)


def wheel_event(event: QtGui.QWheelEvent) -> WheelScrolled:
    pos = event.pos()
    return WheelScrolled(event.angleDelta().y(), pos.x(), pos.y())


def press_event(event: QtGui.QMouseEvent) -> PointerPressed:
    return PointerPressed(pointer_button(event.button()), event.x(), event.y())


def release_event(event: QtGui.QMouseEvent) -> PointerReleased:
    return PointerReleased(pointer_button(event.button()), event.x(), event.y())


def move_event(event: QtGui.QMouseEvent) -> PointerMoved:
    return PointerMoved(event.x(), event.y())
