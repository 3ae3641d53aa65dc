"""Toolkit-independent input events consumed by the input controller."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyAction(Enum):
    """Keyboard commands understood by the plot."""

    INCREASE_THRESHOLD = "increase_threshold"
    DECREASE_THRESHOLD = "decrease_threshold"
    TOGGLE_POINTS = "toggle_points"
    TOGGLE_COLOR = "toggle_color"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    QUIT = "quit"


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"
    OTHER = "other"


@dataclass(frozen=True)
class QuitRequested:
    pass


@dataclass(frozen=True)
class WheelScrolled:
    """Wheel movement at pointer ``(x, y)``; positive ``delta`` scrolls up."""

    delta: int
    x: int
    y: int


@dataclass(frozen=True)
class KeyPressed:
    action: KeyAction


@dataclass(frozen=True)
class PointerPressed:
    button: PointerButton
    x: int
    y: int


@dataclass(frozen=True)
class PointerReleased:
    button: PointerButton
    x: int
    y: int


@dataclass(frozen=True)
class PointerMoved:
    x: int
    y: int


InputEvent = (
    QuitRequested
    | WheelScrolled
    | KeyPressed
    | PointerPressed
    | PointerReleased
    | PointerMoved
)
