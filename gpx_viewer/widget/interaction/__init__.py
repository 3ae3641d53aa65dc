"""Interaction helpers for the track plot widget."""
from __future__ import annotations

from gpx_viewer.widget.interaction.events import (
    InputEvent,
    KeyAction,
    KeyPressed,
    PointerButton,
    PointerMoved,
    PointerPressed,
    PointerReleased,
    QuitRequested,
    WheelScrolled,
)
from gpx_viewer.widget.interaction.input_controller import (
    DrainResult,
    TrackPlotInputController,
    apply_event,
)

__all__ = [
    "DrainResult",
    "InputEvent",
    "KeyAction",
    "KeyPressed",
    "PointerButton",
    "PointerMoved",
    "PointerPressed",
    "PointerReleased",
    "QuitRequested",
    "TrackPlotInputController",
    "WheelScrolled",
    "apply_event",
]
