"""Event-driven transitions of the plot view state.

Every handler is a pure function ``(state, event) -> state``; the controller
looks the handler up by event type, so the same transitions run under Qt and
in unit tests without a window.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Callable, Iterable

from gpx_viewer.model.view_state import (
    MIN_MAX_DISTANCE_KM,
    THRESHOLD_STEP,
    ZOOM_STEP,
    TrackPlotViewState,
)
from gpx_viewer.rendering.primitives.mapping import zoom_at
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

logger = logging.getLogger(__name__)

Handler = Callable[[TrackPlotViewState, InputEvent], TrackPlotViewState]


def handle_quit(state: TrackPlotViewState, event: QuitRequested) -> TrackPlotViewState:
    return state


def handle_wheel(state: TrackPlotViewState, event: WheelScrolled) -> TrackPlotViewState:
    if event.delta > 0:
        new_scale = state.scale * ZOOM_STEP
    elif event.delta < 0:
        new_scale = state.scale / ZOOM_STEP
    else:
        return state
    if new_scale == 0 or math.isinf(new_scale):
        return state
    offset_x, offset_y = zoom_at(
        event.x, event.y, state.scale, new_scale, state.offset_x, state.offset_y
    )
    return replace(state, scale=new_scale, offset_x=offset_x, offset_y=offset_y)


def _increase_threshold(state: TrackPlotViewState) -> TrackPlotViewState:
    return replace(state, max_distance_km=state.max_distance_km * THRESHOLD_STEP)


def _decrease_threshold(state: TrackPlotViewState) -> TrackPlotViewState:
    return replace(
        state,
        max_distance_km=max(
            MIN_MAX_DISTANCE_KM, state.max_distance_km / THRESHOLD_STEP
        ),
    )


def _toggle_points(state: TrackPlotViewState) -> TrackPlotViewState:
    return replace(state, draw_points=not state.draw_points)


def _toggle_color(state: TrackPlotViewState) -> TrackPlotViewState:
    return replace(state, color_lines=not state.color_lines)


def _toggle_fullscreen(state: TrackPlotViewState) -> TrackPlotViewState:
    return replace(state, fullscreen=not state.fullscreen)


_KEY_ACTIONS: dict[KeyAction, Callable[[TrackPlotViewState], TrackPlotViewState]] = {
    KeyAction.INCREASE_THRESHOLD: _increase_threshold,
    KeyAction.DECREASE_THRESHOLD: _decrease_threshold,
    KeyAction.TOGGLE_POINTS: _toggle_points,
    KeyAction.TOGGLE_COLOR: _toggle_color,
    KeyAction.TOGGLE_FULLSCREEN: _toggle_fullscreen,
}


def handle_key(state: TrackPlotViewState, event: KeyPressed) -> TrackPlotViewState:
    action = _KEY_ACTIONS.get(event.action)
    if action is None:
        return state
    return action(state)


def handle_pointer_press(
    state: TrackPlotViewState, event: PointerPressed
) -> TrackPlotViewState:
    if event.button is not PointerButton.PRIMARY:
        return state
    return replace(
        state, dragging=True, last_pointer_x=event.x, last_pointer_y=event.y
    )


def handle_pointer_release(
    state: TrackPlotViewState, event: PointerReleased
) -> TrackPlotViewState:
    if event.button is not PointerButton.PRIMARY:
        return state
    return replace(state, dragging=False)


def handle_pointer_move(
    state: TrackPlotViewState, event: PointerMoved
) -> TrackPlotViewState:
    if not state.dragging:
        return state
    return replace(
        state,
        offset_x=state.offset_x + event.x - state.last_pointer_x,
        offset_y=state.offset_y + event.y - state.last_pointer_y,
        last_pointer_x=event.x,
        last_pointer_y=event.y,
    )


EVENT_HANDLERS: dict[type, Handler] = {
    QuitRequested: handle_quit,
    WheelScrolled: handle_wheel,
    KeyPressed: handle_key,
    PointerPressed: handle_pointer_press,
    PointerReleased: handle_pointer_release,
    PointerMoved: handle_pointer_move,
}


def apply_event(state: TrackPlotViewState, event: object) -> TrackPlotViewState:
    """Apply one event; unknown event kinds leave ``state`` untouched."""
    handler = EVENT_HANDLERS.get(type(event))
    if handler is None:
        return state
    return handler(state, event)


def is_quit_event(event: object) -> bool:
    if isinstance(event, QuitRequested):
        return True
    return isinstance(event, KeyPressed) and event.action is KeyAction.QUIT


@dataclass(frozen=True)
class DrainResult:
    """Outcome of processing one frame's worth of input."""

    state: TrackPlotViewState
    quit_requested: bool = False
    fullscreen_changed: bool = False


class TrackPlotInputController:
    """Drains queued input events into a new view state once per frame."""

    def drain(
        self, state: TrackPlotViewState, events: Iterable[object]
    ) -> DrainResult:
        initial_fullscreen = state.fullscreen
        quit_requested = False
        for event in events:
            if is_quit_event(event):
                quit_requested = True
            previous = state
            state = apply_event(state, event)
            if isinstance(event, KeyPressed):
                self._log_key_change(previous, state)
        return DrainResult(
            state=state,
            quit_requested=quit_requested,
            fullscreen_changed=state.fullscreen != initial_fullscreen,
        )

    @staticmethod
    def _log_key_change(
        previous: TrackPlotViewState, state: TrackPlotViewState
    ) -> None:
        if previous.draw_points != state.draw_points:
            logger.info(state.mode_label)
        if previous.color_lines != state.color_lines:
            logger.info(state.color_label)
        if previous.fullscreen != state.fullscreen:
            logger.info(state.window_label)
        logger.info("Distance Threshold: %g km", state.max_distance_km)
