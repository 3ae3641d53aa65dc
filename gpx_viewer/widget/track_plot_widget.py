"""Qt widget that hosts the track plot frame loop."""
from __future__ import annotations

from collections import deque
import logging
from typing import Deque, Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from gpx_viewer.config import DEFAULT_FRAME_INTERVAL_MS
from gpx_viewer.model.track_store import TrackStore
from gpx_viewer.model.view_state import TrackPlotViewState
from gpx_viewer.rendering.painter_surface import QtPainterSurface
from gpx_viewer.rendering.renderer import FrameStats, render_frame
from gpx_viewer.widget.interaction import qt_events
from gpx_viewer.widget.interaction.events import InputEvent
from gpx_viewer.widget.interaction.input_controller import (
    DrainResult,
    TrackPlotInputController,
)

logger = logging.getLogger(__name__)


class TrackPlotWidget(QtWidgets.QWidget):
    """Widget that queues input and repaints the track once per frame tick.

    Qt events are translated into plot events and queued as they arrive. On
    each tick of the frame timer the whole queue is drained through the input
    controller, the resulting view state replaces the current one, and a
    repaint is scheduled.
    """

    quitRequested = QtCore.pyqtSignal()
    fullscreenToggled = QtCore.pyqtSignal(bool)

    def __init__(
        self,
        track: TrackStore,
        state: Optional[TrackPlotViewState] = None,
        frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._track = track
        self._state = state if state is not None else TrackPlotViewState()
        self._controller = TrackPlotInputController()
        self._pending: Deque[InputEvent] = deque()
        self._last_stats = FrameStats()

        self._frame_timer = QtCore.QTimer(self)
        self._frame_timer.setInterval(frame_interval_ms)
        self._frame_timer.setTimerType(QtCore.Qt.PreciseTimer)
        self._frame_timer.timeout.connect(self.process_frame)

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def state(self) -> TrackPlotViewState:
        return self._state

    @property
    def track(self) -> TrackStore:
        return self._track

    @property
    def last_frame_stats(self) -> FrameStats:
        return self._last_stats

    def start(self) -> None:
        self._frame_timer.start()

    def stop(self) -> None:
        self._frame_timer.stop()

    def post_event(self, event: InputEvent) -> None:
        self._pending.append(event)

    def process_frame(self) -> DrainResult:
        """Drain all pending input, then schedule a repaint."""
        events = list(self._pending)
        self._pending.clear()
        result = self._controller.drain(self._state, events)
        self._state = result.state
        if result.fullscreen_changed:
            self.fullscreenToggled.emit(self._state.fullscreen)
        if result.quit_requested:
            self.quitRequested.emit()
            return result
        self.update()
        return result

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------
    def sizeHint(self) -> QtCore.QSize:  # pragma: no cover - UI hint only
        return QtCore.QSize(1280, 800)

    def wheelEvent(self, event: QtGui.QWheelEvent):  # noqa: N802
        self.post_event(qt_events.wheel_event(event))
        event.accept()

    def keyPressEvent(self, event: QtGui.QKeyEvent):  # noqa: N802
        translated = qt_events.key_event(event)
        if translated is None:
            super().keyPressEvent(event)
            return
        self.post_event(translated)
        event.accept()

    def mousePressEvent(self, event: QtGui.QMouseEvent):  # noqa: N802
        self.post_event(qt_events.press_event(event))
        event.accept()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent):  # noqa: N802
        self.post_event(qt_events.release_event(event))
        event.accept()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent):  # noqa: N802
        self.post_event(qt_events.move_event(event))
        event.accept()

    def paintEvent(self, event: QtGui.QPaintEvent):  # noqa: N802
        painter = QtGui.QPainter(self)
        try:
            surface = QtPainterSurface(painter, self.rect())
            self._last_stats = render_frame(
                surface, self._track, self._state, self.width(), self.height()
            )
        finally:
            painter.end()
