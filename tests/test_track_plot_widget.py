import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # pragma: no cover - allows tests to be skipped in headless CI without PyQt5
    from PyQt5 import QtCore, QtGui, QtWidgets
    from gpx_viewer.widget.track_plot_widget import TrackPlotWidget
    from gpx_viewer.widget.window import TrackPlotWindow
except ImportError:  # pragma: no cover
    pytest.skip("PyQt5 not available", allow_module_level=True)

from gpx_viewer.config import ViewerSettings
from gpx_viewer.geo import GeoPoint
from gpx_viewer.model.track_store import TrackStore
from gpx_viewer.model.view_state import TrackPlotViewState
from gpx_viewer.rendering.renderer import FrameStats
from gpx_viewer.widget.interaction import qt_events
from gpx_viewer.widget.interaction.events import (
    KeyAction,
    KeyPressed,
    PointerButton,
    PointerMoved,
    PointerPressed,
    QuitRequested,
    WheelScrolled,
)


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def track():
    return TrackStore(
        (GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.001), GeoPoint(0.0, 10.0))
    )


def test_events_are_applied_on_frame_tick(qapp, track):
    widget = TrackPlotWidget(track)
    widget.post_event(KeyPressed(KeyAction.TOGGLE_COLOR))
    widget.post_event(PointerPressed(PointerButton.PRIMARY, 10, 10))
    widget.post_event(PointerMoved(30, 5))

    assert not widget.state.color_lines
    result = widget.process_frame()

    assert result.state is widget.state
    assert widget.state.color_lines
    assert (widget.state.offset_x, widget.state.offset_y) == (20, -5)

    before = widget.state
    widget.process_frame()
    assert widget.state == before


def test_quit_and_fullscreen_signals(qapp, track):
    widget = TrackPlotWidget(track, state=TrackPlotViewState(fullscreen=True))
    toggled = []
    quits = []
    widget.fullscreenToggled.connect(toggled.append)
    widget.quitRequested.connect(lambda: quits.append(True))

    widget.post_event(KeyPressed(KeyAction.TOGGLE_FULLSCREEN))
    widget.process_frame()
    assert toggled == [False]
    assert quits == []

    widget.post_event(QuitRequested())
    widget.process_frame()
    assert quits == [True]


def test_paint_runs_renderer_with_widget_size(qapp, track):
    widget = TrackPlotWidget(track)
    widget.resize(400, 200)
    widget.grab()

    assert widget.last_frame_stats == FrameStats(segments_drawn=1, segments_skipped=1)

    widget.post_event(KeyPressed(KeyAction.TOGGLE_POINTS))
    widget.process_frame()
    widget.grab()
    assert widget.last_frame_stats == FrameStats(points_drawn=3)


def test_paint_draws_white_line_on_black(qapp):
    track = TrackStore((GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.004)))
    widget = TrackPlotWidget(track)
    widget.resize(100, 50)

    image = widget.grab().toImage()

    assert QtGui.QColor(image.pixel(50, 25)) == QtGui.QColor(255, 255, 255)
    assert QtGui.QColor(image.pixel(50, 5)) == QtGui.QColor(0, 0, 0)


def test_qt_key_translation():
    event = QtGui.QKeyEvent(QtCore.QEvent.KeyPress, QtCore.Qt.Key_Down, QtCore.Qt.NoModifier)
    assert qt_events.key_event(event) == KeyPressed(KeyAction.DECREASE_THRESHOLD)

    event = QtGui.QKeyEvent(QtCore.QEvent.KeyPress, QtCore.Qt.Key_Q, QtCore.Qt.NoModifier)
    assert qt_events.key_event(event) is None

    repeat = QtGui.QKeyEvent(
        QtCore.QEvent.KeyPress, QtCore.Qt.Key_P, QtCore.Qt.NoModifier, "p", True
    )
    assert qt_events.key_event(repeat) is None


def test_qt_wheel_translation():
    event = QtGui.QWheelEvent(
        QtCore.QPointF(12, 34),
        QtCore.QPointF(12, 34),
        QtCore.QPoint(0, 0),
        QtCore.QPoint(0, -120),
        QtCore.Qt.NoButton,
        QtCore.Qt.NoModifier,
        QtCore.Qt.NoScrollPhase,
        False,
    )
    assert qt_events.wheel_event(event) == WheelScrolled(-120, 12, 34)


def test_qt_mouse_translation():
    event = QtGui.QMouseEvent(
        QtCore.QEvent.MouseButtonPress,
        QtCore.QPointF(7, 9),
        QtCore.Qt.RightButton,
        QtCore.Qt.RightButton,
        QtCore.Qt.NoModifier,
    )
    assert qt_events.press_event(event) == PointerPressed(PointerButton.SECONDARY, 7, 9)


def test_window_closes_on_quit(qapp, track):
    window = TrackPlotWindow(track, ViewerSettings(fullscreen=False))
    window.show_initial()
    assert window.isVisible()
    assert not window.isFullScreen()

    window.plot.post_event(KeyPressed(KeyAction.QUIT))
    window.plot.process_frame()

    assert not window.isVisible()


def test_paint_survives_deep_zoom(qapp, track):
    widget = TrackPlotWidget(track)
    widget.resize(800, 600)
    for _ in range(250):
        widget.post_event(WheelScrolled(15, 0, 600))
    widget.process_frame()

    assert widget.state.scale > 1e10
    widget.grab()
    assert widget.last_frame_stats == FrameStats(segments_drawn=1, segments_skipped=1)

    widget.post_event(KeyPressed(KeyAction.TOGGLE_POINTS))
    widget.process_frame()
    widget.grab()
    assert widget.last_frame_stats == FrameStats(points_drawn=3)
