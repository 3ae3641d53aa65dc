"""Top-level window for the GPX viewer."""
from __future__ import annotations

import logging
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from gpx_viewer.config import ViewerSettings
from gpx_viewer.model.track_store import TrackStore
from gpx_viewer.widget.track_plot_widget import TrackPlotWidget

WINDOW_TITLE = "GPX Track Visualizer"
WINDOWED_SIZE = QtCore.QSize(1280, 800)

logger = logging.getLogger(__name__)


class TrackPlotWindow(QtWidgets.QMainWindow):
    """Hosts the plot widget and applies fullscreen/windowed mode."""

    def __init__(
        self,
        track: TrackStore,
        settings: Optional[ViewerSettings] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        settings = settings or ViewerSettings()
        self.setWindowTitle(WINDOW_TITLE)
        self.plot = TrackPlotWidget(
            track,
            state=settings.initial_view_state(),
            frame_interval_ms=settings.frame_interval_ms,
            parent=self,
        )
        self.setCentralWidget(self.plot)
        self.plot.quitRequested.connect(self.close)
        self.plot.fullscreenToggled.connect(self.apply_window_mode)

    def show_initial(self) -> None:
        self.apply_window_mode(self.plot.state.fullscreen)
        self.plot.setFocus()
        self.plot.start()

    def apply_window_mode(self, fullscreen: bool) -> None:
        if fullscreen:
            self.showFullScreen()
        else:
            self.showNormal()
            self.resize(WINDOWED_SIZE)
        logger.debug(
            "Window mode applied: fullscreen=%s size=%dx%d",
            fullscreen,
            self.plot.width(),
            self.plot.height(),
        )

    def closeEvent(self, event: QtGui.QCloseEvent):  # noqa: N802
        self.plot.stop()
        super().closeEvent(event)
