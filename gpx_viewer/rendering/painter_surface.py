"""QPainter-backed draw surface."""
from __future__ import annotations

from PyQt5 import QtCore, QtGui

from gpx_viewer.rendering.speed_classifier import BACKGROUND_COLOR


class QtPainterSurface:
    """Adapts a :class:`QtGui.QPainter` to the renderer's draw calls.

    The painter is owned by the caller and must stay active while the
    renderer runs.
    """

    def __init__(self, painter: QtGui.QPainter, rect: QtCore.QRect) -> None:
        self._painter = painter
        self._rect = rect
        self._pen = QtGui.QPen(QtGui.QColor(*BACKGROUND_COLOR), 1)
        self._pen.setCosmetic(True)
        self._painter.setRenderHint(QtGui.QPainter.Antialiasing, False)

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self._pen.setColor(QtGui.QColor(r, g, b, a))
        self._painter.setPen(self._pen)

    # Float overloads: zoomed-in coordinates can leave the int32 range.
    def draw_point(self, x: int, y: int) -> None:
        self._painter.drawPoint(QtCore.QPointF(x, y))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._painter.drawLine(QtCore.QLineF(x1, y1, x2, y2))

    def clear(self) -> None:
        self._painter.fillRect(self._rect, QtGui.QColor(*BACKGROUND_COLOR))

    def present(self) -> None:
        """Qt swaps the backing store once ``paintEvent`` returns."""
