"""View-state container for the track plot.

Transient model-layer state read by the renderer and produced by the input
controller. Nothing here is loaded or saved; the frame loop owns one value and
swaps in the one returned by the input controller after every drain.
"""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DISTANCE_KM = 1.0
MIN_MAX_DISTANCE_KM = 0.1
ZOOM_STEP = 1.1
THRESHOLD_STEP = 1.1


@dataclass(frozen=True)
class TrackPlotViewState:
    """Pan/zoom position and display flags for the plot.

    ``scale`` multiplies the screen-sized normalized track, ``offset_x`` and
    ``offset_y`` are the pan in whole pixels. ``max_distance_km`` is the
    longest segment still drawn as a line; longer ones are gaps.
    """

    scale: float = 1.0
    offset_x: int = 0
    offset_y: int = 0
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM
    draw_points: bool = False
    color_lines: bool = False
    fullscreen: bool = True
    dragging: bool = False
    last_pointer_x: int = 0
    last_pointer_y: int = 0

    @property
    def mode_label(self) -> str:
        return "Drawing points" if self.draw_points else "Drawing lines"

    @property
    def color_label(self) -> str:
        return "Color coding lines" if self.color_lines else "Default line color"

    @property
    def window_label(self) -> str:
        return "Fullscreen mode" if self.fullscreen else "Windowed mode"
