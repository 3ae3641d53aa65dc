"""Per-frame draw pipeline for the track plot."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from gpx_viewer.model.track_store import TrackStore
from gpx_viewer.model.view_state import TrackPlotViewState
from gpx_viewer.rendering.primitives.mapping import project
from gpx_viewer.rendering.speed_classifier import (
    DEFAULT_LINE_COLOR,
    POINT_COLOR,
    color_for,
)

logger = logging.getLogger(__name__)


class DrawSurface(Protocol):
    """Drawing primitives the renderer issues each frame."""

    def set_color(self, r: int, g: int, b: int, a: int) -> None: ...

    def draw_point(self, x: int, y: int) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...


@dataclass(frozen=True)
class FrameStats:
    points_drawn: int = 0
    segments_drawn: int = 0
    segments_skipped: int = 0


def render_frame(
    surface: DrawSurface,
    track: TrackStore,
    state: TrackPlotViewState,
    screen_width: int,
    screen_height: int,
) -> FrameStats:
    """Clear, draw the track for the current view, and present the frame."""
    surface.clear()
    box = track.bounds
    if box is None:
        surface.present()
        return FrameStats()

    def to_screen(point):
        return project(
            point,
            box,
            state.scale,
            state.offset_x,
            state.offset_y,
            screen_width,
            screen_height,
        )

    if state.draw_points:
        surface.set_color(*POINT_COLOR)
        for point in track.points:
            surface.draw_point(*to_screen(point))
        stats = FrameStats(points_drawn=len(track.points))
    else:
        drawn = skipped = 0
        points = track.points
        for index, distance in enumerate(track.segment_distances, start=1):
            distance = float(distance)
            if distance > state.max_distance_km:
                skipped += 1
                continue
            x1, y1 = to_screen(points[index - 1])
            x2, y2 = to_screen(points[index])
            if state.color_lines:
                color = color_for(distance).rgba
            else:
                color = DEFAULT_LINE_COLOR
            surface.set_color(*color)
            surface.draw_line(x1, y1, x2, y2)
            drawn += 1
        stats = FrameStats(segments_drawn=drawn, segments_skipped=skipped)

    surface.present()
    logger.debug("Rendered frame: %s", stats)
    return stats
