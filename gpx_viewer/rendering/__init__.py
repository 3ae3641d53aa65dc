"""Rendering helpers for the track plot widget."""
from __future__ import annotations

from gpx_viewer.rendering.primitives.mapping import (
    DEGENERATE_FRACTION,
    ScreenPoint,
    project,
    zoom_at,
)
from gpx_viewer.rendering.renderer import DrawSurface, FrameStats, render_frame
from gpx_viewer.rendering.speed_classifier import (
    BACKGROUND_COLOR,
    DEFAULT_LINE_COLOR,
    FASTEST_TIER,
    POINT_COLOR,
    SPEED_THRESHOLDS,
    ColorTier,
    color_for,
)

__all__ = [
    "BACKGROUND_COLOR",
    "ColorTier",
    "DEFAULT_LINE_COLOR",
    "DEGENERATE_FRACTION",
    "DrawSurface",
    "FASTEST_TIER",
    "FrameStats",
    "POINT_COLOR",
    "SPEED_THRESHOLDS",
    "ScreenPoint",
    "color_for",
    "project",
    "render_frame",
    "zoom_at",
]
