"""Mapping helpers between geographic samples and screen pixels."""
from __future__ import annotations

from gpx_viewer.geo import GeoPoint
from gpx_viewer.model.track_store import BoundingBox

ScreenPoint = tuple[int, int]

# Fraction used on an axis with no extent (single point or straight line).
DEGENERATE_FRACTION = 0.5


def _fraction(value: float, low: float, high: float) -> float:
    span = high - low
    if span == 0:
        return DEGENERATE_FRACTION
    return (value - low) / span


def project(
    point: GeoPoint,
    box: BoundingBox,
    scale: float,
    offset_x: int,
    offset_y: int,
    screen_width: int,
    screen_height: int,
) -> ScreenPoint:
    """Convert a geographic point into screen pixels.

    Longitude grows to the right and latitude grows upwards, so north ends up
    at the top of the screen.
    """
    fx = _fraction(point.lon, box.min_lon, box.max_lon)
    fy = 1.0 - _fraction(point.lat, box.min_lat, box.max_lat)
    x = int(fx * screen_width * scale) + offset_x
    y = int(fy * screen_height * scale) + offset_y
    return x, y


def zoom_at(
    pointer_x: int,
    pointer_y: int,
    prev_scale: float,
    new_scale: float,
    offset_x: int,
    offset_y: int,
) -> tuple[int, int]:
    """Return offsets that keep the location under the pointer in place."""
    if new_scale == prev_scale:
        return offset_x, offset_y
    view_x = (pointer_x - offset_x) / prev_scale
    view_y = (pointer_y - offset_y) / prev_scale
    return (
        pointer_x - int(view_x * new_scale),
        pointer_y - int(view_y * new_scale),
    )
