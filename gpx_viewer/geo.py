"""Great-circle helpers for GPS samples."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import numpy as np

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A single latitude/longitude sample in degrees."""

    lat: float
    lon: float


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the haversine distance between two points in kilometres."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.lon) - math.radians(a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # rounding can push h slightly outside [0, 1]
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def segment_distances_km(points: Sequence[GeoPoint]) -> np.ndarray:
    """Vectorized haversine over each adjacent pair of ``points``.

    Returns an array of length ``len(points) - 1`` (empty for fewer than two
    points) where entry ``i`` is the distance from ``points[i]`` to
    ``points[i + 1]``.
    """
    if len(points) < 2:
        return np.zeros(0, dtype=float)
    lats = np.radians(np.fromiter((p.lat for p in points), dtype=float))
    lons = np.radians(np.fromiter((p.lon for p in points), dtype=float))
    d_lat = np.diff(lats)
    d_lon = np.diff(lons)
    h = (
        np.sin(d_lat / 2) ** 2
        + np.cos(lats[:-1]) * np.cos(lats[1:]) * np.sin(d_lon / 2) ** 2
    )
    h = np.clip(h, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
