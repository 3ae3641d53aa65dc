"""Loaded GPS samples and the geometry derived from them.

The store is built once from ingestion output and never changes afterwards,
so the bounding box and segment lengths are computed up front and shared by
every frame.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from gpx_viewer.geo import GeoPoint, segment_distances_km


@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @classmethod
    def from_points(cls, points: Iterable[GeoPoint]) -> "BoundingBox | None":
        """Return the componentwise extrema of ``points`` or ``None`` if empty."""
        min_lat = min_lon = float("inf")
        max_lat = max_lon = float("-inf")
        seen = False
        for point in points:
            seen = True
            if point.lat < min_lat:
                min_lat = point.lat
            if point.lat > max_lat:
                max_lat = point.lat
            if point.lon < min_lon:
                min_lon = point.lon
            if point.lon > max_lon:
                max_lon = point.lon
        if not seen:
            return None
        return cls(min_lat, max_lat, min_lon, max_lon)

    @property
    def is_degenerate(self) -> bool:
        return self.min_lat == self.max_lat or self.min_lon == self.max_lon


@dataclass(frozen=True)
class TrackStore:
    """Immutable, ordered track with its cached bounding box.

    Point order is the recording order; adjacent points form the path, so the
    sequence is never sorted or deduplicated.
    """

    points: tuple[GeoPoint, ...] = ()
    bounds: BoundingBox | None = field(init=False, repr=False)
    segment_distances: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "bounds", BoundingBox.from_points(points))
        distances = segment_distances_km(points)
        distances.setflags(write=False)
        object.__setattr__(self, "segment_distances", distances)

    @classmethod
    def from_sequences(cls, sequences: Iterable[Sequence[GeoPoint]]) -> "TrackStore":
        """Concatenate per-file sample sequences in the order given."""
        merged: list[GeoPoint] = []
        for sequence in sequences:
            merged.extend(sequence)
        return cls(tuple(merged))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points
