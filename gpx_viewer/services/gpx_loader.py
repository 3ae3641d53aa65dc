"""Load GPX track logs from a directory into a :class:`TrackStore`."""
from __future__ import annotations

import codecs
import logging
import math
from pathlib import Path
import re
from typing import List

import gpxpy
import gpxpy.gpx

from gpx_viewer.geo import GeoPoint
from gpx_viewer.model.track_store import TrackStore

TRACK_FILE_SUFFIX = ".gpx"
_XML_ENCODING = re.compile(
    rb"""\s*<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z0-9._-]+)["']"""
)

logger = logging.getLogger(__name__)


def find_track_files(directory: Path) -> List[Path]:
    """Return GPX files directly inside ``directory``, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return sorted(
        (
            entry
            for entry in directory.iterdir()
            if entry.is_file() and entry.suffix.lower() == TRACK_FILE_SUFFIX
        ),
        key=lambda entry: entry.name,
    )


def _is_finite(p) -> bool:
    return math.isfinite(p.latitude) and math.isfinite(p.longitude)


def extract_points(gpx: gpxpy.gpx.GPX, source: object = "<gpx>") -> List[GeoPoint]:
    """Collect track points in document order, or route points if no tracks.

    Samples with a non-finite latitude or longitude are dropped with a warning.
    """
    samples = [
        p
        for track in gpx.tracks
        for segment in track.segments
        for p in segment.points
    ]
    if not samples:
        samples = [p for route in gpx.routes for p in route.points]
    points = [GeoPoint(p.latitude, p.longitude) for p in samples if _is_finite(p)]
    dropped = len(samples) - len(points)
    if dropped:
        logger.warning(
            "Dropped %d point(s) with non-finite coordinates from %s", dropped, source
        )
    return points


def _declared_encoding(data: bytes) -> str:
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    match = _XML_ENCODING.match(data)
    if match is None:
        return "utf-8"
    encoding = match.group(1).decode("ascii")
    try:
        codecs.lookup(encoding)
    except LookupError:
        return "utf-8"
    return encoding


def read_gpx_text(path: Path) -> str:
    """Decode a GPX file using the encoding named in its XML declaration."""
    data = Path(path).read_bytes()
    return data.decode(_declared_encoding(data), errors="replace")


def load_track_file(path: Path) -> List[GeoPoint]:
    """Parse one GPX file; a file that fails to load contributes nothing."""
    try:
        gpx = gpxpy.parse(read_gpx_text(path))
    except (OSError, ValueError, gpxpy.gpx.GPXException) as exc:
        logger.warning("Failed to load GPX file %s: %s", path, exc)
        return []
    return extract_points(gpx, path)


def load_track_directory(directory: Path) -> TrackStore:
    """Concatenate every GPX file in ``directory`` into one track."""
    files = find_track_files(directory)
    sequences = []
    for path in files:
        points = load_track_file(path)
        logger.debug("Loaded %d points from %s", len(points), path.name)
        sequences.append(points)
    store = TrackStore.from_sequences(sequences)
    logger.info(
        "Loaded %d points from %d GPX file(s) in %s", len(store), len(files), directory
    )
    return store
