import logging
from pathlib import Path

import pytest

pytest.importorskip("gpxpy")

from gpx_viewer.geo import GeoPoint
from gpx_viewer.services.gpx_loader import (
    find_track_files,
    load_track_directory,
    load_track_file,
    read_gpx_text,
)

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
)


def _track_xml(*segments):
    body = []
    for segment in segments:
        points = "".join(
            f'<trkpt lat="{lat}" lon="{lon}"><ele>1.0</ele></trkpt>'
            for lat, lon in segment
        )
        body.append(f"<trkseg>{points}</trkseg>")
    return GPX_HEADER + "<trk><name>t</name>" + "".join(body) + "</trk></gpx>\n"


def _route_xml(points):
    rtepts = "".join(f'<rtept lat="{lat}" lon="{lon}"/>' for lat, lon in points)
    return GPX_HEADER + f"<rte>{rtepts}</rte></gpx>\n"


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_track_file_reads_all_segments_in_order(tmp_path):
    path = _write(
        tmp_path / "ride.gpx",
        _track_xml([(47.0, 8.0), (47.001, 8.001)], [(47.5, 8.5)]),
    )

    assert load_track_file(path) == [
        GeoPoint(47.0, 8.0),
        GeoPoint(47.001, 8.001),
        GeoPoint(47.5, 8.5),
    ]


def test_load_track_file_falls_back_to_route_points(tmp_path):
    path = _write(tmp_path / "route.gpx", _route_xml([(1.0, 2.0), (3.0, 4.0)]))
    assert load_track_file(path) == [GeoPoint(1.0, 2.0), GeoPoint(3.0, 4.0)]


def test_malformed_file_is_skipped_with_warning(tmp_path, caplog):
    path = _write(tmp_path / "broken.gpx", "<gpx><trk><trkseg>")
    caplog.set_level(logging.WARNING, logger="gpx_viewer.services.gpx_loader")

    assert load_track_file(path) == []
    assert any("broken.gpx" in record.getMessage() for record in caplog.records)


def test_non_finite_samples_are_dropped_with_warning(tmp_path, caplog):
    path = _write(
        tmp_path / "glitch.gpx",
        _track_xml(
            [("nan", 2.0), (1.0, 2.0), ("1e400", 3.0), (3.0, "-inf"), (3.0, 4.0)]
        ),
    )
    caplog.set_level(logging.WARNING, logger="gpx_viewer.services.gpx_loader")

    assert load_track_file(path) == [GeoPoint(1.0, 2.0), GeoPoint(3.0, 4.0)]
    messages = [record.getMessage() for record in caplog.records]
    assert any("Dropped 3 point(s)" in m and "glitch.gpx" in m for m in messages)


def test_declared_latin1_encoding_is_honoured(tmp_path):
    text = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
        "<trk><name>Zürich Höhenweg</name><trkseg>"
        '<trkpt lat="47.37" lon="8.54"/><trkpt lat="47.38" lon="8.55"/>'
        "</trkseg></trk></gpx>\n"
    )
    path = tmp_path / "zurich.gpx"
    path.write_bytes(text.encode("iso-8859-1"))

    assert read_gpx_text(path).count("Zürich") == 1
    assert load_track_file(path) == [GeoPoint(47.37, 8.54), GeoPoint(47.38, 8.55)]


def test_unknown_declared_encoding_falls_back_to_utf8(tmp_path):
    path = tmp_path / "odd.gpx"
    path.write_bytes(
        _track_xml([(1.0, 2.0)])
        .replace('encoding="UTF-8"', 'encoding="no-such-codec"')
        .encode("utf-8")
    )
    assert '<trkpt lat="1.0" lon="2.0">' in read_gpx_text(path)


def test_missing_file_is_skipped(tmp_path):
    assert load_track_file(tmp_path / "missing.gpx") == []


def test_find_track_files_filters_and_sorts(tmp_path):
    _write(tmp_path / "b.gpx", _track_xml([(0.0, 0.0)]))
    _write(tmp_path / "a.GPX", _track_xml([(0.0, 0.0)]))
    _write(tmp_path / "notes.txt", "not a track")
    (tmp_path / "nested.gpx").mkdir()

    assert [path.name for path in find_track_files(tmp_path)] == ["a.GPX", "b.gpx"]


def test_find_track_files_rejects_missing_directory(tmp_path):
    with pytest.raises(NotADirectoryError):
        find_track_files(tmp_path / "nowhere")


def test_load_track_directory_concatenates_and_survives_bad_files(tmp_path):
    _write(tmp_path / "01.gpx", _track_xml([(0.0, 0.0), (0.0, 0.001)]))
    _write(tmp_path / "02.gpx", "definitely not xml")
    _write(tmp_path / "03.gpx", _track_xml([(0.0, 10.0)]))

    track = load_track_directory(tmp_path)

    assert track.points == (
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 0.001),
        GeoPoint(0.0, 10.0),
    )
    assert len(track.segment_distances) == 2


def test_load_track_directory_with_no_files_is_empty(tmp_path):
    track = load_track_directory(tmp_path)
    assert track.is_empty
    assert track.bounds is None
