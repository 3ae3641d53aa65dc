"""Configuration helpers for GPX viewer startup settings.

Settings are read from an optional ``gpx_viewer.ini``; the viewer never
writes the file back.
"""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass
import logging
from pathlib import Path
import sys
from typing import Optional

from gpx_viewer.model.view_state import (
    DEFAULT_MAX_DISTANCE_KM,
    MIN_MAX_DISTANCE_KM,
    TrackPlotViewState,
)

CONFIG_FILENAME = "gpx_viewer.ini"
_VIEW_SECTION = "view"
_LOGGING_SECTION = "logging"
DEFAULT_FRAME_INTERVAL_MS = 16

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerSettings:
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM
    fullscreen: bool = True
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    log_level: str = "INFO"

    def initial_view_state(self) -> TrackPlotViewState:
        return TrackPlotViewState(
            max_distance_km=self.max_distance_km, fullscreen=self.fullscreen
        )


def _config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return _config_dir(main_script_path) / CONFIG_FILENAME


def _read_parser(ini_path: Path) -> ConfigParser | None:
    if not ini_path.exists():
        return None
    parser = ConfigParser()
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error) as exc:
        logger.warning("Ignoring unreadable config %s: %s", ini_path, exc)
        return None
    return parser


def load_settings(
    main_script_path: Optional[Path] = None, ini_path: Optional[Path] = None
) -> ViewerSettings:
    """Load startup settings, falling back to defaults for anything invalid."""
    defaults = ViewerSettings()
    parser = _read_parser(ini_path or config_path(main_script_path))
    if parser is None:
        return defaults

    try:
        max_distance = parser.getfloat(
            _VIEW_SECTION, "max_distance_km", fallback=defaults.max_distance_km
        )
    except ValueError:
        max_distance = defaults.max_distance_km
    if not max_distance >= MIN_MAX_DISTANCE_KM:
        max_distance = defaults.max_distance_km

    try:
        fullscreen = parser.getboolean(
            _VIEW_SECTION, "fullscreen", fallback=defaults.fullscreen
        )
    except ValueError:
        fullscreen = defaults.fullscreen

    try:
        frame_interval = parser.getint(
            _VIEW_SECTION, "frame_interval_ms", fallback=defaults.frame_interval_ms
        )
    except ValueError:
        frame_interval = defaults.frame_interval_ms
    if frame_interval <= 0:
        frame_interval = defaults.frame_interval_ms

    level = parser.get(_LOGGING_SECTION, "level", fallback=defaults.log_level)
    level = level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = defaults.log_level

    return ViewerSettings(
        max_distance_km=max_distance,
        fullscreen=fullscreen,
        frame_interval_ms=frame_interval,
        log_level=level,
    )
