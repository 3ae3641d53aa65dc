"""Speed tiers for colouring track segments.

Samples are assumed to be logged at a fixed interval, so the length of a
segment stands in for the speed travelled along it. The thresholds below are
tuned for that interval and are kept as constants.
"""
from __future__ import annotations

from enum import Enum

RGBA = tuple[int, int, int, int]


class ColorTier(Enum):
    """Display tier for a segment, carrying its RGBA colour and legend text."""

    DARK_BLUE = ((0, 0, 139, 255), "Dark blue", 0)
    LIGHT_BLUE = ((173, 216, 230, 255), "Light Blue", 5)
    GREEN = ((0, 255, 0, 255), "Green", 10)
    YELLOW = ((255, 255, 0, 255), "Yellow", 20)
    ORANGE = ((255, 165, 0, 255), "Orange", 30)
    RED = ((150, 0, 0, 150), "Red", 50)

    def __init__(self, rgba: RGBA, label: str, speed_kmh: int) -> None:
        self.rgba = rgba
        self.label = label
        self.speed_kmh = speed_kmh


# Inclusive upper bounds in km per sample interval, ascending.
SPEED_THRESHOLDS: tuple[tuple[float, ColorTier], ...] = (
    (0.041, ColorTier.DARK_BLUE),
    (0.083, ColorTier.LIGHT_BLUE),
    (0.166, ColorTier.GREEN),
    (0.250, ColorTier.YELLOW),
    (0.416, ColorTier.ORANGE),
)
FASTEST_TIER = ColorTier.RED

DEFAULT_LINE_COLOR: RGBA = (255, 255, 255, 255)
POINT_COLOR: RGBA = (255, 0, 0, 255)
BACKGROUND_COLOR: RGBA = (0, 0, 0, 255)


def color_for(distance_km: float) -> ColorTier:
    """Return the tier for a segment of ``distance_km`` kilometres."""
    for upper_bound, tier in SPEED_THRESHOLDS:
        if distance_km <= upper_bound:
            return tier
    return FASTEST_TIER
