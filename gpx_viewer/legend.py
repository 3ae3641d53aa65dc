"""Startup banner listing key bindings and the speed colour scale."""
from __future__ import annotations

import sys
from typing import TextIO

from gpx_viewer.rendering.speed_classifier import ColorTier

KEY_LEGEND = (
    "P:       Lines / Points",
    "S:       Speed",
    "F:       Fullscreen / Window",
    "Up/Down: Change line distance threshold",
    "Esc:     Quit",
)


def legend_lines() -> list[str]:
    lines = list(KEY_LEGEND)
    for tier in ColorTier:
        label = f"{tier.label}:"
        lines.append(f"{label:<12}{tier.speed_kmh:>2}km/h")
    return lines


def print_legend(stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stderr
    for line in legend_lines():
        print(line, file=stream)
