"""Entry point for the GPX track viewer."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from gpx_viewer.config import ViewerSettings, load_settings
from gpx_viewer.legend import print_legend
from gpx_viewer.services.gpx_loader import load_track_directory
from gpx_viewer.version import __version__

logger = logging.getLogger(__name__)


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="gpx-viewer",
        usage="%(prog)s <directory with GPX files>",
        description="Plot every GPX track in a directory.",
        add_help=False,
    )
    parser.add_argument("directory", type=Path)
    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run_viewer(directory: Path, settings: ViewerSettings) -> int:
    try:
        track = load_track_directory(directory)
    except NotADirectoryError as exc:
        logger.error("%s", exc)
        return 1

    from PyQt5 import QtWidgets

    from gpx_viewer.widget.window import TrackPlotWindow

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName("GPX Track Viewer")

    window = None
    try:
        window = TrackPlotWindow(track, settings)
        window.show_initial()
    except Exception:
        logger.exception("Failed to create the viewer window")
        if window is not None:
            window.close()
        return 1

    return app.exec_()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    print_legend(sys.stderr)
    logger.info("Starting GPX Track Viewer %s", __version__)
    return run_viewer(args.directory, settings)


if __name__ == "__main__":
    sys.exit(main())
