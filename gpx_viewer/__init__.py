"""Interactive GPX track viewer."""
from gpx_viewer.version import __version__

__all__ = ["__version__"]
