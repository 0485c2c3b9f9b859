"""Horizontal progress bar with squircle-style rounded corners."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("squircleprogress")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
