"""Convert external coverage data into canonical positions and stations configuration."""

__version__ = "0.1.0"
