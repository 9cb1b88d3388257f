"""Version information for biiif-csv."""

__version__ = "1.0.0"
