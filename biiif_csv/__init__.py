"""biiif-csv.

Builds a biiif directory tree (collections, manifests and canvases with
``info.yml`` sidecars) from a CSV description of a collection.
"""

from biiif_csv.core.version import __version__

__all__ = ["__version__"]
