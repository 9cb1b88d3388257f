"""Asset discovery, canvas matching and technical metadata extraction."""

from biiif_csv.assets.asset_index import AssetIndex
from biiif_csv.assets.extractor import MetadataExtractor
from biiif_csv.assets.matcher import CanvasKind, CanvasMatch, find_canvas_assets

__all__ = [
    "AssetIndex",
    "MetadataExtractor",
    "CanvasKind",
    "CanvasMatch",
    "find_canvas_assets",
]
