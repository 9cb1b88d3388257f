"""Hierarchy path classification, nesting rules and the tree builder.

The builder lives in ``biiif_csv.hierarchy.builder`` and is imported from
there; it depends on the assets package, which itself uses the classifier.
"""

from biiif_csv.hierarchy.classifier import (
    classify_hierarchy,
    classify_segment,
    parse_canvas_index,
    strip_canvas_marker,
)
from biiif_csv.hierarchy.nesting import validate_nesting

__all__ = [
    "classify_hierarchy",
    "classify_segment",
    "parse_canvas_index",
    "strip_canvas_marker",
    "validate_nesting",
]
