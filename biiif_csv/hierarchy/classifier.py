"""Role classification for hierarchy paths.

A hierarchy such as ``collection/photos/manifest1/canvas3`` is split on ``/``
and its last segment decides the node's role:

- starts with ``canvas``   -> canvas (the segment is prefixed with the marker)
- contains ``manifest``    -> manifest
- anything else            -> collection

The marker (``_`` by default) is what tells the biiif compiler that a
directory is a canvas, so ``canvas3`` is created on disk as ``_canvas3``.
"""

import re

from biiif_csv.core.errors import HierarchyError
from biiif_csv.core.models import NodeRole, TreeNode

CANVAS_PREFIX = "canvas"
MANIFEST_TOKEN = "manifest"
DEFAULT_MARKER = "_"

# Path segments a hierarchy may not contain
RELATIVE_SEGMENTS = (".", "..")

_LEADING_DIGITS = re.compile(r"^\d+")


def split_hierarchy(hierarchy: str) -> list[str]:
    """Split a hierarchy string into its non-empty segments."""
    return [segment for segment in hierarchy.split("/") if segment]


def classify_segment(segment: str, marker: str = DEFAULT_MARKER) -> NodeRole:
    """Return the role a single hierarchy segment stands for.

    Examples:
        >>> classify_segment("canvas1")
        <NodeRole.CANVAS: 'canvas'>
        >>> classify_segment("_canvas1")
        <NodeRole.CANVAS: 'canvas'>
        >>> classify_segment("letters_manifest")
        <NodeRole.MANIFEST: 'manifest'>
        >>> classify_segment("photos")
        <NodeRole.COLLECTION: 'collection'>
    """
    if strip_canvas_marker(segment, marker).startswith(CANVAS_PREFIX):
        return NodeRole.CANVAS
    if MANIFEST_TOKEN in segment:
        return NodeRole.MANIFEST
    return NodeRole.COLLECTION


def add_canvas_marker(segment: str, marker: str = DEFAULT_MARKER) -> str:
    if segment.startswith(marker + CANVAS_PREFIX):
        return segment
    return marker + segment


def strip_canvas_marker(segment: str, marker: str = DEFAULT_MARKER) -> str:
    if segment.startswith(marker + CANVAS_PREFIX):
        return segment[len(marker):]
    return segment


def parse_canvas_index(segment: str, marker: str = DEFAULT_MARKER) -> int | None:
    """Parse the numeric index out of a canvas segment.

    The leading run of marker and ``canvas`` characters is removed and the
    digits that follow are read as an integer, so ``_canvas01`` and
    ``_canvas1`` both give ``1``.

    Args:
        segment: Canvas segment, with or without the marker
        marker: The reserved canvas marker

    Returns:
        The canvas index, or None if the segment carries no number
    """
    prefix_chars = re.escape(marker + CANVAS_PREFIX)
    remainder = re.sub(rf"^[{prefix_chars}]+", "", segment)
    match = _LEADING_DIGITS.match(remainder)
    if not match:
        return None
    return int(match.group(0))


def classify_hierarchy(hierarchy: str, marker: str = DEFAULT_MARKER) -> TreeNode:
    """Classify a hierarchy path into a tree node.

    Args:
        hierarchy: Slash-delimited hierarchy path from a row
        marker: Prefix used to flag canvas directories

    Returns:
        TreeNode whose last segment carries the marker when it is a canvas

    Raises:
        HierarchyError: If the hierarchy has no segments or contains
            ``.`` or ``..`` segments
    """
    segments = split_hierarchy(hierarchy or "")
    if not segments:
        raise HierarchyError("Hierarchy path is empty", repr(hierarchy))
    if any(segment in RELATIVE_SEGMENTS for segment in segments):
        raise HierarchyError("Hierarchy path must not contain '.' or '..' segments", hierarchy)

    original = segments[-1]
    role = classify_segment(original, marker)
    if role is NodeRole.CANVAS:
        segments[-1] = add_canvas_marker(original, marker)

    parent_segment = segments[-2] if len(segments) > 1 else None
    parent_role = classify_segment(parent_segment, marker) if parent_segment else None

    return TreeNode(
        hierarchy=hierarchy,
        segments=tuple(segments),
        original_segment=original,
        role=role,
        parent_segment=parent_segment,
        parent_role=parent_role,
    )
