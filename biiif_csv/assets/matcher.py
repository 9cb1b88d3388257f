"""Match indexed asset files to canvas nodes.

A canvas is matched by the number in its name. Canvases whose parent segment
is ``audio`` are audio canvases and match MP3 parts; every other canvas is an
image canvas and matches JPEGs:

- audio: ``Part09.mp3`` and ``part9-1.mp3`` both match canvas 9
- image: ``BHC001_AF_01.JPG`` matches canvas 1, ``BHC001_AF_010.JPG`` matches canvas 10

The candidates are every file in the index, not only the files in a directory
that mirrors the canvas. All matching files are returned.
"""

import posixpath
import re
from dataclasses import dataclass, field
from enum import Enum

from aws_lambda_powertools import Logger

from biiif_csv.assets.asset_index import AssetIndex
from biiif_csv.assets.file_extensions import is_matchable
from biiif_csv.core.models import TreeNode
from biiif_csv.hierarchy.classifier import DEFAULT_MARKER, parse_canvas_index

logger = Logger(service="biiif-csv", child=True)

AUDIO_PART_PATTERN = re.compile(r"part(\d+)(?:-\d+)?\.mp3$")
IMAGE_NUMBER_PATTERN = re.compile(r"_(\d+)\.[^.]+$")


class CanvasKind(Enum):
    IMAGE = "Image"
    AUDIO = "Audio"


@dataclass
class CanvasMatch:
    """Outcome of matching one canvas against the index.

    Attributes:
        canvas_index: Number parsed from the canvas name, None if it has none
        kind: Whether the canvas was matched as audio or image
        files: Matching files, in candidate order
    """

    canvas_index: int | None
    kind: CanvasKind
    files: list[str] = field(default_factory=list)


def canvas_kind(node: TreeNode, audio_parent_segment: str = "audio") -> CanvasKind:
    if node.parent_segment == audio_parent_segment:
        return CanvasKind.AUDIO
    return CanvasKind.IMAGE


def _extension(file_path: str) -> str:
    return posixpath.splitext(file_path)[1]


def extract_file_number(file_path: str, kind: CanvasKind) -> int | None:
    """Read the canvas number a file name carries.

    Args:
        file_path: Normalized path of a candidate file
        kind: The kind of canvas being matched

    Returns:
        The number from the file name, or None if the file cannot match
        a canvas of this kind
    """
    if not is_matchable(_extension(file_path), kind.value):
        return None

    file_name = posixpath.basename(file_path).lower()
    pattern = AUDIO_PART_PATTERN if kind is CanvasKind.AUDIO else IMAGE_NUMBER_PATTERN
    match = pattern.search(file_name)
    if not match:
        return None
    return int(match.group(1))


def match_canvas_files(
    candidates: list[str], canvas_index: int | None, kind: CanvasKind
) -> list[str]:
    """Filter candidate files down to those numbered ``canvas_index``."""
    if canvas_index is None:
        return []
    return [
        file_path
        for file_path in candidates
        if extract_file_number(file_path, kind) == canvas_index
    ]


def find_canvas_assets(
    node: TreeNode,
    index: AssetIndex,
    marker: str = DEFAULT_MARKER,
    audio_parent_segment: str = "audio",
) -> CanvasMatch:
    """Find the asset files belonging to a canvas node.

    Args:
        node: A canvas tree node
        index: The asset index for this run
        marker: The reserved canvas marker
        audio_parent_segment: Parent segment name that marks audio canvases

    Returns:
        CanvasMatch with every matching file
    """
    canvas_index = parse_canvas_index(node.name, marker)
    kind = canvas_kind(node, audio_parent_segment)
    candidates = index.all_files()

    logger.debug(
        f"Looking for files for {node.name}",
        extra={
            "canvas_index": canvas_index,
            "kind": kind.value,
            "candidate_count": len(candidates),
        },
    )

    files = match_canvas_files(candidates, canvas_index, kind)
    return CanvasMatch(canvas_index=canvas_index, kind=kind, files=files)
