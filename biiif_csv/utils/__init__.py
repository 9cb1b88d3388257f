"""Utility modules for biiif-csv."""

from biiif_csv.utils.ffmpeg_utils import FFprobeHelper

__all__ = [
    "FFprobeHelper",
]
