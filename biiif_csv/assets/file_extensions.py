"""
File Extension Constants for biiif-csv

Single source of truth for which asset extensions are matched to canvases
and which ones metadata can be probed from. Extensions are lowercase and
without the leading dot.
"""

# Extensions a canvas can be matched against, by canvas kind
MATCHABLE_EXTENSIONS = {
    "Image": [
        "jpg",
        "jpeg",
    ],
    "Audio": [
        "mp3",
    ],
}


# Extensions technical metadata is extracted from, by probe kind
PROBE_EXTENSIONS = {
    "Image": [
        "jpg",
        "jpeg",
        "png",
        "tiff",
        "tif",
    ],
    "Media": [
        "mp3",  # MPEG Audio Layer III
        "mp4",  # MPEG-4
        "wav",  # Waveform Audio
        "m4a",  # MPEG-4 Audio
    ],
}


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and drop any leading dot."""
    return extension.lower().lstrip(".")


def get_probe_type(extension):
    """
    Return the probe kind ("Image" or "Media") for an extension, or None.
    """
    ext = normalize_extension(extension)
    for probe_type, extensions in PROBE_EXTENSIONS.items():
        if ext in extensions:
            return probe_type
    return None


def is_matchable(extension, canvas_kind):
    """Check whether an extension can be matched to a canvas of the given kind."""
    return normalize_extension(extension) in MATCHABLE_EXTENSIONS.get(canvas_kind, [])
