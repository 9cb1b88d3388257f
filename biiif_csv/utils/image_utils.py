"""Image probing with Pillow."""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from biiif_csv.core.errors import ProbeError


def probe_image_dimensions(file_path: str | Path) -> tuple[int, int]:
    """Read the pixel dimensions of an image.

    Only the image header is read; pixel data is not decoded.

    Args:
        file_path: Path to the image file.

    Returns:
        (width, height) in pixels.

    Raises:
        ProbeError: If the file is missing, is not a readable image, or is
            larger than Pillow's ``Image.MAX_IMAGE_PIXELS`` allows.
    """
    try:
        with Image.open(file_path) as im:
            width, height = im.size
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
        raise ProbeError(
            "Could not extract dimensions from image", path=str(file_path), stderr=str(e)
        ) from e
    return int(width), int(height)
