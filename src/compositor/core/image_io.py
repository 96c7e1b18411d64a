"""Decode and encode Images through Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from compositor.core.data_types import Image
from compositor.core.errors import ImageDecodeError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image:
    """
    Load an image file as RGBA.

    Args:
        path: File to decode; any format Pillow reads

    Returns:
        Image with samples in [0, 1)

    Raises:
        FileNotFoundError: If the file does not exist
        ImageDecodeError: If Pillow cannot decode the file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    try:
        with PILImage.open(path) as source:
            rgba = source.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Failed to decode {path}: {e}") from e

    logger.debug("Loaded %s (%dx%d)", path, rgba.width, rgba.height)
    return Image.from_rgba8(rgba.tobytes(), rgba.width, rgba.height)


def save_image(image: Image, path: str | Path) -> None:
    """
    Encode an Image to a file; the format follows the file extension.

    Args:
        image: Image to write
        path: Destination file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    encoded = PILImage.frombytes("RGBA", (image.width, image.height), image.as_raw())
    encoded.save(path)
    logger.debug("Saved %s (%dx%d)", path, image.width, image.height)
