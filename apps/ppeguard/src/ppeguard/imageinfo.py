"""Image metadata probe."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ppeguard.errors import ImageNotFound, ImageProbeError
from ppeguard.types import ImageInfo


def probe_image(path: str | Path) -> ImageInfo:
    """Read width, height, format and file size without decoding pixels.

    Raises:
        ImageNotFound: If the file does not exist.
        ImageProbeError: If the file is not a readable image.
    """
    path = Path(path)
    if not path.is_file():
        raise ImageNotFound(f"Image file not found: {path}")

    try:
        with Image.open(path) as img:
            width, height = img.size
            fmt = img.format.lower() if img.format else None
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProbeError(f"Cannot read image {path}: {e}") from e

    return ImageInfo(width=width, height=height, format=fmt, size=path.stat().st_size)


__all__ = ["probe_image"]
