"""
Module: builder.images.provider

Purpose:
    Load a stored photo for printing. Never raises for a bad photo:
    the result says whether an image is available or why it was skipped,
    and the entry is drawn without a photo in that case.

Key Functions:
    - load_photo(): Resolve variant and decode

Key Classes:
    - LoadedPhoto: Decoded image ready to draw
    - PhotoSkipped: Reason a photo is unavailable

Dependencies:
    - PIL: Image decoding
    - builder.images.variants: Variant lookup

Used By:
    - builder.output.renderer: Group photos and cover logo
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from .variants import resolve_variant

logger = logging.getLogger(__name__)


SKIP_MISSING = "missing"
SKIP_UNDECODABLE = "undecodable"


@dataclass(frozen=True)
class LoadedPhoto:
    """
    A decoded photo.

    Attributes:
        image: Decoded PIL image (fully loaded, file closed)
        source_path: Variant file the image came from
    """

    image: Image.Image
    source_path: Path

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return self.image.size


@dataclass(frozen=True)
class PhotoSkipped:
    """
    A photo that could not be used.

    Attributes:
        kind: "missing" or "undecodable"
        reason: Human-readable explanation for diagnostics
        path: Path that was requested
    """

    kind: str
    reason: str
    path: Optional[Path] = None


PhotoResult = Union[LoadedPhoto, PhotoSkipped]


def load_photo(base_path: Path) -> PhotoResult:
    """
    Load the best available variant of a photo.

    Args:
        base_path: Path of the display-resolution photo

    Returns:
        LoadedPhoto on success, PhotoSkipped if no variant exists or
        the chosen file cannot be decoded

    Example:
        >>> result = load_photo(Path("photos/families/family_1.jpg"))
        >>> isinstance(result, (LoadedPhoto, PhotoSkipped))
        True
    """
    path = resolve_variant(base_path)
    if path is None:
        return PhotoSkipped(
            kind=SKIP_MISSING,
            reason=f"Photo not found: {base_path}",
            path=base_path,
        )

    try:
        with Image.open(path) as img:
            img.load()
            image = img.copy()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        return PhotoSkipped(
            kind=SKIP_UNDECODABLE,
            reason=f"Cannot decode {path.name}: {e}",
            path=path,
        )

    if image.width <= 0 or image.height <= 0:
        return PhotoSkipped(
            kind=SKIP_UNDECODABLE,
            reason=f"Empty image: {path.name}",
            path=path,
        )

    return LoadedPhoto(image=image, source_path=path)
