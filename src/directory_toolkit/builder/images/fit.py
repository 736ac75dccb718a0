"""
Module: builder.images.fit

Purpose:
    Scale an image into a fixed bounding box without distorting it.

Key Functions:
    - fit_to_box(): Render size for an image inside a box

Used By:
    - builder.output.renderer: Group photos and cover logo
"""

from __future__ import annotations

from typing import Tuple


def fit_to_box(
    img_width: int,
    img_height: int,
    box_width: float,
    box_height: float,
) -> Tuple[float, float]:
    """
    Compute render size that keeps the image's aspect ratio.

    Images wider than the box (relative to its own aspect) are limited by
    box width; all others by box height. One dimension always equals the
    box and the other never exceeds it.

    Args:
        img_width: Image width in pixels
        img_height: Image height in pixels
        box_width: Box width in mm
        box_height: Box height in mm

    Returns:
        (render_width, render_height) in mm

    Raises:
        ValueError: If any dimension is not positive

    Example:
        >>> fit_to_box(1000, 500, 40, 50)
        (40, 20.0)
    """
    if img_width <= 0 or img_height <= 0:
        raise ValueError(f"Image size must be positive: {img_width}x{img_height}")
    if box_width <= 0 or box_height <= 0:
        raise ValueError(f"Box size must be positive: {box_width}x{box_height}")

    aspect = img_width / img_height
    box_aspect = box_width / box_height

    if aspect > box_aspect:
        return box_width, box_width / aspect
    return box_height * aspect, box_height
