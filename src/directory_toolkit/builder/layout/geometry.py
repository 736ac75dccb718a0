"""
Module: builder.layout.geometry

Purpose:
    Page geometry for the directory layout engine.
    Resolves page-size presets and defines margins, line height and
    the fixed sizes used by the estimator and renderer.

Key Functions:
    - resolve(): Page-size selector -> PageGeometry

Key Classes:
    - PageGeometry: Immutable page dimensions in millimeters

Coordinates:
    All positions are millimeters from the bottom-left corner of the page.
    A fresh page starts at y = height - margin; content moves y downwards
    and a break is due whenever y would drop below margin.

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.flow: Column/page breaks
    - builder.layout.estimator: Line-height units
    - builder.output.renderer: Text and image placement
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


# Page presets (width, height) in mm
LETTER_SIZE_MM = (215.9, 279.4)
A4_SIZE_MM = (210.0, 297.0)
PAGE_SIZES = {
    "letter": LETTER_SIZE_MM,
    "a4": A4_SIZE_MM,
}
DEFAULT_PAGE_SIZE = "letter"

# Spacing
MARGIN_MM = 20.0
LINE_HEIGHT_MM = 5.0

# Font sizes (pt)
TITLE_SIZE = 24
HEADING_SIZE = 14
TEXT_SIZE = 10

# Photo box beside each entry
PHOTO_WIDTH_MM = 40.0
PHOTO_HEIGHT_MM = 50.0
PHOTO_TEXT_GAP_MM = 5.0
MEMBER_INDENT_MM = 5.0

# Cover page
COVER_SUBTITLE_DROP_MM = 15.0
LOGO_BOX_MM = 60.0


@dataclass(frozen=True)
class PageGeometry:
    """
    Page dimensions for one document (immutable).

    Attributes:
        width: Page width in mm
        height: Page height in mm
        margin: Margin on every side in mm

    Example:
        >>> geometry = resolve("a4")
        >>> geometry.top
        277.0
    """

    width: float
    height: float
    margin: float = MARGIN_MM

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.column_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.top <= self.bottom:
            raise ValueError("Margins exceed page height")

    @property
    def top(self) -> float:
        """Starting y for a fresh page or column."""
        return self.height - self.margin

    @property
    def bottom(self) -> float:
        """Lowest y content may reach."""
        return self.margin

    @property
    def available_height(self) -> float:
        """Vertical space between the margins."""
        return self.top - self.bottom

    @property
    def column_width(self) -> float:
        """Width of one grid column (two columns with a margin-wide gutter)."""
        return (self.width - self.margin * 3) / 2

    def column_x(self, column: int) -> float:
        """Left edge of a grid column; column 0 is also the list-mode x."""
        return self.margin + column * (self.column_width + self.margin)


def resolve(selector: Optional[str]) -> PageGeometry:
    """
    Resolve a page-size selector to a PageGeometry.

    Total: an unknown or missing selector falls back to letter.

    Args:
        selector: Preset name such as "letter" or "a4" (case-insensitive)

    Returns:
        PageGeometry for the preset

    Example:
        >>> resolve("letter").width
        215.9
        >>> resolve("tabloid") == resolve("letter")
        True
    """
    key = (selector or "").strip().lower()
    if key not in PAGE_SIZES:
        logger.debug(f"Unknown page size {selector!r}, using {DEFAULT_PAGE_SIZE}")
        key = DEFAULT_PAGE_SIZE
    width, height = PAGE_SIZES[key]
    return PageGeometry(width=width, height=height)
