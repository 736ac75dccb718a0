"""
Module: builder.layout.models

Purpose:
    Data models for directory layout.
    Cursor state owned by the flow controller plus the immutable
    placement records the builder reports back to callers.

Key Classes:
    - FlowState: AT_TOP / MID_SECTION
    - BreakKind: What the controller did before a placement
    - RenderCursor: Mutable per-section page/column/y
    - Placement: Where the controller put one block
    - EntryPlacement: A drawn body entry with its measured heights
    - TocLine: A drawn table-of-contents line

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.flow: Creates Placements
    - builder.controller: Builds EntryPlacements and TocLines
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FlowState(Enum):
    """Whether anything has been drawn in the current column yet."""
    AT_TOP = "at_top"
    MID_SECTION = "mid_section"


class BreakKind(Enum):
    """Break taken before placing a block."""
    NONE = "none"
    COLUMN = "column"
    PAGE = "page"


@dataclass
class RenderCursor:
    """
    Mutable position within one section.

    Created by a FlowController and never shared between sections.

    Attributes:
        page_index: Absolute page number (0-indexed) in the document
        y: Current baseline in mm from the page bottom
        column: Grid column (0 or 1); always 0 in list mode
    """

    page_index: int
    y: float
    column: int = 0


@dataclass(frozen=True)
class Placement:
    """
    Position assigned to one block.

    Attributes:
        page_index: Page the block lands on
        column: Column the block lands in
        x: Left edge in mm
        y: Top baseline in mm
        break_kind: Break taken to reach this position
    """

    page_index: int
    column: int
    x: float
    y: float
    break_kind: BreakKind = BreakKind.NONE

    @property
    def starts_new_page(self) -> bool:
        """True when a page must be emitted before drawing."""
        return self.break_kind is BreakKind.PAGE


@dataclass(frozen=True)
class EntryPlacement:
    """
    A body entry as drawn.

    Attributes:
        name: Group display name
        placement: Where the entry was drawn
        estimated_height: Height used for the break decision (mm)
        consumed_height: Height the drawing actually used (mm)
        photo_skip_reason: Why the photo was skipped, if it was
        photo_drawn: Whether a photo was drawn
    """

    name: str
    placement: Placement
    estimated_height: float
    consumed_height: float
    photo_drawn: bool = False
    photo_skip_reason: Optional[str] = None

    @property
    def page_index(self) -> int:
        return self.placement.page_index

    @property
    def column(self) -> int:
        return self.placement.column


@dataclass(frozen=True)
class TocLine:
    """One table-of-contents line as drawn."""

    text: str
    page_index: int
    y: float
