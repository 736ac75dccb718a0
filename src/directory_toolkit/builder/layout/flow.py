"""
Module: builder.layout.flow

Purpose:
    Decide where each block of a section goes: current column, next
    column, or a new page. Blocks are never split.

Key Classes:
    - FlowController: Per-section state machine over a RenderCursor

Algorithm:
    1. Start AT_TOP at y = page top, column 0
    2. A block of height h fits if y - h >= bottom margin
    3. If it does not fit and the column is MID_SECTION:
       - grid layout in column 0: move to column 1, y back to top (AT_TOP)
       - otherwise: new page, column 0, y back to top (AT_TOP)
    4. After drawing, y drops by the consumed height plus the entry gap
       and the state becomes MID_SECTION
    An AT_TOP column never breaks: a block taller than an empty column
    is placed anyway, with a warning, rather than leaving a blank column
    or page behind.

Dependencies:
    - builder.layout.geometry: PageGeometry
    - builder.layout.models: RenderCursor, Placement

Used By:
    - builder.controller: TOC and body sections
"""

from __future__ import annotations

import logging

from ..config import LayoutMode
from .geometry import LINE_HEIGHT_MM, PageGeometry
from .models import BreakKind, FlowState, Placement, RenderCursor

logger = logging.getLogger(__name__)

# Vertical gap after each body entry
DEFAULT_ENTRY_GAP_MM = LINE_HEIGHT_MM * 2


class FlowController:
    """
    Column/page state machine for one section.

    Each section (cover, TOC, body) creates its own controller, so cursor
    state never leaks from one section into the next.

    Attributes:
        geometry: Page geometry for the document
        layout: "list" or "grid"
        entry_gap: Gap added below each block in mm
        cursor: Current page/column/y
        state: AT_TOP until a block is drawn in the current column

    Example:
        >>> flow = FlowController(resolve("letter"), "grid")
        >>> placement = flow.place(60.0)
        >>> flow.advance(55.0)
        >>> round(flow.cursor.y, 1)  # 259.4 - 55 - 10
        194.4
    """

    def __init__(
        self,
        geometry: PageGeometry,
        layout: str = LayoutMode.LIST.value,
        *,
        entry_gap: float = DEFAULT_ENTRY_GAP_MM,
        start_page: int = 0,
    ) -> None:
        self.geometry = geometry
        self.layout = layout
        self.entry_gap = entry_gap
        self.cursor = RenderCursor(page_index=start_page, y=geometry.top, column=0)
        self.state = FlowState.AT_TOP

    @property
    def is_grid(self) -> bool:
        return self.layout == LayoutMode.GRID.value

    def place(self, height: float) -> Placement:
        """
        Choose the position for a block of the given height.

        Moves the cursor to the next column or page when the block does
        not fit below the current y. Does not consume any space; call
        advance() once the block has been drawn.

        Args:
            height: Estimated block height in mm

        Returns:
            Placement with the (possibly new) page, column and top y
        """
        break_kind = BreakKind.NONE

        overflows = self.cursor.y - height < self.geometry.bottom
        if overflows and self.state is FlowState.MID_SECTION:
            if self.is_grid and self.cursor.column == 0:
                self._break_column()
                break_kind = BreakKind.COLUMN
            else:
                self._break_page()
                break_kind = BreakKind.PAGE

        if height > self.geometry.available_height:
            logger.warning(
                f"Block of {height:.1f}mm exceeds empty column "
                f"({self.geometry.available_height:.1f}mm available) "
                f"on page {self.cursor.page_index}; it will run past the bottom margin"
            )

        if break_kind is not BreakKind.NONE:
            logger.debug(
                f"{break_kind.value} break -> page {self.cursor.page_index}, "
                f"column {self.cursor.column}"
            )

        return Placement(
            page_index=self.cursor.page_index,
            column=self.cursor.column,
            x=self.geometry.column_x(self.cursor.column),
            y=self.cursor.y,
            break_kind=break_kind,
        )

    def advance(self, consumed: float) -> None:
        """Move the cursor below a drawn block plus the entry gap."""
        self.cursor.y -= consumed + self.entry_gap
        self.state = FlowState.MID_SECTION

    def finish(self) -> int:
        """Return the last page index used by this section."""
        return self.cursor.page_index

    def _break_column(self) -> None:
        self.cursor.column = 1
        self.cursor.y = self.geometry.top
        self.state = FlowState.AT_TOP

    def _break_page(self) -> None:
        self.cursor.page_index += 1
        self.cursor.column = 0
        self.cursor.y = self.geometry.top
        self.state = FlowState.AT_TOP
