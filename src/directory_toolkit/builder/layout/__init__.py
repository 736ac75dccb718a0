"""
Module: builder.layout

Purpose:
    Page geometry, entry height estimation and column/page flow for the
    directory body and table of contents.

Key Functions:
    - resolve(): Page-size selector to PageGeometry
    - estimate_entry_height(): Space an entry will need

Key Classes:
    - PageGeometry: Page dimensions in mm
    - FlowController: Column/page break state machine
    - Placement: Position assigned to one block

Used By:
    - builder.controller: Section assembly
    - builder.output.renderer: Drawing
"""

from .geometry import PageGeometry, resolve, PAGE_SIZES, LINE_HEIGHT_MM, MARGIN_MM
from .estimator import estimate_entry_height, text_block_height
from .flow import FlowController
from .models import (
    BreakKind,
    EntryPlacement,
    FlowState,
    Placement,
    RenderCursor,
    TocLine,
)

__all__ = [
    # Geometry
    "PageGeometry",
    "resolve",
    "PAGE_SIZES",
    "LINE_HEIGHT_MM",
    "MARGIN_MM",
    # Estimation
    "estimate_entry_height",
    "text_block_height",
    # Flow
    "FlowController",
    "FlowState",
    "BreakKind",
    "RenderCursor",
    "Placement",
    "EntryPlacement",
    "TocLine",
]
