"""
Module: builder.output

Purpose:
    PDF drawing for the directory using ReportLab.

Key Functions:
    - draw_cover(): Cover page
    - draw_toc_heading() / draw_toc_line(): Table of contents
    - draw_entry(): One group entry

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - builder.controller: Section assembly
"""

from .renderer import (
    EntryRender,
    draw_cover,
    draw_entry,
    draw_toc_heading,
    draw_toc_line,
    ensure_fonts,
)

__all__ = [
    "EntryRender",
    "draw_cover",
    "draw_entry",
    "draw_toc_heading",
    "draw_toc_line",
    "ensure_fonts",
]
