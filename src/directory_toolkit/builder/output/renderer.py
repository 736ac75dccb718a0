"""
Module: builder.output.renderer

Purpose:
    Draw directory content onto a ReportLab canvas: cover page, table of
    contents lines and group entries with optional photos. Positions are
    given in mm from the bottom-left corner; page breaks are decided by
    the caller (builder.controller).

Key Functions:
    - ensure_fonts(): Check the built-in faces are available
    - draw_cover(): Organization name, subtitle and optional logo
    - draw_toc_heading() / draw_toc_line(): Table of contents
    - draw_entry(): One group entry; returns the height it consumed

Dependencies:
    - reportlab: PDF drawing
    - PIL: Image handling
    - builder.images: Variant lookup, decoding, fitting
    - builder.layout: Geometry constants and text height

Used By:
    - builder.controller: Section assembly
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from directory_toolkit.core.models import GroupRecord

from ..config import RenderOptions
from ..errors import ResourceLoadError
from ..images import LoadedPhoto, PhotoResult, PhotoSkipped, fit_to_box, load_photo
from ..layout.estimator import MEMBER_GAP_LINES, NAME_ADVANCE_LINES, text_block_height
from ..layout.geometry import (
    COVER_SUBTITLE_DROP_MM,
    HEADING_SIZE,
    LINE_HEIGHT_MM,
    LOGO_BOX_MM,
    MEMBER_INDENT_MM,
    PHOTO_HEIGHT_MM,
    PHOTO_TEXT_GAP_MM,
    PHOTO_WIDTH_MM,
    TEXT_SIZE,
    TITLE_SIZE,
    PageGeometry,
)

logger = logging.getLogger(__name__)

# Built-in faces (no font files needed)
FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

COVER_SUBTITLE = "Photo Directory"
TOC_HEADING = "Table of Contents"
TOC_HEADING_ADVANCE_MM = LINE_HEIGHT_MM * 3

# Photos are re-encoded once for embedding
JPEG_QUALITY = 90


@dataclass(frozen=True)
class EntryRender:
    """
    Outcome of drawing one entry.

    Attributes:
        consumed_height: Vertical space used in mm
        photo: Photo result, or None when no photo was requested
        photo_height: Drawn photo height in mm (0 if none)
    """

    consumed_height: float
    photo: Optional[PhotoResult] = None
    photo_height: float = 0.0

    @property
    def photo_drawn(self) -> bool:
        return isinstance(self.photo, LoadedPhoto)

    @property
    def skipped(self) -> Optional[PhotoSkipped]:
        return self.photo if isinstance(self.photo, PhotoSkipped) else None


def ensure_fonts() -> None:
    """
    Check that the regular and bold built-in faces resolve.

    Raises:
        ResourceLoadError: If ReportLab cannot provide either face
    """
    for name in (FONT_REGULAR, FONT_BOLD):
        try:
            pdfmetrics.getFont(name)
        except (KeyError, ValueError) as e:
            raise ResourceLoadError(f"Built-in font unavailable: {name}") from e


def draw_cover(
    c: canvas.Canvas,
    geometry: PageGeometry,
    options: RenderOptions,
) -> Optional[PhotoSkipped]:
    """
    Draw the cover page content on the current page.

    The organization name sits at the top margin in the title face, the
    subtitle 15mm below it, and the logo (if configured) below that.

    Args:
        c: ReportLab canvas
        geometry: Page geometry
        options: Render options (name and logo)

    Returns:
        PhotoSkipped if a configured logo could not be drawn, else None
    """
    x = geometry.margin
    y = geometry.top

    c.setFont(FONT_BOLD, TITLE_SIZE)
    c.drawString(x * mm, y * mm, options.organization_name)
    y -= COVER_SUBTITLE_DROP_MM

    c.setFont(FONT_REGULAR, HEADING_SIZE)
    c.drawString(x * mm, y * mm, COVER_SUBTITLE)

    if options.organization_logo is None:
        return None

    logo = load_photo(options.organization_logo)
    if isinstance(logo, PhotoSkipped):
        logger.warning(f"Skipping cover logo: {logo.reason}")
        return logo

    logo_top = y - LINE_HEIGHT_MM * 2
    _draw_photo(c, logo, x, logo_top, LOGO_BOX_MM, LOGO_BOX_MM)
    return None


def draw_toc_heading(c: canvas.Canvas, x: float, y: float) -> float:
    """Draw the table of contents heading; returns the height it consumes."""
    c.setFont(FONT_BOLD, HEADING_SIZE)
    c.drawString(x * mm, y * mm, TOC_HEADING)
    return TOC_HEADING_ADVANCE_MM


def draw_toc_line(c: canvas.Canvas, text: str, x: float, y: float) -> float:
    """Draw one table of contents line; returns the height it consumes."""
    c.setFont(FONT_REGULAR, TEXT_SIZE)
    c.drawString(x * mm, y * mm, text)
    return LINE_HEIGHT_MM


def draw_entry(
    c: canvas.Canvas,
    record: GroupRecord,
    options: RenderOptions,
    x: float,
    y: float,
    *,
    photos_dir: Optional[Path] = None,
) -> EntryRender:
    """
    Draw one group entry with its top baseline at (x, y).

    With photos enabled the text column starts right of the photo box
    whether or not this group has a photo, so entries line up.

    Args:
        c: ReportLab canvas
        record: Group to draw
        options: Render options
        x: Left edge in mm
        y: Top baseline in mm
        photos_dir: Root photo folder (group photos live in "families/")

    Returns:
        EntryRender with consumed height and photo outcome
    """
    text_x = x + PHOTO_WIDTH_MM + PHOTO_TEXT_GAP_MM if options.include_photos else x

    photo: Optional[PhotoResult] = None
    photo_height = 0.0
    if options.include_photos and record.photo_path:
        photo = load_photo(_group_photo_path(record.photo_path, photos_dir))
        if isinstance(photo, LoadedPhoto):
            _, photo_height = _draw_photo(c, photo, x, y, PHOTO_WIDTH_MM, PHOTO_HEIGHT_MM)
        else:
            logger.warning(f"Skipping photo for {record.name}: {photo.reason}")

    line_y = y
    c.setFont(FONT_BOLD, HEADING_SIZE)
    c.drawString(text_x * mm, line_y * mm, record.name)
    line_y -= LINE_HEIGHT_MM * NAME_ADVANCE_LINES

    c.setFont(FONT_REGULAR, TEXT_SIZE)
    for line in _detail_lines(record, options):
        c.drawString(text_x * mm, line_y * mm, line)
        line_y -= LINE_HEIGHT_MM

    line_y -= LINE_HEIGHT_MM * MEMBER_GAP_LINES

    for member in record.members:
        c.drawString((text_x + MEMBER_INDENT_MM) * mm, line_y * mm, member.display_name)
        line_y -= LINE_HEIGHT_MM

    consumed = max(text_block_height(record, options), photo_height)
    return EntryRender(consumed_height=consumed, photo=photo, photo_height=photo_height)


def _detail_lines(record: GroupRecord, options: RenderOptions) -> list[str]:
    """Address and contact lines in drawing order."""
    lines: list[str] = []
    if options.include_address:
        if record.mailing_name:
            lines.append(record.mailing_name)
        if record.address:
            lines.append(record.address)
            locality = record.city_state_zip
            if locality:
                lines.append(locality)
    if options.include_contact_info:
        if record.phone:
            lines.append(record.phone)
        if record.email:
            lines.append(record.email)
    return lines


def _group_photo_path(photo_path: str, photos_dir: Optional[Path]) -> Path:
    """Absolute location of a group photo."""
    if photos_dir is None:
        return Path(photo_path)
    return Path(photos_dir) / "families" / photo_path


def _draw_photo(
    c: canvas.Canvas,
    photo: LoadedPhoto,
    x: float,
    top: float,
    box_width: float,
    box_height: float,
) -> tuple[float, float]:
    """
    Draw a photo fitted into a box whose top-left corner is (x, top).

    Returns:
        (width, height) drawn in mm
    """
    img_width, img_height = photo.size
    width, height = fit_to_box(img_width, img_height, box_width, box_height)
    c.drawImage(
        _pil_to_reader(photo.image),
        x * mm,
        (top - height) * mm,
        width=width * mm,
        height=height * mm,
    )
    return width, height


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Re-encodes as JPEG so large photos do not bloat the PDF.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.convert("RGB").save(buf, format="JPEG", quality=JPEG_QUALITY)
    buf.seek(0)
    return ImageReader(buf)
