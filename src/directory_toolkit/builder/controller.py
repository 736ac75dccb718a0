"""
Module: builder.controller

Purpose:
    Assemble the complete directory PDF.
    Fonts → Output file → Cover → Table of contents → Body → Save

Key Functions:
    - generate_directory(): Main entry point for building a directory

Key Classes:
    - DirectoryResult: Pages written plus per-entry diagnostics

Dependencies:
    - reportlab: Canvas
    - builder.layout: Geometry, estimation and flow
    - builder.output: Drawing

Used By:
    - scripts/build_directory.py: Command-line builds
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from directory_toolkit.core.models import GroupRecord

from .config import RenderOptions
from .errors import FatalIOError, STAGE_CREATE, STAGE_FINALIZE
from .layout import (
    EntryPlacement,
    FlowController,
    PageGeometry,
    TocLine,
    estimate_entry_height,
    resolve,
)
from .layout.geometry import LINE_HEIGHT_MM
from .output import draw_cover, draw_entry, draw_toc_heading, draw_toc_line, ensure_fonts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path of the written PDF
        page_count: Number of pages in the PDF
        placements: Body entries in drawing order
        toc_lines: Table of contents lines in drawing order
        warnings: Non-fatal problems (skipped photos and logo)

    Example:
        >>> result = generate_directory(records, RenderOptions(), Path("out.pdf"))
        >>> print(f"{result.entry_count} entries on {result.page_count} pages")
    """

    output_path: Path
    page_count: int
    placements: tuple[EntryPlacement, ...] = ()
    toc_lines: tuple[TocLine, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def entry_count(self) -> int:
        """Number of body entries drawn."""
        return len(self.placements)

    @property
    def skipped_photos(self) -> tuple[EntryPlacement, ...]:
        """Entries whose photo was requested but not drawn."""
        return tuple(p for p in self.placements if p.photo_skip_reason)


class _Document:
    """Canvas plus the index of the page currently being drawn."""

    def __init__(self, c: canvas.Canvas) -> None:
        self.canvas = c
        self.page_index = 0

    def new_page(self) -> None:
        self.canvas.showPage()
        self.page_index += 1


def generate_directory(
    records: Sequence[GroupRecord],
    options: RenderOptions,
    output_path: Path,
    *,
    photos_dir: Optional[Path] = None,
) -> DirectoryResult:
    """
    Render a directory PDF from start to finish.

    Pipeline:
    1. Check built-in fonts
    2. Create the output file
    3. Cover page (optional)
    4. Table of contents (optional, skipped when there are no records)
    5. Body entries in input order, never split across columns or pages
    6. Save

    Args:
        records: Groups in display order (never reordered)
        options: Render options
        output_path: Where to write the PDF
        photos_dir: Root photo folder; group photos live in "families/"

    Returns:
        DirectoryResult with page count and placement diagnostics

    Raises:
        ResourceLoadError: If a built-in font is unavailable
        FatalIOError: If the output cannot be created or saved

    Example:
        >>> result = generate_directory(
        ...     records,
        ...     RenderOptions(layout="list", include_toc=True),
        ...     Path("output/directory.pdf"),
        ...     photos_dir=Path("data/photos"),
        ... )
        >>> print(f"Generated {result.page_count} pages")
    """
    start_time = time.perf_counter()
    output_path = Path(output_path)
    geometry = resolve(options.page_size)

    logger.info(
        f"Starting directory for {options.organization_name!r}: "
        f"{len(records)} groups, {options.layout} layout, "
        f"{geometry.width}x{geometry.height}mm"
    )

    # 1. Fonts
    ensure_fonts()

    # 2. Output file
    fh = _open_output(output_path)
    try:
        c = canvas.Canvas(fh, pagesize=(geometry.width * mm, geometry.height * mm))
        c.setTitle(options.organization_name)
        c.setCreator(_creator())
        doc = _Document(c)

        warnings: List[str] = []

        # 3. Cover
        if options.include_cover:
            skipped_logo = draw_cover(c, geometry, options)
            if skipped_logo is not None:
                warnings.append(skipped_logo.reason)
            doc.new_page()

        # 4. Table of contents
        toc_lines: tuple[TocLine, ...] = ()
        if options.include_toc and records:
            toc_lines = _render_toc(doc, geometry, records)
            doc.new_page()

        # 5. Body
        placements, last_page = _render_body(doc, geometry, records, options, photos_dir, warnings)

        # 6. Save
        try:
            c.save()
        except OSError as e:
            raise FatalIOError(f"Failed to write PDF {output_path}: {e}", stage=STAGE_FINALIZE) from e
    finally:
        fh.close()

    page_count = last_page + 1
    elapsed = time.perf_counter() - start_time
    logger.info(f"Rendered {len(placements)} entries on {page_count} pages to {output_path} in {elapsed:.2f}s")

    return DirectoryResult(
        output_path=output_path,
        page_count=page_count,
        placements=placements,
        toc_lines=toc_lines,
        warnings=tuple(warnings),
    )


def _render_toc(
    doc: _Document,
    geometry: PageGeometry,
    records: Sequence[GroupRecord],
) -> tuple[TocLine, ...]:
    """Draw the table of contents, one line per group, single column."""
    flow = FlowController(geometry, "list", entry_gap=0.0, start_page=doc.page_index)
    lines: List[TocLine] = []

    heading = flow.place(LINE_HEIGHT_MM)
    flow.advance(draw_toc_heading(doc.canvas, heading.x, heading.y))

    for record in records:
        placement = flow.place(LINE_HEIGHT_MM)
        if placement.starts_new_page:
            doc.new_page()
        flow.advance(draw_toc_line(doc.canvas, record.name, placement.x, placement.y))
        lines.append(TocLine(text=record.name, page_index=placement.page_index, y=placement.y))

    return tuple(lines)


def _render_body(
    doc: _Document,
    geometry: PageGeometry,
    records: Sequence[GroupRecord],
    options: RenderOptions,
    photos_dir: Optional[Path],
    warnings: List[str],
) -> tuple[tuple[EntryPlacement, ...], int]:
    """
    Draw every group entry in order through a fresh flow controller.

    Returns:
        (placements, index of the last page drawn)
    """
    flow = FlowController(geometry, options.layout, start_page=doc.page_index)
    placements: List[EntryPlacement] = []

    for record in records:
        estimated = estimate_entry_height(record, options)
        placement = flow.place(estimated)
        if placement.starts_new_page:
            doc.new_page()

        rendered = draw_entry(
            doc.canvas,
            record,
            options,
            placement.x,
            placement.y,
            photos_dir=photos_dir,
        )
        flow.advance(rendered.consumed_height)

        skipped = rendered.skipped
        if skipped is not None:
            warnings.append(f"{record.name}: {skipped.reason}")
        if rendered.consumed_height > estimated:
            # Estimator and renderer have drifted apart
            warnings.append(
                f"{record.name}: drawn height {rendered.consumed_height:.1f}mm "
                f"exceeds estimate {estimated:.1f}mm"
            )

        placements.append(EntryPlacement(
            name=record.name,
            placement=placement,
            estimated_height=estimated,
            consumed_height=rendered.consumed_height,
            photo_drawn=rendered.photo_drawn,
            photo_skip_reason=skipped.reason if skipped else None,
        ))

    return tuple(placements), flow.finish()


def _open_output(output_path: Path) -> BinaryIO:
    """Create parent folders and open the PDF for writing."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return open(output_path, "wb")
    except OSError as e:
        raise FatalIOError(f"Cannot create output {output_path}: {e}", stage=STAGE_CREATE) from e


def _creator() -> str:
    """PDF creator string with the package version."""
    from directory_toolkit import __version__
    return f"Photo Directory Builder v{__version__}"
