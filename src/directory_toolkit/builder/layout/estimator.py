"""
Module: builder.layout.estimator

Purpose:
    Predict how much vertical space a group entry will take before it is
    drawn, so the flow controller can move whole entries to the next
    column or page.

Key Functions:
    - estimate_entry_height(): Upper bound used for break decisions
    - text_block_height(): Exact height of the text lines the renderer draws

Dependencies:
    - builder.layout.geometry: Line height and photo box constants

Used By:
    - builder.controller: Body section
    - builder.output.renderer: Consumed height of a drawn entry
"""

from __future__ import annotations

from directory_toolkit.core.models import GroupRecord

from ..config import RenderOptions
from .geometry import LINE_HEIGHT_MM, PHOTO_HEIGHT_MM

# Name line advance and gap before the member list, in line-height units
NAME_ADVANCE_LINES = 1.5
MEMBER_GAP_LINES = 0.5


def estimate_entry_height(
    record: GroupRecord,
    options: RenderOptions,
    *,
    line_height: float = LINE_HEIGHT_MM,
    photo_box_height: float = PHOTO_HEIGHT_MM,
) -> float:
    """
    Estimate the height of one entry in mm.

    Counts two lines for the name and trailing gap, then one line per
    optional detail and per member. With photos on, the entry is never
    shorter than the photo box plus one line.

    Args:
        record: Group to measure
        options: Current render options
        line_height: Height of one text line in mm
        photo_box_height: Height of the photo bounding box in mm

    Returns:
        Estimated height in mm (never less than the drawn height)

    Example:
        >>> estimate_entry_height(GroupRecord("Lee"), RenderOptions(include_photos=False))
        10.0
    """
    height = line_height * 2

    if options.include_address:
        if record.mailing_name:
            height += line_height
        if record.address:
            height += line_height * 2

    if options.include_contact_info:
        if record.phone:
            height += line_height
        if record.email:
            height += line_height

    height += line_height * len(record.members)

    if options.include_photos:
        height = max(height, photo_box_height + line_height)

    return height


def text_block_height(
    record: GroupRecord,
    options: RenderOptions,
    *,
    line_height: float = LINE_HEIGHT_MM,
) -> float:
    """
    Height the renderer's text lines consume for this entry.

    Mirrors draw_entry() line for line. The composite city/state/zip line
    is only drawn when it has content, so this can be one line short of
    the estimate.
    """
    height = line_height * NAME_ADVANCE_LINES

    if options.include_address:
        if record.mailing_name:
            height += line_height
        if record.address:
            height += line_height
            if record.city_state_zip:
                height += line_height

    if options.include_contact_info:
        if record.phone:
            height += line_height
        if record.email:
            height += line_height

    height += line_height * MEMBER_GAP_LINES
    height += line_height * len(record.members)
    return height
