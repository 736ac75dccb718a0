"""
Module: builder.images.variants

Purpose:
    Map a stored photo path to the files that may hold it, best first.

    Photos are saved twice: a display copy (``family_<id>.jpg``) and a
    print-quality copy with a ``_full`` suffix (``family_<id>_full.jpg``).
    The directory prefers the print copy when it exists.

Key Functions:
    - variant_candidates(): Pure path -> candidate paths
    - resolve_variant(): First existing candidate
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

FULL_RESOLUTION_SUFFIX = "_full"
FULL_RESOLUTION_EXT = ".jpg"


def full_resolution_path(base_path: Path) -> Path:
    """
    Path of the print-quality sibling, keeping the base extension.

    Example:
        >>> full_resolution_path(Path("families/family_1.jpg"))
        PosixPath('families/family_1_full.jpg')
    """
    return base_path.with_name(f"{base_path.stem}{FULL_RESOLUTION_SUFFIX}{base_path.suffix}")


def variant_candidates(base_path: Path) -> Tuple[Path, ...]:
    """
    Candidate files for a photo in preference order.

    Order: ``_full`` with the same extension, ``_full.jpg`` (print copies
    are always written as JPEG), then the display file itself.

    Args:
        base_path: Path of the display-resolution photo

    Returns:
        Tuple of distinct candidate paths, best first
    """
    candidates = [full_resolution_path(base_path)]
    if base_path.suffix.lower() != FULL_RESOLUTION_EXT:
        candidates.append(
            base_path.with_name(f"{base_path.stem}{FULL_RESOLUTION_SUFFIX}{FULL_RESOLUTION_EXT}")
        )
    candidates.append(base_path)
    return tuple(candidates)


def resolve_variant(base_path: Path) -> Optional[Path]:
    """Return the best existing variant of a photo, or None if none exist."""
    for candidate in variant_candidates(base_path):
        if candidate.is_file():
            logger.debug(f"Photo {base_path.name} -> {candidate.name}")
            return candidate
    return None
