"""
Module: builder.images

Purpose:
    Photo handling for the directory: picking the print-quality variant,
    decoding it, and fitting it into the photo box.

Key Functions:
    - fit_to_box(): Aspect-preserving render size
    - variant_candidates(): Candidate files for a stored photo
    - load_photo(): Decode with an explicit skip result

Dependencies:
    - PIL: Image decoding
"""

from .fit import fit_to_box
from .variants import variant_candidates, resolve_variant, full_resolution_path
from .provider import load_photo, LoadedPhoto, PhotoSkipped, PhotoResult

__all__ = [
    "fit_to_box",
    "variant_candidates",
    "resolve_variant",
    "full_resolution_path",
    "load_photo",
    "LoadedPhoto",
    "PhotoSkipped",
    "PhotoResult",
]
