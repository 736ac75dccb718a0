"""
Module: builder

Purpose:
    Render directory records to a paginated PDF with an optional cover
    page, an optional table of contents and a list or grid body with
    photos.

Key Functions:
    - generate_directory(): Main entry point for directory generation

Key Classes:
    - RenderOptions: Layout, page size and content toggles
    - DirectoryResult: Output path, page count and diagnostics
    - DirectoryBuildError: Base class for fatal errors

Dependencies:
    - reportlab: PDF generation
    - PIL: Photo decoding
    - directory_toolkit.core.models: GroupRecord, MemberRecord

Used By:
    - scripts/build_directory.py: Command-line interface
"""

from .config import RenderOptions, LayoutMode
from .errors import DirectoryBuildError, FatalIOError, ResourceLoadError
from .controller import generate_directory, DirectoryResult

__all__ = [
    # Config
    "RenderOptions",
    "LayoutMode",
    # Errors
    "DirectoryBuildError",
    "FatalIOError",
    "ResourceLoadError",
    # Controller
    "generate_directory",
    "DirectoryResult",
]
