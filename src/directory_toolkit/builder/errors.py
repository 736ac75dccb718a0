"""
Module: builder.errors

Purpose:
    Fatal errors raised by directory generation. Each carries the stage
    that failed so callers can report it. Photo problems are not errors;
    see builder.images.provider.PhotoSkipped.
"""

from __future__ import annotations

STAGE_CREATE = "create"
STAGE_RESOURCE = "resource"
STAGE_FINALIZE = "finalize"


class DirectoryBuildError(Exception):
    """Error during directory generation."""

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


class FatalIOError(DirectoryBuildError):
    """Output file could not be created or written."""


class ResourceLoadError(DirectoryBuildError):
    """A built-in font could not be obtained."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage=STAGE_RESOURCE)
