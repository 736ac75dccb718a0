"""
Schemas Package

Validation of directory JSON payloads.
"""

from .validator import (
    validate_group,
    validate_member,
    ValidationError,
)

__all__ = [
    "validate_group",
    "validate_member",
    "ValidationError",
]
