"""
Core Models Package

Immutable data models for directory records.

All models in this package are frozen dataclasses, so a record list handed
to the builder cannot change while a document is being generated.
"""

from .records import GroupRecord, MemberRecord

__all__ = [
    "GroupRecord",
    "MemberRecord",
]
