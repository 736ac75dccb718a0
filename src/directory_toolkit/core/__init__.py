"""
Photo Directory Core Package

Shared record models and JSON loading used by the builder and the
command-line scripts.
"""

from .models import GroupRecord, MemberRecord

__all__ = [
    "GroupRecord",
    "MemberRecord",
]
