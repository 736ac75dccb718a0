"""
Utils Package

Serialization of directory records.
"""

from .serialization import (
    serialize_group,
    deserialize_group,
    serialize_member,
    deserialize_member,
    load_directory,
    save_directory,
)

__all__ = [
    "serialize_group",
    "deserialize_group",
    "serialize_member",
    "deserialize_member",
    "load_directory",
    "save_directory",
]
