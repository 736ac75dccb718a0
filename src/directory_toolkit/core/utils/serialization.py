"""
Serialization Utilities

Provides to/from JSON utilities for directory records.

Directory JSON is either a bare list of groups or a document:

    {
        "options": {"layout": "grid", "page_size": "letter", ...},
        "groups": [
            {"name": "Lee", "address": "1 Main St", "members": [
                {"first_name": "Ann", "last_name": "Lee", "role": "Deacon"}
            ]}
        ]
    }

Group and member order are preserved exactly as read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from directory_toolkit.builder.config import RenderOptions

from ..models.records import GroupRecord, MemberRecord
from ..schemas.validator import validate_group, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Record Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_member(member: MemberRecord) -> dict[str, Any]:
    """Serialize a MemberRecord to a dictionary."""
    data: dict[str, Any] = {
        "first_name": member.first_name,
        "last_name": member.last_name,
        "sort_order": member.sort_order,
    }
    if member.role:
        data["role"] = member.role
    if member.photo_path:
        data["photo_path"] = member.photo_path
    return data


def serialize_group(group: GroupRecord) -> dict[str, Any]:
    """
    Serialize a GroupRecord to a dictionary.

    Empty optional fields are omitted.

    Args:
        group: GroupRecord instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    data: dict[str, Any] = {"name": group.name}
    for key in (
        "group_id", "mailing_name", "address", "city", "state",
        "zip", "phone", "email", "photo_path",
    ):
        value = getattr(group, key)
        if value:
            data[key] = value
    data["members"] = [serialize_member(m) for m in group.members]
    return data


def deserialize_member(data: dict[str, Any]) -> MemberRecord:
    """Deserialize a MemberRecord from a dictionary."""
    return MemberRecord(
        first_name=data["first_name"],
        last_name=data["last_name"],
        role=_text(data.get("role")),
        photo_path=_text(data.get("photo_path")),
        sort_order=data.get("sort_order", 0),
    )


def deserialize_group(
    data: dict[str, Any],
    *,
    validate: bool = True,
    path: str = "groups[0]",
) -> GroupRecord:
    """
    Deserialize a GroupRecord from a dictionary.

    Blank strings are treated as missing, so an empty phone cell does not
    produce an empty line.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate structure first
        path: Location used in validation messages

    Returns:
        GroupRecord instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_group(data, path)

    group_id = data.get("group_id", data.get("family_id"))
    return GroupRecord(
        name=data["name"],
        mailing_name=_text(data.get("mailing_name")),
        address=_text(data.get("address")),
        city=_text(data.get("city")),
        state=_text(data.get("state")),
        zip=_text(data.get("zip")),
        phone=_text(data.get("phone")),
        email=_text(data.get("email")),
        photo_path=_text(data.get("photo_path")),
        group_id=str(group_id) if group_id is not None else None,
        members=tuple(deserialize_member(m) for m in data.get("members", [])),
    )


def _text(value: Any) -> Optional[str]:
    """Normalise an optional text field: blank -> None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_directory(path: Path) -> Tuple[List[GroupRecord], Optional[RenderOptions]]:
    """
    Load groups (and options, if present) from a directory JSON file.

    Args:
        path: Path to JSON file

    Returns:
        (groups in file order, RenderOptions or None)

    Raises:
        ValidationError: If the document or any group is invalid
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}", path="") from e

    options: Optional[RenderOptions] = None
    if isinstance(payload, list):
        raw_groups = payload
    elif isinstance(payload, dict):
        raw_groups = payload.get("groups", [])
        raw_options = payload.get("options")
        if raw_options is not None:
            if not isinstance(raw_options, dict):
                raise ValidationError("options must be an object", path="options")
            try:
                options = RenderOptions.from_dict(raw_options)
            except ValueError as e:
                raise ValidationError(str(e), path="options") from e
    else:
        raise ValidationError("Directory JSON must be a list or an object", path="")

    if not isinstance(raw_groups, list):
        raise ValidationError("groups must be a list", path="groups")

    groups = [
        deserialize_group(data, path=f"groups[{i}]")
        for i, data in enumerate(raw_groups)
    ]
    return groups, options


def save_directory(
    groups: List[GroupRecord],
    path: Path,
    options: Optional[RenderOptions] = None,
) -> None:
    """
    Save groups (and optional options) to a directory JSON file.

    Args:
        groups: Groups to save, in display order
        path: Output path
        options: Options to embed, if any
    """
    payload: dict[str, Any] = {"groups": [serialize_group(g) for g in groups]}
    if options is not None:
        payload["options"] = options.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
