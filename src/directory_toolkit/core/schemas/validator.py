"""
Record Validation Utilities

Validates directory JSON payloads before they are turned into records.

Only structural checks are made here (required keys, value types). Ordering
and deduplication are the caller's job and are not checked.
"""

from __future__ import annotations

from typing import Any


GROUP_REQUIRED_FIELDS = ("name",)
MEMBER_REQUIRED_FIELDS = ("first_name", "last_name")

_OPTIONAL_TEXT_FIELDS = (
    "mailing_name", "address", "city", "state", "zip",
    "phone", "email", "photo_path",
)


class ValidationError(Exception):
    """Raised when directory data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_group(data: Any, path: str = "groups[0]") -> None:
    """
    Validate one group payload.

    Args:
        data: Group dictionary from JSON
        path: Location used in error messages

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("group must be an object", path=path)

    _check_required(data, GROUP_REQUIRED_FIELDS, "Group", path)

    for key in _OPTIONAL_TEXT_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"{key} must be a string or null: {value!r}",
                path=f"{path}.{key}",
            )

    members = data.get("members", [])
    if not isinstance(members, list):
        raise ValidationError("members must be a list", path=f"{path}.members")
    for i, member in enumerate(members):
        validate_member(member, f"{path}.members[{i}]")


def validate_member(data: Any, path: str) -> None:
    """Validate one member payload."""
    if not isinstance(data, dict):
        raise ValidationError("member must be an object", path=path)

    _check_required(data, MEMBER_REQUIRED_FIELDS, "Member", path)

    sort_order = data.get("sort_order", 0)
    if not isinstance(sort_order, int):
        raise ValidationError(
            f"Invalid sort_order: {sort_order!r} (must be an integer)",
            path=f"{path}.sort_order",
        )


def _check_required(data: dict[str, Any], fields: tuple[str, ...], kind: str, path: str) -> None:
    """Required fields must be present and hold non-blank strings."""
    missing = [f for f in fields if data.get(f) is None]
    if missing:
        raise ValidationError(
            f"{kind} missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    for key in fields:
        value = data[key]
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                f"{key} must be a non-blank string: {value!r}",
                path=f"{path}.{key}",
            )
