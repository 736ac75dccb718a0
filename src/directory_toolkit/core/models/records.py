"""
Module: records

Purpose:
    Provides the GroupRecord and MemberRecord dataclasses - the input handed
    to the directory builder. A GroupRecord is one directory entry (a family,
    household or team) with its ordered members.

Key Classes:
    - MemberRecord: One member line within a group
    - GroupRecord: One directory entry with contact details and members

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization
    - builder.layout.estimator
    - builder.output.renderer
    - builder.controller

Ordering:
    Records arrive already sorted (groups by name, members by sort_order,
    then last name, then first name). Nothing in this package reorders them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MemberRecord:
    """
    A single member of a group (immutable).

    Attributes:
        first_name: Given name
        last_name: Surname
        role: Optional role shown in parentheses, e.g. "Elder"
        photo_path: Optional photo filename (not rendered in the directory)
        sort_order: Caller's explicit order key (informational only)

    Example:
        >>> MemberRecord("Ann", "Lee", role="Deacon").display_name
        'Ann Lee (Deacon)'
    """

    first_name: str
    last_name: str
    role: Optional[str] = None
    photo_path: Optional[str] = None
    sort_order: int = 0

    @property
    def display_name(self) -> str:
        """Text of the member's line in the directory."""
        name = f"{self.first_name} {self.last_name}"
        if self.role:
            return f"{name} ({self.role})"
        return name


@dataclass(frozen=True)
class GroupRecord:
    """
    One directory entry (immutable).

    Attributes:
        name: Display name, also used for the table of contents
        mailing_name: Optional addressee line ("Mr. & Mrs. Lee")
        address: Street address line
        city: City
        state: State / region
        zip: Postal code
        phone: Contact phone
        email: Contact email
        photo_path: Photo filename relative to the families photo folder
        group_id: Caller's identifier (informational only)
        members: Members in display order

    Invariants:
        - name is non-empty
        - members keep the order given by the caller
    """

    name: str
    mailing_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    photo_path: Optional[str] = None
    group_id: Optional[str] = None
    members: tuple[MemberRecord, ...] = ()

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if not self.name or not self.name.strip():
            raise ValueError("GroupRecord name must be non-empty")
        if not isinstance(self.members, tuple):
            # Accept lists from callers but store immutably
            object.__setattr__(self, "members", tuple(self.members))

    @property
    def city_state_zip(self) -> str:
        """
        Composite locality line.

        State attaches to the city with a comma; zip follows after a space.

        Example:
            >>> GroupRecord("Lee", city="Salem", state="OR", zip="97301").city_state_zip
            'Salem, OR 97301'
        """
        parts: list[str] = []
        if self.city:
            parts.append(self.city)
        if self.state:
            if parts:
                parts[-1] = f"{parts[-1]}, {self.state}"
            else:
                parts.append(self.state)
        if self.zip:
            parts.append(self.zip)
        return " ".join(parts)

    @property
    def member_count(self) -> int:
        """Number of members listed under this group."""
        return len(self.members)
