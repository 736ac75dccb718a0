"""
Module: builder.config

Purpose:
    Configuration dataclass for directory rendering. Immutable snapshot of
    the user's print settings, validated on construction.

Key Classes:
    - RenderOptions: Layout, page size and content toggles
    - LayoutMode: Allowed layout names

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Section assembly
    - builder.layout.estimator: Height estimation
    - builder.output.renderer: Entry drawing
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class LayoutMode(str, Enum):
    """Body layout of the directory."""
    LIST = "list"
    GRID = "grid"


DEFAULT_ORGANIZATION_NAME = "Our Church"


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    """
    Read a toggle stored as a bool or as the string "true"/"false".

    The settings store keeps every value as text, so both forms appear.
    """
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"{key} must be true or false: {value!r}")


@dataclass(frozen=True)
class RenderOptions:
    """
    Rendering options for one directory (immutable).

    Defaults match the application's stock settings: two-column grid on
    letter paper with photos, contact info and addresses shown.

    Attributes:
        layout: "list" (single column) or "grid" (two columns)
        page_size: Page preset name; unknown names render as letter
        include_photos: Draw group photos beside each entry
        include_contact_info: Show phone and email lines
        include_address: Show mailing name and address lines
        include_cover: Emit a cover page first
        include_toc: Emit a table of contents before the body
        organization_name: Title used on the cover page
        organization_logo: Optional logo image drawn on the cover

    Example:
        >>> options = RenderOptions(layout="list", page_size="a4")
        >>> options.is_grid
        False
    """

    layout: str = LayoutMode.GRID.value
    page_size: str = "letter"

    # Content toggles
    include_photos: bool = True
    include_contact_info: bool = True
    include_address: bool = True
    include_cover: bool = False
    include_toc: bool = False

    # Branding
    organization_name: str = DEFAULT_ORGANIZATION_NAME
    organization_logo: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        layout = self.layout.value if isinstance(self.layout, LayoutMode) else str(self.layout).lower()
        if layout not in (LayoutMode.LIST.value, LayoutMode.GRID.value):
            raise ValueError(f"layout must be 'list' or 'grid': {self.layout!r}")
        object.__setattr__(self, "layout", layout)
        if self.organization_logo is not None and not isinstance(self.organization_logo, Path):
            object.__setattr__(self, "organization_logo", Path(self.organization_logo))

    @property
    def is_grid(self) -> bool:
        """True when the body uses two columns."""
        return self.layout == LayoutMode.GRID.value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderOptions":
        """
        Build options from a settings dictionary.

        Unknown keys are ignored. The application's older settings keys
        ``church_name``/``church_logo_path`` and ``default_layout`` are
        accepted as aliases.

        Args:
            data: Settings mapping (e.g. parsed from JSON)

        Returns:
            RenderOptions instance

        Raises:
            ValueError: If the layout value or a toggle is not recognised
        """
        defaults = cls()
        name = data.get("organization_name", data.get("church_name"))
        logo = data.get("organization_logo", data.get("church_logo_path"))
        return cls(
            layout=data.get("layout", data.get("default_layout", defaults.layout)),
            page_size=data.get("page_size", defaults.page_size),
            include_photos=_flag(data, "include_photos", defaults.include_photos),
            include_contact_info=_flag(data, "include_contact_info", defaults.include_contact_info),
            include_address=_flag(data, "include_address", defaults.include_address),
            include_cover=_flag(data, "include_cover", defaults.include_cover),
            include_toc=_flag(data, "include_toc", defaults.include_toc),
            organization_name=name if name else defaults.organization_name,
            organization_logo=Path(logo) if logo else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data = asdict(self)
        data["organization_logo"] = str(self.organization_logo) if self.organization_logo else None
        return data
