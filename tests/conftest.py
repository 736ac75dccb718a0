import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import directory_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from directory_toolkit.core.models import GroupRecord, MemberRecord


# Common test fixtures
@pytest.fixture
def group_factory():
    """Factory for GroupRecords with N generated members."""
    def _create(
        name: str = "Lee",
        members: int = 2,
        **fields,
    ) -> GroupRecord:
        member_records = tuple(
            MemberRecord(first_name=f"Person{i}", last_name=name, sort_order=i)
            for i in range(members)
        )
        return GroupRecord(name=name, members=member_records, **fields)
    return _create


@pytest.fixture
def full_group(group_factory):
    """Group with every optional field filled in."""
    return group_factory(
        "Anderson",
        members=3,
        mailing_name="Mr. & Mrs. Anderson",
        address="12 Elm Street",
        city="Salem",
        state="OR",
        zip="97301",
        phone="555-0100",
        email="anderson@example.com",
        photo_path="family_anderson.jpg",
    )


@pytest.fixture
def photos_dir(tmp_path: Path) -> Path:
    """Empty photo root with a families/ folder."""
    root = tmp_path / "photos"
    (root / "families").mkdir(parents=True)
    return root


@pytest.fixture
def make_photo(photos_dir: Path):
    """Write a JPEG into photos/families and return its filename."""
    def _create(filename: str, size=(400, 500), color="navy") -> str:
        img = Image.new("RGB", size, color=color)
        img.save(photos_dir / "families" / filename, format="JPEG")
        return filename
    return _create
