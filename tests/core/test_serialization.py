"""
Unit tests for directory JSON loading and saving.
"""

import json
from pathlib import Path

import pytest

from directory_toolkit.builder.config import RenderOptions
from directory_toolkit.core.schemas import ValidationError
from directory_toolkit.core.utils import (
    deserialize_group,
    load_directory,
    save_directory,
    serialize_group,
)


def _group(name: str, **extra) -> dict:
    data = {"name": name, "members": []}
    data.update(extra)
    return data


class TestDeserializeGroup:

    def test_when_full_payload_then_all_fields(self):
        data = _group(
            "Lee",
            family_id="F-12",
            address="1 Main St",
            city="Salem",
            phone="555-0100",
            photo_path="family_1.jpg",
            members=[
                {"first_name": "Ann", "last_name": "Lee", "role": "Elder", "sort_order": 1},
                {"first_name": "Bo", "last_name": "Lee"},
            ],
        )

        group = deserialize_group(data)

        assert group.name == "Lee"
        assert group.group_id == "F-12"
        assert group.address == "1 Main St"
        assert group.photo_path == "family_1.jpg"
        assert [m.first_name for m in group.members] == ["Ann", "Bo"]
        assert group.members[0].role == "Elder"
        assert group.members[0].sort_order == 1

    def test_when_blank_strings_then_treated_as_missing(self):
        group = deserialize_group(_group("Lee", phone="  ", email=""))

        assert group.phone is None
        assert group.email is None

    def test_when_name_missing_then_validation_error(self):
        with pytest.raises(ValidationError, match="Missing|missing") as exc_info:
            deserialize_group({"members": []}, path="groups[3]")

        assert exc_info.value.path == "groups[3]"

    def test_when_member_missing_last_name_then_validation_error(self):
        data = _group("Lee", members=[{"first_name": "Ann"}])

        with pytest.raises(ValidationError) as exc_info:
            deserialize_group(data)

        assert exc_info.value.path.endswith("members[0]")

    def test_when_phone_not_string_then_validation_error(self):
        with pytest.raises(ValidationError):
            deserialize_group(_group("Lee", phone=5550100))


class TestLoadDirectory:

    def test_when_bare_list_then_groups_and_no_options(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps([_group("B"), _group("A")]))

        groups, options = load_directory(path)

        assert [g.name for g in groups] == ["B", "A"]  # file order kept
        assert options is None

    def test_when_document_then_options_parsed(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps({
            "options": {"layout": "list", "page_size": "a4", "include_toc": True, "church_name": "Grace"},
            "groups": [_group("A")],
        }))

        groups, options = load_directory(path)

        assert len(groups) == 1
        assert options.layout == "list"
        assert options.page_size == "a4"
        assert options.include_toc is True
        assert options.organization_name == "Grace"

    def test_when_bad_layout_then_validation_error(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps({"options": {"layout": "columns"}, "groups": []}))

        with pytest.raises(ValidationError, match="layout"):
            load_directory(path)

    def test_when_invalid_json_then_validation_error(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text("{not json")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_directory(path)

    def test_when_missing_file_then_file_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_directory(tmp_path / "nope.json")

    def test_when_toggle_stored_as_false_string_then_off(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps({"options": {"include_cover": "false", "include_toc": "true"}, "groups": []}))

        _, options = load_directory(path)

        assert options.include_cover is False
        assert options.include_toc is True

    def test_when_toggle_not_boolean_then_validation_error(self, tmp_path: Path):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps({"options": {"include_photos": "maybe"}, "groups": []}))

        with pytest.raises(ValidationError, match="include_photos"):
            load_directory(path)

    @pytest.mark.parametrize("name", ["   ", "", 123, ["Lee"]])
    def test_when_group_name_blank_or_not_text_then_validation_error(self, tmp_path: Path, name):
        path = tmp_path / "dir.json"
        path.write_text(json.dumps([{"name": name}]))

        with pytest.raises(ValidationError) as exc_info:
            load_directory(path)

        assert exc_info.value.path == "groups[0].name"

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_when_member_name_blank_then_validation_error(self, tmp_path: Path, field):
        member = {"first_name": "Ann", "last_name": "Lee"}
        member[field] = "  "
        path = tmp_path / "dir.json"
        path.write_text(json.dumps([{"name": "Lee", "members": [member]}]))

        with pytest.raises(ValidationError) as exc_info:
            load_directory(path)

        assert exc_info.value.path == f"groups[0].members[0].{field}"


class TestSaveDirectory:

    def test_save_when_reloaded_then_same_groups_and_options(self, tmp_path: Path, full_group):
        path = tmp_path / "dir.json"
        options = RenderOptions(layout="list", include_cover=True)

        save_directory([full_group], path, options)
        groups, loaded_options = load_directory(path)

        assert groups == [full_group]
        assert loaded_options == options

    def test_serialize_when_optional_fields_empty_then_omitted(self, group_factory):
        data = serialize_group(group_factory("Lee", members=1))

        assert set(data) == {"name", "members"}
        assert data["members"][0]["first_name"] == "Person0"
