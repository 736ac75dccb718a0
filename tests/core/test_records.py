"""
Unit tests for GroupRecord and MemberRecord.
"""

import pytest

from directory_toolkit.core.models import GroupRecord, MemberRecord


class TestMemberRecord:

    def test_display_name_when_no_role_then_first_last(self):
        assert MemberRecord("Ann", "Lee").display_name == "Ann Lee"

    def test_display_name_when_role_then_in_parentheses(self):
        assert MemberRecord("Ann", "Lee", role="Deacon").display_name == "Ann Lee (Deacon)"

    def test_frozen_when_assigned_then_raises(self):
        member = MemberRecord("Ann", "Lee")
        with pytest.raises(AttributeError):
            member.first_name = "Bo"


class TestGroupRecord:

    def test_init_when_blank_name_then_raises(self):
        with pytest.raises(ValueError, match="name must be non-empty"):
            GroupRecord("   ")

    def test_init_when_members_list_then_stored_as_tuple_in_order(self):
        members = [MemberRecord("Zed", "Lee"), MemberRecord("Ann", "Lee")]

        record = GroupRecord("Lee", members=members)

        assert isinstance(record.members, tuple)
        assert [m.first_name for m in record.members] == ["Zed", "Ann"]
        assert record.member_count == 2

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({"city": "Salem", "state": "OR", "zip": "97301"}, "Salem, OR 97301"),
            ({"city": "Salem", "zip": "97301"}, "Salem 97301"),
            ({"state": "OR", "zip": "97301"}, "OR 97301"),
            ({"city": "Salem"}, "Salem"),
            ({}, ""),
        ],
    )
    def test_city_state_zip_when_partial_then_joined(self, fields, expected):
        assert GroupRecord("Lee", **fields).city_state_zip == expected
