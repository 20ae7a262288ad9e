"""
Unit tests for identifier transformation and name scopes.
"""

import pytest

from pb_modelgen.codegen.core.naming import (
    NameScope,
    NamingCase,
    convert_case,
    to_member_name,
    to_type_name,
)


class TestMemberName:
    """camelCase conversion."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("title", "title"),
            ("first_name", "firstName"),
            ("created_by_user", "createdByUser"),
            ("userID", "userID"),
            ("a_bC", "aBC"),
            ("First_name", "firstName"),
            ("Title", "title"),
            ("UserID", "userID"),
        ],
    )
    def test_conversion(self, raw, expected):
        assert to_member_name(raw) == expected

    def test_date_time_exception_does_not_apply(self):
        assert to_member_name("date_time") == "dateTime"
        assert to_member_name("datetime") == "datetime"

    def test_is_pure(self):
        assert to_member_name("first_name") == to_member_name("first_name")


class TestTypeName:
    """PascalCase conversion and the DateTime exception."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("posts", "Posts"),
            ("first_name", "FirstName"),
            ("user_profiles", "UserProfiles"),
            ("status", "Status"),
        ],
    )
    def test_conversion(self, raw, expected):
        assert to_type_name(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["date_time", "datetime", "dateTime", "DATE_TIME", "DateTime"]
    )
    def test_reserved_tokens(self, raw):
        assert to_type_name(raw) == "DateTimez"

    def test_reserved_token_only_matches_whole_name(self):
        assert to_type_name("start_date_time") == "StartDateTime"

    def test_convert_case(self):
        assert convert_case("first_name", NamingCase.CAMEL_CASE) == "firstName"
        assert convert_case("first_name", NamingCase.PASCAL_CASE) == "FirstName"


class TestNameScope:
    """Collision tracking."""

    def test_claim_free_name(self):
        scope = NameScope("class X")
        assert scope.claim("title", "field 'title'") is None
        assert "title" in scope

    def test_claim_taken_name_returns_owner(self):
        scope = NameScope("class X")
        scope.claim("firstName", "field 'first_name'")
        assert scope.claim("firstName", "field 'firstName'") == "field 'first_name'"

    def test_reserved_names(self):
        scope = NameScope("enum X", {"values": "built-in"})
        assert scope.claim("values", "value 'values'") == "built-in"
