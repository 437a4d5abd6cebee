"""Tests for remixroute.naming — route name to component identifier."""

import pytest

from remixroute.naming import component_name


class TestComponentName:
    def test_dotted_name(self) -> None:
        assert component_name("items.new") == "ItemsNew"

    def test_single_segment(self) -> None:
        assert component_name("edit") == "Edit"

    def test_digits_stripped(self) -> None:
        assert component_name("a1.b2") == "AB"

    def test_no_letters_yields_empty(self) -> None:
        assert component_name("123") == ""

    def test_remainder_case_preserved(self) -> None:
        """Only the first letter of a segment changes case."""
        assert component_name("userProfile.editMode") == "UserProfileEditMode"
        assert component_name("HTML.doc") == "HTMLDoc"

    @pytest.mark.parametrize(
        ("route_name", "expected"),
        [
            ("$id.edit", "IdEdit"),
            ("_index", "Index"),
            ("($lang).about", "LangAbout"),
            ("blog.$slug_", "BlogSlug"),
            ("sign-up", "Signup"),
        ],
    )
    def test_remix_special_characters(self, route_name: str, expected: str) -> None:
        assert component_name(route_name) == expected

    def test_empty_segments_contribute_nothing(self) -> None:
        assert component_name("items.42.new") == "ItemsNew"
        assert component_name("a..b") == "AB"

    def test_non_ascii_letters_stripped(self) -> None:
        assert component_name("café.menu") == "CafMenu"

    def test_empty_name(self) -> None:
        assert component_name("") == ""
