"""Unit tests for placeholder type resolution."""

import pytest

from app.strategies.template_engine.models import PlaceholderType
from app.strategies.template_engine.resolver import (
    default_type,
    resolve_type,
    resolve_types,
    set_type_override,
)


class TestDefaultType:
    """Test suite for the naming convention."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("timeline_table", PlaceholderType.TABLE),
            ("attendees_csv", PlaceholderType.TABLE),
            ("Budget_TABLE", PlaceholderType.TABLE),
            ("objective_list", PlaceholderType.LIST),
            ("agenda_items", PlaceholderType.LIST),
            ("Action_Items", PlaceholderType.LIST),
            ("notes", PlaceholderType.TEXT),
            ("table_notes", PlaceholderType.TEXT),
            ("listing", PlaceholderType.TEXT),
            ("", PlaceholderType.TEXT),
        ],
    )
    def test_suffix_convention(self, name, expected):
        """Test the suffix-based default for a range of names."""
        assert default_type(name) == expected


class TestResolveType:
    """Test suite for resolve_type."""

    def test_convention_without_overrides(self):
        """Test that the convention applies when no override exists."""
        assert resolve_type("x_table", {}) == PlaceholderType.TABLE
        assert resolve_type("notes", {}) == PlaceholderType.TEXT
        assert resolve_type("notes") == PlaceholderType.TEXT

    def test_override_wins(self):
        """Test that an override supersedes the convention."""
        assert resolve_type("x_table", {"x_table": "text"}) == PlaceholderType.TEXT
        assert resolve_type("notes", {"notes": PlaceholderType.LIST}) == PlaceholderType.LIST

    def test_override_for_other_name_is_ignored(self):
        """Test that overrides are keyed by exact name."""
        assert resolve_type("x_table", {"y_table": "text"}) == PlaceholderType.TABLE

    def test_unknown_override_falls_back(self):
        """Test that an unknown type tag never fails resolution."""
        assert resolve_type("x_list", {"x_list": "bogus"}) == PlaceholderType.LIST

    def test_resolve_types(self):
        """Test resolving several names at once."""
        result = resolve_types(["a", "b_items"], {"a": "table"})
        assert result == {"a": PlaceholderType.TABLE, "b_items": PlaceholderType.LIST}


class TestSetTypeOverride:
    """Test suite for sparse override storage."""

    def test_override_matching_convention_is_not_stored(self):
        """Test that setting the default type stores nothing."""
        assert set_type_override({}, "x_table", PlaceholderType.TABLE) == {}

    def test_override_is_stored_then_pruned(self):
        """Test that returning to the default removes the entry."""
        overrides = set_type_override({}, "notes", "list")
        assert overrides == {"notes": PlaceholderType.LIST}

        overrides = set_type_override(overrides, "notes", "text")
        assert overrides == {}

    def test_input_is_not_mutated(self):
        """Test that a new mapping is returned."""
        original = {"notes": PlaceholderType.LIST}
        updated = set_type_override(original, "other", PlaceholderType.TABLE)

        assert original == {"notes": PlaceholderType.LIST}
        assert updated == {"notes": PlaceholderType.LIST, "other": PlaceholderType.TABLE}
