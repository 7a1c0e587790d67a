"""Unit tests for the merge engine."""

from app.strategies.template_engine.merge import (
    build_context,
    fill_document,
    merge_values,
    normalize_generated,
)
from app.strategies.template_engine.models import ListValue, PlaceholderType


class TestMergeValues:
    """Test suite for merge_values."""

    def test_blank_generated_value_never_wins(self):
        """Test fallback to the raw value when generation is blank."""
        types = {"p": PlaceholderType.TEXT}
        raw = {"p": "hello"}

        assert merge_values(["p"], types, raw, {"p": ""}) == {"p": "hello"}
        assert merge_values(["p"], types, raw, {"p": "   \n"}) == {"p": "hello"}

    def test_generated_value_wins(self):
        """Test that a non-blank generated value is used."""
        result = merge_values(["p"], {"p": PlaceholderType.TEXT}, {"p": "hello"}, {"p": "World"})
        assert result == {"p": "World"}

    def test_generated_value_is_verbatim(self):
        """Test that generated values are not trimmed or re-rendered."""
        result = merge_values(
            ["team_table"], {"team_table": PlaceholderType.TABLE}, {}, {"team_table": " raw\n"}
        )
        assert result == {"team_table": " raw\n"}

    def test_raw_values_are_rendered_by_type(self):
        """Test rendering of list and table raw values."""
        names = ["goal_list", "team_table", "summary"]
        types = {
            "goal_list": PlaceholderType.LIST,
            "team_table": PlaceholderType.TABLE,
            "summary": PlaceholderType.TEXT,
        }
        raw = {
            "goal_list": ListValue(items=["Ship", ""]),
            "team_table": "Name,Role\nAda,Eng",
            "summary": "All good.",
        }

        result = merge_values(names, types, raw)

        assert result == {
            "goal_list": "- Ship",
            "team_table": "| Name | Role |\n| --- | --- |\n| Ada | Eng |",
            "summary": "All good.",
        }

    def test_missing_raw_value_renders_empty(self):
        """Test that every requested name is resolved."""
        assert merge_values(["a", "b_list"], {}, {}) == {"a": "", "b_list": ""}

    def test_missing_type_uses_convention(self):
        """Test names absent from the type map."""
        assert merge_values(["x_list"], {}, {"x_list": "a\nb"}) == {"x_list": "- a\n- b"}

    def test_only_requested_names(self):
        """Test that stale values for other names are ignored."""
        result = merge_values(["a"], {}, {"a": "1", "gone": "2"}, {"gone": "3"})
        assert result == {"a": "1"}


class TestBuildContext:
    """Test suite for build_context."""

    def test_context_ignores_generated_values(self):
        """Test that context only reflects raw input."""
        names = ["notes", "steps_list", "team_csv"]
        raw = {"notes": "n", "steps_list": "- a\n- b", "team_csv": "x,y\n1,2"}

        result = build_context(names, {"notes": PlaceholderType.TEXT}, raw)

        assert result == {"notes": "n", "steps_list": "a\nb", "team_csv": "x | y\n1 | 2"}


class TestNormalizeGenerated:
    """Test suite for normalize_generated."""

    def test_missing_names_become_empty(self):
        """Test that absent names are filled with empty strings."""
        result = normalize_generated(["a", "b"], {"a": "x"})
        assert result == {"a": "x", "b": ""}

    def test_non_string_values_are_coerced(self):
        """Test None and number values from a JSON reply."""
        result = normalize_generated(["a"], {"a": None, "n": 3})
        assert result == {"a": "", "n": "3"}

    def test_no_response(self):
        """Test a missing response mapping."""
        assert normalize_generated(["a"], None) == {"a": ""}


class TestFillDocument:
    """Test suite for fill_document."""

    def test_every_occurrence_is_replaced(self):
        """Test substitution regardless of inner whitespace."""
        text = "Hi {{ name }} and {{name}}; {{other}}"
        assert fill_document(text, {"name": "Ada"}) == "Hi Ada and Ada; {{other}}"

    def test_backslashes_are_preserved(self):
        """Test that escaped pipes survive substitution."""
        assert fill_document("{{t}}", {"t": "| a\\|b |"}) == "| a\\|b |"

    def test_empty_name(self):
        """Test that the empty placeholder name can be filled."""
        assert fill_document("x{{}}y", {"": "-"}) == "x-y"
