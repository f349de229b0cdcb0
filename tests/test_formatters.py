"""
Tests for the formatters module.
"""
import pytest

from notion_seed.formatters import (
    VALUE_FORMATTERS,
    MISSING_VALUE,
    UnhandledPropertyTypeError,
    extract_value_to_string,
    format_formula,
    format_rollup,
    user_to_string,
)
from notion_seed.schemas import READ_PROPERTY_TYPES, FORMULA_RESULT_TYPES, ROLLUP_RESULT_TYPES


def prop(prop_type, payload, prop_id="abc"):
    return {"id": prop_id, "type": prop_type, prop_type: payload}


USER = {"object": "user", "id": "u1", "name": "Ada"}
ANONYMOUS = {"object": "user", "id": "u2"}
DATE = {"start": "2021-05-13T10:20:00.000+00:00", "end": None}

# One sample per known read type, including every formula and rollup sub-type
SAMPLE_VALUES = [
    prop("checkbox", False),
    prop("created_by", USER),
    prop("created_time", "2021-05-13T10:20:00.000Z"),
    prop("date", DATE),
    prop("email", "ada@example.com"),
    prop("url", "https://example.com"),
    prop("number", 42),
    prop("phone_number", "555-0100"),
    prop("select", {"id": "o1", "name": "Open", "color": "green"}),
    prop("multi_select", [{"id": "a", "name": "A"}]),
    prop("people", [USER, ANONYMOUS]),
    prop("last_edited_by", ANONYMOUS),
    prop("last_edited_time", "2021-05-14T00:00:00.000Z"),
    prop("title", [{"type": "text", "plain_text": "Hello"}]),
    prop("rich_text", [{"type": "text", "plain_text": "World"}]),
    prop("files", [{"name": "a.pdf"}, {"name": "b.png"}]),
    prop("formula", {"type": "string", "string": "computed"}),
    prop("formula", {"type": "number", "number": 3.5}),
    prop("formula", {"type": "boolean", "boolean": True}),
    prop("formula", {"type": "date", "date": DATE}),
    prop("rollup", {"type": "number", "number": 7, "function": "sum"}),
    prop("rollup", {"type": "date", "date": DATE, "function": "latest_date"}),
    prop("rollup", {"type": "array", "array": [{"type": "number", "number": 1}], "function": "show_original"}),
]


class TestExhaustiveness:
    """The handled types must match the closed sets of read types."""

    def test_formatter_registry_matches_read_types(self):
        """Test that every read type has a formatter and no formatter is orphaned."""
        assert set(VALUE_FORMATTERS) == READ_PROPERTY_TYPES

    def test_samples_cover_every_type(self):
        """Test that the samples below exercise every type and sub-type."""
        assert {v["type"] for v in SAMPLE_VALUES} == READ_PROPERTY_TYPES
        formula_types = {v["formula"]["type"] for v in SAMPLE_VALUES if v["type"] == "formula"}
        rollup_types = {v["rollup"]["type"] for v in SAMPLE_VALUES if v["type"] == "rollup"}
        assert formula_types == FORMULA_RESULT_TYPES
        assert rollup_types == ROLLUP_RESULT_TYPES

    @pytest.mark.parametrize("value", SAMPLE_VALUES, ids=lambda v: v["type"])
    def test_every_type_formats_to_non_empty_string(self, value):
        """Test that every known type renders without raising."""
        result = extract_value_to_string(value)
        assert isinstance(result, str)
        assert result

    def test_unknown_type_raises(self):
        """Test that an unknown type fails loudly."""
        with pytest.raises(UnhandledPropertyTypeError, match="status"):
            extract_value_to_string(prop("status", {"name": "Done"}))

    def test_unknown_formula_type_raises(self):
        """Test that an unknown formula result type fails loudly."""
        with pytest.raises(UnhandledPropertyTypeError, match="formula"):
            format_formula({"type": "array", "array": []})

    def test_unknown_rollup_type_raises(self):
        """Test that an unknown rollup result type fails loudly."""
        with pytest.raises(UnhandledPropertyTypeError, match="rollup"):
            format_rollup({"type": "unsupported", "unsupported": {}})

    def test_unhandled_error_is_assertion_error(self):
        """Test that the error is not confused with ordinary runtime failures."""
        assert issubclass(UnhandledPropertyTypeError, AssertionError)


class TestExtractValueToString:
    """Tests for the rendering of each property type."""

    def test_checkbox(self):
        assert extract_value_to_string(prop("checkbox", True)) == "true"
        assert extract_value_to_string(prop("checkbox", False)) == "false"

    def test_users(self):
        """Test user rendering, including the missing name placeholder."""
        assert user_to_string(USER) == "u1: Ada"
        assert extract_value_to_string(prop("created_by", ANONYMOUS)) == "u2: Unknown Name"
        assert extract_value_to_string(prop("people", [USER, ANONYMOUS])) == "u1: Ada, u2: Unknown Name"
        assert extract_value_to_string(prop("people", [])) == ""

    def test_timestamps(self):
        """Test that timestamps are rendered as UTC ISO-8601."""
        assert extract_value_to_string(prop("created_time", "2021-05-13T10:20:00.000Z")) == "2021-05-13T10:20:00.000Z"
        assert extract_value_to_string(prop("last_edited_time", "2021-05-13T12:20:00+02:00")) == "2021-05-13T10:20:00.000Z"
        assert extract_value_to_string(prop("date", {"start": "2021-05-13", "end": None})) == "2021-05-13T00:00:00.000Z"

    def test_scalars(self):
        assert extract_value_to_string(prop("email", "ada@example.com")) == "ada@example.com"
        assert extract_value_to_string(prop("url", "https://example.com")) == "https://example.com"
        assert extract_value_to_string(prop("phone_number", "555-0100")) == "555-0100"
        assert extract_value_to_string(prop("number", 42)) == "42"
        assert extract_value_to_string(prop("number", 1.5)) == "1.5"

    def test_select(self):
        value = prop("select", {"id": "o1", "name": "Open", "color": "green"})
        assert extract_value_to_string(value) == "o1 Open"

    def test_multi_select(self):
        """Test that multi_select options are joined with a comma."""
        value = prop("multi_select", [{"id": "id1", "name": "A"}, {"id": "id2", "name": "B"}])
        assert extract_value_to_string(value) == "id1 A, id2 B"

    def test_rich_text_segments(self):
        """Test that each segment's plain text is joined with a comma."""
        value = prop("title", [{"plain_text": "Hello"}, {"plain_text": "World"}])
        assert extract_value_to_string(value) == "Hello, World"

    def test_files(self):
        value = prop("files", [{"name": "a.pdf"}, {"name": "b.png"}])
        assert extract_value_to_string(value) == "a.pdf, b.png"

    def test_formula(self):
        assert extract_value_to_string(prop("formula", {"type": "string", "string": "x"})) == "x"
        assert extract_value_to_string(prop("formula", {"type": "number", "number": 0})) == "0"
        assert extract_value_to_string(prop("formula", {"type": "boolean", "boolean": False})) == "false"
        assert extract_value_to_string(prop("formula", {"type": "date", "date": DATE})) == "2021-05-13T10:20:00.000Z"

    def test_formula_missing_values_use_placeholder(self):
        """Test that empty formula strings and numbers render as the placeholder."""
        assert extract_value_to_string(prop("formula", {"type": "string", "string": None})) == MISSING_VALUE
        assert extract_value_to_string(prop("formula", {"type": "string", "string": ""})) == MISSING_VALUE
        assert extract_value_to_string(prop("formula", {"type": "number", "number": None})) == MISSING_VALUE

    def test_rollup(self):
        assert extract_value_to_string(prop("rollup", {"type": "number", "number": 7})) == "7"
        assert extract_value_to_string(prop("rollup", {"type": "date", "date": DATE})) == "2021-05-13T10:20:00.000Z"

    def test_rollup_array_is_dumped(self):
        """Test that rollup arrays are rendered as JSON."""
        array = [{"type": "number", "number": 1}]
        value = prop("rollup", {"type": "array", "array": array})
        assert extract_value_to_string(value) == '[{"type": "number", "number": 1}]'


class TestEmptyPayloads:
    """Empty properties come back from a query with a null payload."""

    @pytest.mark.parametrize("prop_type", sorted(READ_PROPERTY_TYPES))
    def test_null_payload_renders_placeholder(self, prop_type):
        """Test that every known type renders a null payload as the placeholder."""
        assert extract_value_to_string(prop(prop_type, None)) == MISSING_VALUE

    def test_null_select(self):
        assert extract_value_to_string(prop("select", None)) == MISSING_VALUE

    def test_null_date(self):
        assert extract_value_to_string(prop("date", None)) == MISSING_VALUE

    def test_null_number_is_not_rendered_as_none(self):
        """Test that a missing number does not render as the text 'None'."""
        assert extract_value_to_string(prop("number", None)) == MISSING_VALUE

    def test_null_formula_and_rollup_dates(self):
        """Test that date results without a date render as the placeholder."""
        assert extract_value_to_string(prop("formula", {"type": "date", "date": None})) == MISSING_VALUE
        assert extract_value_to_string(prop("rollup", {"type": "date", "date": None, "function": "latest_date"})) == MISSING_VALUE

    def test_null_rollup_number(self):
        assert extract_value_to_string(prop("rollup", {"type": "number", "number": None})) == MISSING_VALUE

    def test_unknown_type_with_null_payload_still_raises(self):
        """Test that a null payload does not hide an unknown type."""
        with pytest.raises(UnhandledPropertyTypeError):
            extract_value_to_string(prop("status", None))
