"""Unit tests for payload helpers."""

import json

import pytest

from resource_engine.providers.base.payload import filter_nil_values, stringify_id, to_json


@pytest.mark.unit
class TestFilterNilValues:
    """Test cases for filter_nil_values."""

    def test_nested_nils_are_removed(self):
        """Test None values, empty nested mappings and emptied lists are dropped."""
        values = {
            "a": 1,
            "b": None,
            "c": {"d": None},
            "e": [None, 2],
            "f": [{"g": None}],
        }

        assert filter_nil_values(values) == {"a": 1, "e": [2], "f": [{}]}

    def test_falsy_values_are_kept(self):
        """Test only None is filtered, not other falsy values."""
        values = {"zero": 0, "false": False, "empty": ""}

        assert filter_nil_values(values) == values

    def test_input_is_not_mutated(self):
        """Test the input mapping is left untouched."""
        values = {"a": None, "b": {"c": None, "d": 1}}

        filter_nil_values(values)

        assert values == {"a": None, "b": {"c": None, "d": 1}}

    def test_list_of_only_nils_is_dropped(self):
        """Test a list emptied by filtering is dropped from its parent."""
        assert filter_nil_values({"items": [None, None]}) == {}

    def test_mixed_nesting_example(self):
        """Test nils are removed at every depth while emptied list objects are kept."""
        values = {"a": 1, "b": None, "c": {"d": None, "e": 2}, "f": [None, {"g": None}]}

        assert filter_nil_values(values) == {"a": 1, "c": {"e": 2}, "f": [{}]}


@pytest.mark.unit
class TestStringifyId:
    """Test cases for stringify_id."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            ("abc", "abc"),
            (42, "42"),
            (42.0, "42"),
            (1.5, "1.5"),
            (True, "true"),
        ],
    )
    def test_stringify(self, value, expected):
        """Test id rendering of decoded JSON values."""
        assert stringify_id(value) == expected


@pytest.mark.unit
class TestToJson:
    """Test cases for to_json."""

    def test_compact_sorted_output(self):
        """Test properties are serialized compactly with sorted keys."""
        assert to_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_round_trips(self):
        """Test the output decodes back to the input."""
        values = {"name": "net", "regions": ["GRA7"], "vlanId": 3}

        assert json.loads(to_json(values)) == values
