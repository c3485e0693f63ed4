"""Unit tests for shared utilities."""

import pytest

from shared.utils import first_header, safe_json_loads, serialize_to_query, to_snake_case


class TestToSnakeCase:
    """Test envelope key derivation."""

    @pytest.mark.parametrize("name,expected", [
        ("Product", "product"),
        ("CustomCollection", "custom_collection"),
        ("InventoryItem", "inventory_item"),
    ])
    def test_conversion(self, name, expected):
        """Test CamelCase names become snake_case."""
        assert to_snake_case(name) == expected


class TestSerializeToQuery:
    """Test query parameter flattening."""

    def test_scalar_types(self):
        """Test None is dropped and other scalars become strings."""
        query = serialize_to_query({
            "limit": 50,
            "published": False,
            "title": "Shirt",
            "since_id": None,
        })
        assert query == {"limit": "50", "published": "false", "title": "Shirt"}

    def test_lists_comma_joined(self):
        """Test arrays join their scalar members."""
        assert serialize_to_query({"ids": [1, 2, 3]}) == {"ids": "1,2,3"}
        assert serialize_to_query({"ids": [None, {"a": 1}]}) is None

    def test_objects_as_json(self):
        """Test nested objects are sent as compact JSON."""
        assert serialize_to_query({"filter": {"a": 1}}) == {"filter": '{"a":1}'}

    def test_empty(self):
        """Test empty input gives no query."""
        assert serialize_to_query(None) is None
        assert serialize_to_query({}) is None
        assert serialize_to_query({"x": None}) is None


class TestHelpers:
    """Test small helpers."""

    def test_first_header(self):
        """Test the first value of a multi-value header is returned."""
        headers = {"link": ["a", "b"]}
        assert first_header(headers, "Link") == "a"
        assert first_header(headers, "missing") is None

    def test_safe_json_loads(self):
        """Test invalid JSON falls back to the default."""
        assert safe_json_loads('{"a": 1}') == {"a": 1}
        assert safe_json_loads("nope", default={}) == {}
