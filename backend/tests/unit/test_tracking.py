"""Unit tests for dirty-change tracking."""

import copy

import pytest
from pydantic import BaseModel

from domains.resources import Article, Product
from domains.rest.errors import ResourceSerializationError
from domains.rest.tracking import TrackedResource, diff_json, json_equal, serialize


class Settings(BaseModel):
    """Small model standing in for a resource without ``to_payload``."""

    name: str
    enabled: bool = True


class TestJsonEqual:
    """Test JSON structural equality."""

    def test_bool_distinct_from_number(self):
        """Test true/1 and false/0 are not equal."""
        assert not json_equal(True, 1)
        assert not json_equal(0, False)
        assert json_equal(True, True)

    def test_nested_structures(self):
        """Test objects and arrays compare structurally."""
        assert json_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})
        assert not json_equal({"a": [1, 2]}, {"a": [2, 1]})
        assert not json_equal({"a": 1}, {"a": 1, "b": 2})
        assert not json_equal([1], {"0": 1})

    def test_int_and_float(self):
        """Test numbers compare by value."""
        assert json_equal(1, 1.0)


class TestDiffJson:
    """Test the diff algorithm."""

    def test_only_changed_fields(self):
        """Test unchanged keys are omitted."""
        original = {"title": "Old", "vendor": "Acme", "tags": "a"}
        current = {"title": "New", "vendor": "Acme", "tags": "a"}
        assert diff_json(original, current) == {"title": "New"}

    def test_added_field(self):
        """Test keys missing from the original are included."""
        assert diff_json({"title": "T"}, {"title": "T", "body_html": "<p>"}) == {"body_html": "<p>"}

    def test_removed_field_not_reported(self):
        """Test keys only present in the original are ignored."""
        assert diff_json({"title": "T", "vendor": "Acme"}, {"title": "T"}) == {}

    def test_nested_object_recurses(self):
        """Test only the changed nested key is sent."""
        original = {"image": {"src": "a.png", "alt": "A"}, "title": "T"}
        current = {"image": {"src": "b.png", "alt": "A"}, "title": "T"}
        assert diff_json(original, current) == {"image": {"src": "b.png"}}

    def test_nested_added_key(self):
        """Test a key added inside a nested object is reported."""
        original = {"image": {"src": "a.png"}}
        current = {"image": {"src": "a.png", "alt": "A"}}
        assert diff_json(original, current) == {"image": {"alt": "A"}}

    def test_nested_removal_only_omitted(self):
        """Test a nested object that only lost keys produces no entry."""
        original = {"image": {"src": "a.png", "alt": "A"}}
        current = {"image": {"src": "a.png"}}
        assert diff_json(original, current) == {}

    def test_arrays_returned_whole(self):
        """Test a changed array is sent in full."""
        original = {"options": [{"name": "Size"}, {"name": "Color"}]}
        current = {"options": [{"name": "Size"}, {"name": "Colour"}]}
        assert diff_json(original, current) == current

    def test_type_change_returns_current(self):
        """Test a value changing shape is sent whole."""
        assert diff_json({"image": {"src": "a"}}, {"image": None}) == {"image": None}
        assert diff_json({"published": 1}, {"published": True}) == {"published": True}

    def test_non_objects(self):
        """Test scalars give None when equal and the current value otherwise."""
        assert diff_json(1, 1) is None
        assert diff_json("a", "b") == "b"
        assert diff_json([1], [1, 2]) == [1, 2]

    def test_nested_option_name_change(self):
        """Test a renamed option sends only its name, not its unchanged values."""
        original = {"opt": {"name": "Color", "values": ["R", "B"]}}
        current = {"opt": {"name": "Size", "values": ["R", "B"]}}
        assert diff_json(original, current) == {"opt": {"name": "Size"}}

    def test_diff_is_a_copy(self):
        """Test mutating the diff leaves the input untouched."""
        current = {"tags": ["a"]}
        diff = diff_json({}, current)
        diff["tags"].append("b")
        assert current == {"tags": ["a"]}


class TestTrackedResource:
    """Test tracked resources."""

    def test_new_is_always_dirty(self):
        """Test a new resource is dirty and reports every field."""
        tracked = TrackedResource.new(Product(title="Shirt", vendor="Acme"))
        assert tracked.is_new()
        assert tracked.is_dirty()
        assert tracked.changed_fields() == {"title": "Shirt", "vendor": "Acme"}

    def test_existing_starts_clean(self):
        """Test a loaded resource has no changes."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        assert not tracked.is_new()
        assert not tracked.is_dirty()
        assert tracked.changed_fields() == {}

    def test_field_change_detected(self):
        """Test writing through the tracker marks it dirty with a minimal diff."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt", vendor="Acme"))
        tracked.title = "T-Shirt"

        assert tracked.resource.title == "T-Shirt"
        assert tracked.is_dirty()
        assert tracked.changed_fields() == {"title": "T-Shirt"}

    def test_reverting_change_is_clean(self):
        """Test restoring the original value clears the dirty state."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        tracked.title = "Other"
        tracked.title = "Shirt"
        assert not tracked.is_dirty()

    def test_mark_clean(self):
        """Test mark_clean snapshots the current state."""
        tracked = TrackedResource.new(Article(blog_id=1, title="Post"))
        tracked.mark_clean()
        assert not tracked.is_new()
        assert not tracked.is_dirty()

        tracked.resource.author = "Ann"
        assert tracked.changed_fields() == {"author": "Ann"}

    def test_existing_dirty_then_clean_cycle(self):
        """Test a loaded resource goes clean, dirty and clean again after mark_clean."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        assert not tracked.is_dirty()

        tracked.title = "Tee"
        assert tracked.is_dirty()
        assert tracked.changed_fields() == {"title": "Tee"}

        tracked.mark_clean()
        assert not tracked.is_dirty()
        assert tracked.changed_fields() == {}

    def test_deepcopy_keeps_tracker(self):
        """Test a deep copy is an independent tracker with its own snapshot."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        copied = copy.deepcopy(tracked)

        assert isinstance(copied, TrackedResource)
        assert copied.resource is not tracked.resource
        assert copied.original_state == tracked.original_state
        assert not copied.is_dirty()

        copied.title = "Tee"
        assert copied.is_dirty()
        assert not tracked.is_dirty()

    def test_shallow_copy_keeps_tracker(self):
        """Test a shallow copy shares the resource but stays a tracker."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        copied = copy.copy(tracked)

        assert isinstance(copied, TrackedResource)
        assert copied.resource is tracked.resource

    def test_special_attributes_not_forwarded(self):
        """Test dunder lookups stop at the tracker instead of reaching the resource."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        with pytest.raises(AttributeError):
            tracked.__pydantic_fields_set__

    def test_read_only_fields_ignored(self):
        """Test id and timestamps never show up as changes."""
        tracked = TrackedResource.from_existing(Product(id=1, title="Shirt"))
        tracked.id = 2
        assert not tracked.is_dirty()

    def test_attribute_reads_forwarded(self):
        """Test resource attributes are readable on the tracker."""
        tracked = TrackedResource.from_existing(Product(id=5, title="Shirt"))
        assert tracked.id == 5
        assert tracked.into_inner() is tracked.resource

    def test_plain_models_and_values(self):
        """Test non-resource values can be tracked too."""
        tracked = TrackedResource.from_existing(Settings(name="a"))
        tracked.enabled = False
        assert tracked.changed_fields() == {"enabled": False}

        values = TrackedResource.from_existing({"a": 1})
        values.resource["a"] = 2
        assert values.changed_fields() == {"a": 2}

    def test_unserializable_value(self):
        """Test values that cannot become JSON raise a serialization error."""
        with pytest.raises(ResourceSerializationError, match="Cannot serialize"):
            serialize(object())

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_rejected(self, number):
        """Test NaN and Infinity raise instead of leaving a tracker dirty forever."""
        with pytest.raises(ResourceSerializationError):
            serialize(number)
        with pytest.raises(ResourceSerializationError):
            TrackedResource.from_existing({"price": number})

    def test_repr(self):
        """Test the repr shows the dirty state."""
        tracked = TrackedResource.new(Product(title="Shirt"))
        assert "dirty=True" in repr(tracked)
