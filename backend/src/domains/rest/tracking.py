"""Snapshot-based change tracking for partial updates.

``TrackedResource`` keeps a resource alongside the JSON it had when it was
last persisted. Field writes are not intercepted; every check re-serializes
the resource and compares it to the snapshot, and ``changed_fields`` yields
just the fields worth sending in an update body.

Removed keys are never reported: a field present in the snapshot but
missing from the current value does not appear in the diff.
"""

import copy
import json
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from shared.types import JSONValue
from .errors import ResourceSerializationError


T = TypeVar("T")


def serialize(value: Any) -> JSONValue:
    """Turn a resource or plain value into a JSON tree."""
    try:
        if hasattr(value, "to_payload"):
            tree = value.to_payload()
        elif isinstance(value, BaseModel):
            tree = value.model_dump(mode="json")
        else:
            tree = value
        # NaN and Infinity have no JSON form and never equal themselves.
        return json.loads(json.dumps(tree, allow_nan=False))
    except (TypeError, ValueError) as e:
        raise ResourceSerializationError(type(value).__name__, str(e)) from e


def json_equal(a: JSONValue, b: JSONValue) -> bool:
    """Structural JSON equality that keeps ``true`` distinct from ``1``."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return a == b


def diff_json(original: JSONValue, current: JSONValue) -> JSONValue:
    """Fields of ``current`` that differ from ``original``.

    Objects are compared key by key and nested objects recursively; any other
    changed value (arrays included) is returned whole. Non-object inputs give
    ``None`` when equal and ``current`` otherwise.
    """
    if not (isinstance(original, dict) and isinstance(current, dict)):
        return None if json_equal(original, current) else copy.deepcopy(current)

    diff = {}
    for key, value in current.items():
        if key not in original:
            diff[key] = copy.deepcopy(value)
            continue

        previous = original[key]
        if json_equal(previous, value):
            continue

        if isinstance(previous, dict) and isinstance(value, dict):
            nested = diff_json(previous, value)
            if nested:
                diff[key] = nested
        else:
            diff[key] = copy.deepcopy(value)

    return diff


class TrackedResource(Generic[T]):
    """A resource paired with its last persisted JSON state."""

    def __init__(self, resource: T, original_state: Optional[JSONValue] = None):
        self.resource = resource
        self.original_state = original_state

    @classmethod
    def new(cls, resource: T) -> "TrackedResource[T]":
        """Track a resource that has never been saved."""
        return cls(resource)

    @classmethod
    def from_existing(cls, resource: T) -> "TrackedResource[T]":
        """Track a resource loaded from the API; it starts clean."""
        return cls(resource, serialize(resource))

    def is_new(self) -> bool:
        return self.original_state is None

    def is_dirty(self) -> bool:
        if self.original_state is None:
            return True
        return not json_equal(serialize(self.resource), self.original_state)

    def changed_fields(self) -> JSONValue:
        current = serialize(self.resource)
        if self.original_state is None:
            return current
        return diff_json(self.original_state, current)

    def mark_clean(self) -> None:
        """Take a fresh snapshot, typically right after a successful save."""
        self.original_state = serialize(self.resource)

    def into_inner(self) -> T:
        return self.resource

    def __copy__(self) -> "TrackedResource[T]":
        return type(self)(self.resource, self.original_state)

    def __deepcopy__(self, memo: dict) -> "TrackedResource[T]":
        return type(self)(
            copy.deepcopy(self.resource, memo),
            copy.deepcopy(self.original_state, memo)
        )

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the tracker itself.
        if name in ("resource", "original_state"):
            raise AttributeError(name)
        # Protocol hooks (copy, pickle) must not resolve to the wrapped value's.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return getattr(self.resource, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("resource", "original_state"):
            object.__setattr__(self, name, value)
        else:
            setattr(self.resource, name, value)

    def __repr__(self) -> str:
        return f"TrackedResource({self.resource!r}, dirty={self.is_dirty()})"
