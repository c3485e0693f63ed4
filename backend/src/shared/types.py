"""Shared type definitions across the SDK."""

from typing import Any, Dict, List, Mapping, Union


JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, Dict[str, Any], List[Any]]
JSONObject = Dict[str, Any]

# Path parameter names to the values substituted into URL templates.
PathIds = Mapping[str, Any]
