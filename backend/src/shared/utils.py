"""Utility functions for the Shopify REST SDK."""

import json
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a CamelCase resource name to its snake_case envelope key."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def safe_json_loads(text: str, default: Any = None) -> Any:
    """Safely parse JSON with default value."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return default


def first_header(headers: Mapping[str, List[str]], name: str) -> Optional[str]:
    """Return the first value of a lower-cased multi-value header."""
    values = headers.get(name.lower())
    return values[0] if values else None


def serialize_to_query(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, str]]:
    """Flatten request parameters into Shopify query-string values.

    ``None`` values are dropped, booleans become ``true``/``false``, lists are
    comma-joined (keeping only strings and numbers) and nested objects are
    sent as JSON text. Returns ``None`` when nothing is left.
    """
    if not params:
        return None

    query: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, (int, float, str)):
            query[key] = str(value)
        elif isinstance(value, (list, tuple)):
            parts = _scalar_strings(value)
            if parts:
                query[key] = ",".join(parts)
        elif isinstance(value, dict):
            query[key] = json.dumps(value, separators=(",", ":"))
        else:
            query[key] = str(value)

    return query or None


def _scalar_strings(values: Iterable[Any]) -> List[str]:
    return [
        str(v) for v in values
        if isinstance(v, (str, int, float)) and not isinstance(v, bool)
    ]
