"""Shared module for common utilities and types."""

from .types import (
    JSONScalar,
    JSONValue,
    JSONObject,
    PathIds,
)

from .exceptions import (
    ShopifyError,
    ConfigurationError,
    HttpError,
    HttpResponseError,
    MaxHttpRetriesExceededError,
    InvalidHttpRequestError,
    NetworkError,
    InvalidPathError,
)

from .logging import (
    setup_logging,
    get_logger,
    LoggerMixin,
    RequestLogger,
)

from .utils import (
    to_snake_case,
    safe_json_loads,
    first_header,
    serialize_to_query,
)

__all__ = [
    # Types
    "JSONScalar",
    "JSONValue",
    "JSONObject",
    "PathIds",
    # Exceptions
    "ShopifyError",
    "ConfigurationError",
    "HttpError",
    "HttpResponseError",
    "MaxHttpRetriesExceededError",
    "InvalidHttpRequestError",
    "NetworkError",
    "InvalidPathError",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "RequestLogger",
    # Utils
    "to_snake_case",
    "safe_json_loads",
    "first_header",
    "serialize_to_query",
]
