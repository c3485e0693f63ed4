"""Generic REST resource layer: path tables, change tracking and CRUD."""

from .errors import (
    ResourceError,
    ResourceNotFoundError,
    ResourceValidationError,
    PathResolutionFailed,
    ResourceSerializationError,
)
from .paths import ResourceOperation, ResourcePath, build_path, get_path
from .resource import RestResource, save_tracked
from .response import ResourceResponse
from .tracking import TrackedResource, diff_json, json_equal

__all__ = [
    "ResourceError",
    "ResourceNotFoundError",
    "ResourceValidationError",
    "PathResolutionFailed",
    "ResourceSerializationError",
    "ResourceOperation",
    "ResourcePath",
    "build_path",
    "get_path",
    "RestResource",
    "save_tracked",
    "ResourceResponse",
    "TrackedResource",
    "diff_json",
    "json_equal",
]
