"""Errors raised by REST resource operations."""

from typing import Any, Dict, List, Optional

from shared.exceptions import ShopifyError, HttpResponseError


class ResourceError(ShopifyError):
    """Base exception for resource-level failures."""

    @property
    def request_id(self) -> Optional[str]:
        return self.details.get("request_id")

    @staticmethod
    def from_http_response(
        code: int,
        body: Any,
        resource: str,
        id: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> ShopifyError:
        """Map an unsuccessful response to the most specific error."""
        if code == 404:
            return ResourceNotFoundError(resource, id or "unknown")
        if code == 422:
            return ResourceValidationError(parse_validation_errors(body), request_id)

        message = str(body)
        if request_id:
            message = (
                f"{message} (If you report this error, please include this id: {request_id}.)"
            )
        return HttpResponseError(
            code=code,
            message=message,
            error_reference=request_id,
            body=body if isinstance(body, dict) else None
        )


class ResourceNotFoundError(ResourceError):
    """Raised when the API answers 404 for a resource."""

    def __init__(self, resource: str, id: str):
        super().__init__(
            message=f"{resource} with id {id} not found",
            error_code="RESOURCE_NOT_FOUND",
            details={"resource": resource, "id": id}
        )
        self.resource = resource
        self.id = id


class ResourceValidationError(ResourceError):
    """Raised when the API rejects a payload with 422."""

    def __init__(
        self,
        errors: Dict[str, List[str]],
        request_id: Optional[str] = None
    ):
        super().__init__(
            message=f"Validation failed: {errors}",
            error_code="RESOURCE_VALIDATION_FAILED",
            details={"errors": errors, "request_id": request_id}
        )
        self.errors = errors


class PathResolutionFailed(ResourceError):
    """Raised when no declared path fits the operation and available ids."""

    def __init__(self, resource: str, operation: str):
        super().__init__(
            message=f"Cannot resolve path for {resource}::{operation} with provided IDs",
            error_code="PATH_RESOLUTION_FAILED",
            details={"resource": resource, "operation": operation}
        )
        self.resource = resource
        self.operation = operation


class ResourceSerializationError(ResourceError, TypeError):
    """Raised when a tracked value cannot be turned into JSON.

    Well-formed resource models never hit this; it signals a programming
    error rather than a condition callers should recover from.
    """

    def __init__(self, type_name: str, reason: str):
        super().__init__(
            message=f"Cannot serialize {type_name} to JSON: {reason}",
            error_code="RESOURCE_SERIALIZATION_ERROR",
            details={"type": type_name}
        )


def parse_validation_errors(body: Any) -> Dict[str, List[str]]:
    """Normalize the ``errors`` member of a 422 body to field -> messages.

    Object form keeps its field names; list and string forms are stored
    under ``base``.
    """
    if not isinstance(body, dict) or "errors" not in body:
        return {}

    errors = body["errors"]
    result: Dict[str, List[str]] = {}

    if isinstance(errors, dict):
        for field, messages in errors.items():
            if isinstance(messages, list):
                result[field] = [m for m in messages if isinstance(m, str)]
            elif isinstance(messages, str):
                result[field] = [messages]
            else:
                result[field] = [str(messages)]
    elif isinstance(errors, list):
        messages = [m for m in errors if isinstance(m, str)]
        if messages:
            result["base"] = messages
    elif isinstance(errors, str):
        result["base"] = [errors]

    return result
