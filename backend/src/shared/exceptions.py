"""Custom exceptions for the Shopify REST SDK."""

from typing import Optional, Dict, Any


class ShopifyError(Exception):
    """Base exception for all SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured logs."""
        return {
            "type": self.__class__.__name__,
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ShopifyError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        config_key: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            error_code="CONFIGURATION_ERROR",
            details={"config_key": config_key, **(details or {})}
        )
        self.config_key = config_key


class HttpError(ShopifyError):
    """Base class for transport-level failures."""


class HttpResponseError(HttpError):
    """Raised when Shopify answers with a non-2xx status."""

    def __init__(
        self,
        code: int,
        message: str,
        error_reference: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="HTTP_RESPONSE_ERROR",
            details={"code": code, "error_reference": error_reference}
        )
        self.code = code
        self.error_reference = error_reference
        self.body = body or {}


class MaxHttpRetriesExceededError(HttpError):
    """Raised when a retryable status persists past the allowed tries."""

    def __init__(
        self,
        code: int,
        tries: int,
        message: str,
        error_reference: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Exceeded maximum retry count of {tries}. Last message: {message}",
            error_code="MAX_RETRIES_EXCEEDED",
            details={"code": code, "tries": tries, "error_reference": error_reference}
        )
        self.code = code
        self.tries = tries
        self.error_reference = error_reference
        self.body = body or {}


class InvalidHttpRequestError(HttpError):
    """Raised when a request is malformed before it is sent."""

    def __init__(self, message: str, method: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="INVALID_HTTP_REQUEST",
            details={"method": method}
        )
        self.method = method


class NetworkError(HttpError):
    """Raised when the connection itself fails."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Network error: {message}",
            error_code="NETWORK_ERROR"
        )


class InvalidPathError(HttpError):
    """Raised when a REST path cannot be used."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Invalid REST API path: {path}",
            error_code="INVALID_PATH",
            details={"path": path}
        )
        self.path = path
