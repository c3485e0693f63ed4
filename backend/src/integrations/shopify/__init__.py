"""Shopify HTTP transport."""

from .client import HttpClient, RestClient, RestTransport, Session, normalize_path
from .http import ApiCallLimit, DataType, HttpMethod, HttpRequest, HttpResponse, PaginationInfo

__all__ = [
    "HttpClient",
    "RestClient",
    "RestTransport",
    "Session",
    "normalize_path",
    "ApiCallLimit",
    "DataType",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "PaginationInfo",
]
