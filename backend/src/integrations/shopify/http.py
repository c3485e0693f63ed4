"""Request and response types for the Shopify HTTP transport."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

from shared.exceptions import InvalidHttpRequestError
from shared.utils import first_header


class HttpMethod(str, Enum):
    """HTTP verbs used by the Admin API."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"


class DataType(str, Enum):
    """Request body encodings."""

    JSON = "application/json"
    GRAPHQL = "application/graphql"


@dataclass
class HttpRequest:
    """A single request to be sent through ``HttpClient``."""

    http_method: HttpMethod
    path: str
    body: Optional[Any] = None
    body_type: Optional[DataType] = None
    query: Optional[Dict[str, str]] = None
    extra_headers: Optional[Dict[str, str]] = None
    tries: int = 1

    def verify(self) -> None:
        """Reject requests that cannot be sent as described."""
        if self.tries < 1:
            raise InvalidHttpRequestError(
                f"Tries must be at least 1, got {self.tries}.",
                method=self.http_method.value
            )
        if self.body is not None and self.body_type is None:
            raise InvalidHttpRequestError(
                "Cannot set a body without also setting body_type.",
                method=self.http_method.value
            )
        if self.http_method in (HttpMethod.POST, HttpMethod.PUT) and self.body is None:
            raise InvalidHttpRequestError(
                f"Cannot use {self.http_method.value} without specifying data.",
                method=self.http_method.value
            )


@dataclass(frozen=True)
class ApiCallLimit:
    """Leaky-bucket usage from ``X-Shopify-Shop-Api-Call-Limit``."""

    request_count: int
    bucket_size: int

    @classmethod
    def parse(cls, header_value: str) -> Optional["ApiCallLimit"]:
        parts = header_value.split("/")
        if len(parts) != 2:
            return None
        try:
            return cls(request_count=int(parts[0]), bucket_size=int(parts[1]))
        except ValueError:
            return None

    @property
    def remaining(self) -> int:
        return max(self.bucket_size - self.request_count, 0)


@dataclass(frozen=True)
class PaginationInfo:
    """Cursor tokens extracted from a ``Link`` header."""

    prev_page_info: Optional[str] = None
    next_page_info: Optional[str] = None

    @classmethod
    def parse_link_header(cls, header_value: str) -> "PaginationInfo":
        """Parse ``<url?page_info=abc>; rel="next", <...>; rel="previous"``."""
        found: Dict[str, str] = {}
        for link in header_value.split(","):
            segments = [s.strip() for s in link.strip().split(";")]
            if not segments or not segments[0]:
                continue

            url = segments[0].lstrip("<").rstrip(">")
            rel = None
            for segment in segments[1:]:
                if segment.startswith("rel="):
                    rel = segment[len("rel="):].strip('"')

            page_info = _extract_page_info(url)
            if rel in ("previous", "next") and page_info:
                found[rel] = page_info

        return cls(prev_page_info=found.get("previous"), next_page_info=found.get("next"))


def _extract_page_info(url: str) -> Optional[str]:
    values = parse_qs(urlsplit(url).query).get("page_info")
    return values[0] if values else None


@dataclass
class HttpResponse:
    """A decoded Admin API response.

    Headers are stored lower-cased with every value kept, since Shopify may
    repeat some of them.
    """

    code: int
    headers: Dict[str, List[str]] = field(default_factory=dict)
    body: Any = field(default_factory=dict)

    def __post_init__(self):
        self.headers = {k.lower(): list(v) for k, v in self.headers.items()}

        link = first_header(self.headers, "link")
        pagination = PaginationInfo.parse_link_header(link) if link else PaginationInfo()
        self.prev_page_info: Optional[str] = pagination.prev_page_info
        self.next_page_info: Optional[str] = pagination.next_page_info

        limit = first_header(self.headers, "x-shopify-shop-api-call-limit")
        self.api_call_limit: Optional[ApiCallLimit] = ApiCallLimit.parse(limit) if limit else None

        retry_after = first_header(self.headers, "retry-after")
        self.retry_request_after: Optional[float] = None
        if retry_after:
            try:
                self.retry_request_after = float(retry_after)
            except ValueError:
                pass

    @property
    def is_ok(self) -> bool:
        return 200 <= self.code <= 299

    @property
    def request_id(self) -> Optional[str]:
        return first_header(self.headers, "x-request-id")

    @property
    def deprecation_reason(self) -> Optional[str]:
        return first_header(self.headers, "x-shopify-api-deprecated-reason")

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None
