"""Typed wrapper around resource responses."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from integrations.shopify.http import ApiCallLimit, HttpResponse, PaginationInfo
from shared.exceptions import HttpResponseError


T = TypeVar("T")
U = TypeVar("U")


@dataclass
class ResourceResponse(Generic[T]):
    """Decoded resource data plus pagination and rate-limit metadata."""

    data: T
    pagination: Optional[PaginationInfo] = None
    rate_limit: Optional[ApiCallLimit] = None
    request_id: Optional[str] = None

    @classmethod
    def from_http_response(
        cls,
        response: HttpResponse,
        key: str,
        parse: Callable[[Any], T]
    ) -> "ResourceResponse[T]":
        """Pull ``key`` out of the body and decode it with ``parse``."""
        body = response.body if isinstance(response.body, dict) else {}
        if key not in body:
            raise HttpResponseError(
                code=response.code,
                message=f"Missing key '{key}' in response body",
                error_reference=response.request_id,
                body=body
            )

        try:
            data = parse(body[key])
        except ValueError as e:
            raise HttpResponseError(
                code=response.code,
                message=f"Failed to deserialize '{key}': {e}",
                error_reference=response.request_id,
                body=body
            ) from e

        pagination = None
        if response.prev_page_info or response.next_page_info:
            pagination = PaginationInfo(
                prev_page_info=response.prev_page_info,
                next_page_info=response.next_page_info
            )

        return cls(
            data=data,
            pagination=pagination,
            rate_limit=response.api_call_limit,
            request_id=response.request_id
        )

    @property
    def has_next_page(self) -> bool:
        return bool(self.pagination and self.pagination.next_page_info)

    @property
    def has_prev_page(self) -> bool:
        return bool(self.pagination and self.pagination.prev_page_info)

    @property
    def next_page_info(self) -> Optional[str]:
        return self.pagination.next_page_info if self.pagination else None

    @property
    def prev_page_info(self) -> Optional[str]:
        return self.pagination.prev_page_info if self.pagination else None

    def map(self, func: Callable[[T], U]) -> "ResourceResponse[U]":
        """Transform the data, keeping the metadata."""
        return ResourceResponse(
            data=func(self.data),
            pagination=self.pagination,
            rate_limit=self.rate_limit,
            request_id=self.request_id
        )

    def into_inner(self) -> T:
        return self.data

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
