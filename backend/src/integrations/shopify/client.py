"""Shopify Admin API HTTP clients."""

import asyncio
import json
import platform
from typing import Any, Dict, Optional, Protocol

import httpx
from pydantic import BaseModel, field_validator

from infrastructure.config.settings import Settings, normalize_shop_domain
from infrastructure.config.version import ApiVersion
from shared import (
    HttpResponseError,
    MaxHttpRetriesExceededError,
    NetworkError,
    InvalidPathError,
    ConfigurationError,
    LoggerMixin,
    RequestLogger,
    safe_json_loads,
)
from .http import DataType, HttpMethod, HttpRequest, HttpResponse


SDK_VERSION = "1.0.0"
RETRY_WAIT_TIME = 1.0
RETRYABLE_STATUS_CODES = frozenset({429, 500})
REST_DEPRECATION_NOTICE = (
    "The REST Admin API is deprecated. Consider migrating to GraphQL. "
    "See: https://www.shopify.com/ca/partners/blog/all-in-on-graphql"
)


class Session(BaseModel):
    """Credentials for one shop."""

    shop: str
    access_token: str = ""

    @field_validator("shop")
    @classmethod
    def check_shop(cls, v: str) -> str:
        try:
            return normalize_shop_domain(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @classmethod
    def from_settings(cls, settings: Settings) -> "Session":
        return cls(shop=settings.shop_domain, access_token=settings.access_token)


class RestTransport(Protocol):
    """What the resource layer needs from a REST client."""

    async def get(
        self,
        path: str,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse: ...

    async def post(
        self,
        path: str,
        body: Any,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse: ...

    async def put(
        self,
        path: str,
        body: Any,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse: ...

    async def delete(
        self,
        path: str,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse: ...


class HttpClient(LoggerMixin):
    """Low-level client that owns headers, retries and response decoding."""

    def __init__(
        self,
        base_path: str,
        session: Session,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_path = base_path.rstrip("/")
        self.base_uri = settings.base_uri if settings and settings.host else f"https://{session.shop}"
        self.retry_wait_time = settings.retry_wait_time if settings else RETRY_WAIT_TIME

        prefix = settings.user_agent_prefix if settings else None
        user_agent = (
            f"{prefix + ' | ' if prefix else ''}"
            f"Shopify API Library v{SDK_VERSION} | Python {platform.python_version()}"
        )

        self.default_headers: Dict[str, str] = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        if settings and settings.host:
            self.default_headers["Host"] = session.shop
        if session.access_token:
            self.default_headers["X-Shopify-Access-Token"] = session.access_token

        self.client = httpx.AsyncClient(
            timeout=settings.http_timeout if settings else 30.0,
            transport=transport
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def request(self, request: HttpRequest) -> HttpResponse:
        """Send a request, retrying 429 and 500 answers up to ``request.tries``."""
        request.verify()

        url = f"{self.base_uri}{self.base_path}/{request.path}"
        headers = dict(self.default_headers)
        if request.body_type is not None:
            headers["Content-Type"] = request.body_type.value
        if request.extra_headers:
            headers.update(request.extra_headers)

        content = None
        if request.body is not None:
            content = request.body if isinstance(request.body, str) else json.dumps(request.body)

        tries = 0
        while True:
            tries += 1
            with RequestLogger(self.logger, request.http_method.value, request.path) as log:
                response = await self._send(request, url, headers, content)
                log.status_code = response.code
                log.request_id = response.request_id

                if response.deprecation_reason:
                    self.log_event(
                        "deprecated_api_request",
                        level="warning",
                        path=request.path,
                        reason=response.deprecation_reason
                    )

                if response.is_ok:
                    return response

                message = self.serialize_error(response)
                if response.code not in RETRYABLE_STATUS_CODES or tries >= request.tries:
                    if response.code in RETRYABLE_STATUS_CODES and request.tries > 1:
                        raise MaxHttpRetriesExceededError(
                            code=response.code,
                            tries=request.tries,
                            message=message,
                            error_reference=response.request_id,
                            body=response.body
                        )
                    raise HttpResponseError(
                        code=response.code,
                        message=message,
                        error_reference=response.request_id,
                        body=response.body
                    )

            delay = self.calculate_retry_delay(response)
            self.log_event(
                "retrying_request",
                level="warning",
                path=request.path,
                status_code=response.code,
                attempt=tries,
                delay_seconds=delay
            )
            await asyncio.sleep(delay)

    async def _send(
        self,
        request: HttpRequest,
        url: str,
        headers: Dict[str, str],
        content: Optional[str]
    ) -> HttpResponse:
        try:
            raw = await self.client.request(
                method=request.http_method.value.upper(),
                url=url,
                params=request.query,
                headers=headers,
                content=content
            )
        except httpx.RequestError as e:
            self.log_error(e, "network_error", url=url)
            raise NetworkError(str(e)) from e

        collected: Dict[str, list] = {}
        for name, value in raw.headers.multi_items():
            collected.setdefault(name.lower(), []).append(value)

        return HttpResponse(
            code=raw.status_code,
            headers=collected,
            body=self.decode_body(raw.status_code, raw.text)
        )

    @staticmethod
    def decode_body(code: int, text: str) -> Any:
        """Decode a JSON body; keep unparseable server errors as ``raw_body``."""
        if not text:
            return {}
        body = safe_json_loads(text)
        if body is None:
            return {"raw_body": text} if code >= 500 else {}
        return body

    def calculate_retry_delay(self, response: HttpResponse) -> float:
        if response.code == 429 and response.retry_request_after is not None:
            return response.retry_request_after
        return self.retry_wait_time

    @staticmethod
    def serialize_error(response: HttpResponse) -> str:
        """Build the JSON error message surfaced by failed requests."""
        body = response.body if isinstance(response.body, dict) else {}
        error_body: Dict[str, Any] = {}

        if "errors" in body:
            error_body["errors"] = body["errors"]
        if "error" in body:
            error_body["error"] = body["error"]
            if "error_description" in body:
                error_body["error_description"] = body["error_description"]
        if response.request_id:
            error_body["error_reference"] = (
                f"If you report this error, please include this id: {response.request_id}."
            )

        return json.dumps(error_body)


class RestClient(LoggerMixin):
    """Client for the Admin REST API, rooted at ``/admin/api/{version}``."""

    def __init__(
        self,
        session: Session,
        settings: Optional[Settings] = None,
        api_version: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        configured = settings.version if settings else None
        if api_version is not None:
            self.api_version = ApiVersion(api_version)
            if configured is not None and configured != self.api_version:
                self.log_event(
                    "api_version_override",
                    level="debug",
                    configured=str(configured),
                    version=str(self.api_version)
                )
        else:
            self.api_version = configured or ApiVersion.latest()

        self.default_tries = settings.http_tries if settings else 1

        self.log_event("rest_api_deprecated", level="warning", notice=REST_DEPRECATION_NOTICE)

        self.http_client = HttpClient(
            f"/admin/api/{self.api_version}",
            session,
            settings,
            transport=transport
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "RestClient":
        return cls(Session.from_settings(settings), settings, transport=transport)

    async def close(self):
        await self.http_client.close()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def get(
        self,
        path: str,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse:
        return await self._make_request(HttpMethod.GET, path, None, query, tries)

    async def post(
        self,
        path: str,
        body: Any,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse:
        return await self._make_request(HttpMethod.POST, path, body, query, tries)

    async def put(
        self,
        path: str,
        body: Any,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse:
        return await self._make_request(HttpMethod.PUT, path, body, query, tries)

    async def delete(
        self,
        path: str,
        query: Optional[Dict[str, str]] = None,
        tries: Optional[int] = None
    ) -> HttpResponse:
        return await self._make_request(HttpMethod.DELETE, path, None, query, tries)

    async def _make_request(
        self,
        method: HttpMethod,
        path: str,
        body: Any,
        query: Optional[Dict[str, str]],
        tries: Optional[int]
    ) -> HttpResponse:
        request = HttpRequest(
            http_method=method,
            path=normalize_path(path),
            body=body,
            body_type=DataType.JSON if body is not None else None,
            query=query,
            tries=tries or self.default_tries
        )
        return await self.http_client.request(request)


def normalize_path(path: str) -> str:
    """Strip a leading slash and ensure a single ``.json`` suffix."""
    trimmed = path.lstrip("/")
    if trimmed.endswith(".json"):
        trimmed = trimmed[: -len(".json")]
    if not trimmed:
        raise InvalidPathError(path)
    return f"{trimmed}.json"
