"""Shared fixtures for the test suite."""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from integrations.shopify.http import HttpResponse


def build_response(
    body: Any = None,
    code: int = 200,
    headers: Optional[Dict[str, List[str]]] = None
) -> HttpResponse:
    return HttpResponse(code=code, headers=headers or {}, body=body if body is not None else {})


@pytest.fixture
def make_response():
    """Factory building an ``HttpResponse`` the way the HTTP client would."""
    return build_response


@pytest.fixture
def mock_client():
    """Transport double with async get/post/put/delete."""
    client = AsyncMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    client.delete = AsyncMock()
    return client
