"""Webhook subscriptions."""

from datetime import datetime
from typing import ClassVar, List, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod


class Webhook(RestResource):
    """A subscription delivering ``topic`` events to ``address``."""

    NAME: ClassVar[str] = "Webhook"
    PLURAL: ClassVar[str] = "webhooks"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "webhooks/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, (), "webhooks"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, (), "webhooks/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, (), "webhooks"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "webhooks/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("id",), "webhooks/{id}"),
    )

    topic: Optional[str] = None
    address: Optional[str] = None
    format: Optional[str] = None
    fields: Optional[List[str]] = None
    metafield_namespaces: Optional[List[str]] = None
    api_version: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
