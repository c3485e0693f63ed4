"""Orders and their lifecycle actions."""

from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.client import RestTransport
from integrations.shopify.http import HttpMethod


class Order(RestResource):
    """An order.

    Besides CRUD, orders can be cancelled, closed and re-opened. Each action
    POSTs to ``orders/{id}/<action>`` and returns the updated order.
    """

    NAME: ClassVar[str] = "Order"
    PLURAL: ClassVar[str] = "orders"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "orders/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, (), "orders"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, (), "orders/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, (), "orders"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "orders/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("id",), "orders/{id}"),
    )
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = RestResource.READ_ONLY_FIELDS | {
        "name",
        "order_number",
        "cancelled_at",
        "closed_at",
        "processed_at",
    }

    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    order_number: Optional[int] = None
    note: Optional[str] = None
    tags: Optional[str] = None
    currency: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    total_price: Optional[str] = None
    subtotal_price: Optional[str] = None
    total_tax: Optional[str] = None
    cancel_reason: Optional[str] = None
    line_items: Optional[List[Dict[str, Any]]] = None
    shipping_address: Optional[Dict[str, Any]] = None
    billing_address: Optional[Dict[str, Any]] = None
    customer: Optional[Dict[str, Any]] = None
    cancelled_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    async def cancel(self, client: RestTransport, **options: Any) -> "Order":
        """Cancel the order; ``options`` (``reason``, ``email``, ...) form the body."""
        return await self._post_action(client, "cancel", "orders/{id}/cancel", dict(options))

    async def close(self, client: RestTransport) -> "Order":
        return await self._post_action(client, "close", "orders/{id}/close")

    async def open(self, client: RestTransport) -> "Order":
        """Re-open a closed order."""
        return await self._post_action(client, "open", "orders/{id}/open")
