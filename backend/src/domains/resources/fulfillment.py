"""Fulfillments, nested under orders."""

from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.client import RestTransport
from integrations.shopify.http import HttpMethod


class TrackingInfo(BaseModel):
    """Carrier details sent with ``update_tracking``."""

    number: Optional[str] = None
    url: Optional[str] = None
    company: Optional[str] = None


class Fulfillment(RestResource):
    """A shipment of some or all of an order's line items.

    Fulfillments cannot be deleted, only cancelled.
    """

    NAME: ClassVar[str] = "Fulfillment"
    PLURAL: ClassVar[str] = "fulfillments"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("order_id", "id"),
                     "orders/{order_id}/fulfillments/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, ("order_id",),
                     "orders/{order_id}/fulfillments"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, ("order_id",),
                     "orders/{order_id}/fulfillments/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, ("order_id",),
                     "orders/{order_id}/fulfillments"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("order_id", "id"),
                     "orders/{order_id}/fulfillments/{id}"),
    )

    order_id: Optional[int] = None
    status: Optional[str] = None
    shipment_status: Optional[str] = None
    location_id: Optional[int] = None
    tracking_company: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_numbers: Optional[List[str]] = None
    tracking_url: Optional[str] = None
    tracking_urls: Optional[List[str]] = None
    notify_customer: Optional[bool] = None
    line_items: Optional[List[Dict[str, Any]]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    async def cancel(self, client: RestTransport) -> "Fulfillment":
        return await self._post_action(
            client, "cancel", "orders/{order_id}/fulfillments/{id}/cancel"
        )

    async def update_tracking(
        self,
        client: RestTransport,
        tracking_info: TrackingInfo,
        notify_customer: Optional[bool] = None
    ) -> "Fulfillment":
        """Replace the tracking details; only the fulfillment id is needed."""
        fulfillment: Dict[str, Any] = {
            "tracking_info": tracking_info.model_dump(mode="json", exclude_none=True)
        }
        if notify_customer is not None:
            fulfillment["notify_customer"] = notify_customer

        return await self._post_action(
            client,
            "update_tracking",
            "fulfillments/{id}/update_tracking",
            {"fulfillment": fulfillment}
        )
