"""Product variants, reachable nested under a product or on their own."""

from typing import ClassVar, FrozenSet, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod


class Variant(RestResource):
    """A product variant.

    Nested routes are preferred when ``product_id`` is known; ``find`` and
    ``update`` fall back to ``variants/{id}`` when only the id is at hand.
    """

    NAME: ClassVar[str] = "Variant"
    PLURAL: ClassVar[str] = "variants"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("product_id", "id"),
                     "products/{product_id}/variants/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, ("product_id",),
                     "products/{product_id}/variants"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, ("product_id",),
                     "products/{product_id}/variants/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, ("product_id",),
                     "products/{product_id}/variants"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("product_id", "id"),
                     "products/{product_id}/variants/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("product_id", "id"),
                     "products/{product_id}/variants/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "variants/{id}"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "variants/{id}"),
    )
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = RestResource.READ_ONLY_FIELDS | {
        "inventory_item_id",
        "inventory_quantity",
    }

    product_id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[str] = None
    compare_at_price: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    position: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    taxable: Optional[bool] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    inventory_policy: Optional[str] = None
    inventory_management: Optional[str] = None
    fulfillment_service: Optional[str] = None
    inventory_item_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
