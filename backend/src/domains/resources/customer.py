"""Customers."""

from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod


class Customer(RestResource):
    """A store customer."""

    NAME: ClassVar[str] = "Customer"
    PLURAL: ClassVar[str] = "customers"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "customers/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, (), "customers"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, (), "customers/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, (), "customers"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "customers/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("id",), "customers/{id}"),
    )
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = RestResource.READ_ONLY_FIELDS | {
        "orders_count",
        "total_spent",
        "last_order_id",
    }

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    tags: Optional[str] = None
    note: Optional[str] = None
    verified_email: Optional[bool] = None
    tax_exempt: Optional[bool] = None
    currency: Optional[str] = None
    addresses: Optional[List[Dict[str, Any]]] = None
    default_address: Optional[Dict[str, Any]] = None
    orders_count: Optional[int] = None
    total_spent: Optional[str] = None
    last_order_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
