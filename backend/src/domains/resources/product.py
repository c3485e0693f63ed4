"""Products."""

from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod
from .variant import Variant


class Product(RestResource):
    """A product with its variants, options and images."""

    NAME: ClassVar[str] = "Product"
    PLURAL: ClassVar[str] = "products"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "products/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, (), "products"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, (), "products/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, (), "products"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "products/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("id",), "products/{id}"),
    )

    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    published_scope: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    variants: Optional[List[Variant]] = None
    options: Optional[List[Dict[str, Any]]] = None
    images: Optional[List[Dict[str, Any]]] = None
