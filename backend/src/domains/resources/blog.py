"""Blogs."""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod


class Blog(RestResource):
    """An online store blog; articles live underneath it."""

    NAME: ClassVar[str] = "Blog"
    PLURAL: ClassVar[str] = "blogs"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "blogs/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, (), "blogs"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, (), "blogs/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, (), "blogs"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("id",), "blogs/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("id",), "blogs/{id}"),
    )

    title: Optional[str] = None
    handle: Optional[str] = None
    commentable: Optional[str] = None
    feedburner: Optional[str] = None
    feedburner_location: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
