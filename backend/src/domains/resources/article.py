"""Blog articles. Every route is nested under ``blogs/{blog_id}``."""

from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, RestResource
from integrations.shopify.http import HttpMethod


class Article(RestResource):
    NAME: ClassVar[str] = "Article"
    PLURAL: ClassVar[str] = "articles"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("blog_id", "id"),
                     "blogs/{blog_id}/articles/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.ALL, ("blog_id",),
                     "blogs/{blog_id}/articles"),
        ResourcePath(HttpMethod.GET, ResourceOperation.COUNT, ("blog_id",),
                     "blogs/{blog_id}/articles/count"),
        ResourcePath(HttpMethod.POST, ResourceOperation.CREATE, ("blog_id",),
                     "blogs/{blog_id}/articles"),
        ResourcePath(HttpMethod.PUT, ResourceOperation.UPDATE, ("blog_id", "id"),
                     "blogs/{blog_id}/articles/{id}"),
        ResourcePath(HttpMethod.DELETE, ResourceOperation.DELETE, ("blog_id", "id"),
                     "blogs/{blog_id}/articles/{id}"),
    )

    blog_id: Optional[int] = None
    title: Optional[str] = None
    author: Optional[str] = None
    body_html: Optional[str] = None
    summary_html: Optional[str] = None
    handle: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    image: Optional[Dict[str, Any]] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
