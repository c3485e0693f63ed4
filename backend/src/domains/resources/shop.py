"""The current shop, a read-only singleton."""

from typing import ClassVar, Optional, Tuple

from domains.rest import ResourceOperation, ResourcePath, ResourceResponse, RestResource
from integrations.shopify.client import RestTransport
from integrations.shopify.http import HttpMethod


class Shop(RestResource):
    """Shop settings for the authenticated store.

    Only ``find`` is routed, at ``shop`` with no ids, so ``all``, ``count``,
    ``save`` and ``delete`` all fail with ``PathResolutionFailed``.
    """

    NAME: ClassVar[str] = "Shop"
    PLURAL: ClassVar[str] = "shop"
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, (), "shop"),
    )

    name: Optional[str] = None
    email: Optional[str] = None
    domain: Optional[str] = None
    myshopify_domain: Optional[str] = None
    shop_owner: Optional[str] = None
    plan_name: Optional[str] = None
    currency: Optional[str] = None
    money_format: Optional[str] = None
    country_code: Optional[str] = None
    iana_timezone: Optional[str] = None
    primary_locale: Optional[str] = None
    weight_unit: Optional[str] = None
    password_enabled: Optional[bool] = None

    @classmethod
    async def current(cls, client: RestTransport) -> "Shop":
        response = await cls._send(client, ResourceOperation.FIND, {})
        return ResourceResponse.from_http_response(
            response, cls.resource_key(), cls._parse_one
        ).into_inner()
