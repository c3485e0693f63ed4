"""Generic CRUD operations shared by every REST resource."""

from typing import (
    Any,
    AsyncIterator,
    ClassVar,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ConfigDict

from integrations.shopify.client import RestTransport
from integrations.shopify.http import HttpMethod, HttpResponse
from shared import HttpResponseError, get_logger, serialize_to_query, to_snake_case
from shared.types import JSONObject, JSONValue
from .errors import PathResolutionFailed, ResourceError
from .paths import (
    ResourceOperation,
    ResourcePath,
    build_path,
    get_path,
    template_placeholders,
)
from .response import ResourceResponse
from .tracking import TrackedResource


logger = get_logger(__name__)

R = TypeVar("R", bound="RestResource")
Params = Optional[Union[Mapping[str, Any], BaseModel]]

# Shopify only accepts these alongside a page_info cursor.
PAGINATION_CARRY_OVER = ("limit", "fields")


class RestResource(BaseModel):
    """Base class for Admin REST resources.

    Subclasses declare ``NAME``, ``PLURAL`` and a ``PATHS`` table; the CRUD
    methods pick a route from the table using whichever path ids are at hand,
    so nested, standalone and read-only resources need no code of their own.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    NAME: ClassVar[str] = ""
    PLURAL: ClassVar[str] = ""
    PATHS: ClassVar[Tuple[ResourcePath, ...]] = ()
    PREFIX: ClassVar[Optional[str]] = None
    KEY: ClassVar[Optional[str]] = None
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"id", "created_at", "updated_at", "admin_graphql_api_id"}
    )

    id: Optional[int] = None

    @classmethod
    def resource_key(cls) -> str:
        """Envelope key wrapping a single resource in request/response bodies."""
        return cls.KEY or to_snake_case(cls.NAME)

    @classmethod
    def path_parameters(cls) -> FrozenSet[str]:
        """Every id name used by any template in the table."""
        return frozenset(name for path in cls.PATHS for name in path.ids)

    @classmethod
    def build_full_path(cls, path: str) -> str:
        return f"{cls.PREFIX}/{path}" if cls.PREFIX else path

    def get_id(self) -> Optional[Any]:
        return self.id

    def path_ids(self) -> Dict[str, Any]:
        """Path ids this instance currently holds, e.g. ``id`` and ``blog_id``."""
        ids = {}
        for name in self.path_parameters():
            value = getattr(self, name, None)
            if value is not None:
                ids[name] = value
        return ids

    def to_payload(self) -> JSONObject:
        """JSON body fields, without unset values and read-only fields."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=set(self.READ_ONLY_FIELDS)
        )

    @classmethod
    def resolve(
        cls,
        operation: ResourceOperation,
        ids: Mapping[str, Any]
    ) -> Tuple[ResourcePath, str]:
        """Pick the route for ``operation`` and build its full path."""
        path = get_path(cls.PATHS, operation, ids.keys())
        if path is None:
            raise PathResolutionFailed(cls.NAME, operation.value)

        logger.debug(
            "path_resolved",
            resource=cls.NAME,
            operation=operation.value,
            template=path.template
        )
        return path, cls.build_full_path(build_path(path.template, ids))

    @classmethod
    async def _send(
        cls,
        client: RestTransport,
        operation: ResourceOperation,
        ids: Mapping[str, Any],
        body: Optional[JSONValue] = None,
        params: Params = None,
        resource_id: Optional[str] = None,
    ) -> HttpResponse:
        path, url = cls.resolve(operation, ids)
        return await cls._dispatch(client, path.http_method, url, body, params, resource_id)

    @classmethod
    async def _dispatch(
        cls,
        client: RestTransport,
        method: HttpMethod,
        url: str,
        body: Optional[JSONValue] = None,
        params: Params = None,
        resource_id: Optional[str] = None,
    ) -> HttpResponse:
        query = serialize_to_query(_params_to_dict(params))

        try:
            if method is HttpMethod.GET:
                response = await client.get(url, query)
            elif method is HttpMethod.POST:
                response = await client.post(url, body if body is not None else {}, query)
            elif method is HttpMethod.PUT:
                response = await client.put(url, body if body is not None else {}, query)
            else:
                response = await client.delete(url, query)
        except HttpResponseError as e:
            if e.code in (404, 422):
                raise ResourceError.from_http_response(
                    e.code, e.body, cls.NAME, resource_id, e.error_reference
                ) from e
            raise

        if not response.is_ok:
            raise ResourceError.from_http_response(
                response.code, response.body, cls.NAME, resource_id, response.request_id
            )
        return response

    @classmethod
    def _parse_one(cls: Type[R], data: Any) -> R:
        return cls.model_validate(data)

    @classmethod
    def _parse_many(cls: Type[R], data: Any) -> List[R]:
        return [cls.model_validate(item) for item in data]

    @classmethod
    async def find(
        cls: Type[R],
        client: RestTransport,
        id: Any,
        params: Params = None,
        **parent_ids: Any
    ) -> ResourceResponse[R]:
        """Fetch one resource by id; parent ids select nested routes."""
        ids = {**parent_ids, "id": id}
        response = await cls._send(
            client, ResourceOperation.FIND, ids, params=params, resource_id=str(id)
        )
        return ResourceResponse.from_http_response(response, cls.resource_key(), cls._parse_one)

    @classmethod
    async def all(
        cls: Type[R],
        client: RestTransport,
        params: Params = None,
        **parent_ids: Any
    ) -> ResourceResponse[List[R]]:
        """Fetch one page of resources."""
        response = await cls._send(client, ResourceOperation.ALL, parent_ids, params=params)
        return ResourceResponse.from_http_response(response, cls.PLURAL, cls._parse_many)

    @classmethod
    async def iter_all(
        cls: Type[R],
        client: RestTransport,
        params: Params = None,
        **parent_ids: Any
    ) -> AsyncIterator[R]:
        """Yield every resource, following ``page_info`` cursors."""
        query = dict(_params_to_dict(params) or {})
        while True:
            page = await cls.all(client, query, **parent_ids)
            for item in page.data:
                yield item

            if not page.has_next_page:
                return
            query = {k: query[k] for k in PAGINATION_CARRY_OVER if k in query}
            query["page_info"] = page.next_page_info

    @classmethod
    async def count(
        cls,
        client: RestTransport,
        params: Params = None,
        **parent_ids: Any
    ) -> int:
        response = await cls._send(client, ResourceOperation.COUNT, parent_ids, params=params)
        count = response.body.get("count") if isinstance(response.body, dict) else None
        if not isinstance(count, int) or isinstance(count, bool):
            raise HttpResponseError(
                code=response.code,
                message="Missing 'count' in response",
                error_reference=response.request_id
            )
        return count

    async def save(self: R, client: RestTransport) -> R:
        """Create the resource when it has no id, otherwise send a full update."""
        key = self.resource_key()
        body = {key: self.to_payload()}
        resource_id = self.get_id()

        if resource_id is None:
            response = await self._send(client, ResourceOperation.CREATE, self.path_ids(), body=body)
        else:
            response = await self._send(
                client,
                ResourceOperation.UPDATE,
                self.path_ids(),
                body=body,
                resource_id=str(resource_id)
            )
        return ResourceResponse.from_http_response(response, key, self._parse_one).into_inner()

    async def save_partial(self: R, client: RestTransport, changed_fields: JSONValue) -> R:
        """Update with only ``changed_fields`` under the envelope key."""
        resource_id = self.get_id()
        if resource_id is None:
            raise PathResolutionFailed(self.NAME, ResourceOperation.UPDATE.value)

        key = self.resource_key()
        response = await self._send(
            client,
            ResourceOperation.UPDATE,
            self.path_ids(),
            body={key: changed_fields},
            resource_id=str(resource_id)
        )
        return ResourceResponse.from_http_response(response, key, self._parse_one).into_inner()

    async def delete(self, client: RestTransport) -> None:
        resource_id = self.get_id()
        if resource_id is None:
            raise PathResolutionFailed(self.NAME, ResourceOperation.DELETE.value)

        await self._send(
            client,
            ResourceOperation.DELETE,
            self.path_ids(),
            resource_id=str(resource_id)
        )

    async def _post_action(
        self: R,
        client: RestTransport,
        action: str,
        template: str,
        body: Optional[JSONValue] = None
    ) -> R:
        """POST to a custom action route such as ``orders/{id}/cancel``."""
        ids = self.path_ids()
        if any(name not in ids for name in template_placeholders(template)):
            raise PathResolutionFailed(self.NAME, action)

        resource_id = self.get_id()
        url = self.build_full_path(build_path(template, ids))
        response = await self._dispatch(
            client,
            HttpMethod.POST,
            url,
            body=body if body is not None else {},
            resource_id=str(resource_id) if resource_id is not None else None
        )
        return ResourceResponse.from_http_response(
            response, self.resource_key(), self._parse_one
        ).into_inner()


async def save_tracked(client: RestTransport, tracked: TrackedResource[R]) -> R:
    """Persist a tracked resource, sending only what changed.

    New resources are created in full, clean ones are left alone, and dirty
    ones go out as a partial update. The tracker holds the saved resource and
    a fresh snapshot afterwards.
    """
    resource = tracked.resource

    if tracked.is_new() or resource.get_id() is None:
        saved = await resource.save(client)
    elif not tracked.is_dirty():
        logger.debug("save_skipped_clean", resource=resource.NAME, id=resource.get_id())
        return resource
    else:
        saved = await resource.save_partial(client, tracked.changed_fields())

    tracked.resource = saved
    tracked.mark_clean()
    return saved


def _params_to_dict(params: Params) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", exclude_none=True)
    return dict(params)
