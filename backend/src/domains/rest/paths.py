"""Path tables and path resolution for REST resources.

Each resource declares a static table of ``ResourcePath`` entries. A resource
may be reachable through several templates for the same operation, e.g. a
variant through ``products/{product_id}/variants/{id}`` and through
``variants/{id}``. ``get_path`` picks the most specific entry whose required
ids are all available, and ``build_path`` fills the chosen template in.

    PATHS = (
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("product_id", "id"),
                     "products/{product_id}/variants/{id}"),
        ResourcePath(HttpMethod.GET, ResourceOperation.FIND, ("id",), "variants/{id}"),
    )

    path = get_path(PATHS, ResourceOperation.FIND, {"product_id", "id"})
    build_path(path.template, {"product_id": 123, "id": 456})
    # 'products/123/variants/456'
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from integrations.shopify.http import HttpMethod
from shared.types import PathIds


_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class ResourceOperation(str, Enum):
    """CRUD-style actions a resource may support."""

    FIND = "find"
    ALL = "all"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    COUNT = "count"

    @property
    def default_http_method(self) -> HttpMethod:
        if self in (ResourceOperation.FIND, ResourceOperation.ALL, ResourceOperation.COUNT):
            return HttpMethod.GET
        if self is ResourceOperation.CREATE:
            return HttpMethod.POST
        if self is ResourceOperation.UPDATE:
            return HttpMethod.PUT
        return HttpMethod.DELETE


def template_placeholders(template: str) -> Tuple[str, ...]:
    """Names of the ``{name}`` placeholders in a template, in order."""
    return tuple(_PLACEHOLDER.findall(template))


@dataclass(frozen=True)
class ResourcePath:
    """One declared (method, operation, required ids, template) route."""

    http_method: HttpMethod
    operation: ResourceOperation
    ids: Tuple[str, ...]
    template: str

    def __post_init__(self):
        # Tables are declared at import time, so a mismatch fails loudly there.
        object.__setattr__(self, "ids", tuple(self.ids))
        placeholders = set(template_placeholders(self.template))
        if placeholders != set(self.ids) or len(set(self.ids)) != len(self.ids):
            raise ValueError(
                f"Path template '{self.template}' placeholders {sorted(placeholders)} "
                f"do not match required ids {list(self.ids)}"
            )

    @property
    def id_count(self) -> int:
        return len(self.ids)

    def matches_ids(self, available_ids: Iterable[str]) -> bool:
        """True when every required id is among ``available_ids``."""
        available = set(available_ids)
        return all(name in available for name in self.ids)


def get_path(
    paths: Sequence[ResourcePath],
    operation: ResourceOperation,
    available_ids: Iterable[str],
) -> Optional[ResourcePath]:
    """Select the most specific path for ``operation`` given ``available_ids``.

    Extra available ids are ignored. When several entries match, the one
    requiring the most ids wins; equally specific entries resolve to the
    first declared. Returns ``None`` when nothing matches.
    """
    available = frozenset(available_ids)
    best: Optional[ResourcePath] = None

    for path in paths:
        if path.operation != operation or not path.matches_ids(available):
            continue
        if best is None or path.id_count > best.id_count:
            best = path

    return best


def build_path(template: str, ids: PathIds) -> str:
    """Substitute ``ids`` into ``template``.

    Values are inserted with ``str()`` and are not URL-encoded. Every
    placeholder must have a value; a missing one is a programming error.
    """
    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in ids:
            raise ValueError(f"Missing value for '{name}' in path template '{template}'")
        return str(ids[name])

    return _PLACEHOLDER.sub(substitute, template)
