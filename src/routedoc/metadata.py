"""Typed metadata store and read accessors.

Every router and route owns a ``MetadataStore``. Annotations and
declarations write fragments into it while the tree is built; the
explorer only reads from it.

Two tiers of documentation fragments live in the store:

- ``MetaKey.API_OBJECT`` — document-level fragment (info, tags, servers,
  security, components, webhooks, path items). Routers only.
- ``MetaKey.API_OPERATION`` — operation-level fragment. Authoritative on a
  route; on a router it holds defaults (tags, parameters) for every route
  beneath it.

Structured declarations (request body, path params, query params, files)
are stored under their own keys.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any, Protocol


class MetaKey(Enum):
    """Closed set of fragment identifiers a node can carry."""

    API_OBJECT = "api-object"
    API_OPERATION = "api-operation"
    REQUEST_BODY = "request-body"
    PATH_PARAMS = "path-params"
    QUERY = "query"
    FILES = "files"


class MetadataStore:
    """Mapping of ``MetaKey`` to fragment, populated during setup.

    Usage::

        store = MetadataStore()
        store.set_field(MetaKey.API_OPERATION, "summary", "List orders")
        store.append_field(MetaKey.API_OPERATION, "tags", "Orders")
        store.get(MetaKey.API_OPERATION)
        # {"summary": "List orders", "tags": ["Orders"]}
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[MetaKey, Any] = {}

    def get(self, key: MetaKey, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: MetaKey, value: Any) -> None:
        """Replace the whole fragment stored under *key*."""
        self._data[key] = value

    def set_field(self, key: MetaKey, field: str, value: Any) -> None:
        """Set one field inside the mapping fragment stored under *key*.

        Creates the fragment if it does not exist yet. The stored fragment is
        replaced by an updated copy; it is never edited in place.
        """
        fragment = self._data.get(key)
        fragment = dict(fragment) if isinstance(fragment, dict) else {}
        fragment[field] = value
        self._data[key] = fragment

    def append_field(self, key: MetaKey, field: str, item: Any) -> None:
        """Append *item* to the list field *field* of the fragment under *key*."""
        fragment = self._data.get(key)
        current = fragment.get(field) if isinstance(fragment, dict) else None
        items = list(current) if isinstance(current, list) else []
        items.append(item)
        self.set_field(key, field, items)

    def keys(self) -> Iterator[MetaKey]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        names = ", ".join(k.value for k in self._data)
        return f"MetadataStore({names})"


class HasMetadata(Protocol):
    """Anything that carries a metadata store (routers and routes)."""

    @property
    def metadata(self) -> MetadataStore: ...


# HTTP methods an OpenAPI path item can hold
OPENAPI_METHODS: frozenset[str] = frozenset({
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
})


def get_api_object(node: HasMetadata) -> dict[str, Any] | None:
    """Return the node's document-level fragment, or ``None`` if never set."""
    fragment = node.metadata.get(MetaKey.API_OBJECT)
    return fragment if isinstance(fragment, dict) else None


def get_api_operation(node: HasMetadata) -> dict[str, Any] | None:
    """Return the node's operation-level fragment, or ``None`` if never set.

    Valid on routers (defaults) and routes (authoritative override).
    """
    fragment = node.metadata.get(MetaKey.API_OPERATION)
    return fragment if isinstance(fragment, dict) else None


def is_openapi_method(method: str) -> bool:
    """Check if *method* can appear in an OpenAPI path item.

    Case-sensitive: ``"get"`` is documentable, ``"GET"`` is not.
    """
    return method in OPENAPI_METHODS
