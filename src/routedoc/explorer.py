"""Explorer — aggregate an annotated router tree into one OpenAPI document.

The walk is top-down then bottom-up. Each router:

1. starts from the document template and deep-merges its own
   document-level fragment
2. builds one operation per owned route from router defaults, the route's
   declarations and the route's own operation fragment
3. explores every mounted router and splices the result in under the
   mount prefix

Colon placeholders are rewritten to brace form once, at the root, after
every prefix has been concatenated.

Exploration never raises for metadata content. Missing fragments fall
back to defaults; fragments of the wrong shape are ignored (and logged at
debug level) so documentation can never take the host application down.
"""

import copy
import logging
from typing import Any

from routedoc._internal.types import Document, Operation, Paths
from routedoc.config import ExplorerConfig
from routedoc.merge import concat, deep_merge, merge_paths
from routedoc.metadata import (
    HasMetadata,
    MetaKey,
    get_api_object,
    get_api_operation,
    is_openapi_method,
)
from routedoc.routing.params import join_path, to_openapi_path
from routedoc.routing.route import Route
from routedoc.routing.router import Router

logger = logging.getLogger("routedoc.explorer")

# Document-level lists that accumulate across mounted routers
_CONCATENATED = ("servers", "tags", "security")

# Document-level mappings merged key-wise across mounted routers
_MERGED = ("components", "webhooks")


class Explorer:
    """Builds documents from router trees with a fixed configuration.

    Usage::

        explorer = Explorer(ExplorerConfig(title="Orders API"))
        document = explorer.explore(api)

    Holds no state between calls; exploring the same unmodified tree
    twice yields equal documents.
    """

    __slots__ = ("config",)

    def __init__(self, config: ExplorerConfig | None = None) -> None:
        self.config: ExplorerConfig = config or ExplorerConfig()

    def explore(self, router: Router) -> Document:
        """Explore *router* and everything mounted beneath it."""
        document = self._explore_router(router)
        document["paths"] = normalize_paths(document["paths"])
        return document

    # -- Per-router aggregation --

    def _template(self) -> Document:
        return {
            "openapi": self.config.openapi_version,
            "info": {"version": self.config.version, "title": self.config.title},
            "paths": {},
        }

    def _explore_router(self, router: Router) -> Document:
        document = deep_merge(self._template(), get_api_object(router))
        if not isinstance(document.get("paths"), dict):
            logger.debug("Ignoring non-mapping 'paths' on router %r", router.prefix)
            document["paths"] = {}

        prefix = router.prefix or ""
        default_tags = _default_tags(router)
        router_operation = get_api_operation(router) or {}
        default_parameters = _as_list(router_operation.get("parameters"), "parameters")

        route_paths: Paths = {}
        for route in router.routes:
            if not is_openapi_method(route.method):
                logger.debug(
                    "Skipping %s %s%s: not an OpenAPI method", route.method, prefix, route.path
                )
                continue
            operation = self._build_operation(router, route, default_parameters, default_tags)
            route_paths.setdefault(join_path(prefix, route.path), {})[route.method] = operation
        merge_paths(document["paths"], route_paths)

        for child_prefix, child in router.routers:
            self._splice(document, self._explore_router(child), join_path(prefix, child_prefix))

        return document

    def _splice(self, document: Document, child: Document, mount: str) -> None:
        """Merge a mounted router's document into its parent's."""
        for key in _CONCATENATED:
            combined = concat(_as_list(document.get(key), key), _as_list(child.get(key), key))
            if combined:
                document[key] = combined

        for key in _MERGED:
            value = child.get(key)
            if isinstance(value, dict):
                current = document.get(key)
                document[key] = deep_merge(current if isinstance(current, dict) else None, value)

        merge_paths(document["paths"], {mount + path: item for path, item in child["paths"].items()})

    # -- Per-route operations --

    def _build_operation(
        self,
        router: Router,
        route: Route,
        default_parameters: list[Any],
        default_tags: list[str],
    ) -> Operation:
        body = deep_merge(_declared(router, MetaKey.REQUEST_BODY), _declared(route, MetaKey.REQUEST_BODY))
        path_params = deep_merge(_declared(router, MetaKey.PATH_PARAMS), _declared(route, MetaKey.PATH_PARAMS))
        query = deep_merge(_declared(router, MetaKey.QUERY), _declared(route, MetaKey.QUERY))
        files = deep_merge(_declared(router, MetaKey.FILES), _declared(route, MetaKey.FILES))

        operation: Operation = {"responses": {self.config.default_status: {}}}
        operation["parameters"] = [
            *copy.deepcopy(default_parameters),
            *_parameters(path_params, "path"),
            *_parameters(query, "query"),
        ]

        request_body = self._request_body(body, files)
        if request_body is not None:
            operation["requestBody"] = request_body

        own = get_api_operation(route)
        operation = deep_merge(operation, own)

        own_tags = _as_list(own.get("tags"), "tags") if own else []
        tags = own_tags or default_tags
        if tags:
            operation["tags"] = list(tags)
        else:
            operation.pop("tags", None)
        return operation

    def _request_body(self, body: dict[str, Any], files: dict[str, Any]) -> dict[str, Any] | None:
        """Encode declared body fields and files as a request body object.

        Without files the body schema is sent as JSON (and omitted when
        nothing was declared). Any file field switches to multipart, with
        file schemas overriding body properties of the same name.
        """
        if not files:
            if not body:
                return None
            return {"content": {self.config.json_media_type: {"schema": body}}}

        properties = body.get("properties")
        merged: dict[str, Any] = dict(properties) if isinstance(properties, dict) else {}
        for name, descriptor in files.items():
            schema = descriptor.get("schema") if isinstance(descriptor, dict) else None
            merged[name] = schema if schema is not None else {}

        schema: dict[str, Any] = {"type": "object", "properties": merged}
        if isinstance(body.get("required"), list):
            schema["required"] = list(body["required"])
        return {"content": {self.config.multipart_media_type: {"schema": schema}}}


def explore(router: Router, config: ExplorerConfig | None = None) -> Document:
    """Build the OpenAPI document for *router* and everything mounted beneath it.

    Usage::

        from routedoc import Router, api_info, explore

        api = Router("/api").use(api_info({"title": "Orders", "version": "2.0.0"}))
        api.get("/orders/:id").param("id", int)

        explore(api)["paths"]
        # {"/api/orders/{id}": {"get": {...}}}
    """
    return Explorer(config).explore(router)


def normalize_paths(paths: Paths) -> Paths:
    """Rewrite ``:name`` placeholders in path keys to ``{name}``.

    Must run once, on fully assembled paths. Keys that become identical
    after rewriting are merged.
    """
    normalized: Paths = {}
    for path, item in paths.items():
        merge_paths(normalized, {to_openapi_path(path): item})
    return normalized


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _default_tags(router: Router) -> list[str]:
    """Tags every route under *router* receives unless it declares its own.

    Declared router tags first, then the ``route_path`` label, then the
    prefix.
    """
    operation = get_api_operation(router)
    tags = _as_list(operation.get("tags"), "tags") if operation else []
    if tags:
        return list(tags)
    if router.route_path:
        return [router.route_path]
    if router.prefix:
        return [router.prefix]
    return []


def _declared(node: HasMetadata, key: MetaKey) -> dict[str, Any] | None:
    """Read a structured declaration, ignoring anything that is not a mapping."""
    value = node.metadata.get(key)
    if value is None or isinstance(value, dict):
        return value
    logger.debug("Ignoring non-mapping %s declaration: %r", key.value, value)
    return None


def _parameters(declared: dict[str, Any], location: str) -> list[dict[str, Any]]:
    """Turn ``{name: descriptor}`` declarations into parameter objects."""
    return [
        {"name": name, **(descriptor if isinstance(descriptor, dict) else {}), "in": location}
        for name, descriptor in declared.items()
    ]


def _as_list(value: Any, field: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    logger.debug("Ignoring non-list %r: %r", field, value)
    return []
