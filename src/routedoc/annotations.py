"""Documentation annotations — fragment-attachment helpers.

Each helper returns an :class:`Annotation` that writes one fragment into a
node's metadata when applied with ``use()``. Nothing here affects how
requests are routed.

Where the fragment lands depends on the node it is applied to:

- on a ``Router`` — the document-level fragment (``MetaKey.API_OBJECT``),
  or, for ``api_tag`` / ``api_parameter``, defaults for every route below
- on a ``Route`` — that route's operation fragment (``MetaKey.API_OPERATION``)

Helpers that only make sense at one level raise ``ConfigurationError``
when applied to the other. Every helper replaces what it writes, except
``api_tag`` and ``api_parameter``, which append.

Usage::

    api = Router("/api").use(
        api_info({"title": "Orders", "version": "2.0.0"}),
        api_servers([{"url": "https://orders.example.com"}]),
    )
    api.get("/orders").use(
        api_summary("List orders"),
        api_tag("Orders"),
    )
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from routedoc.errors import ConfigurationError
from routedoc.metadata import MetaKey
from routedoc.routing.route import Route
from routedoc.routing.router import Router


@dataclass(frozen=True, slots=True)
class Annotation:
    """A deferred metadata write, applied to a router or a route."""

    name: str
    apply: Callable[[Router | Route], None]

    def __call__(self, node: Router | Route) -> None:
        self.apply(node)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _object_field(name: str, field: str, value: Any) -> Annotation:
    """Annotation setting one document-level field. Routers only."""

    def apply(node: Router | Route) -> None:
        _require_router(name, node)
        node.metadata.set_field(MetaKey.API_OBJECT, field, value)

    return Annotation(name, apply)


def _operation_field(name: str, field: str, value: Any) -> Annotation:
    """Annotation setting one operation-level field. Routes only."""

    def apply(node: Router | Route) -> None:
        _require_route(name, node)
        node.metadata.set_field(MetaKey.API_OPERATION, field, value)

    return Annotation(name, apply)


def _scoped_field(name: str, field: str, value: Any) -> Annotation:
    """Document-level on a router, operation-level on a route."""

    def apply(node: Router | Route) -> None:
        key = MetaKey.API_OPERATION if isinstance(node, Route) else MetaKey.API_OBJECT
        node.metadata.set_field(key, field, value)

    return Annotation(name, apply)


def _appended_field(name: str, field: str, item: Any) -> Annotation:
    """Append to an operation-level list; on a router it becomes a route default."""

    def apply(node: Router | Route) -> None:
        node.metadata.append_field(MetaKey.API_OPERATION, field, item)

    return Annotation(name, apply)


def _require_router(name: str, node: Router | Route) -> None:
    if not isinstance(node, Router):
        msg = f"{name}() describes the whole document; apply it to a Router, not a route."
        raise ConfigurationError(msg)


def _require_route(name: str, node: Router | Route) -> None:
    if not isinstance(node, Route):
        msg = f"{name}() describes a single operation; apply it to a route, not a Router."
        raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Document-level helpers
# ---------------------------------------------------------------------------


def api_object(obj: dict[str, Any]) -> Annotation:
    """Replace the router's whole document-level fragment."""

    def apply(node: Router | Route) -> None:
        _require_router("api_object", node)
        node.metadata.set(MetaKey.API_OBJECT, copy.deepcopy(obj))

    return Annotation("api_object", apply)


def api_info(info: dict[str, Any]) -> Annotation:
    return _object_field("api_info", "info", info)


def api_paths(paths: dict[str, Any]) -> Annotation:
    """Attach hand-written path items. Keys are relative to ancestor prefixes."""
    return _object_field("api_paths", "paths", paths)


def api_components(components: dict[str, Any]) -> Annotation:
    return _object_field("api_components", "components", components)


def api_tags(tags: list[dict[str, Any]]) -> Annotation:
    """Declare tag objects (name, description, ...) for the document."""
    return _object_field("api_tags", "tags", tags)


def api_external_docs(external_docs: dict[str, Any]) -> Annotation:
    return _object_field("api_external_docs", "externalDocs", external_docs)


def api_webhooks(webhooks: dict[str, Any]) -> Annotation:
    return _object_field("api_webhooks", "webhooks", webhooks)


def api_path_item(path: str, path_item: dict[str, Any]) -> Annotation:
    """Attach a single hand-written path item under ``paths[path]``."""

    def apply(node: Router | Route) -> None:
        _require_router("api_path_item", node)
        fragment = node.metadata.get(MetaKey.API_OBJECT)
        paths = fragment.get("paths") if isinstance(fragment, dict) else None
        updated = dict(paths) if isinstance(paths, dict) else {}
        updated[path] = path_item
        node.metadata.set_field(MetaKey.API_OBJECT, "paths", updated)

    return Annotation("api_path_item", apply)


# ---------------------------------------------------------------------------
# Helpers valid at both levels
# ---------------------------------------------------------------------------


def api_servers(servers: list[dict[str, Any]]) -> Annotation:
    return _scoped_field("api_servers", "servers", servers)


def api_security(security: list[dict[str, list[str]]]) -> Annotation:
    return _scoped_field("api_security", "security", security)


def api_tag(tag: str) -> Annotation:
    """Tag an operation. On a router, the tag becomes the default for its routes."""
    return _appended_field("api_tag", "tags", tag)


def api_parameter(param: dict[str, Any]) -> Annotation:
    """Add a parameter object. On a router, every route below inherits it."""
    return _appended_field("api_parameter", "parameters", param)


# ---------------------------------------------------------------------------
# Operation-level helpers
# ---------------------------------------------------------------------------


def api_operation(operation: dict[str, Any]) -> Annotation:
    """Replace the route's whole operation fragment."""

    def apply(node: Router | Route) -> None:
        _require_route("api_operation", node)
        node.metadata.set(MetaKey.API_OPERATION, copy.deepcopy(operation))

    return Annotation("api_operation", apply)


def api_summary(summary: str) -> Annotation:
    return _operation_field("api_summary", "summary", summary)


def api_description(description: str) -> Annotation:
    return _operation_field("api_description", "description", description)


def api_operation_id(operation_id: str) -> Annotation:
    return _operation_field("api_operation_id", "operationId", operation_id)


def api_request_body(request_body: dict[str, Any]) -> Annotation:
    """Set the request body object verbatim; it overrides declared body fields."""
    return _operation_field("api_request_body", "requestBody", request_body)


def api_responses(responses: dict[str, Any]) -> Annotation:
    return _operation_field("api_responses", "responses", responses)


def api_callbacks(callbacks: dict[str, Any]) -> Annotation:
    return _operation_field("api_callbacks", "callbacks", callbacks)


def api_deprecated() -> Annotation:
    return _operation_field("api_deprecated", "deprecated", True)
