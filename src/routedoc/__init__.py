"""Routedoc — OpenAPI documents from annotated router trees.

Describe routes where they are declared, get one document for the whole
tree.

Basic usage::

    from routedoc import Router, api_info, api_summary, explore

    api = Router("/api").use(api_info({"title": "Orders", "version": "2.0.0"}))

    orders = Router("/orders", route_path="Orders")
    orders.get("/:id").param("id", int).use(api_summary("Fetch one order"))
    api.mount(orders, "/v1")

    document = explore(api)
    # document["paths"]["/api/v1/orders/{id}"]["get"]["tags"] == ["Orders"]
"""

__version__ = "0.1.0"
__all__ = [
    "Annotation",
    "ConfigurationError",
    "Explorer",
    "ExplorerConfig",
    "MetaKey",
    "MetadataStore",
    "Route",
    "Router",
    "RoutedocError",
    "api_callbacks",
    "api_components",
    "api_deprecated",
    "api_description",
    "api_external_docs",
    "api_info",
    "api_object",
    "api_operation",
    "api_operation_id",
    "api_parameter",
    "api_path_item",
    "api_paths",
    "api_request_body",
    "api_responses",
    "api_security",
    "api_servers",
    "api_summary",
    "api_tag",
    "api_tags",
    "api_webhooks",
    "explore",
    "get_api_object",
    "get_api_operation",
    "is_openapi_method",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "Annotation": "routedoc.annotations",
    "ConfigurationError": "routedoc.errors",
    "Explorer": "routedoc.explorer",
    "ExplorerConfig": "routedoc.config",
    "MetaKey": "routedoc.metadata",
    "MetadataStore": "routedoc.metadata",
    "Route": "routedoc.routing.route",
    "Router": "routedoc.routing.router",
    "RoutedocError": "routedoc.errors",
    "api_callbacks": "routedoc.annotations",
    "api_components": "routedoc.annotations",
    "api_deprecated": "routedoc.annotations",
    "api_description": "routedoc.annotations",
    "api_external_docs": "routedoc.annotations",
    "api_info": "routedoc.annotations",
    "api_object": "routedoc.annotations",
    "api_operation": "routedoc.annotations",
    "api_operation_id": "routedoc.annotations",
    "api_parameter": "routedoc.annotations",
    "api_path_item": "routedoc.annotations",
    "api_paths": "routedoc.annotations",
    "api_request_body": "routedoc.annotations",
    "api_responses": "routedoc.annotations",
    "api_security": "routedoc.annotations",
    "api_servers": "routedoc.annotations",
    "api_summary": "routedoc.annotations",
    "api_tag": "routedoc.annotations",
    "api_tags": "routedoc.annotations",
    "api_webhooks": "routedoc.annotations",
    "explore": "routedoc.explorer",
    "get_api_object": "routedoc.metadata",
    "get_api_operation": "routedoc.metadata",
    "is_openapi_method": "routedoc.metadata",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routedoc`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
