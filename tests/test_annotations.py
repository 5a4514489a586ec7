"""Tests for routedoc.annotations — fragment-attachment helpers."""

from typing import Any

import pytest

from routedoc.annotations import (
    Annotation,
    api_callbacks,
    api_components,
    api_deprecated,
    api_description,
    api_external_docs,
    api_info,
    api_object,
    api_operation,
    api_operation_id,
    api_parameter,
    api_path_item,
    api_paths,
    api_request_body,
    api_responses,
    api_security,
    api_servers,
    api_summary,
    api_tag,
    api_tags,
    api_webhooks,
)
from routedoc.errors import ConfigurationError
from routedoc.metadata import MetaKey
from routedoc.routing.route import Route
from routedoc.routing.router import Router


@pytest.fixture
def router() -> Router:
    return Router("/test")


@pytest.fixture
def route(router: Router) -> Route:
    return router.get("/item")


def _object(node: Router | Route) -> Any:
    return node.metadata.get(MetaKey.API_OBJECT)


def _operation(node: Router | Route) -> Any:
    return node.metadata.get(MetaKey.API_OPERATION)


# =============================================================================
# Document-level helpers
# =============================================================================


class TestDocumentLevel:
    def test_api_object(self, router: Router) -> None:
        src = {"openapi": "3.1.0", "info": {"version": "1.0.0", "title": "My api"}}
        router.use(api_object(src))
        assert _object(router) == src
        assert _operation(router) is None

    def test_api_object_replaces(self, router: Router) -> None:
        router.use(api_info({"title": "old"}), api_object({"info": {"title": "new"}}))
        assert _object(router) == {"info": {"title": "new"}}

    def test_api_info(self, router: Router) -> None:
        src = {"version": "2.0.0", "title": "My api 2"}
        router.use(api_info(src))
        assert _object(router) == {"info": src}

    def test_api_paths(self, router: Router) -> None:
        src = {"/path1": {"get": {"responses": {"200": {}}}}}
        router.use(api_paths(src))
        assert _object(router) == {"paths": src}

    def test_api_components(self, router: Router) -> None:
        src = {"schemas": {"Schema1": {"type": "object", "properties": {"str": {"type": "string"}}}}}
        router.use(api_components(src))
        assert _object(router) == {"components": src}

    def test_api_tags(self, router: Router) -> None:
        src = [{"name": "tag1", "description": "some description"}]
        router.use(api_tags(src))
        assert _object(router) == {"tags": src}

    def test_api_external_docs(self, router: Router) -> None:
        src = {"url": "http://localhost:8080", "description": "my docs"}
        router.use(api_external_docs(src))
        assert _object(router) == {"externalDocs": src}

    def test_api_webhooks(self, router: Router) -> None:
        src = {"/path1": {"get": {"responses": {"200": {}}}}}
        router.use(api_webhooks(src))
        assert _object(router) == {"webhooks": src}

    def test_api_path_item(self, router: Router) -> None:
        src = {"get": {"responses": {"200": {}}}}
        router.use(api_path_item("/path1", src))
        assert _object(router) == {"paths": {"/path1": src}}

    def test_api_path_item_accumulates(self, router: Router) -> None:
        first = {"get": {"responses": {"200": {}}}}
        second = {"post": {"responses": {"201": {}}}}
        router.use(api_path_item("/a", first), api_path_item("/b", second))
        assert _object(router) == {"paths": {"/a": first, "/b": second}}

    @pytest.mark.parametrize(
        "annotation",
        [
            api_object({}),
            api_info({"title": "x"}),
            api_paths({}),
            api_components({}),
            api_tags([]),
            api_external_docs({"url": "x"}),
            api_webhooks({}),
            api_path_item("/x", {}),
        ],
        ids=lambda a: a.name,
    )
    def test_rejected_on_route(self, route: Route, annotation: Annotation) -> None:
        with pytest.raises(ConfigurationError, match="apply it to a Router"):
            route.use(annotation)
        assert not route.metadata


# =============================================================================
# Helpers scoped by the node they are applied to
# =============================================================================


class TestScoped:
    def test_servers_on_router(self, router: Router) -> None:
        src = [{"url": "http://localhost:8080", "description": "my server"}]
        router.use(api_servers(src))
        assert _object(router) == {"servers": src}

    def test_servers_on_route(self, route: Route) -> None:
        src = [{"url": "http://localhost:8080", "description": "my server"}]
        route.use(api_servers(src))
        assert _object(route) is None
        assert _operation(route) == {"servers": src}

    def test_security_on_router(self, router: Router) -> None:
        src = [{"sec1": ["oauth2", "token"]}]
        router.use(api_security(src))
        assert _object(router) == {"security": src}

    def test_security_on_route(self, route: Route) -> None:
        src = [{"sec1": ["oauth2", "token"]}]
        route.use(api_security(src))
        assert _operation(route) == {"security": src}

    def test_tag_on_route(self, route: Route) -> None:
        route.use(api_tag("tag2"))
        assert _operation(route) == {"tags": ["tag2"]}

    def test_tag_appends(self, route: Route) -> None:
        route.use(api_tag("a"), api_tag("b"))
        assert _operation(route) == {"tags": ["a", "b"]}

    def test_tag_on_router_sets_default(self, router: Router) -> None:
        router.use(api_tag("Orders"))
        assert _operation(router) == {"tags": ["Orders"]}
        assert _object(router) is None

    def test_parameter_on_route(self, route: Route) -> None:
        src = {"name": "xyz", "in": "path", "schema": {"type": "string"}}
        route.use(api_parameter(src))
        assert _operation(route) == {"parameters": [src]}

    def test_parameter_appends(self, route: Route) -> None:
        a = {"name": "a", "in": "query"}
        b = {"name": "b", "in": "header"}
        route.use(api_parameter(a), api_parameter(b))
        assert _operation(route) == {"parameters": [a, b]}

    def test_parameter_on_router(self, router: Router) -> None:
        src = {"name": "X-Trace", "in": "header"}
        router.use(api_parameter(src))
        assert _operation(router) == {"parameters": [src]}


# =============================================================================
# Operation-level helpers
# =============================================================================


class TestOperationLevel:
    def test_api_operation(self, route: Route) -> None:
        src = {"responses": {"200": {}}, "description": "some operation"}
        route.use(api_operation(src))
        assert _operation(route) == src

    def test_api_summary(self, route: Route) -> None:
        route.use(api_summary("Some summary"))
        assert _operation(route) == {"summary": "Some summary"}

    def test_api_description(self, route: Route) -> None:
        route.use(api_description("Some description"))
        assert _operation(route) == {"description": "Some description"}

    def test_api_operation_id(self, route: Route) -> None:
        route.use(api_operation_id("uniq-id"))
        assert _operation(route) == {"operationId": "uniq-id"}

    def test_api_request_body(self, route: Route) -> None:
        src = {
            "content": {
                "application/json": {
                    "schema": {"type": "object", "properties": {"str": {"type": "string"}}}
                }
            }
        }
        route.use(api_request_body(src))
        assert _operation(route) == {"requestBody": src}

    def test_api_responses(self, route: Route) -> None:
        src = {"404": {"description": "not found"}}
        route.use(api_responses(src))
        assert _operation(route) == {"responses": src}

    def test_api_callbacks(self, route: Route) -> None:
        src = {"onEvent": {"{$request.body#/url}": {"post": {"responses": {"200": {}}}}}}
        route.use(api_callbacks(src))
        assert _operation(route) == {"callbacks": src}

    def test_api_deprecated(self, route: Route) -> None:
        route.use(api_deprecated())
        assert _operation(route) == {"deprecated": True}

    def test_setters_replace(self, route: Route) -> None:
        route.use(api_summary("first"), api_summary("second"))
        assert _operation(route) == {"summary": "second"}

    def test_helpers_combine(self, route: Route) -> None:
        route.use(api_summary("List"), api_tag("Orders"), api_deprecated())
        assert _operation(route) == {"summary": "List", "tags": ["Orders"], "deprecated": True}

    @pytest.mark.parametrize(
        "annotation",
        [
            api_operation({}),
            api_summary("x"),
            api_description("x"),
            api_operation_id("x"),
            api_request_body({}),
            api_responses({}),
            api_callbacks({}),
            api_deprecated(),
        ],
        ids=lambda a: a.name,
    )
    def test_rejected_on_router(self, router: Router, annotation: Annotation) -> None:
        with pytest.raises(ConfigurationError, match="apply it to a route"):
            router.use(annotation)
        assert not router.metadata


class TestAnnotation:
    def test_callable(self, route: Route) -> None:
        annotation = api_summary("direct")
        annotation(route)
        assert _operation(route) == {"summary": "direct"}

    def test_named(self) -> None:
        assert api_deprecated().name == "api_deprecated"

    def test_does_not_touch_routing(self, router: Router, route: Route) -> None:
        router.use(api_info({"title": "x"}))
        route.use(api_summary("x"))
        assert router.routes == [route]
        assert router.routers == []


class TestSharedFragments:
    def test_shared_operation_stays_per_route(self, router: Router) -> None:
        shared = {"description": "common"}
        a = router.get("/a").use(api_operation(shared))
        b = router.get("/b").use(api_operation(shared), api_summary("only b"), api_tag("B"))

        assert _operation(a) == {"description": "common"}
        assert _operation(b) == {"description": "common", "summary": "only b", "tags": ["B"]}
        assert shared == {"description": "common"}

    def test_shared_object_stays_per_router(self) -> None:
        base = {"info": {"version": "2", "title": "Base"}}
        first = Router("/one").use(api_object(base))
        second = Router("/two").use(api_object(base), api_info({"title": "Two"}))

        assert _object(first) == {"info": {"version": "2", "title": "Base"}}
        assert _object(second) == {"info": {"title": "Two"}}
        assert base == {"info": {"version": "2", "title": "Base"}}

    def test_nested_values_are_copied(self, route: Route) -> None:
        operation = {"responses": {"200": {"description": "ok"}}}
        route.use(api_operation(operation))
        operation["responses"]["404"] = {}

        assert _operation(route) == {"responses": {"200": {"description": "ok"}}}
