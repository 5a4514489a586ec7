"""Router — a routing group with a shared prefix.

Routers own routes and can mount other routers, forming the tree the
explorer walks. Mount order and registration order are preserved; the
explorer merges contributions in exactly that order.
"""

import logging
from collections.abc import Iterator

from routedoc.declarations import Declarable
from routedoc.errors import ConfigurationError
from routedoc.metadata import MetadataStore
from routedoc.routing.params import join_path
from routedoc.routing.route import Route

logger = logging.getLogger("routedoc.routing")


class Router(Declarable):
    """A group of routes mounted under ``prefix``.

    Usage::

        api = Router("/api")
        users = Router("/users", route_path="Users")
        users.get("/:id").param("id", int)
        api.mount(users, "/v1")
        # GET /api/v1/users/:id

    ``route_path`` is an optional human label; when set it names the
    default tag for routes under this router instead of the prefix.
    """

    __slots__ = ("metadata", "prefix", "route_path", "routers", "routes")

    def __init__(self, prefix: str | None = None, *, route_path: str | None = None) -> None:
        self.prefix = prefix
        self.route_path = route_path
        self.metadata = MetadataStore()
        # Mounted children, in mount order: (mount prefix, router)
        self.routers: list[tuple[str | None, Router]] = []
        # Owned routes, in registration order
        self.routes: list[Route] = []

    # -- Route registration --

    def route(self, method: str, path: str = "", *, name: str | None = None) -> Route:
        """Register a route and return it for further declarations.

        The method is stored lower-cased. Methods OpenAPI cannot describe
        (``connect``, custom verbs) are accepted; they are left out of the
        generated document.
        """
        route = Route(method=method.lower(), path=path, name=name)
        self.routes.append(route)
        return route

    def get(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("get", path, name=name)

    def put(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("put", path, name=name)

    def post(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("post", path, name=name)

    def delete(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("delete", path, name=name)

    def options(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("options", path, name=name)

    def head(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("head", path, name=name)

    def patch(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("patch", path, name=name)

    def trace(self, path: str = "", *, name: str | None = None) -> Route:
        return self.route("trace", path, name=name)

    # -- Nesting --

    def mount(self, router: "Router", prefix: str | None = None) -> "Router":
        """Mount *router* beneath this one and return it.

        Everything under *router* is documented at
        ``self.prefix + prefix + router.prefix + route.path``.

        The same router may be mounted again under a different prefix.

        Raises ``ConfigurationError`` if mounting would create a cycle, or
        if *router* is already mounted here under the same prefix.
        """
        if any(node is self for _full_prefix, node in router.walk()):
            msg = (
                f"Cannot mount router {router.prefix!r} inside {self.prefix!r}: "
                "it is the same router or one of its ancestors."
            )
            raise ConfigurationError(msg)
        if any(child is router and mounted == prefix for mounted, child in self.routers):
            msg = f"Router {router.prefix!r} is already mounted at {prefix!r} inside {self.prefix!r}."
            raise ConfigurationError(msg)

        self.routers.append((prefix, router))
        logger.debug("Mounted router %r at %r under %r", router.prefix, prefix, self.prefix)
        return router

    def walk(self) -> Iterator[tuple[str, "Router"]]:
        """Yield ``(full_prefix, router)`` for this router and everything below it.

        Depth-first, in mount order. ``full_prefix`` is where the router's
        own routes are documented (before placeholder rewriting)::

            api = Router("/api")
            users = api.mount(Router("/users"), "/v1")
            list(api.walk())
            # [("/api", api), ("/api/v1/users", users)]
        """
        yield from self._walk("")

    def _walk(self, base: str) -> Iterator[tuple[str, "Router"]]:
        full_prefix = join_path(base, self.prefix)
        yield full_prefix, self
        for mount_prefix, child in self.routers:
            yield from child._walk(join_path(full_prefix, mount_prefix))

    def __repr__(self) -> str:
        return (
            f"Router(prefix={self.prefix!r}, routes={len(self.routes)}, "
            f"routers={len(self.routers)})"
        )
