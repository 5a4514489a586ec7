"""Structured input declarations shared by routers and routes.

Declarations record what a handler reads from the request — body fields,
path parameters, query parameters, uploaded files — as schema fragments.
On a router they act as defaults for every route it owns; a route's own
declaration wins field by field.

Usage::

    orders = Router("/orders/:order_id").param("order_id", int)
    orders.get("/lines").query("limit", int, required=False)
    orders.post("/attachments").file("scan").body(AttachmentMeta)
"""

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from routedoc.errors import ConfigurationError
from routedoc.merge import deep_merge
from routedoc.metadata import MetadataStore, MetaKey
from routedoc.schema import dataclass_to_schema, type_to_schema

if TYPE_CHECKING:
    from routedoc.annotations import Annotation

# Schema for a single uploaded file part
_BINARY_SCHEMA: dict[str, str] = {"type": "string", "format": "binary"}


class Declarable:
    """Mixin for nodes that carry a ``metadata`` store.

    Every method returns ``self`` so declarations chain.
    """

    __slots__ = ()

    metadata: MetadataStore

    def use(self, *annotations: "Annotation") -> Self:
        """Apply documentation annotations to this node."""
        for annotation in annotations:
            annotation.apply(self)
        return self

    def body(self, schema: Mapping[str, Any] | type) -> Self:
        """Declare the request body schema.

        Accepts a JSON Schema mapping or a dataclass type. Repeated calls
        deep-merge into the existing declaration.
        """
        if isinstance(schema, type) and dataclasses.is_dataclass(schema):
            fragment = dataclass_to_schema(schema)
        elif isinstance(schema, Mapping):
            fragment = dict(schema)
        else:
            msg = (
                f"Request body schema must be a mapping or a dataclass, "
                f"got {type(schema).__name__}"
            )
            raise ConfigurationError(msg)

        current = self.metadata.get(MetaKey.REQUEST_BODY)
        self.metadata.set(MetaKey.REQUEST_BODY, deep_merge(current, fragment))
        return self

    def param(self, name: str, annotation: Any = str, **extra: Any) -> Self:
        """Declare a path parameter (``:name`` in the route path)."""
        self.metadata.set_field(
            MetaKey.PATH_PARAMS, name, {"schema": type_to_schema(annotation), **extra}
        )
        return self

    def query(self, name: str, annotation: Any = str, **extra: Any) -> Self:
        """Declare a query-string parameter."""
        self.metadata.set_field(
            MetaKey.QUERY, name, {"schema": type_to_schema(annotation), **extra}
        )
        return self

    def file(self, name: str, *, multiple: bool = False, **extra: Any) -> Self:
        """Declare an uploaded file field.

        Any file field switches the request body to ``multipart/form-data``.
        """
        schema: dict[str, Any] = dict(_BINARY_SCHEMA)
        if multiple:
            schema = {"type": "array", "items": schema}
        self.metadata.set_field(MetaKey.FILES, name, {"schema": schema, **extra})
        return self
