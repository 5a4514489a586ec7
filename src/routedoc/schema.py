"""Python type annotations to JSON Schema fragments.

Used by the declaration calls (``body``, ``param``, ``query``) so a route
can describe its inputs with plain types and dataclasses instead of
hand-written schema dicts::

    @dataclass(frozen=True)
    class NewOrder:
        sku: str
        quantity: int = 1

    dataclass_to_schema(NewOrder)
    # {"type": "object",
    #  "properties": {"sku": {"type": "string"}, "quantity": {"type": "integer"}},
    #  "required": ["sku"]}
"""

import dataclasses
import types
import typing
from typing import Any, Union, get_args, get_origin

# Python type → JSON Schema type
_TYPE_MAP: dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
}


def type_to_schema(annotation: Any) -> dict[str, Any]:
    """Convert a Python type annotation to a JSON Schema fragment.

    Supports: ``str``, ``int``, ``float``, ``bool``, ``list[X]``,
    ``dict[str, X]``, ``X | None`` and nested dataclasses. Anything else
    falls back to ``{"type": "string"}``.
    """
    if annotation in _TYPE_MAP:
        return {"type": _TYPE_MAP[annotation]}

    if _is_optional(annotation):
        return type_to_schema(_unwrap_optional(annotation))

    origin = get_origin(annotation)
    if origin is list or annotation is list:
        args = get_args(annotation)
        if args:
            return {"type": "array", "items": type_to_schema(args[0])}
        return {"type": "array"}

    if origin is dict or annotation is dict:
        return {"type": "object"}

    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return dataclass_to_schema(annotation)

    # Fallback
    return {"type": "string"}


def dataclass_to_schema[T](cls: type[T]) -> dict[str, Any]:
    """Generate an object schema from a dataclass.

    Fields without a default (or default factory) and not typed
    ``X | None`` are listed in ``required``; the key is omitted when
    nothing is required.
    """
    if not dataclasses.is_dataclass(cls):
        msg = f"{cls.__name__} is not a dataclass — schema generation requires a dataclass"
        raise TypeError(msg)

    hints = typing.get_type_hints(cls)
    properties: dict[str, Any] = {}
    required: list[str] = []

    for field in dataclasses.fields(cls):
        annotation = hints.get(field.name, field.type)
        properties[field.name] = type_to_schema(annotation)
        has_default = (
            field.default is not dataclasses.MISSING
            or field.default_factory is not dataclasses.MISSING
        )
        if not has_default and not _is_optional(annotation):
            required.append(field.name)

    result: dict[str, Any] = {
        "type": "object",
        "properties": properties,
    }
    if required:
        result["required"] = required
    return result


def _is_optional(annotation: Any) -> bool:
    """Check if an annotation is X | None."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return type(None) in get_args(annotation)
    return False


def _unwrap_optional(annotation: Any) -> Any:
    """Extract the non-None type from X | None."""
    non_none = [a for a in get_args(annotation) if a is not type(None)]
    if len(non_none) == 1:
        return non_none[0]
    # Multi-type union, fall back to string
    return str
