"""Locate the root Router for the CLI.

Import strings take the form ``"package.module:attribute.path"``. The
attribute path may be dotted, and may be left out entirely, in which case
the module is searched for a conventional name.
"""

import importlib
from types import ModuleType
from typing import Any

from routedoc.routing.router import Router

# Module attributes tried, in order, when the import string names no attribute
DEFAULT_NAMES = ("router", "api")


def resolve_router(import_string: str) -> Router:
    """Resolve *import_string* to the Router whose tree should be documented.

    The resolved object may be:

    - a ``Router``
    - a zero-argument factory returning one
    - a host object (an application, a blueprint) exposing its root
      Router as ``.router``

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute path does not exist.
        TypeError: If nothing Router-shaped is found, or a factory fails.
    """
    module_path, _, attr_path = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = _lookup(module, attr_path) if attr_path else _default(module)

    router = _unwrap(obj)
    if router is None and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Calling {import_string!r} to build a router failed: {exc}"
            raise TypeError(msg) from exc
        router = _unwrap(obj)

    if router is None:
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a routedoc.Router instance"
        raise TypeError(msg)
    return router


def _lookup(module: ModuleType, attr_path: str) -> Any:
    obj: Any = module
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


def _default(module: ModuleType) -> Any:
    for name in DEFAULT_NAMES:
        if hasattr(module, name):
            return getattr(module, name)
    tried = ", ".join(DEFAULT_NAMES)
    msg = f"module {module.__name__!r} has none of the default router names ({tried}); use 'module:attribute'"
    raise AttributeError(msg)


def _unwrap(obj: Any) -> Router | None:
    if isinstance(obj, Router):
        return obj
    inner = getattr(obj, "router", None)
    return inner if isinstance(inner, Router) else None
