"""Shared type aliases used across routedoc modules."""

from typing import Any, TypeAlias

# The aggregated OpenAPI document, a plain JSON-shaped dict
Document: TypeAlias = dict[str, Any]

Operation: TypeAlias = dict[str, Any]

# path -> method -> operation
Paths: TypeAlias = dict[str, dict[str, Operation]]
