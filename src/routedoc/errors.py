"""Routedoc exception hierarchy.

Raised while a route tree is being built. Exploration itself never raises
for metadata content: missing or malformed fragments are treated as absent.
"""


class RoutedocError(Exception):
    """Base for all routedoc-specific errors."""


class ConfigurationError(RoutedocError):
    """Raised when a route tree is assembled incorrectly.

    Typically at registration time: mounting a router inside itself,
    applying a route-only annotation to a router, or declaring a body
    schema that is not a mapping.
    """
