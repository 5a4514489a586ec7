"""Routing — the route tree the explorer walks.

Routers group routes under a shared prefix and can be mounted inside each
other. Nodes only carry documentation metadata; dispatch lives elsewhere.
"""
