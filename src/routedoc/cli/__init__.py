"""Routedoc CLI — inspect the documentation a router tree produces.

Entry point registered as ``routedoc`` in ``pyproject.toml``::

    [project.scripts]
    routedoc = "routedoc.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routedoc`` command."""
    parser = argparse.ArgumentParser(
        prog="routedoc",
        description="Routedoc — OpenAPI documents from annotated router trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routedoc routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List documented operations")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.api:router or myapp.main:app); defaults to router, then api",
    )
    routes_parser.add_argument(
        "--title",
        default=None,
        help="Document title used while exploring",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routedoc.cli._routes import run_routes

        run_routes(args)
