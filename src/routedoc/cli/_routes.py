"""``routedoc routes`` — list documented operations.

Resolves an import string to a Router, explores it, and prints every
operation in the resulting document with method, path and label.
"""

import argparse
import sys

from routedoc.cli._resolve import resolve_router
from routedoc.config import ExplorerConfig
from routedoc.explorer import explore


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / OPERATION table for ``args.router``.

    The label is the operation id, falling back to the summary.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = ExplorerConfig(title=args.title) if args.title else ExplorerConfig()
    document = explore(router, config)

    rows: list[tuple[str, str, str]] = []
    for path, item in document["paths"].items():
        if not isinstance(item, dict):
            continue
        for method, operation in item.items():
            label = ""
            if isinstance(operation, dict):
                label = operation.get("operationId") or operation.get("summary") or ""
            rows.append((method.upper(), path, label))

    if not rows:
        print("No documented routes.")
        return

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "OPERATION"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, label in rows:
        print(fmt.format(method, path, label))
