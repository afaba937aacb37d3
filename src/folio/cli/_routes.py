"""``folio routes``: list the route table.

Prints every file in table order with its kind.  Table order is the
tie-break for matching, so this is also the order routes are tried in.
"""

import argparse

from folio.cli._table import resolver_from_args


def run_routes(args: argparse.Namespace) -> None:
    """Print a KIND / PATH table of the route files."""
    resolver = resolver_from_args(args)
    files = list(resolver.table)
    if not files:
        print("No route files found.")
        return

    rows = [(f.kind.value, f.path) for f in files]
    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header

    fmt = f"{{:<{max_kind}}}  {{}}"
    print(fmt.format("KIND", "PATH"))
    sep_len = max_kind + 2 + max(len(r[1]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, path in rows:
        print(fmt.format(kind, path))
