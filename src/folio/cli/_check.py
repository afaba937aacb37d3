"""``folio check``: duplicate route detection.

Always runs the check, whatever the production setting, and exits with
code 1 if any logical route is served by more than one file.
"""

import argparse
import sys

from folio.cli._table import resolver_from_args
from folio.routing.duplicates import find_duplicates


def run_check(args: argparse.Namespace) -> None:
    """Print duplicate route reports; ``SystemExit(1)`` if there are any."""
    resolver = resolver_from_args(args)
    conflicts = find_duplicates(resolver.table)

    if not conflicts:
        print(f"No duplicate routes ({len(resolver.table)} file(s) checked).")
        return

    for conflict in conflicts:
        for line in conflict.messages():
            print(line, file=sys.stderr)
    print(f"{len(conflicts)} duplicate route(s) found.", file=sys.stderr)
    raise SystemExit(1)
