"""``folio resolve``: show how a request path resolves."""

import argparse
import json

from folio.cli._table import resolver_from_args


def run_resolve(args: argparse.Namespace) -> None:
    """Print the content file, layout chain, and params for ``args.path``.

    Exits 1 when no content file matches.
    """
    resolver = resolver_from_args(args)
    result = resolver.resolve(args.path)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"pathname: /{result.pathname}")
        print(f"content:  {result.content_file.path if result.content_file else '<not found>'}")
        print("layouts:")
        for layout in result.layout_chain:
            print(f"  {layout.path}")
        if result.params:
            print("params:")
            for name, value in result.params.items():
                shown = "/".join(value) if isinstance(value, tuple) else value
                print(f"  {name} = {shown}")

    if not result.found:
        raise SystemExit(1)
