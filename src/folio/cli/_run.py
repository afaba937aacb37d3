"""``folio run``: serve a project's routes with uvicorn."""

import argparse
import sys

from folio.cli._table import config_from_args


def run_server(args: argparse.Namespace) -> None:
    """Build the app from the command line and serve it.

    The route table is built before the server starts, so an unusable
    routes directory fails fast with exit code 1.
    """
    from folio.app import App
    from folio.errors import FolioError

    config = config_from_args(args)
    app = App(config)
    try:
        app.run()
    except FolioError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
