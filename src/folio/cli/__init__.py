"""Folio CLI: route listing, resolution, duplicate checks, and a local server.

Entry point registered as ``folio`` in ``pyproject.toml``::

    [project.scripts]
    folio = "folio.cli:main"
"""

import argparse
import sys


def _add_table_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root directory (default: current directory)",
    )
    parser.add_argument("--routes-dir", default=None, help="Routes root relative to the project")
    parser.add_argument("--extension", default=None, help="Content file extension (e.g. py, php)")
    parser.add_argument("--files-list", default=None, help="JSON listing of route files")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``folio`` command."""
    parser = argparse.ArgumentParser(
        prog="folio",
        description="Folio: filesystem-convention routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- folio routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table")
    _add_table_options(routes_parser)

    # -- folio resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a request path")
    resolve_parser.add_argument("path", help="Request path (e.g. /users/42)")
    _add_table_options(resolve_parser)
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolution as JSON",
    )

    # -- folio check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Detect duplicate routes")
    _add_table_options(check_parser)

    # -- folio run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the routes with uvicorn")
    _add_table_options(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Production mode (skips the duplicate route check)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from folio.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from folio.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "check":
        from folio.cli._check import run_check

        run_check(args)
    elif args.command == "run":
        from folio.cli._run import run_server

        run_server(args)
