"""Filesystem-convention routing: the file is the route.

Resolves a request path against a flat listing of files under the routes
root, without any route registration::

    src/app/
      layout.py                  # Top-level shell
      index.py                   # GET /
      (marketing)/about/index.py # GET /about        (group folder, invisible)
      users/[id]/index.py        # GET /users/42     -> {"id": "42"}
      docs/[...slug]/route.py    # GET /docs/a/b     -> {"slug": ("a", "b")}
      dashboard/
        layout.py                # Wraps everything under /dashboard

Usage::

    table = build_route_table(paths, routes_dir="src/app")
    resolver = Resolver(table)
    result = resolver.resolve("/users/42")
"""

from folio.routing.duplicates import DuplicateRoute, check_duplicate_routes, find_duplicates
from folio.routing.groups import locate_group_folder
from folio.routing.layouts import LayoutChain, assemble_layouts
from folio.routing.matcher import BoundParams, RouteMatch, match_route
from folio.routing.request import RequestPath
from folio.routing.resolver import ResolutionResult, Resolver
from folio.routing.segments import CatchAll, Group, Literal, Segment, SingleDynamic, classify
from folio.routing.table import (
    RouteFile,
    RouteKind,
    RouteTable,
    build_route_table,
    load_files_list,
    load_route_table,
    scan_routes_dir,
)

__all__ = [
    "BoundParams",
    "CatchAll",
    "DuplicateRoute",
    "Group",
    "LayoutChain",
    "Literal",
    "RequestPath",
    "ResolutionResult",
    "Resolver",
    "RouteFile",
    "RouteKind",
    "RouteMatch",
    "RouteTable",
    "Segment",
    "SingleDynamic",
    "assemble_layouts",
    "build_route_table",
    "check_duplicate_routes",
    "classify",
    "find_duplicates",
    "load_files_list",
    "load_route_table",
    "locate_group_folder",
    "match_route",
    "scan_routes_dir",
]
