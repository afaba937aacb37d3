"""Duplicate route detection.

Two files that differ only by group folders serve the same URL::

    about/route.py
    (marketing)/about/route.py     -> both answer /about

That is a configuration defect, not a runtime fault, so it is reported
once per build rather than raised per request.  Layouts are exempt: a
group may legitimately carry its own ``layout`` for a shared path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from folio.config import FolioConfig
from folio.routing.segments import strip_groups
from folio.routing.table import RouteFile, RouteKind, RouteTable

logger = logging.getLogger("folio.routing")

_REPORTED_KINDS = frozenset({RouteKind.ROUTE, RouteKind.INDEX})


@dataclass(frozen=True, slots=True)
class DuplicateRoute:
    """Physical files colliding on one logical route.

    Attributes:
        logical_route: The path with every group folder removed.
        physical_paths: Colliding files, in table order.
    """

    logical_route: str
    physical_paths: tuple[str, ...]

    def messages(self) -> list[str]:
        """Human-readable report lines for this conflict."""
        lines = [f"Duplicate route found after normalization: {self.logical_route}"]
        lines.extend(f"- Grouped original route: {path}" for path in self.physical_paths)
        return lines


def logical_route(route_file: RouteFile) -> str:
    """The collision key: the file's path with group folders stripped."""
    return "/".join(strip_groups(route_file.segments))


def find_duplicates(table: RouteTable) -> list[DuplicateRoute]:
    """Report every logical route served by more than one ROUTE/INDEX file.

    Conflicts are listed in order of their first file's table position.
    A path listed more than once (e.g. with both separator styles) is one
    file and never collides with itself.
    """
    by_key: dict[str, list[RouteFile]] = {}
    seen: set[str] = set()
    for route_file in table:
        if not route_file.has_route_extension or route_file.path in seen:
            continue
        seen.add(route_file.path)
        by_key.setdefault(logical_route(route_file), []).append(route_file)

    conflicts: list[DuplicateRoute] = []
    for key, files in by_key.items():
        if len(files) < 2 or files[0].kind not in _REPORTED_KINDS:
            continue
        conflicts.append(DuplicateRoute(key, tuple(f.path for f in files)))
    return conflicts


def check_duplicate_routes(table: RouteTable, config: FolioConfig) -> list[DuplicateRoute]:
    """Run :func:`find_duplicates` unless running in production.

    Each conflict is logged as a warning.  In production mode the check is
    skipped and an empty list returned; ``folio check`` still runs it.
    """
    if config.production:
        logger.debug("Production mode: duplicate route check skipped")
        return []

    conflicts = find_duplicates(table)
    for conflict in conflicts:
        logger.warning(
            "Duplicate route %r: %s",
            conflict.logical_route,
            ", ".join(conflict.physical_paths),
        )
    return conflicts
