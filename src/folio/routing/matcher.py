"""Dynamic route matching.

Matches a request against route files containing ``[name]`` or
``[...name]`` segments.  The table is scanned in order and the first file
that satisfies every check wins; there is no backtracking and no
specificity ranking, so table order is the tie-break.

Each file is matched in exactly one mode, picked from its whole path:

- **single-dynamic**: exactly one ``[..]`` bracket group and no ``[...``
- **catch-all**: contains ``[...``

Files with no brackets (literal routes, found by the group folder
locator) or with several single-dynamic segments are never matched here.
"""

from __future__ import annotations

from dataclasses import dataclass

from folio.routing.request import RequestPath
from folio.routing.segments import (
    CatchAll,
    SingleDynamic,
    bracket_count,
    classify,
    has_catch_all,
    strip_groups,
)
from folio.routing.table import RouteFile, RouteKind, RouteTable

BoundParams = dict[str, str | tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """A dynamic route match and the parameters it bound."""

    file: RouteFile
    params: BoundParams


def match_route(request: RequestPath, table: RouteTable) -> RouteMatch | None:
    """Match a non-root request against the table's dynamic routes.

    Returns ``None`` when no file matches: a normal not-found outcome,
    not an error.
    """
    if request.is_root:
        return None

    for route_file in table.content_files:
        if has_catch_all(route_file.path):
            params = _match_catch_all(route_file, request)
        elif bracket_count(route_file.path) == 1:
            params = _match_single(route_file, request)
        else:
            continue
        if params is not None:
            return RouteMatch(file=route_file, params=params)
    return None


def _match_single(route_file: RouteFile, request: RequestPath) -> BoundParams | None:
    """Match a file with exactly one ``[name]`` segment.

    Segments before the dynamic one must match literally; substituting the
    request's value back into the route directory must then reproduce the
    request path exactly (so a mere prefix never matches).
    """
    filtered = strip_groups(route_file.directory)
    requested = request.segments

    for index, segment in enumerate(filtered):
        token = classify(segment)
        if isinstance(token, SingleDynamic):
            if index >= len(requested):
                return None
            value = requested[index]
            substituted = (*filtered[:index], value, *filtered[index + 1 :])
            if substituted != requested:
                return None
            return {token.name: value}
        if index >= len(requested) or segment != requested[index]:
            return None
    return None


def _match_catch_all(route_file: RouteFile, request: RequestPath) -> BoundParams | None:
    """Match a file carrying a ``[...name]`` marker.

    The cleaned route (groups stripped) up to the marker must be a literal
    prefix of the request path; the rest of the request is bound, in order.
    ROUTE files match on the prefix alone.  INDEX files also need the
    marker to be a whole directory segment, and the directory rebuilt from
    the captured tail must equal the request path.
    """
    cleaned = strip_groups(route_file.segments)
    cleaned_path = "/".join(cleaned)

    marker_index, marker = _find_catch_all(cleaned)
    if marker is None:
        return None

    prefix = cleaned_path[: cleaned_path.index(marker.marker)]
    pathname = request.pathname
    if not pathname.startswith(prefix):
        return None
    tail = pathname[len(prefix) :].strip("/")
    if not tail:
        return None
    captured = tuple(tail.split("/"))

    if route_file.kind is RouteKind.ROUTE:
        return {marker.name: captured}

    directory = cleaned[:-1]
    if marker_index >= len(directory) or directory[marker_index] != marker.marker:
        return None
    if marker_index >= len(request.segments):
        return None
    rebuilt = "/".join((*directory[:marker_index], tail, *directory[marker_index + 1 :]))
    if rebuilt != pathname:
        return None
    return {marker.name: captured}


def _find_catch_all(segments: tuple[str, ...]) -> tuple[int, CatchAll | None]:
    for index, segment in enumerate(segments):
        token = classify(segment)
        if isinstance(token, CatchAll):
            return index, token
    return -1, None
