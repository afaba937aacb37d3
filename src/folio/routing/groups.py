"""Group folder location.

Group folders are invisible in URLs: ``/about`` may physically live at
``(marketing)/about/route.py``.  The locator finds that file so the
resolver can serve it and re-root layout discovery inside the group.
"""

from __future__ import annotations

from collections.abc import Sequence

from folio.routing.segments import is_group, strip_groups
from folio.routing.table import RouteKind, RouteTable


def locate_group_folder(request_segments: Sequence[str], table: RouteTable) -> str:
    """Find the group folder (or group-hidden file) serving a request.

    Two phases:

    1. A request segment that is itself a ``(group)`` is returned as-is:
       the URL names the group explicitly.
    2. Otherwise every ROUTE/INDEX file is compared, with its group
       segments stripped, against ``<path>/route.<ext>`` and
       ``<path>/index.<ext>``.  The first ROUTE match wins immediately; an
       INDEX match is kept only until a ROUTE match turns up.

    Returns:
        The explicit group segment, the winning file's (un-stripped)
        path, or ``""`` when nothing matches.
    """
    for segment in request_segments:
        if is_group(segment):
            return segment

    route_candidate = (*request_segments, f"route.{table.extension}")
    index_candidate = (*request_segments, f"index.{table.extension}")

    best: str = ""
    for route_file in table.content_files:
        cleaned = strip_groups(route_file.segments)
        if cleaned == route_candidate and route_file.kind is RouteKind.ROUTE:
            return route_file.path
        if cleaned == index_candidate and route_file.kind is RouteKind.INDEX and not best:
            best = route_file.path
    return best


def group_directory(located: str) -> tuple[str, ...]:
    """Directory whose layouts apply to a located group file.

    Returns the located file's directory segments when that directory
    passes through a group folder, else ``()`` (layouts then follow the
    literal request path).  An explicit group segment on its own is not a
    file path and also yields ``()``.
    """
    if "/" not in located:
        return ()
    directory = tuple(located.split("/")[:-1])
    if any(is_group(segment) for segment in directory):
        return directory
    return ()
