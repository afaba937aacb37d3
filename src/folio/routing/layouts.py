"""Layout chain assembly.

Collects the ``layout`` files wrapping a request, root-to-leaf.  The
top-level layout is not part of the walk: it is the outermost shell of
every page and only stands in as the sole entry when nothing nested
applies.  Renderers consume the chain leaf-to-root: innermost content
first, then each enclosing layout.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from folio.routing.request import RequestPath
from folio.routing.table import RouteFile, RouteTable

LayoutChain = tuple[RouteFile, ...]


def assemble_layouts(
    request: RequestPath,
    table: RouteTable,
    *,
    group_dir: Sequence[str] = (),
    matched: RouteFile | None = None,
) -> LayoutChain:
    """Build the layout chain for a request.

    Args:
        request: The normalized request path.
        table: The route table to check for layout files.
        group_dir: Directory of a group-hidden content file.  When given it
            replaces the literal request segments, so layouts inside the
            group (and not those of a same-named literal path) apply.
        matched: Content file found by the dynamic matcher.  Its own
            directory is walked too, adding layouts along its physical path.

    Returns:
        Layout files root-to-leaf, each at most once.  Falls back to the
        top-level layout alone when the walks find nothing.
    """
    chain: list[RouteFile] = []
    seen: set[str] = set()

    _walk(group_dir or request.segments, table, chain, seen)
    if matched is not None:
        _walk(matched.directory, table, chain, seen)

    if not chain:
        root_layout = table.file_at((), "layout")
        if root_layout is not None:
            chain.append(root_layout)

    return tuple(chain)


def render_order(chain: LayoutChain) -> LayoutChain:
    """Leaf-to-root order in which layouts wrap rendered content."""
    return tuple(reversed(chain))


def _walk(
    segments: Iterable[str],
    table: RouteTable,
    chain: list[RouteFile],
    seen: set[str],
) -> None:
    directory: list[str] = []
    for segment in segments:
        directory.append(segment)
        layout = table.file_at(directory, "layout")
        if layout is not None and layout.path not in seen:
            seen.add(layout.path)
            chain.append(layout)
