"""Resolution facade: request path to content file, layouts, and params.

Ties the components together for one request::

    request path
      -> root precedence        ("" only: route beats index)
      -> group folder locator   (literal and group-hidden routes)
      -> dynamic route matcher  ([name] and [...name] routes)
      -> layout chain assembler (always, so not-found keeps its shell)

Resolution is a pure function of the table and the request.  The table
is shared read-only; params and layout chains are built fresh for every
call, so one ``Resolver`` can serve any number of concurrent requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from folio.config import FolioConfig
from folio.routing.groups import group_directory, locate_group_folder
from folio.routing.layouts import LayoutChain, assemble_layouts, render_order
from folio.routing.matcher import BoundParams, match_route
from folio.routing.request import RequestPath
from folio.routing.segments import is_group
from folio.routing.table import RouteFile, RouteKind, RouteTable, load_route_table

logger = logging.getLogger("folio.routing")


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Everything a renderer needs to answer one request.

    Attributes:
        pathname: The normalized request path (``""`` for the root).
        content_file: The matched ROUTE/INDEX file, or ``None``.
        layout_chain: Layouts root-to-leaf (see :mod:`folio.routing.layouts`).
        params: Parameters bound by a dynamic route.
        root_layout: The top-level layout, the outermost shell of every page.
        not_found_file: The top-level ``not-found`` file, if any.
    """

    pathname: str
    content_file: RouteFile | None = None
    layout_chain: LayoutChain = ()
    params: BoundParams = field(default_factory=dict)
    root_layout: RouteFile | None = None
    not_found_file: RouteFile | None = None

    @property
    def found(self) -> bool:
        return self.content_file is not None

    @property
    def is_api(self) -> bool:
        """True when the content is a ROUTE file (served without layouts)."""
        return self.content_file is not None and self.content_file.kind is RouteKind.ROUTE

    @property
    def render_order(self) -> LayoutChain:
        """Layouts in wrapping order: leaf first, top-level layout last."""
        ordered = render_order(self.layout_chain)
        if self.root_layout is not None and self.root_layout not in ordered:
            ordered = (*ordered, self.root_layout)
        return ordered

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly summary."""
        return {
            "pathname": "/" + self.pathname,
            "content_file": self.content_file.path if self.content_file else None,
            "layouts": [layout.path for layout in self.layout_chain],
            "params": {k: list(v) if isinstance(v, tuple) else v for k, v in self.params.items()},
            "not_found_file": self.not_found_file.path if self.not_found_file else None,
        }


class Resolver:
    """Resolves request paths against an immutable :class:`RouteTable`.

    Usage::

        resolver = Resolver(build_route_table(paths, routes_dir="src/app"))
        result = resolver.resolve("/users/42")
        result.content_file.path   # "users/[id]/index.py"
        result.params              # {"id": "42"}
    """

    __slots__ = ("config", "table")

    def __init__(self, table: RouteTable, config: FolioConfig | None = None) -> None:
        self.table = table
        self.config = config or FolioConfig(extension=table.extension)

    @classmethod
    def from_config(cls, config: FolioConfig) -> Resolver:
        """Build the route table described by *config* and wrap it.

        Raises:
            RouteTableError: If the listing or routes directory is unusable.
        """
        return cls(load_route_table(config), config)

    def resolve(self, request: RequestPath | str) -> ResolutionResult:
        """Resolve a request path (a :class:`RequestPath` or raw URI)."""
        if isinstance(request, str):
            request = RequestPath.parse(request, project_name=self.config.project_name)

        if request.is_root:
            result = self._resolve_root(request)
        else:
            result = self._resolve_path(request)

        logger.debug(
            "Resolved %r -> %s (%d layout(s))",
            result.pathname,
            result.content_file.path if result.content_file else "<not found>",
            len(result.layout_chain),
        )
        return result

    def blocked(self, request: RequestPath | str) -> ResolutionResult:
        """An empty result for a request that must not reach its content."""
        if isinstance(request, str):
            request = RequestPath.parse(request, project_name=self.config.project_name)
        return ResolutionResult(
            pathname=request.pathname,
            root_layout=self._root_file("layout"),
            not_found_file=self._root_file("not-found"),
        )

    def loading_files(self) -> list[tuple[str, RouteFile]]:
        """Every ``loading`` file with the URL it covers (``/`` for the root)."""
        return [
            ("/" + "/".join(f.directory), f) for f in self.table.of_kind(RouteKind.LOADING)
        ]

    # -- Internals --

    def _resolve_root(self, request: RequestPath) -> ResolutionResult:
        content = self._root_file("route") or self._root_file("index")
        return self._result(request, content, assemble_layouts(request, self.table))

    def _resolve_path(self, request: RequestPath) -> ResolutionResult:
        content: RouteFile | None = None
        params: BoundParams = {}
        matched: RouteFile | None = None

        located = locate_group_folder(request.segments, self.table)
        if located and is_group(located):
            content = self._explicit_group_file(request)
        elif located:
            content = self.table.get(located)

        if content is None:
            match = match_route(request, self.table)
            if match is not None:
                content = matched = match.file
                params = match.params

        chain = assemble_layouts(
            request,
            self.table,
            group_dir=group_directory(located),
            matched=matched,
        )
        return self._result(request, content, chain, params)

    def _explicit_group_file(self, request: RequestPath) -> RouteFile | None:
        # The URL names the group, so look exactly where it points.
        return self.table.file_at(request.segments, "route") or self.table.file_at(
            request.segments, "index"
        )

    def _root_file(self, stem: str) -> RouteFile | None:
        return self.table.file_at((), stem)

    def _result(
        self,
        request: RequestPath,
        content: RouteFile | None,
        chain: LayoutChain,
        params: BoundParams | None = None,
    ) -> ResolutionResult:
        return ResolutionResult(
            pathname=request.pathname,
            content_file=content,
            layout_chain=chain,
            params=params if params is not None else {},
            root_layout=self._root_file("layout"),
            not_found_file=self._root_file("not-found"),
        )
