"""Folio ASGI application.

Builds the route table once, checks it for duplicate routes, and then
resolves every HTTP request against it.  Rendering belongs to a
pluggable *renderer*: folio decides *what* answers a request (content
file, layout chain, params); the renderer decides how it looks.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from folio._internal.asgi import Receive, Scope, Send
from folio.config import FolioConfig
from folio.http.request import RequestContext
from folio.http.response import Response
from folio.routing.duplicates import DuplicateRoute, check_duplicate_routes
from folio.routing.resolver import ResolutionResult, Resolver
from folio.routing.table import RouteTable, load_route_table
from folio.server.errors import (
    duplicate_routes_response,
    internal_error_response,
    not_found_json,
    permission_denied_json,
)
from folio.server.sender import send_response

logger = logging.getLogger("folio.server")

RenderResult: TypeAlias = Response | str | dict[str, Any]
Renderer: TypeAlias = Callable[
    [ResolutionResult, RequestContext],
    RenderResult | Awaitable[RenderResult],
]


def describe_resolution(result: ResolutionResult, request: RequestContext) -> Response:
    """Default renderer: a JSON description of the resolution.

    Status is 404 when no content file matched.
    """
    data = result.to_dict()
    data["method"] = request.method
    response = Response.json(data)
    return response if result.found else response.with_status(404)


class App:
    """The folio application.

    Usage::

        app = App(FolioConfig(project_root="site"), renderer=my_renderer)

    Thread safety:
        The route table is built exactly once, on the first request or at
        lifespan startup, under a Lock with a double-check.  After that
        the app holds only immutable state and resolves requests
        concurrently without locking.
    """

    __slots__ = (
        "_duplicates",
        "_freeze_lock",
        "_frozen",
        "_resolver",
        "_table",
        "config",
        "renderer",
    )

    def __init__(
        self,
        config: FolioConfig | None = None,
        *,
        renderer: Renderer | None = None,
        table: RouteTable | None = None,
    ) -> None:
        self.config: FolioConfig = config or FolioConfig()
        self.renderer: Renderer = renderer or describe_resolution
        self._table: RouteTable | None = table
        self._resolver: Resolver | None = None
        self._duplicates: tuple[DuplicateRoute, ...] = ()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Frozen state --

    @property
    def resolver(self) -> Resolver:
        self._ensure_frozen()
        assert self._resolver is not None
        return self._resolver

    @property
    def duplicates(self) -> tuple[DuplicateRoute, ...]:
        """Duplicate routes found at startup (empty in production)."""
        self._ensure_frozen()
        return self._duplicates

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the route table and run the duplicate check.

        MUST only be called while holding _freeze_lock.

        Raises:
            RouteTableError: If the table cannot be built.
        """
        table = self._table if self._table is not None else load_route_table(self.config)
        self._resolver = Resolver(table, self.config)
        self._duplicates = tuple(check_duplicate_routes(table, self.config))
        logger.info(
            "Route table ready: %d file(s), %d duplicate route(s)",
            len(table),
            len(self._duplicates),
        )
        self._frozen = True

    # -- Resolution --

    def resolve(self, request: RequestContext) -> ResolutionResult:
        """Resolve *request*, withholding private paths from cross-site fetches."""
        if request.path.is_private and not request.same_origin:
            logger.debug("Private path %s requested without same-origin fetch", request.path.url)
            return self.resolver.blocked(request.path)
        return self.resolver.resolve(request.path)

    async def handle(self, request: RequestContext) -> Response:
        """Produce the response for one request."""
        self._ensure_frozen()
        result = self.resolve(request)

        if self._duplicates:
            return duplicate_routes_response(
                self._duplicates,
                as_json=request.wants_json or result.is_api,
                show_errors=self.config.show_errors,
            )

        if not result.found and self.config.backend_only:
            if request.is_file_request:
                return not_found_json()
            return permission_denied_json()

        try:
            rendered = self.renderer(result, request)
            if inspect.isawaitable(rendered):
                rendered = await rendered
        except Exception as exc:
            logger.exception("500 %s %s", request.method, request.uri)
            return internal_error_response(
                exc,
                as_json=request.wants_json or result.is_api,
                show_errors=self.config.show_errors,
            )
        return _to_response(rendered)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            msg = f"Unsupported ASGI scope type: {scope['type']!r}"
            raise RuntimeError(msg)

        request = RequestContext.from_asgi(scope, project_name=self.config.project_name)
        response = await self.handle(request)
        await send_response(response, send, head=request.method == "HEAD")

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, building the table at startup."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with uvicorn (``pip install folio-routes[server]``)."""
        from folio.server.dev import run_server

        self._ensure_frozen()
        run_server(self, host or self.config.host, port or self.config.port)


def _to_response(rendered: RenderResult) -> Response:
    if isinstance(rendered, Response):
        return rendered
    if isinstance(rendered, dict):
        return Response.json(rendered)
    return Response(body=rendered)
