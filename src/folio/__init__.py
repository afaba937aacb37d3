"""Folio: filesystem-convention routing where the file is the route.

Resolves a request path to a content file, its nested layout chain, and
any dynamic parameters, straight from the files under a routes root.

Basic usage::

    from folio import Resolver, build_route_table

    table = build_route_table(
        ["src/app/layout.py", "src/app/users/[id]/index.py"],
        routes_dir="src/app",
    )
    result = Resolver(table).resolve("/users/42")
    result.content_file.path   # "users/[id]/index.py"
    result.params              # {"id": "42"}

Serving (``pip install folio-routes[server]``)::

    from folio import App, FolioConfig

    app = App(FolioConfig(project_root="site"), renderer=render)
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "FolioConfig",
    "FolioError",
    "RequestContext",
    "RequestPath",
    "ResolutionResult",
    "Resolver",
    "Response",
    "RouteTable",
    "RouteTableError",
    "build_route_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import folio`` fast while providing a clean top-level API.
    """
    if name == "App":
        from folio.app import App

        return App

    if name == "FolioConfig":
        from folio.config import FolioConfig

        return FolioConfig

    if name == "RequestContext":
        from folio.http.request import RequestContext

        return RequestContext

    if name == "Response":
        from folio.http.response import Response

        return Response

    if name in ("RequestPath", "ResolutionResult", "Resolver", "RouteTable", "build_route_table"):
        from folio import routing as _routing

        return getattr(_routing, name)

    if name in ("ConfigurationError", "FolioError", "RouteTableError"):
        from folio import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
