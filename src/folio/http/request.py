"""Immutable request context.

Built once at the ASGI boundary and passed explicitly to the resolver and
renderer.  Nothing downstream reads headers, method, or path from ambient
state; everything it needs is on this value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from folio._internal.asgi import Scope
from folio.routing.request import RequestPath

_BODY_CONTENT_TYPES = (
    "application/json",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True, slots=True)
class RequestContext:
    """An immutable view of one incoming request.

    Attributes:
        method: Upper-case HTTP method.
        uri: Path plus query string, as received.
        path: The normalized :class:`RequestPath`.
        headers: Lower-cased header names to their first value.
    """

    method: str
    uri: str
    path: RequestPath
    headers: Mapping[str, str]

    @classmethod
    def from_asgi(cls, scope: Scope, *, project_name: str = "") -> RequestContext:
        """Build a context from an ASGI HTTP scope.

        ``scope["path"]`` arrives percent-decoded and is used as-is.
        """
        raw_path = scope.get("path", "/")
        query = scope.get("query_string", b"").decode("latin-1")
        uri = f"{raw_path}?{query}" if query else raw_path

        headers: dict[str, str] = {}
        for name, value in scope.get("headers", ()):
            headers.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))

        return cls(
            method=scope.get("method", "GET").upper(),
            uri=uri,
            path=RequestPath.from_path(raw_path, project_name=project_name),
            headers=MappingProxyType(headers),
        )

    @classmethod
    def build(
        cls,
        uri: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        project_name: str = "",
    ) -> RequestContext:
        """Build a context directly (tests, CLI)."""
        lowered = {k.lower(): v for k, v in (headers or {}).items()}
        return cls(
            method=method.upper(),
            uri=uri,
            path=RequestPath.parse(uri, project_name=project_name),
            headers=MappingProxyType(lowered),
        )

    # -- Computed properties --

    @property
    def pathname(self) -> str:
        return self.path.pathname

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @property
    def same_origin(self) -> bool:
        """True if the browser marked this as a same-origin fetch."""
        return self.headers.get("sec-fetch-site") == "same-origin"

    @property
    def is_ajax(self) -> bool:
        """True for script-initiated requests.

        Detected from ``X-Requested-With``, a body-carrying content type,
        or a body-carrying method.
        """
        if self.headers.get("x-requested-with", "").lower() == "xmlhttprequest":
            return True
        content_type = self.content_type.lower()
        if any(ct in content_type for ct in _BODY_CONTENT_TYPES):
            return True
        return self.method in _BODY_METHODS

    @property
    def is_file_request(self) -> bool:
        """True for same-origin requests asking for a raw file."""
        return self.same_origin and self.headers.get("x-file-request") == "true"

    @property
    def wants_json(self) -> bool:
        """Whether error output should be JSON rather than an HTML page."""
        return self.is_ajax or self.is_file_request
