"""Request path normalization.

Turns a raw request URI into the segment list every resolver component
works on.  Query strings are dropped, both separators are accepted, and
empty segments are collapsed, so ``"/docs//a/?v=2"`` and ``"docs/a"``
are the same request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RequestPath:
    """An incoming request's path.

    Attributes:
        pathname: Segments joined by ``/``: no leading or trailing slash,
            no query string.  ``""`` is the root route.
        segments: The non-empty path segments, in order.
    """

    pathname: str
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, uri: str, *, project_name: str = "") -> RequestPath:
        """Normalize a request URI (path plus optional query string).

        When *project_name* is set and appears in the path, everything up to
        and including it is treated as the deployment prefix and removed::

            RequestPath.parse("/htdocs/shop/products/7", project_name="shop")
            # -> pathname "products/7"
        """
        path = uri.split("?", 1)[0].split("#", 1)[0]
        return cls.from_path(path, project_name=project_name)

    @classmethod
    def from_path(cls, path: str, *, project_name: str = "") -> RequestPath:
        """Normalize an already-decoded path, such as ASGI ``scope["path"]``.

        Only separators and the project prefix are handled.  ``?`` and ``#``
        are ordinary characters here, and nothing is percent-decoded again.
        """
        path = path.replace("\\", "/")
        if project_name:
            path = _strip_project_prefix(path, project_name)
        segments = tuple(s for s in path.split("/") if s)
        return cls(pathname="/".join(segments), segments=segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def is_private(self) -> bool:
        """True if any segment names a private (``_``-prefixed) folder."""
        return any(s.startswith("_") for s in self.segments)

    @property
    def url(self) -> str:
        """The path as a URL, with a leading slash."""
        return "/" + self.pathname


def _strip_project_prefix(path: str, project_name: str) -> str:
    match = re.search(rf"(?:.*{re.escape(project_name)})(/.*)$", path)
    if match and match.group(1):
        return match.group(1)
    return path
