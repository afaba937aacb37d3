"""Error responses for folio requests.

Pages are plain f-strings and never go through the renderer.
"""

import html
from collections.abc import Sequence

from folio.http.response import Response
from folio.routing.duplicates import DuplicateRoute

GENERIC_ERROR = "An error occurred"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: system-ui, sans-serif; margin: 2rem; color: #222; }}
.folio-error {{ border-left: 4px solid #c0392b; padding: 0.5rem 1rem; background: #fdf2f1; }}
.folio-error ul {{ margin: 0.25rem 0 1rem; }}
code {{ font-family: ui-monospace, monospace; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div class="folio-error">
{body}
</div>
</body>
</html>
"""


def duplicate_routes_response(
    conflicts: Sequence[DuplicateRoute],
    *,
    as_json: bool,
    show_errors: bool = True,
) -> Response:
    """Blocking error response listing duplicate routes.

    Args:
        conflicts: The duplicate-route reports to show.
        as_json: Return ``{"success": false, "error": ...}`` instead of HTML.
        show_errors: When ``False`` the details are replaced by a generic
            message.
    """
    if not show_errors:
        if as_json:
            return Response.json({"success": False, "error": GENERIC_ERROR}, status=500)
        body = f"<p>{GENERIC_ERROR}</p>"
        return Response(body=_PAGE.format(title="Error", body=body), status=500)

    lines = [line for conflict in conflicts for line in conflict.messages()]
    if as_json:
        return Response.json({"success": False, "error": "\n".join(lines)}, status=500)

    return Response(
        body=_PAGE.format(title="Duplicate routes", body=_render_conflicts(conflicts)),
        status=500,
    )


def _render_conflicts(conflicts: Sequence[DuplicateRoute]) -> str:
    parts: list[str] = []
    for conflict in conflicts:
        logical = html.escape(conflict.logical_route)
        parts.append(f"<p>Duplicate route found after normalization: <code>{logical}</code></p>")
        items = "".join(
            f"<li>Grouped original route: <code>{html.escape(path)}</code></li>"
            for path in conflict.physical_paths
        )
        parts.append(f"<ul>{items}</ul>")
    return "\n".join(parts)


def not_found_json() -> Response:
    """JSON 404 for an unmatched file request in backend-only deployments."""
    return Response.json({"success": False, "error": "Not found"}, status=404)


def permission_denied_json() -> Response:
    """JSON 403 for any other unmatched request in backend-only deployments."""
    return Response.json({"success": False, "error": "Permission denied"}, status=403)


def internal_error_response(exc: Exception, *, as_json: bool, show_errors: bool) -> Response:
    """500 response for a renderer failure.  The caller logs the exception."""
    detail = f"{type(exc).__name__}: {exc}" if show_errors else GENERIC_ERROR
    if as_json:
        return Response.json({"success": False, "error": detail}, status=500)
    body = f"<p>{html.escape(detail)}</p>"
    return Response(body=_PAGE.format(title="Internal Server Error", body=body), status=500)
