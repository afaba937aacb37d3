"""Local server.

Starts uvicorn with the live folio App object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio.app import App


def run_server(app: App, host: str, port: int, *, log_level: str = "info") -> None:
    """Serve *app* on ``host:port`` with a single uvicorn worker.

    Raises:
        ModuleNotFoundError: If uvicorn is not installed.
    """
    import uvicorn

    uvicorn.run(app, host=host, port=port, log_level=log_level)
