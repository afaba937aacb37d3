"""Resolver and application configuration.

FolioConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from folio.errors import ConfigurationError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class FolioConfig:
    """Folio configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FolioConfig(project_root="site", extension="html", production=True)
    """

    # Route table
    project_root: str | Path = "."
    routes_dir: str = "src/app"  # Routes root, relative to project_root
    extension: str = "py"  # Extension carried by route/index/layout/... files
    files_list: str | Path | None = None  # JSON listing; None scans routes_dir

    # Behaviour
    production: bool = False  # Skips the duplicate-route check
    show_errors: bool = True  # Show duplicate-route detail on the error page
    backend_only: bool = False  # Unmatched requests get a JSON 404
    project_name: str = ""  # Deployment prefix stripped from request URIs

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        ext = self.extension.lstrip(".")
        if not ext or "/" in ext or "\\" in ext:
            msg = f"Invalid content file extension: {self.extension!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "extension", ext)
        object.__setattr__(self, "routes_dir", self.routes_dir.replace("\\", "/").strip("/"))

    @property
    def routes_path(self) -> Path:
        """Absolute-or-relative directory holding the route files."""
        return Path(self.project_root) / self.routes_dir

    def with_overrides(self, **overrides: Any) -> FolioConfig:
        """Return a copy with the non-``None`` *overrides* applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values) if values else self

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> FolioConfig:
        """Build a config from environment variables.

        Recognised variables::

            APP_ENV              "production" enables production mode
            SHOW_ERRORS          boolean, default true
            FOLIO_ROUTES_DIR     routes root relative to the project
            FOLIO_EXTENSION      content file extension
            FOLIO_FILES_LIST     path to a files-list.json listing
            FOLIO_PROJECT_NAME   deployment prefix for request URIs
            FOLIO_BACKEND_ONLY   boolean, default false

        Explicit keyword *overrides* win over the environment.

        Raises:
            ConfigurationError: On unparseable boolean values or unknown
                override names.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if "APP_ENV" in env:
            values["production"] = env["APP_ENV"].strip().lower() == "production"
        if "SHOW_ERRORS" in env:
            values["show_errors"] = _parse_bool("SHOW_ERRORS", env["SHOW_ERRORS"])
        if "FOLIO_BACKEND_ONLY" in env:
            values["backend_only"] = _parse_bool("FOLIO_BACKEND_ONLY", env["FOLIO_BACKEND_ONLY"])
        if env.get("FOLIO_ROUTES_DIR"):
            values["routes_dir"] = env["FOLIO_ROUTES_DIR"]
        if env.get("FOLIO_EXTENSION"):
            values["extension"] = env["FOLIO_EXTENSION"]
        if env.get("FOLIO_FILES_LIST"):
            values["files_list"] = env["FOLIO_FILES_LIST"]
        if "FOLIO_PROJECT_NAME" in env:
            values["project_name"] = env["FOLIO_PROJECT_NAME"]

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            msg = f"Unknown configuration option(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        values.update(overrides)
        return cls(**values)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{name} must be a boolean (true/false), got {raw!r}"
    raise ConfigurationError(msg)
