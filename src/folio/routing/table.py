"""Route table: the normalized, immutable listing of candidate route files.

Built once at startup from a flat list of file paths (a ``files-list.json``
listing, a directory scan, or any iterable of strings) and shared
read-only by every request afterwards.  Any filesystem change means
building a new table; nothing here is ever mutated.

Paths are normalized once, here, so every other component sees the same
shape: ``/`` separators, no leading ``./``, and relative to the routes
root (``src/app`` by default)::

    "./src/app/(auth)/signin/index.py"  -> "(auth)/signin/index.py"
    "src\\app\\dashboard\\layout.py"    -> "dashboard/layout.py"
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from folio.config import FolioConfig
from folio.errors import RouteTableError

logger = logging.getLogger("folio.routing")


class RouteKind(Enum):
    """Role of a file, derived purely from its basename."""

    ROUTE = "route"
    INDEX = "index"
    LAYOUT = "layout"
    LOADING = "loading"
    NOT_FOUND = "not-found"
    OTHER = "other"


_KIND_BY_STEM = {kind.value: kind for kind in RouteKind if kind is not RouteKind.OTHER}


def normalize_path(raw: str, routes_dir: str = "") -> str | None:
    """Normalize a listed file path relative to *routes_dir*.

    Returns ``None`` when *routes_dir* is given and the path lies outside it.
    """
    path = raw.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    parts = [p for p in path.split("/") if p and p != "."]

    if routes_dir:
        root = [p for p in routes_dir.split("/") if p]
        if parts[: len(root)] != root:
            return None
        parts = parts[len(root) :]

    return "/".join(parts)


def kind_for(basename: str, extension: str) -> RouteKind:
    """Classify *basename* (``"route.py"``, ``"not-found.py"``, ...)."""
    stem, dot, ext = basename.rpartition(".")
    if not dot or ext != extension:
        return RouteKind.OTHER
    return _KIND_BY_STEM.get(stem, RouteKind.OTHER)


@dataclass(frozen=True, slots=True)
class RouteFile:
    """One candidate file discovered under the routes root.

    Attributes:
        raw_path: The path exactly as listed.
        path: Normalized, routes-root-relative path.
        segments: ``path`` split on ``/``.
        kind: Role derived from the basename.
        extension: The configured content extension (without the dot).
    """

    raw_path: str
    path: str
    segments: tuple[str, ...]
    kind: RouteKind
    extension: str

    @classmethod
    def from_path(cls, raw_path: str, path: str, extension: str) -> RouteFile:
        segments = tuple(path.split("/"))
        return cls(
            raw_path=raw_path,
            path=path,
            segments=segments,
            kind=kind_for(segments[-1], extension),
            extension=extension,
        )

    @property
    def basename(self) -> str:
        return self.segments[-1]

    @property
    def directory(self) -> tuple[str, ...]:
        """Directory segments (everything but the basename)."""
        return self.segments[:-1]

    @property
    def has_route_extension(self) -> bool:
        return self.basename.endswith(f".{self.extension}")

    @property
    def is_content(self) -> bool:
        """True for files that can be the answer to a request."""
        return self.kind in (RouteKind.ROUTE, RouteKind.INDEX)


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Immutable, order-preserving sequence of :class:`RouteFile`.

    Table order is significant: it is the tie-break for every
    first-match-wins scan.  Duplicate listings of the same normalized
    path keep their first position.
    """

    files: tuple[RouteFile, ...] = ()
    extension: str = "py"
    _by_path: dict[str, RouteFile] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, RouteFile] = {}
        for route_file in self.files:
            index.setdefault(route_file.path, route_file)
        object.__setattr__(self, "_by_path", index)

    def __iter__(self) -> Iterator[RouteFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def get(self, path: str) -> RouteFile | None:
        """Look up a file by normalized path."""
        return self._by_path.get(path)

    def file_at(self, directory: Iterable[str], stem: str) -> RouteFile | None:
        """Return ``<directory>/<stem>.<extension>`` if it is in the table."""
        return self.get("/".join([*directory, f"{stem}.{self.extension}"]))

    def of_kind(self, *kinds: RouteKind) -> tuple[RouteFile, ...]:
        return tuple(f for f in self.files if f.kind in kinds)

    @property
    def content_files(self) -> tuple[RouteFile, ...]:
        """ROUTE and INDEX files with the content extension, in table order."""
        return tuple(f for f in self.files if f.is_content and f.has_route_extension)


def build_route_table(
    paths: Iterable[str],
    *,
    routes_dir: str = "",
    extension: str = "py",
) -> RouteTable:
    """Build a :class:`RouteTable` from raw file paths.

    Args:
        paths: File paths, using either separator convention.
        routes_dir: Prefix to strip (e.g. ``"src/app"``).  Paths outside
            it are dropped.  Empty means *paths* are already relative.
        extension: Content file extension, without the dot.

    Raises:
        RouteTableError: If an entry is not a string.
    """
    extension = extension.lstrip(".")
    routes_dir = routes_dir.replace("\\", "/").strip("/")
    files: list[RouteFile] = []
    skipped = 0

    for raw in paths:
        if not isinstance(raw, str):
            msg = f"Route listing entries must be strings, got {type(raw).__name__}: {raw!r}"
            raise RouteTableError(msg)
        path = normalize_path(raw, routes_dir)
        if not path:
            skipped += 1
            continue
        files.append(RouteFile.from_path(raw, path, extension))

    if skipped:
        logger.debug("Skipped %d listed path(s) outside %r", skipped, routes_dir or ".")
    logger.debug("Built route table with %d file(s)", len(files))
    return RouteTable(tuple(files), extension=extension)


def load_files_list(
    listing: str | Path,
    *,
    routes_dir: str = "",
    extension: str = "py",
) -> RouteTable:
    """Build a table from a ``files-list.json`` array of paths.

    Raises:
        RouteTableError: If the file is missing, not JSON, or not an array.
    """
    listing = Path(listing)
    try:
        data = json.loads(listing.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"Route listing not found: {listing}"
        raise RouteTableError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Route listing could not be read: {listing}: {exc}"
        raise RouteTableError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Route listing is not valid JSON: {listing}: {exc}"
        raise RouteTableError(msg) from exc

    if not isinstance(data, list):
        msg = f"Route listing must be a JSON array of paths: {listing}"
        raise RouteTableError(msg)

    return build_route_table(data, routes_dir=routes_dir, extension=extension)


def scan_routes_dir(directory: str | Path, *, extension: str = "py") -> RouteTable:
    """Walk *directory* and build a table of every file below it.

    Files are listed depth-first with entries sorted by name, so a
    directory's own files precede its subdirectories' files.  Hidden
    entries (leading ``.``) are skipped.

    Raises:
        RouteTableError: If *directory* does not exist.
    """
    root = Path(directory)
    if not root.is_dir():
        msg = f"Routes directory not found: {root}"
        raise RouteTableError(msg)

    paths: list[str] = []
    _walk(root, root, paths)
    return build_route_table(paths, extension=extension)


def _walk(directory: Path, root: Path, paths: list[str]) -> None:
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    for item in entries:
        if item.name.startswith(".") or not item.is_file():
            continue
        paths.append(item.relative_to(root).as_posix())
    for item in entries:
        if item.name.startswith(".") or not item.is_dir():
            continue
        _walk(item, root, paths)


def load_route_table(config: FolioConfig) -> RouteTable:
    """Build the table described by a :class:`~folio.config.FolioConfig`.

    Uses ``config.files_list`` when set (resolved against
    ``config.project_root`` if relative), otherwise scans
    ``config.routes_path``.
    """
    if config.files_list is not None:
        listing = Path(config.files_list)
        if not listing.is_absolute():
            listing = Path(config.project_root) / listing
        return load_files_list(
            listing,
            routes_dir=config.routes_dir,
            extension=config.extension,
        )
    return scan_routes_dir(config.routes_path, extension=config.extension)
