"""Route path segment classification.

Every directory or file name under the routes root is one of four kinds::

    "users"           -> Literal("users")
    "(marketing)"     -> Group("marketing")      never consumes a URL segment
    "[id]"            -> SingleDynamic("id")     binds exactly one URL segment
    "[...slug]"       -> CatchAll("slug")        binds one or more trailing segments
    "v-[...slug].txt" -> CatchAll("slug", prefix="v-", suffix=".txt")

Malformed brackets (``"[id"``, ``"[]"``, ``"id]"``) are plain literals, so a
typo in a folder name can only fail to match, never crash a request.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

# [...name] anywhere inside a segment
_CATCH_ALL_RE = re.compile(r"\[\.\.\.([^\]]+)\]")

# A whole-segment [name]
_SINGLE_RE = re.compile(r"^\[([^\]]+)\]$")

# Any [..] bracket group inside a path (used to pick the matching mode)
_BRACKET_RE = re.compile(r"\[[^\]]+\]")


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches only an identical request segment."""

    value: str


@dataclass(frozen=True, slots=True)
class Group:
    """Organizational folder, invisible to URL matching."""

    name: str


@dataclass(frozen=True, slots=True)
class SingleDynamic:
    """Binds ``name`` to exactly one request segment."""

    name: str


@dataclass(frozen=True, slots=True)
class CatchAll:
    """Binds ``name`` to the remaining request segments.

    ``prefix`` and ``suffix`` hold static text sharing the segment with the
    marker (usually empty).
    """

    name: str
    prefix: str = ""
    suffix: str = ""

    @property
    def marker(self) -> str:
        return f"[...{self.name}]"


Segment: TypeAlias = Literal | Group | SingleDynamic | CatchAll


def classify(segment: str) -> Segment:
    """Classify a single path segment."""
    if is_group(segment):
        return Group(segment[1:-1])

    match = _CATCH_ALL_RE.search(segment)
    if match:
        return CatchAll(
            match.group(1),
            prefix=segment[: match.start()],
            suffix=segment[match.end() :],
        )

    match = _SINGLE_RE.match(segment)
    if match and not segment.startswith("[..."):
        return SingleDynamic(match.group(1))

    return Literal(segment)


def is_group(segment: str) -> bool:
    """True if *segment* is a ``(group)`` folder name."""
    return len(segment) >= 2 and segment[0] == "(" and segment[-1] == ")"


def strip_groups(segments: Iterable[str]) -> tuple[str, ...]:
    """Drop group segments, keeping everything else in order."""
    return tuple(s for s in segments if not is_group(s))


def bracket_count(path: str) -> int:
    """Number of ``[...]`` bracket groups anywhere in *path*."""
    return len(_BRACKET_RE.findall(path))


def has_catch_all(path: str) -> bool:
    """True if *path* carries a ``[...`` catch-all marker."""
    return "[..." in path
