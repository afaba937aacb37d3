"""Folio exception hierarchy.

Matching failures are never exceptions: an unmatched request resolves to
an absent content file.  Only broken inputs to the engine itself (a
missing routes directory, an unreadable file listing, invalid settings)
raise, and they raise once at startup.
"""


class FolioError(Exception):
    """Base for all folio-specific errors."""


class ConfigurationError(FolioError):
    """Raised when configuration values are invalid.

    Typically raised by ``FolioConfig.from_env()`` or during ``App._freeze()``.
    """


class RouteTableError(FolioError):
    """Raised when the route table cannot be built.

    Covers a missing routes directory, an unreadable or malformed
    ``files-list.json``, and entries that are not path strings.
    """
