"""
Error types and user-visible error messages.

User-visible errors travel inside the app state as plain strings; the
exception classes below are for programming faults and I/O problems at the
edges (catalog file, settings file).
"""


class NavigationInvariantError(AssertionError):
    """A state was built with a navigation_paths mapping that does not cover every tab."""


class CatalogError(Exception):
    """The catalog resource could not be read or parsed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class CatalogFormatError(CatalogError):
    """The catalog file was read but its content has the wrong shape."""


class ConfigError(ValueError):
    """Raised when settings are invalid."""


class AppErrors:
    """Centralized actionable error messages."""

    CATALOG_UNAVAILABLE = (
        "The word catalog could not be loaded. Check res/catalog.json and restart."
    )

    CATALOG_INVALID = (
        "The word catalog is malformed. Fix res/catalog.json and restart."
    )

    COLLECTION_NOT_FOUND = (
        "This collection is no longer available."
    )

    ADD_WORD_INCOMPLETE = (
        "Enter a word and a definition before saving."
    )


def format_catalog_error(error: Exception) -> str:
    """Format a catalog loading error as an actionable message."""
    if isinstance(error, CatalogFormatError):
        return AppErrors.CATALOG_INVALID
    return AppErrors.CATALOG_UNAVAILABLE
