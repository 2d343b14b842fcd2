"""Error types raised at the edges of regdom (loading and refreshing lists)."""


class RegDomError(Exception):
    """Base class for regdom errors."""


class PslCacheNotFoundError(RegDomError, RuntimeError):
    """Raised when no public suffix list is available to build a resolver from."""


class PslDownloadError(RegDomError):
    """Raised when the public suffix list cannot be downloaded."""
