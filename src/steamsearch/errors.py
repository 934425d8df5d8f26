"""Exceptions raised by the storefront client."""

from __future__ import annotations

from steamsearch.models import SearchResult


class StorefrontError(Exception):
    """Base class for every storefront failure."""


class NotFound(StorefrontError):
    """No app name matched the query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'Sorry, I couldn\'t find any results matching "{query}"')


class AmbiguousMatch(StorefrontError):
    """Several app names contain the query and none equals it.

    ``candidates`` holds the listed matches only, already capped.
    """

    def __init__(self, query: str, candidates: list[SearchResult]):
        self.query = query
        self.candidates = list(candidates)
        names = "".join(f"{c.name}\n" for c in self.candidates)
        super().__init__(
            f'Sorry, I found multiple results for "{query}", '
            f"try one of these possible matches:\n{names}"
        )


class TransportError(StorefrontError):
    """The HTTP request failed or returned an error status."""

    def __init__(self, message: str, *, url: str = ""):
        self.url = url
        super().__init__(message)


class ParseError(StorefrontError):
    """The response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, *, url: str = ""):
        self.url = url
        super().__init__(message)


class ConfigurationError(StorefrontError, ValueError):
    """A STEAMSEARCH_* setting holds an unusable value."""
