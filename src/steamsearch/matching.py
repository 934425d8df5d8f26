"""Resolve a free-text game name against storefront search candidates."""

from __future__ import annotations

import logging

from steamsearch.config import MAX_LISTED_MATCHES
from steamsearch.errors import AmbiguousMatch, NotFound
from steamsearch.models import SearchResult

logger = logging.getLogger(__name__)


def find_application(
    query: str,
    candidates: list[SearchResult],
    *,
    max_listed: int = MAX_LISTED_MATCHES,
) -> SearchResult:
    """Pick the app the user meant out of ``candidates``.

    A case-insensitive exact name match wins outright, wherever it sits in the
    list. Failing that, a single candidate whose name contains the query is
    accepted as if it matched exactly. No matches raises ``NotFound``; several
    raises ``AmbiguousMatch`` listing the first ``max_listed`` names in
    response order so a human can pick one.
    """
    needle = query.lower()
    partial: list[SearchResult] = []

    for app in candidates:
        name = app.name.lower()
        if name == needle:
            logger.debug("found exact match! %s", app.name)
            return app
        if needle in name:
            partial.append(app)

    if not partial:
        raise NotFound(query)
    if len(partial) == 1:
        return partial[0]

    logger.debug("%d partial matches for %r", len(partial), query)
    raise AmbiguousMatch(query, partial[:max_listed])
