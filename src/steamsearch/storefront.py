"""Steam storefront API client.

Three public operations:

- ``resolve_application``: free-text game name -> ``SearchResult``
- ``get_app_review``: free-text game name -> (review summary text, app id)
- ``check_app_is_adult``: app id -> whether it carries adult sexual content

Every call is synchronous and stateless. Failures propagate as
``steamsearch.errors.StorefrontError`` subclasses; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote_plus

import httpx

from steamsearch import config
from steamsearch.errors import ParseError, TransportError
from steamsearch.matching import find_application
from steamsearch.models import (
    AppDetails,
    ReviewInfo,
    ReviewSummary,
    SearchResult,
    parse_app_details_response,
    parse_review_info,
    parse_search_results,
)

logger = logging.getLogger(__name__)

# Content descriptor id for adult-only sexual content
ADULT_SEXUAL_CONTENT_DESCRIPTOR = 3

# Verdict when no descriptor list mentions adult content, including when the
# storefront returned no details at all.
BENEFIT_OF_THE_DOUBT = False


def _get_json(url: str, **kwargs):
    """GET ``url`` and decode its JSON body."""
    try:
        resp = httpx.get(url, timeout=config.get_timeout(), **kwargs)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("request to %s failed: %s", url, e)
        raise TransportError(f"Request to {url} failed: {e}", url=url) from e

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("invalid JSON from %s: %s", url, e)
        raise ParseError(f"Invalid JSON from {url}: {e}", url=url) from e


# --- Search ---


def search_apps(query: str) -> list[SearchResult]:
    """Query the app search endpoint, keeping the storefront's ordering."""
    url = f"{config.get_search_url()}/{quote_plus(query)}"
    payload = _get_json(url)
    try:
        return parse_search_results(payload)
    except ValueError as e:
        raise ParseError(f"Unexpected search response from {url}: {e}", url=url) from e


def resolve_application(query: str, *, max_listed: Optional[int] = None) -> SearchResult:
    """Resolve a free-text game name to a single app.

    Raises ``NotFound`` when nothing matches and ``AmbiguousMatch`` when
    several names contain the query and none equals it.
    """
    if max_listed is None:
        max_listed = config.get_max_listed_matches()
    return find_application(query, search_apps(query), max_listed=max_listed)


# --- Reviews ---


def store_page_url(app_id: str) -> str:
    return f"{config.STORE_APP_URL}/{app_id}"


def fetch_review_info(app_id: str) -> ReviewInfo:
    """Fetch aggregate review statistics for ``app_id``."""
    url = f"{config.get_reviews_url()}/{app_id}"
    payload = _get_json(url, params={"json": 1})
    try:
        info = parse_review_info(payload)
    except ValueError as e:
        raise ParseError(f"Unexpected review response from {url}: {e}", url=url) from e
    if info.success != 1:
        logger.debug("review query for app %s reported success=%d", app_id, info.success)
    return info


def format_review(app: SearchResult, summary: ReviewSummary) -> str:
    return (
        f'Reception for {app.name} is "{summary.review_score_desc}" '
        f"recommended by {summary.total_positive}/{summary.total_reviews} reviewers.\n"
        "For more info, check out the store page:\n"
        f"{store_page_url(app.app_id)}"
    )


def get_app_review(query: str) -> tuple[str, str]:
    """Return (review summary text, app id) for the game named ``query``."""
    app = resolve_application(query)
    info = fetch_review_info(app.app_id)
    return format_review(app, info.query_summary), app.app_id


# --- Details ---


def get_app_details(app_id: str) -> dict[str, AppDetails]:
    """Fetch app details as an ordered ``app id -> AppDetails`` mapping."""
    url = config.get_details_url()
    payload = _get_json(url, params={"appids": app_id})
    try:
        return parse_app_details_response(payload)
    except ValueError as e:
        raise ParseError(f"Unexpected details response from {url}: {e}", url=url) from e


def contains_adult_content(details: dict[str, AppDetails]) -> bool:
    for app_id, entry in details.items():
        logger.debug("content descriptor ids for %s: %s", app_id, list(entry.content_descriptor_ids))
        if ADULT_SEXUAL_CONTENT_DESCRIPTOR in entry.content_descriptor_ids:
            return True
    return BENEFIT_OF_THE_DOUBT


def check_app_is_adult(app_id: str) -> bool:
    """Whether the storefront flags ``app_id`` for adult sexual content."""
    return contains_adult_content(get_app_details(app_id))
