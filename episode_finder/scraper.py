"""Nyaa.si episode search orchestration."""

import logging
from datetime import datetime
from urllib.parse import urlencode

import httpx

from .extractor import BASE_URL, extract_candidates
from .matcher import MAX_RESULTS, match_episode
from .models import RawCandidate, SearchError, SearchOutcome, SearchQuery, TorrentResult
from .parser import parse_release_name
from .recency import filter_recent

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0

# Category codes for nyaa.si
CATEGORIES = {
    "all": "0_0",
    "anime": "1_0",
    "anime_amv": "1_1",
    "anime_english": "1_2",
    "anime_non_english": "1_3",
    "anime_raw": "1_4",
}

# Filter codes
FILTERS = {
    "no_filter": "0",
    "no_remakes": "1",
    "trusted": "2",
}


def build_search_url(
    query: str,
    category: str = "anime_english",
    filter_type: str = "no_filter",
    sort_by: str = "seeders",
    order: str = "desc",
    base_url: str = BASE_URL,
) -> str:
    """Build a search URL for nyaa.si."""
    params = {
        "f": FILTERS.get(filter_type, "0"),
        "c": CATEGORIES.get(category, "1_2"),
        "q": query,
        "s": sort_by,
        "o": order,
    }
    return f"{base_url}/?{urlencode(params)}"


def build_results(
    candidates: list[RawCandidate], now: datetime | None = None
) -> list[TorrentResult]:
    """Turn recent candidates into results with episode and resolution filled in."""
    results = []
    for candidate, published in filter_recent(candidates, now=now):
        episode, resolution = (
            parse_release_name(candidate.title) if candidate.title else (None, None)
        )
        results.append(
            TorrentResult(
                name=candidate.title or "",
                date=published,
                seeders=candidate.seeders_text,
                magnet_link=candidate.magnet_link or "",
                episode=episode,
                resolution=resolution,
            )
        )
    return results


def _fetch_page(client: httpx.Client, url: str) -> str:
    response = client.get(url)
    response.raise_for_status()
    return response.text


def search_episode_outcome(
    query: SearchQuery,
    client: httpx.Client | None = None,
    base_url: str = BASE_URL,
    now: datetime | None = None,
    limit: int = MAX_RESULTS,
) -> SearchOutcome:
    """
    Search nyaa.si for one episode and report how it went.

    Args:
        query: Titles to search for and the episode wanted
        client: HTTP client to use; a short-lived one is created if omitted
        base_url: Index root, for mirrors
        now: Reference time for the recency window (defaults to now)
        limit: Maximum number of results kept

    Returns:
        A SearchOutcome. On failure its results are empty and its error
        says whether the fetch or the page processing went wrong.
    """
    url = build_search_url(query.search_term, base_url=base_url)
    logger.info(f"Searching {url} for episode {query.target_episode}")

    try:
        if client is None:
            with httpx.Client(timeout=REQUEST_TIMEOUT, follow_redirects=True) as own_client:
                html = _fetch_page(own_client, url)
        else:
            html = _fetch_page(client, url)
    except httpx.HTTPError as e:
        logger.warning(f"HTTP error searching for {query.search_term!r}: {e}")
        return SearchOutcome(error=SearchError("transport", str(e)))
    except Exception as e:
        logger.warning(f"Request for {query.search_term!r} failed: {e}")
        return SearchOutcome(error=SearchError("transport", str(e)))

    try:
        candidates = extract_candidates(html, base_url=base_url)
        results = build_results(candidates, now=now)
        matches = match_episode(results, query.target_episode, limit=limit)
    except Exception as e:
        logger.warning(f"Failed to process results for {query.search_term!r}: {e}")
        return SearchOutcome(error=SearchError("parse", str(e)))

    logger.info(
        f"{len(candidates)} rows, {len(results)} recent, {len(matches)} matching"
    )
    return SearchOutcome(results=matches)


def search_episode(
    query: SearchQuery,
    client: httpx.Client | None = None,
    base_url: str = BASE_URL,
    now: datetime | None = None,
    limit: int = MAX_RESULTS,
) -> list[TorrentResult]:
    """Search nyaa.si for one episode. Failures come back as no results."""
    return search_episode_outcome(
        query, client=client, base_url=base_url, now=now, limit=limit
    ).results
