"""Recency filtering of search result rows by publish date."""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from .models import RawCandidate

logger = logging.getLogger(__name__)

# Trailing window: rows published before now minus this are stale
RECENCY_WINDOW = relativedelta(months=3)


def parse_published(text: str) -> datetime | None:
    """Parse a publish date such as '2025-07-06 14:49', or None if unparsable.

    Dates without an offset are read as UTC, which is what the index shows.
    """
    if not text or not text.strip():
        return None
    try:
        published = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unparsable publish date {text!r}: {e}")
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return published


def window_start(now: datetime | None = None) -> datetime:
    """Earliest publish time still inside the trailing window."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - RECENCY_WINDOW


def is_recent(published: datetime, now: datetime | None = None) -> bool:
    """Check whether a publish time falls inside the trailing window."""
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return published >= window_start(now)


def filter_recent(
    candidates: Iterable[RawCandidate], now: datetime | None = None
) -> Iterator[tuple[RawCandidate, datetime]]:
    """Yield (candidate, publish time) for rows that are dated and recent.

    Rejected rows are dropped silently.
    """
    cutoff = window_start(now)
    for candidate in candidates:
        published = parse_published(candidate.published_text)
        if published is None:
            logger.debug(f"Dropping {candidate.title!r}: no usable date")
            continue
        if published < cutoff:
            logger.debug(f"Dropping {candidate.title!r}: published {published:%Y-%m-%d}")
            continue
        yield candidate, published
