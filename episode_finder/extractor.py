"""Listing row extraction from nyaa.si search result pages."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .models import RawCandidate

logger = logging.getLogger(__name__)

BASE_URL = "https://nyaa.si"

# Column positions on the search results table
TITLE_COLUMN = 1
LINKS_COLUMN = 2
DATE_COLUMN = 4
SEEDERS_COLUMN = 5


def iter_row_cells(document: BeautifulSoup) -> list[list[Tag]]:
    """Return every result row of the page as its list of cells."""
    return [row.find_all("td") for row in document.select(".torrent-list tbody tr")]


def _cell(cells: list[Tag], index: int) -> Tag | None:
    return cells[index] if index < len(cells) else None


def _cell_text(cells: list[Tag], index: int) -> str:
    cell = _cell(cells, index)
    return cell.get_text(strip=True) if cell else ""


def _absolute_link(href: str | None, base_url: str) -> str | None:
    if not href:
        return None
    try:
        return urljoin(base_url, href)
    except ValueError as e:
        logger.debug(f"Unusable link {href!r}: {e}")
        return None


def _extract_title_link(cells: list[Tag], base_url: str) -> tuple[str | None, str | None]:
    """Find the release title anchor, skipping the comments counter."""
    cell = _cell(cells, TITLE_COLUMN)
    if cell is None:
        return None, None

    for link in cell.find_all("a"):
        if "comments" in (link.get("class") or []):
            continue
        title = link.get("title") or link.get_text(strip=True) or None
        return title, _absolute_link(link.get("href"), base_url)
    return None, None


def _extract_magnet_link(cells: list[Tag]) -> str | None:
    """The second link of the torrent-info cell (the first is the .torrent file)."""
    cell = _cell(cells, LINKS_COLUMN)
    if cell is None:
        return None
    links = cell.find_all("a")
    if len(links) < 2:
        return None
    return links[1].get("href")


def extract_candidate(cells: list[Tag], base_url: str = BASE_URL) -> RawCandidate:
    """
    Build a RawCandidate from one row's cells.

    Missing cells or attributes become None or empty text; a malformed
    row never raises.
    """
    try:
        title, detail_link = _extract_title_link(cells, base_url)
        return RawCandidate(
            title=title,
            detail_link=detail_link,
            magnet_link=_extract_magnet_link(cells),
            published_text=_cell_text(cells, DATE_COLUMN),
            seeders_text=_cell_text(cells, SEEDERS_COLUMN),
        )
    except Exception as e:
        logger.warning(f"Failed to parse row: {e}")
        return RawCandidate(title=None, detail_link=None, magnet_link=None)


def extract_candidates(html: str, base_url: str = BASE_URL) -> list[RawCandidate]:
    """Parse a search results page into candidates, in document order."""
    soup = BeautifulSoup(html, "lxml")
    candidates = [extract_candidate(cells, base_url) for cells in iter_row_cells(soup)]
    logger.debug(f"Extracted {len(candidates)} rows from search page")
    return candidates
