"""Shared pytest fixtures for episode-finder tests."""

import pytest
from datetime import datetime, timedelta, timezone

from episode_finder.models import RawCandidate, SearchQuery, TorrentResult


# Fixed reference time for recency-sensitive tests
NOW = datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Factory Fixtures - Create test data on demand
# ============================================================================


@pytest.fixture
def now():
    """Reference 'now' used with the fixed-date HTML fixtures."""
    return NOW


@pytest.fixture
def result_factory():
    """Factory for creating test TorrentResult objects."""

    def _create(
        name: str = "[SubsPlease] Test Anime - 01 (1080p) [ABC123].mkv",
        date: datetime = NOW - timedelta(days=1),
        seeders: str = "100",
        magnet_link: str = "magnet:?xt=urn:btih:ABC123",
        episode: int | None = 1,
        resolution: str | None = "1080p",
    ) -> TorrentResult:
        return TorrentResult(
            name=name,
            date=date,
            seeders=seeders,
            magnet_link=magnet_link,
            episode=episode,
            resolution=resolution,
        )

    return _create


@pytest.fixture
def candidate_factory():
    """Factory for creating test RawCandidate objects."""

    def _create(
        title: str | None = "[SubsPlease] Test Anime - 01 (1080p) [ABC123].mkv",
        detail_link: str | None = "https://nyaa.si/view/1234567",
        magnet_link: str | None = "magnet:?xt=urn:btih:ABC123",
        published_text: str = "2025-07-14 12:00",
        seeders_text: str = "100",
    ) -> RawCandidate:
        return RawCandidate(
            title=title,
            detail_link=detail_link,
            magnet_link=magnet_link,
            published_text=published_text,
            seeders_text=seeders_text,
        )

    return _create


@pytest.fixture
def query_factory():
    """Factory for creating test SearchQuery objects."""

    def _create(
        primary_title: str = "Shingeki no Kyojin",
        alternate_title: str | None = "Attack on Titan",
        target_episode: int | None = 12,
    ) -> SearchQuery:
        return SearchQuery(
            primary_title=primary_title,
            alternate_title=alternate_title,
            target_episode=target_episode,
        )

    return _create


# ============================================================================
# HTML Mock Data - Realistic nyaa.si HTML fixtures
# ============================================================================


def render_row(
    title: str,
    date: str,
    seeders: str = "100",
    torrent_id: str = "1234567",
    comments: int = 0,
) -> str:
    """Render one nyaa.si result row."""
    comments_link = (
        f'<a href="/view/{torrent_id}#comments" class="comments" '
        f'title="{comments} comments"><i class="fa fa-comments-o"></i>{comments}</a>'
        if comments
        else ""
    )
    return f"""
                <tr class="default">
                    <td><a href="/?c=1_2" title="Anime - English-translated">Anime</a></td>
                    <td colspan="2">
                        {comments_link}
                        <a href="/view/{torrent_id}" title="{title}">{title}</a>
                    </td>
                    <td class="text-center">
                        <a href="/download/{torrent_id}.torrent"><i class="fa fa-fw fa-download"></i></a>
                        <a href="magnet:?xt=urn:btih:{torrent_id}"><i class="fa fa-fw fa-magnet"></i></a>
                    </td>
                    <td class="text-center">1.4 GiB</td>
                    <td class="text-center">{date}</td>
                    <td class="text-center">{seeders}</td>
                    <td class="text-center">20</td>
                    <td class="text-center">1000</td>
                </tr>"""


def render_page(rows: list[str]) -> str:
    """Wrap rendered rows in a nyaa.si search results page."""
    return f"""
    <!DOCTYPE html>
    <html>
    <body>
        <table class="table torrent-list">
            <thead><tr><th>Category</th><th>Name</th><th>Link</th></tr></thead>
            <tbody>{"".join(rows)}
            </tbody>
        </table>
    </body>
    </html>
    """


@pytest.fixture
def search_page_factory():
    """Factory building a search page from (title, date, seeders) tuples."""

    def _create(entries: list[tuple[str, str, str]]) -> str:
        rows = [
            render_row(title, date, seeders, torrent_id=str(1000 + i), comments=i % 2)
            for i, (title, date, seeders) in enumerate(entries)
        ]
        return render_page(rows)

    return _create


@pytest.fixture
def sample_search_page_html():
    """Search page dated against NOW: two recent releases, one stale, one undated."""
    return render_page(
        [
            render_row(
                "[SubsPlease] Test Anime - 12 (1080p) [ABCDEF].mkv",
                "2025-07-10 14:49",
                "150",
                torrent_id="1234567",
                comments=3,
            ),
            render_row(
                "[Erai-raws] Test Anime - 12 [720p][Multiple Subtitle].mkv",
                "2025-07-09 08:00",
                "120",
                torrent_id="1234568",
            ),
            render_row(
                "[SubsPlease] Test Anime - 12 (1080p) [OLD000].mkv",
                "2025-01-02 10:00",
                "90",
                torrent_id="1234569",
            ),
            render_row(
                "[SubsPlease] Test Anime - 11 (1080p) [XYZ111].mkv",
                "unknown",
                "80",
                torrent_id="1234570",
            ),
        ]
    )


@pytest.fixture
def recent_date():
    """Format a date N days before the real current time, as nyaa.si shows it."""

    def _format(days_ago: int = 1) -> str:
        return (datetime.now(timezone.utc) - timedelta(days=days_ago)).strftime(
            "%Y-%m-%d %H:%M"
        )

    return _format


@pytest.fixture
def empty_search_page_html():
    """Empty search results page (no torrents found)."""
    return """
    <!DOCTYPE html>
    <html>
    <body>
        <p>No results found.</p>
    </body>
    </html>
    """

