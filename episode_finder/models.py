"""Data models for episode finder."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from .utils import parse_int_safe


@dataclass
class SearchQuery:
    """What the caller wants found on the index."""

    primary_title: str
    alternate_title: str | None = None
    target_episode: int | None = None

    @property
    def search_term(self) -> str:
        """The literal search term, preferring the alternate title."""
        if self.alternate_title and self.alternate_title.strip():
            return self.alternate_title
        return self.primary_title


@dataclass
class RawCandidate:
    """One result row as it appears on the search page."""

    title: str | None
    detail_link: str | None
    magnet_link: str | None
    published_text: str = ""
    seeders_text: str = ""


@dataclass(frozen=True)
class TorrentResult:
    """A release that survived filtering, with its parsed metadata."""

    name: str
    date: datetime
    seeders: str
    magnet_link: str
    episode: int | None = None
    resolution: str | None = None

    @property
    def seeders_count(self) -> int:
        """Seeder count as a number, 0 when the page showed something else."""
        return parse_int_safe(self.seeders)

    def __str__(self) -> str:
        return f"{self.name} [{self.resolution or '?'}] S:{self.seeders}"


@dataclass
class SearchError:
    """Why a search produced no results."""

    kind: Literal["transport", "parse"]
    message: str

    def __str__(self) -> str:
        return f"{self.kind} error: {self.message}"


@dataclass
class SearchOutcome:
    """Results of one search plus the failure that cut it short, if any."""

    results: list[TorrentResult] = field(default_factory=list)
    error: SearchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DownloadRecord:
    """A viewer's chosen release, as handed to the download history."""

    viewer_id: int
    anime_name: str
    episode: int
    torrent_name: str
    magnet_link: str
    downloaded_at: datetime
    resolution: str | None = None
    seeders: int | None = None

    @classmethod
    def from_result(
        cls,
        result: TorrentResult,
        viewer_id: int,
        anime_name: str,
        downloaded_at: datetime | None = None,
    ) -> "DownloadRecord":
        """Build a record for a result the viewer picked."""
        return cls(
            viewer_id=viewer_id,
            anime_name=anime_name,
            episode=result.episode or 0,
            torrent_name=result.name,
            magnet_link=result.magnet_link,
            downloaded_at=downloaded_at or datetime.now(timezone.utc),
            resolution=result.resolution,
            seeders=result.seeders_count or None,
        )
