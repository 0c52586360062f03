"""Watch-list reconciliation: which episode does the viewer need, and has it aired."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timezone

from .models import SearchQuery

# Display order of airing days; shows without a schedule go last
DAY_ORDER = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
    "unknown",
]


@dataclass
class MediaTitle:
    """Titles the tracking service knows a show by."""

    romaji: str | None = None
    english: str | None = None

    @property
    def display(self) -> str:
        return self.english or self.romaji or "Unknown"


@dataclass
class NextAiring:
    """The next scheduled episode of a show."""

    episode: int
    airing_at: int  # unix seconds
    time_until_airing: int | None = None  # seconds


@dataclass
class ListEntry:
    """A show on the viewer's watch list."""

    media_id: int
    title: MediaTitle
    progress: int
    total_episodes: int | None = None
    next_airing: NextAiring | None = None

    @property
    def needed_episode(self) -> int:
        """The episode the viewer watches next."""
        return self.progress + 1


@dataclass
class AiringNotification:
    """Notice from the tracking service that an episode aired."""

    media_id: int
    title: MediaTitle
    episode: int


def is_episode_available(progress: int, next_airing_episode: int | None) -> bool:
    """
    Check whether the episode after `progress` should already be out.

    The episode just before the next airing one is taken as released, so
    the needed episode is available when progress + 1 < next airing.
    Without schedule information the episode is assumed available.
    """
    if next_airing_episode is None:
        return True
    return progress + 1 < next_airing_episode


def _entry_available(entry: ListEntry) -> bool:
    next_episode = entry.next_airing.episode if entry.next_airing else None
    return is_episode_available(entry.progress, next_episode)


def available_entries(
    entries: list[ListEntry], only_available: bool = True
) -> list[ListEntry]:
    """
    Filter and order a watch list for display.

    Entries whose next episode has not aired are dropped when
    `only_available` is set. Entries with a scheduled next episode come
    first, earliest airing first; the rest keep their original order.
    """
    if only_available:
        entries = [e for e in entries if _entry_available(e)]

    scheduled = [e for e in entries if e.next_airing and e.next_airing.airing_at]
    unscheduled = [e for e in entries if not (e.next_airing and e.next_airing.airing_at)]
    scheduled.sort(key=lambda e: e.next_airing.airing_at)
    return scheduled + unscheduled


def query_for_entry(entry: ListEntry) -> SearchQuery:
    """Search query for the episode a watch-list entry needs next."""
    return SearchQuery(
        primary_title=entry.title.romaji or "",
        alternate_title=entry.title.english,
        target_episode=entry.needed_episode,
    )


def query_for_notification(notification: AiringNotification) -> SearchQuery:
    """Search query for the episode an airing notification announced."""
    return SearchQuery(
        primary_title=notification.title.romaji or "",
        alternate_title=notification.title.english,
        target_episode=notification.episode,
    )


def progress_percentage(progress: int, total_episodes: int | None) -> float:
    """Share of the show watched, 0 when the episode count is unknown."""
    if not total_episodes:
        return 0.0
    return progress / total_episodes * 100


def time_remaining(next_airing: NextAiring | None) -> str | None:
    """Countdown to the next episode, e.g. '2d 5h', '3h 20m' or '45m'."""
    if next_airing is None or next_airing.time_until_airing is None:
        return None

    seconds = next_airing.time_until_airing
    if seconds <= 0:
        return "Available now!"

    days, rest = divmod(seconds, 24 * 60 * 60)
    hours, rest = divmod(rest, 60 * 60)
    minutes = rest // 60

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def group_by_day(entries: list[ListEntry]) -> dict[str, list[ListEntry]]:
    """
    Group watch-list entries by the weekday their next episode airs.

    Weekdays are taken in UTC. Entries without a schedule go under
    "unknown". Groups come back in DAY_ORDER, empty days omitted, and
    each group keeps the entries' original order.
    """
    groups: dict[str, list[ListEntry]] = defaultdict(list)
    for entry in entries:
        if entry.next_airing is None:
            groups["unknown"].append(entry)
            continue
        airing = datetime.fromtimestamp(entry.next_airing.airing_at, tz=timezone.utc)
        groups[airing.strftime("%A")].append(entry)

    return {day: groups[day] for day in DAY_ORDER if day in groups}
