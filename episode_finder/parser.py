"""Episode and resolution extraction from release titles."""

import re
from collections.abc import Callable


def _reasonable_episode(value: int) -> bool:
    """Reject captures that are really years, resolutions or hashes."""
    return 0 < value < 1000


# Episode rules: (pattern, validator). First accepted value wins.
# Order matters: looser patterns would otherwise misfire on season numbers,
# years, or other embedded digits.
EPISODE_RULES: list[tuple[re.Pattern, Callable[[int], bool]]] = [
    # S01E01, S1E1
    (re.compile(r"S\d+E(\d+)", re.IGNORECASE), _reasonable_episode),
    # " - 03" followed by whitespace, end of title, or a bracket
    (re.compile(r"\s-\s(\d+)(?:\s|$|\[)", re.IGNORECASE), _reasonable_episode),
    # EP03, ep3
    (re.compile(r"EP(\d+)", re.IGNORECASE), _reasonable_episode),
    # Episode 03, episode3
    (re.compile(r"episode\s*(\d+)", re.IGNORECASE), _reasonable_episode),
    # E01, e1 (standalone)
    (re.compile(r"\bE(\d+)\b", re.IGNORECASE), _reasonable_episode),
    # [01]
    (re.compile(r"\[(\d+)\]"), _reasonable_episode),
]

# Resolution rules, first match wins
RESOLUTION_RULES: list[re.Pattern] = [
    re.compile(r"(\d{3,4}p)", re.IGNORECASE),  # 1080p, 720p, 480p, 2160p
    re.compile(r"(\d{3,4}x\d{3,4})", re.IGNORECASE),  # 1920x1080
    re.compile(r"(4K)", re.IGNORECASE),
    re.compile(r"(8K)", re.IGNORECASE),
    re.compile(r"(HD)", re.IGNORECASE),
    re.compile(r"(FHD)", re.IGNORECASE),
    re.compile(r"(UHD)", re.IGNORECASE),
]


def extract_episode(title: str) -> int | None:
    """
    Extract the episode number from a release title.

    Each rule in EPISODE_RULES is tried in order. A rule whose capture
    fails its validator does not stop the search; the next rule gets a
    chance. None means the episode is unknown, never episode 0.
    """
    for pattern, is_valid in EPISODE_RULES:
        match = pattern.search(title)
        if not match:
            continue
        episode = int(match.group(1))
        if is_valid(episode):
            return episode
    return None


def extract_resolution(title: str) -> str | None:
    """Extract a lower-cased resolution tag (e.g. '1080p') from a title."""
    for pattern in RESOLUTION_RULES:
        match = pattern.search(title)
        if match:
            return match.group(1).lower()
    return None


def parse_release_name(title: str) -> tuple[int | None, str | None]:
    """Return (episode, resolution) for a release title."""
    return extract_episode(title), extract_resolution(title)
