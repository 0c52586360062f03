"""Episode matching of parsed search results."""

from .models import TorrentResult

# Most results handed back for a single episode
MAX_RESULTS = 5


def match_episode(
    results: list[TorrentResult],
    target_episode: int | None,
    limit: int = MAX_RESULTS,
) -> list[TorrentResult]:
    """
    Keep the results for the requested episode.

    Args:
        results: Parsed results in upstream order (seeders, descending)
        target_episode: Episode to keep. None disables episode filtering.
        limit: Maximum number of results returned

    Returns:
        At most `limit` results, upstream order preserved. A result whose
        episode is unknown never matches a concrete target.
    """
    if target_episode is None:
        return results[:limit]
    return [r for r in results if r.episode == target_episode][:limit]
