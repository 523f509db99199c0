from typing import Mapping

DEFAULT_LIMIT = 10


def top_words(tally: Mapping[str, int], limit: int = DEFAULT_LIMIT) -> list[str]:
    """Rank tallied words by count (highest first), then alphabetically.

    Words with a non-positive count are dropped. ``limit <= 0`` returns the
    whole ranking.
    """
    ranked = sorted((w for w, n in tally.items() if n > 0), key=lambda w: (-tally[w], w))
    return ranked[:limit] if limit > 0 else ranked
