from __future__ import annotations

import itertools
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from wordfinder.errors import EmptyWordError, NullStreamError
from wordfinder.grid import Grid
from wordfinder.metrics import StageTimer
from wordfinder.ranking import top_words
from wordfinder.settings import settings

logger = logging.getLogger("wordfinder")


def _check_word(word) -> None:
    if not isinstance(word, str):
        raise TypeError(f"query words must be str, got {type(word).__name__}")
    if not word:
        raise EmptyWordError()


class WordFinder:
    """Finds query words in a Grid, reading left-to-right and top-to-bottom.

    ``top_n`` and ``max_workers`` fall back to the global settings at call
    time when left as None.
    """

    def __init__(self, grid: Grid, top_n: int | None = None, max_workers: int | None = None):
        if not isinstance(grid, Grid):
            raise TypeError(f"expected a Grid, got {type(grid).__name__}")
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.grid = grid
        self.top_n = top_n
        self.max_workers = max_workers

    @classmethod
    def from_rows(cls, rows: Iterable[str], **kwargs) -> WordFinder:
        return cls(Grid(rows), **kwargs)

    def contains(self, word: str) -> bool:
        """True if ``word`` reads across some row or down some column."""
        _check_word(word)
        return self._present(word)

    def find(self, words: Iterable[str]) -> list[str]:
        """Top words of the stream that occur in the grid.

        Each stream entry found in the grid counts once, duplicates included.
        Ranked by count (highest first), ties alphabetical.
        """
        if words is None:
            raise NullStreamError()
        if isinstance(words, str):
            raise TypeError("words must be an iterable of str, not a single str")

        timer = StageTimer()
        with timer.stage("tally"):
            counts = Counter(words)
            for word in counts:
                _check_word(word)

        with timer.stage("scan"):
            tally = self._scan(counts)

        limit = settings.TOP_N if self.top_n is None else self.top_n
        with timer.stage("rank"):
            result = top_words(tally, limit)
        timer.note(distinct=len(counts), found=len(tally), returned=len(result))

        logger.debug(
            "Found %d of %d distinct words in %r (returning top %d, %.3fms)",
            len(tally), len(counts), self.grid, len(result), timer.total_ms,
        )
        if settings.DEBUG:
            logger.info("find timings: %s", timer.summary())
        return result

    def _present(self, word: str) -> bool:
        grid = self.grid
        if len(word) > grid.rows and len(word) > grid.cols:
            return False
        # startswith(word, k) is False whenever the word runs off the edge
        return any(
            grid.row(r).startswith(word, c) or grid.column(c).startswith(word, r)
            for r, c in grid.starts(word[0])
        )

    def _tally_shard(self, words: list[str], counts: Counter) -> Counter:
        part: Counter = Counter()
        for word in words:
            if self._present(word):
                part[word] = counts[word]
        return part

    def _scan(self, counts: Counter) -> Counter:
        distinct = list(counts)
        max_workers = settings.MAX_WORKERS if self.max_workers is None else self.max_workers
        workers = min(max_workers, len(distinct))
        if workers <= 1 or len(distinct) < settings.PARALLEL_MIN_WORDS:
            return self._tally_shard(distinct, counts)

        # One shard per worker; partial tallies are merged after the join
        shards = [distinct[i::workers] for i in range(workers)]
        tally: Counter = Counter()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordfinder") as executor:
            for part in executor.map(self._tally_shard, shards, itertools.repeat(counts)):
                tally.update(part)
        logger.debug("Scanned %d distinct words across %d workers", len(distinct), workers)
        return tally
