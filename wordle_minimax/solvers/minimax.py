"""
Minimax guess selection (worst-case elimination).

Idea:
  For a candidate guess g, every feedback pattern p it could receive leads
  to a tightened constraint state, and that state rules out some number of
  live dictionary entries. The guess's *guarantee* is the minimum of that
  number over all 3**N patterns: no matter what the game answers, at least
  that many words disappear. Pick the live entry with the largest
  guarantee.

Notes:
  - All 3**N patterns are evaluated, including ones no real answer could
    produce (e.g. "X-XXX" for EERIE: a real game marks the first unmatched
    E as misplaced before the second). There is no reachability filter; an
    unreachable pattern counts like any other.
  - Cost is O(size * 3**N * size). The live region is split into
    contiguous chunks, one per worker thread; each chunk keeps its own best
    and the chunk winners are merged in chunk order afterwards.
  - Ties go to the first entry in scan order, so the chosen index does not
    depend on the worker count.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from wordle_minimax.engine.constraints import ConstraintState, _apply_pattern
from wordle_minimax.engine.entry import DictionaryEntry
from wordle_minimax.engine.feedback import all_patterns
from wordle_minimax.engine.store import DictionaryStore
from .base import BaseSolver, Selection, register

log = logging.getLogger(__name__)

# (index of local winner or None, its guarantee; -1 when the chunk is empty)
ChunkResult = Tuple[int | None, int]


def default_workers() -> int:
    return os.cpu_count() or 1


def partition(size: int, workers: int) -> List[Tuple[int, int]]:
    """
    Split [0, size) into `workers` contiguous half-open ranges.

    Ranges are disjoint, in order, and cover every index exactly once.
    Trailing ranges may be empty when size < workers.
    """
    workers = max(1, int(workers))
    per = -(-size // workers)  # ceil division
    ranges = []
    for i in range(workers):
        start = min(per * i, size)
        end = min(start + per, size)
        ranges.append((start, end))
    return ranges


def worst_case_gain(state: ConstraintState, entry: DictionaryEntry,
                    store: DictionaryStore) -> int:
    """
    Minimum number of live entries eliminated by guessing `entry`, over every
    feedback pattern it could receive. Always within [0, store.size].
    """
    if store.size == 0:
        return 0

    best = store.size
    for pattern in all_patterns(len(entry)):
        removed = store.count_eliminated(_apply_pattern(state, entry, pattern))
        if removed < best:
            best = removed
            if best == 0:
                # Nothing can go lower; the rest of the patterns don't matter.
                break
    return best


def _evaluate_chunk(state: ConstraintState, store: DictionaryStore,
                    start: int, end: int) -> ChunkResult:
    """Best entry in [start, end): largest guarantee, first one on ties."""
    best_index = None
    best_gain = -1
    for i in range(start, end):
        gain = worst_case_gain(state, store[i], store)
        if gain > best_gain:
            best_index, best_gain = i, gain
    log.debug("chunk [%d, %d): best index=%s gain=%d", start, end, best_index, best_gain)
    return best_index, best_gain


def select_guess(state: ConstraintState, store: DictionaryStore,
                 workers: int | None = None) -> Selection:
    """
    Evaluate every live entry and return the one with the best guarantee.

    A fresh thread pool is started for the call and joined before returning;
    `state` and `store` are only read while it runs.

    Returns:
      Selection(index, guarantee); Selection(None, 0) for an empty store.
    """
    size = store.size
    if size == 0:
        log.info("no candidates left to select from")
        return Selection(index=None, guarantee=0)

    n_workers = workers if workers is not None else default_workers()
    ranges = partition(size, n_workers)

    # One slot per worker; the executor's shutdown is the join barrier.
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(_evaluate_chunk, state, store, start, end)
                   for start, end in ranges]
        results: List[ChunkResult] = [f.result() for f in futures]

    best_index = None
    best_gain = -1
    for index, gain in results:
        if index is not None and gain > best_gain:
            best_index, best_gain = index, gain

    log.info("selected %s (index %d of %d): guaranteed to eliminate at least %d",
             store[best_index].word, best_index, size, best_gain)
    return Selection(index=best_index, guarantee=best_gain)


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (worst-case elimination)"
    version = "1.0.0"

    def __init__(self, workers: int | None = None):
        super().__init__()
        self.workers = workers

    def select(self, state: ConstraintState, store: DictionaryStore) -> Selection:
        return select_guess(state, store, workers=self.workers)
