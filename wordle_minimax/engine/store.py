"""
Dictionary store: the working set of still-possible answers.

Layout:
  - an arena of DictionaryEntry objects, fixed at construction
  - numpy mirrors of every entry's position masks (size x N, uint32) and
    letter counts (size x 26, uint8), so the feasibility filter runs over
    the whole set in a handful of vectorized operations
  - a logical-size cursor; rows [0, size) are live, rows beyond it are
    eliminated garbage and are never read

Removal swaps the dead row with the last live row and shrinks the cursor,
so nothing is reallocated and the cursor only ever moves down. Surviving
entries carry no ordering guarantee.

Thread safety: reads (fits_mask, count_eliminated, __getitem__) are safe
to run concurrently as long as nobody calls prune(commit=True) meanwhile.
The Session only prunes between selection calls.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence

import numpy as np

from .constraints import ConstraintState
from .entry import DictionaryEntry
from .errors import InvalidWordError
from .letters import ALPHABET_SIZE, WORD_LENGTH

log = logging.getLogger(__name__)


class DictionaryStore:
    def __init__(self, entries: Sequence[DictionaryEntry], N: int = WORD_LENGTH):
        for e in entries:
            if len(e) != N:
                raise InvalidWordError(f"{e.word!r} has length {len(e)}, expected {N}")

        self.N = N
        self._entries: List[DictionaryEntry] = list(entries)
        n = len(self._entries)
        self._masks = np.array(
            [e.position_mask for e in self._entries], dtype=np.uint32).reshape(n, N)
        self._counts = np.array(
            [e.letter_count for e in self._entries], dtype=np.uint8).reshape(n, ALPHABET_SIZE)
        self._size = n

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = WORD_LENGTH) -> "DictionaryStore":
        """Build one entry per word. Malformed words raise InvalidWordError."""
        return cls([DictionaryEntry.from_word(w, N) for w in words], N)

    # ---- logical region ----

    @property
    def capacity(self) -> int:
        return len(self._entries)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> DictionaryEntry:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} outside live region [0, {self._size})")
        return self._entries[index]

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries[: self._size])

    def entries(self) -> List[DictionaryEntry]:
        """Snapshot of the live entries."""
        return self._entries[: self._size]

    def words(self) -> List[str]:
        return [e.word for e in self._entries[: self._size]]

    # ---- filtering ----

    def fits_mask(self, state: ConstraintState) -> np.ndarray:
        """
        Boolean array over the live region: True where the entry fits `state`.
        Row for row this agrees with constraints.fits().
        """
        size = self._size
        possible = np.asarray(state.position_possible, dtype=np.uint32)
        bounds = np.asarray(state.count_bounds, dtype=np.int16)

        pos_ok = np.all((self._masks[:size] & possible) != 0, axis=1)
        counts = self._counts[:size]
        count_ok = np.all((counts >= bounds[:, 0]) & (counts <= bounds[:, 1]), axis=1)
        return pos_ok & count_ok

    def count_eliminated(self, state: ConstraintState) -> int:
        """How many live entries `state` would rule out. Read-only."""
        return int(self._size - np.count_nonzero(self.fits_mask(state)))

    def prune(self, state: ConstraintState, commit: bool = True) -> int:
        """
        Count live entries that do not fit `state`; with commit=True also
        remove them (swap with the last live entry, shrink the cursor).

        Every live entry is visited exactly once in either mode.
        Returns the removed (or would-be removed) count.
        """
        ok = self.fits_mask(state)
        if not commit:
            return int(self._size - np.count_nonzero(ok))

        size = self._size
        removed = 0
        i = 0
        while i < size:
            if ok[i]:
                i += 1
                continue

            # Row i is dead: pull the last live row into its slot and look
            # at slot i again, since that row has not been visited yet.
            removed += 1
            last = size - 1
            if i != last:
                self._swap(i, last)
                ok[i], ok[last] = ok[last], ok[i]
            size -= 1

        self._size = size
        log.debug("pruned %d entr%s, %d left", removed, "y" if removed == 1 else "ies", size)
        return removed

    def _swap(self, i: int, j: int) -> None:
        ents = self._entries
        ents[i], ents[j] = ents[j], ents[i]
        self._masks[[i, j]] = self._masks[[j, i]]
        self._counts[[i, j]] = self._counts[[j, i]]
