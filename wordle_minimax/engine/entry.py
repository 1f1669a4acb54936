"""
Dictionary entries.

A DictionaryEntry is one word plus everything the filter needs about it,
computed once at load time:
  - letter_at[i]      : alphabet index of the letter at position i
  - position_mask[i]  : one-bit mask for that letter
  - letter_count[c]   : how many times letter c occurs (length-26 tuple)

Entries are immutable and shared read-only by every worker thread.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidWordError
from .letters import ALPHABET, ALPHABET_SIZE, WORD_LENGTH, letter_index, letter_mask


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    letter_at: Tuple[int, ...] = field(repr=False)
    position_mask: Tuple[int, ...] = field(repr=False)
    letter_count: Tuple[int, ...] = field(repr=False)

    @classmethod
    def from_word(cls, word: str, N: int = WORD_LENGTH) -> "DictionaryEntry":
        """
        Build an entry from a raw word (case-insensitive).

        Raises:
          InvalidWordError if the word is not exactly N letters A–Z.
        """
        if not isinstance(word, str):
            raise InvalidWordError(f"expected a string, got {type(word).__name__}")

        w = word.upper()
        if len(w) != N:
            raise InvalidWordError(f"{word!r} has length {len(w)}, expected {N}")
        bad = [ch for ch in w if ch not in ALPHABET]
        if bad:
            raise InvalidWordError(f"{word!r} contains non-alphabet character(s) {bad}")

        indices = tuple(letter_index(ch) for ch in w)
        counts = [0] * ALPHABET_SIZE
        for i in indices:
            counts[i] += 1

        return cls(
            word=w,
            letter_at=indices,
            position_mask=tuple(letter_mask(i) for i in indices),
            letter_count=tuple(counts),
        )

    def __len__(self) -> int:
        return len(self.letter_at)

    def __str__(self) -> str:
        return self.word
