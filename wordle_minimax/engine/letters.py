"""
Alphabet and bitmask helpers.

Every letter A–Z maps to an index 0..25 and to a one-bit mask (1 << index).
A set of letters is then just an int with up to 26 bits set, which is how
the constraint state tracks "letters still allowed at position i".
"""

from __future__ import annotations

import string

# Single source of truth for the game shape.
WORD_LENGTH = 5
ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)

# Every letter allowed.
FULL_MASK = (1 << ALPHABET_SIZE) - 1


def letter_index(ch: str) -> int:
    """Index 0..25 of an uppercase letter. Caller guarantees membership."""
    return ord(ch) - ord("A")


def letter_mask(index: int) -> int:
    return 1 << index


def mask_letters(mask: int) -> str:
    """Letters present in `mask`, alphabetical. Handy for debugging states."""
    return "".join(ch for i, ch in enumerate(ALPHABET) if mask & (1 << i))
