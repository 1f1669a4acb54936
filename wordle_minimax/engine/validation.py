"""
Lightweight word validation.

Answers the question "can this string become a DictionaryEntry?" without
raising, so loaders can skip malformed lines instead of failing. A word is
valid iff, after stripping and upper-casing, it is exactly N letters A–Z.
"""

from __future__ import annotations

from .letters import ALPHABET, WORD_LENGTH

_ALPHABET_SET = frozenset(ALPHABET)


def normalize_word(word: str) -> str:
    """Strip whitespace and fold to uppercase (the dictionary's single case)."""
    return word.strip().upper()


def is_valid_word(word: object, N: int = WORD_LENGTH) -> bool:
    if not isinstance(word, str):
        return False

    w = normalize_word(word)

    # str.isalpha() would accept accented letters; the alphabet is A–Z only.
    return len(w) == N and all(ch in _ALPHABET_SET for ch in w)
