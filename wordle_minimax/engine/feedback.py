"""
Feedback patterns.

One symbol per guessed position:
  'O' : CORRECT    = letter is in the word at this position
  '-' : MISPLACED  = letter is in the word, but elsewhere
  'X' : INCORRECT  = letter is absent (or present fewer times than guessed)

Codes are case-insensitive on input and uppercase on output.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Sequence, Tuple, Union

from .errors import InvalidFeedbackError
from .letters import WORD_LENGTH


class LetterResult(IntEnum):
    INCORRECT = 0
    MISPLACED = 1
    CORRECT = 2

    @property
    def code(self) -> str:
        return _CODES[self]


_CODES = {
    LetterResult.INCORRECT: "X",
    LetterResult.MISPLACED: "-",
    LetterResult.CORRECT: "O",
}
_FROM_CODE = {v: k for k, v in _CODES.items()}

Pattern = Tuple[LetterResult, ...]
FeedbackLike = Union[str, Sequence[LetterResult], Sequence[int]]


def parse_feedback(feedback: FeedbackLike, N: int = WORD_LENGTH) -> Pattern:
    """
    Normalize user/harness feedback into a tuple of LetterResult.

    Accepts a code string ("xO-XO", case-insensitive) or a sequence of
    LetterResult / ints 0..2.

    Raises:
      InvalidFeedbackError on wrong length or unknown symbols.
    """
    if isinstance(feedback, str):
        text = feedback.strip().upper()
        if len(text) != N:
            raise InvalidFeedbackError(
                f"feedback {feedback!r} has length {len(text)}, expected {N}")
        bad = sorted({ch for ch in text if ch not in _FROM_CODE})
        if bad:
            raise InvalidFeedbackError(
                f"feedback {feedback!r} contains invalid symbol(s) {bad}; use 'X', '-' or 'O'")
        return tuple(_FROM_CODE[ch] for ch in text)

    items = list(feedback)
    if len(items) != N:
        raise InvalidFeedbackError(f"feedback has length {len(items)}, expected {N}")
    try:
        return tuple(LetterResult(v) for v in items)
    except ValueError as e:
        raise InvalidFeedbackError(f"invalid feedback symbol in {items!r}") from e


def format_feedback(pattern: Sequence[LetterResult]) -> str:
    """Tuple of LetterResult -> code string, e.g. 'XO-XO'."""
    return "".join(LetterResult(r).code for r in pattern)


def is_solved(pattern: Sequence[LetterResult]) -> bool:
    return all(r == LetterResult.CORRECT for r in pattern)


def all_patterns(N: int = WORD_LENGTH) -> Iterator[Pattern]:
    """
    Yield all 3**N patterns exactly once.

    Odometer over N base-3 digits; the last position turns fastest, so the
    order matches N nested loops with position 0 outermost.
    """
    digits = [0] * N
    results = tuple(LetterResult)
    while True:
        yield tuple(results[d] for d in digits)
        pos = N - 1
        while pos >= 0:
            digits[pos] += 1
            if digits[pos] < len(results):
                break
            digits[pos] = 0
            pos -= 1
        if pos < 0:
            return
