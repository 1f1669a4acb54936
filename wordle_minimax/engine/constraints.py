"""
Constraint state: everything learned about the hidden word so far.

The state holds:
  - position_possible[i] : bitmask of letters still allowed at position i
  - count_bounds[c]      : (min, max) occurrences of letter c in the answer

Two operations work on it:
  - fits(entry, state)            : does a dictionary word satisfy the state?
  - apply(state, entry, feedback) : new state after seeing `feedback` for
                                    guess `entry` (input state untouched)

apply() is used for the real round (once per turn); the minimax evaluator
runs the same update through _apply_pattern (3**N times per candidate)
with pre-parsed patterns. Neither mutates its input.

Count-bound rule for repeated letters:
  Guess "EERIE" with feedback "O X X X O" means exactly two E's, not zero:
  an INCORRECT on one copy caps the count at the number of copies that were
  confirmed (CORRECT/MISPLACED) in the same pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .entry import DictionaryEntry
from .errors import InvalidFeedbackError
from .feedback import FeedbackLike, LetterResult, Pattern, parse_feedback
from .letters import ALPHABET, ALPHABET_SIZE, FULL_MASK, WORD_LENGTH, mask_letters


@dataclass
class ConstraintState:
    position_possible: List[int]
    count_bounds: List[Tuple[int, int]]

    @classmethod
    def initial(cls, N: int = WORD_LENGTH) -> "ConstraintState":
        """Unconstrained state: every letter everywhere, 0..N copies of each."""
        return cls(
            position_possible=[FULL_MASK] * N,
            count_bounds=[(0, N)] * ALPHABET_SIZE,
        )

    @property
    def N(self) -> int:
        return len(self.position_possible)

    def copy(self) -> "ConstraintState":
        # Lists of ints/tuples: a shallow list copy is a full value copy.
        return ConstraintState(list(self.position_possible), list(self.count_bounds))

    def is_satisfiable(self) -> bool:
        """
        False if no word at all could satisfy the state (some position has no
        allowed letter, some letter has min > max, or the minimum counts
        alone need more than N letters).
        """
        if any(mask == 0 for mask in self.position_possible):
            return False
        if any(lo > hi for lo, hi in self.count_bounds):
            return False
        return sum(lo for lo, _ in self.count_bounds) <= self.N

    def describe(self) -> str:
        """One-line summary for logs, e.g. 'pos=[...] counts={E:1-1, R:1-5}'."""
        pos = [ch if len(ch) == 1 else f"{len(ch)}"
               for ch in (mask_letters(m) for m in self.position_possible)]
        N = self.N
        counts = ", ".join(
            f"{ALPHABET[c]}:{lo}-{hi}"
            for c, (lo, hi) in enumerate(self.count_bounds)
            if (lo, hi) != (0, N)
        )
        return f"pos={pos} counts={{{counts}}}"


def fits(entry: DictionaryEntry, state: ConstraintState) -> bool:
    """
    True iff `entry` is still a possible answer under `state`.

    Checks every position's letter against the allowed mask, then every
    letter count against its (min, max) bounds.
    """
    for m, allowed in zip(entry.position_mask, state.position_possible):
        if not (m & allowed):
            return False

    for n, (lo, hi) in zip(entry.letter_count, state.count_bounds):
        if n < lo or n > hi:
            return False

    return True


def apply(state: ConstraintState, entry: DictionaryEntry,
          feedback: FeedbackLike) -> ConstraintState:
    """
    Return the state that results from guessing `entry` and seeing `feedback`.

    Per position i with letter c:
      INCORRECT : c is not at i; c's max gets capped (see module docstring)
      MISPLACED : c is not at i; one more confirmed copy of c
      CORRECT   : position i becomes exactly {c}; one more confirmed copy of c

    Count bounds only tighten relative to `state`:
      min = max(old min, confirmed copies)
      max = min(old max, confirmed copies)   for letters with an INCORRECT

    Raises:
      InvalidFeedbackError if feedback length differs from the entry length.
    """
    N = len(entry)
    if state.N != N:
        raise InvalidFeedbackError(f"state is for length {state.N}, guess has length {N}")
    return _apply_pattern(state, entry, parse_feedback(feedback, N))


def contradicts_positions(state: ConstraintState, entry: DictionaryEntry,
                          pattern: Pattern) -> bool:
    """True if a CORRECT in `pattern` names a letter `state` already ruled out there."""
    return any(
        r == LetterResult.CORRECT and not (allowed & m)
        for r, allowed, m in zip(pattern, state.position_possible, entry.position_mask)
    )


def _apply_pattern(state: ConstraintState, entry: DictionaryEntry,
                   pattern: Pattern) -> ConstraintState:
    """apply() for an already-validated pattern of matching length."""
    new = state.copy()
    possible = new.position_possible
    confirmed = [0] * ALPHABET_SIZE
    capped = [False] * ALPHABET_SIZE

    for i, result in enumerate(pattern):
        c = entry.letter_at[i]
        m = entry.position_mask[i]
        if result == LetterResult.INCORRECT:
            possible[i] &= ~m
            capped[c] = True
        elif result == LetterResult.MISPLACED:
            possible[i] &= ~m
            confirmed[c] += 1
        else:
            possible[i] = m
            confirmed[c] += 1

    bounds = new.count_bounds
    # Only letters in the guess can change.
    for c in set(entry.letter_at):
        lo, hi = bounds[c]
        n = confirmed[c]
        if n > lo:
            lo = n
        if capped[c] and n < hi:
            hi = n
        bounds[c] = (lo, hi)

    return new
