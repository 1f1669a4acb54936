"""
Game session: one round driver around the engine.

A Session owns the real ConstraintState and the DictionaryStore for one
game and runs the loop

    suggestion = session.next_guess()     # solver picks from the live region
    session.submit("XO-XO")               # real feedback -> new state -> prune

It is UI-agnostic; the interactive CLI and the self-play harness both drive
the game through it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from wordle_minimax.engine import (
    ConstraintState, DictionaryEntry, DictionaryStore, InconsistentFeedbackError,
    NoCandidatesError, WORD_LENGTH, apply, format_feedback, is_solved, parse_feedback,
)
from wordle_minimax.engine.constraints import contradicts_positions
from wordle_minimax.engine.feedback import FeedbackLike
from wordle_minimax.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    entry: DictionaryEntry
    guarantee: int
    index: int

    @property
    def word(self) -> str:
        return self.entry.word


@dataclass(frozen=True)
class Round:
    guess: str
    pattern: str
    guarantee: int | None
    removed: int


class Session:
    def __init__(self, store: DictionaryStore, *, solver: BaseSolver | None = None,
                 state: ConstraintState | None = None):
        self.store = store
        self.N = store.N
        self.state = state.copy() if state is not None else ConstraintState.initial(self.N)
        self.solver = solver if solver is not None else create_solver("minimax")
        self.pending: Suggestion | None = None
        self.history: List[Round] = []
        self.solved = False

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = WORD_LENGTH, **kwargs) -> "Session":
        return cls(DictionaryStore.from_words(words, N), **kwargs)

    @property
    def remaining_count(self) -> int:
        return self.store.size

    def remaining(self) -> List[str]:
        """Words still possible (read-only snapshot)."""
        return self.store.words()

    def next_guess(self) -> Suggestion | None:
        """
        Ask the solver for the next guess. Returns None if no candidate is
        left (the answer is not in the dictionary, or feedback was wrong).
        """
        sel = self.solver.select(self.state, self.store)
        if sel.index is None:
            self.pending = None
            return None
        self.pending = Suggestion(entry=self.store[sel.index], guarantee=sel.guarantee,
                                  index=sel.index)
        return self.pending

    def submit(self, feedback: FeedbackLike,
               guess: str | DictionaryEntry | None = None) -> int:
        """
        Commit real feedback for `guess` (default: the pending suggestion).

        The new state is checked before anything changes; contradictory
        feedback raises InconsistentFeedbackError and leaves the session as
        it was, so the caller can re-prompt.

        Returns:
          number of dictionary entries removed.
        """
        guarantee = None
        if guess is None:
            if self.pending is None:
                raise NoCandidatesError("no pending guess; call next_guess() first")
            entry = self.pending.entry
            guarantee = self.pending.guarantee
        elif isinstance(guess, DictionaryEntry):
            entry = guess
        else:
            entry = DictionaryEntry.from_word(guess, self.N)

        pattern = parse_feedback(feedback, self.N)
        new_state = apply(self.state, entry, pattern)
        if contradicts_positions(self.state, entry, pattern) or not new_state.is_satisfiable():
            raise InconsistentFeedbackError(
                f"feedback {format_feedback(pattern)} for {entry.word} contradicts earlier rounds")

        removed = self.store.prune(new_state, commit=True)
        self.state = new_state
        self.pending = None
        self.history.append(Round(entry.word, format_feedback(pattern), guarantee, removed))
        self.solved = is_solved(pattern)

        log.debug("round %d: %s %s removed=%d left=%d state=%s",
                  len(self.history), entry.word, format_feedback(pattern), removed,
                  self.store.size, new_state.describe())
        return removed
