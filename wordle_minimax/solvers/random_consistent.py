"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the live region of the store (words
    still consistent with all feedback so far).
  - Still reports the pick's worst-case guarantee so the driver can show
    the same line it shows for minimax.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline for the self-play harness; it does not search at all.
"""

from __future__ import annotations

from wordle_minimax.engine.constraints import ConstraintState
from wordle_minimax.engine.store import DictionaryStore
from .base import BaseSolver, Selection, register
from .minimax import worst_case_gain


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def select(self, state: ConstraintState, store: DictionaryStore) -> Selection:
        if store.size == 0:
            return Selection(index=None, guarantee=0)

        i = self.rng.randrange(store.size)
        return Selection(index=i, guarantee=worst_case_gain(state, store[i], store))
