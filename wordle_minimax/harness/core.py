"""
Self-play harness core primitives.

- run_case:  play one game against a known hidden answer with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The harness stands in for the human: it scores each suggested guess against
the answer and submits that feedback to a Session, exactly as the
interactive CLI would with typed feedback.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence, Tuple

from wordle_minimax.engine import DictionaryEntry, DictionaryStore, score
from .session import Session

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")

def run_case(
        solver,
        answer: str,
        *,
        entries: Sequence[DictionaryEntry],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins, runs out of candidates, or the
    turn budget is exhausted.

    Args:
        solver:     an object implementing BaseSolver.select(state, store)
        answer:     the hidden word for this case
        entries:    the full dictionary, built once and shared across cases
        N:          word length
        max_turns:  must be 6 (Wordle rule; enforced)
        seed:       RNG seed so solver tie-breaks are reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern, guarantee)]), answer (str)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().upper()

    solver.reset(seed=seed)

    # Fresh live region per game; entries themselves are shared read-only.
    session = Session(DictionaryStore(entries, N), solver=solver)
    history: List[Tuple[str, str, int]] = []

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        suggestion = session.next_guess()
        if suggestion is None:
            # Answer not in the dictionary: nothing left to guess.
            break

        patt = score(suggestion.word, answer)
        session.submit(patt)
        history.append((suggestion.word, patt, suggestion.guarantee))

        if session.solved:
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "answer": answer
            }

    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": answer
    }

def run_batch(
        solver,
        answers: List[str],
        *,
        entries: Sequence[DictionaryEntry],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length N) are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            solver, ans, entries=entries, N=N,
            max_turns=WORDLE_MAX_TURNS, seed=case_seed
        )
        out.append(r)
    return out
