# apps/cli/play.py
"""
Interactive solver.

Each round the solver prints the word to submit and how many dictionary
words it is guaranteed to eliminate; the player types back the game's
feedback:

    O   letter is in the word, in this position
    -   letter is in the word, elsewhere
    X   letter is not in the word
    list  prints the words still possible

Exit code 0 once the word is solved, 1 if the dictionary is missing, the
candidates run out, or input ends.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from wordle_minimax.datasets import DICTIONARY_FILENAME, find_dictionary_path, load_dictionary
from wordle_minimax.engine import InconsistentFeedbackError, InvalidFeedbackError, WORD_LENGTH
from wordle_minimax.harness import Session
from wordle_minimax.solvers import BaseSolver, create_solver, get_solver_ids

INTRO = """
Welcome to the wordle solver! Each round you will be presented with a word to submit and then provide feedback for the
results. The key is below:

    O       The letter is present in the final word and is in the correct location
    -       The letter is present in the final word, but is not in the correct location
    X       The letter is not present in the final word

There are also a few additional commands you can execute:

    list    This will list all remaining words in the dictionary
"""

PROMPT = "Result:           "


def play(session: Session, *, read_line: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    """
    Run the prompt loop until solved. Returns the process exit code.

    `read_line` must raise EOFError when input ends (as input() does).
    """
    write(INTRO)

    while True:
        write(f"There are {session.remaining_count} words left in the dictionary")
        suggestion = session.next_guess()
        if suggestion is None:
            write("No words left in the dictionary match that feedback.")
            return 1

        write(f"This word is guaranteed to reduce dictionary size by at least {suggestion.guarantee}")
        write(f"Submit this word: {suggestion.word}")

        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                return 1

            text = line.strip().upper()
            if text == "LIST":
                write("The remaining words in the dictionary are: " + ", ".join(session.remaining()))
                continue
            if len(text) != session.N:
                write("ERROR: Input was of incorrect length. Please only use the letters 'X', '-', and 'O'")
                continue

            try:
                session.submit(text)
            except InvalidFeedbackError:
                write("ERROR: Input contained invalid character(s). Please only use the letters 'X', '-', and 'O'")
                continue
            except InconsistentFeedbackError as e:
                write(f"ERROR: {e}. Please check the result and enter it again")
                continue
            break

        if session.solved:
            write(f"Solved in {len(session.history)} guess(es): {suggestion.word}")
            return 0


def _make_solver(solver_id: str, workers: int | None, seed: int | None) -> BaseSolver:
    solver = create_solver(solver_id, workers=workers) if solver_id == "minimax" \
        else create_solver(solver_id)
    solver.reset(seed=seed)
    return solver


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-minimax — interactive worst-case solver")
    ap.add_argument("--dictionary",
                    help=f"word list path (default: nearest {DICTIONARY_FILENAME} "
                         f"in the current directory or its parents)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--workers", type=int, help="worker threads (default: CPU count)")
    ap.add_argument("--seed", type=int, help="RNG seed for randomized solvers")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.dictionary) if args.dictionary else find_dictionary_path()
    if path is None or not path.is_file():
        print("ERROR: Unable to find dictionary file. Ensure that the working directory is set correctly",
              file=sys.stderr)
        return 1

    words = load_dictionary(path, args.N)
    session = Session.from_words(words, args.N,
                                 solver=_make_solver(args.solver, args.workers, args.seed))
    return play(session)


if __name__ == "__main__":
    sys.exit(main())
