# apps/cli/run.py
"""
CLI entry point for self-play benchmarks.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it, builds the entries once, and instantiates the requested solver.
  3) Plays a batch of games against known answers with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/pattern/guarantee history columns
       - JSON: manifest with config, dictionary report, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from wordle_minimax.datasets import (
    DICTIONARY_FILENAME, find_dictionary_path, load_dictionary, pretty_summary, validate_dictionary,
)
from wordle_minimax.engine import WORD_LENGTH, DictionaryEntry
from wordle_minimax.harness import WORDLE_MAX_TURNS, run_case
from wordle_minimax.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_minimax.solvers import create_solver, get_solver_ids


def _summarize(results: List[Dict]) -> Dict:
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses_on_win": (sum(r["guesses"] for r in wins) / len(wins)) if wins else None,
        "total_time_ms": round(sum(float(r["time_ms"]) for r in results), 3),
    }


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-minimax — self-play benchmark")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--dictionary",
                    help=f"word list path (default: nearest {DICTIONARY_FILENAME})")
    ap.add_argument("--answers",
                    help="hidden answers to play against (default: the dictionary itself)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, help="minimax worker threads (default: CPU count)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    dict_path = Path(args.dictionary) if args.dictionary else find_dictionary_path()
    if dict_path is None or not dict_path.is_file():
        print("ERROR: Unable to find dictionary file.", file=sys.stderr)
        return 1

    # 1) Validate and print a one-liner summary
    rep = validate_dictionary(args.N, str(dict_path))
    print(pretty_summary(rep))

    # 2) Load once; every game gets a fresh live region over the same entries
    words = load_dictionary(dict_path, args.N)
    entries = [DictionaryEntry.from_word(w, args.N) for w in words]
    answers = load_dictionary(args.answers, args.N) if args.answers else list(words)

    solver = (create_solver(args.solver, workers=args.workers) if args.solver == "minimax"
              else create_solver(args.solver))

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)

    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, ans, entries=entries, N=args.N,
                     max_turns=WORDLE_MAX_TURNS, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    summary = _summarize(results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Won {summary['wins']}/{summary['games']} "
          f"(mean guesses on win: {summary['mean_guesses_on_win']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
