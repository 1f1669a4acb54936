"""
Output files for a self-play benchmark.

A run leaves two artifacts side by side: a CSV with one row per game and a
JSON manifest describing how the run was produced. The CSV spreads each
game's rounds over fixed columns, so every row has the same width no
matter how quickly the game was solved.

Feedback strings such as "-O-XX" start with a minus sign; they are written
with a leading apostrophe so a spreadsheet shows them verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

RESULT_COLUMNS = ["solver", "N", "answer", "success", "guesses", "time_ms"]


def _excel_safe_pattern(patt: str) -> str:
    return f"'{patt}" if patt else patt


def _turn_columns(max_turns: int) -> List[str]:
    cols = []
    for turn in range(1, max_turns + 1):
        cols.extend((f"guess_{turn}", f"patt_{turn}", f"guar_{turn}"))
    return cols


def _row(result: Dict, N: int, max_turns: int) -> Dict:
    row = dict(zip(RESULT_COLUMNS, (
        result.get("solver_id", "?"),
        N,
        result["answer"],
        result["success"],
        result["guesses"],
        round(float(result["time_ms"]), 3),
    )))
    rounds = list(result.get("history", []))[:max_turns]
    rounds += [("", "", "")] * (max_turns - len(rounds))
    for turn, (guess, patt, guar) in enumerate(rounds, start=1):
        row[f"guess_{turn}"] = guess
        row[f"patt_{turn}"] = _excel_safe_pattern(patt)
        # a None guarantee (explicit guess) is left blank
        row[f"guar_{turn}"] = "" if guar is None else guar
    return row


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Write one CSV row per finished game and return the path.

    Each round k contributes guess_k, patt_k and guar_k (the minimax
    guarantee quoted when the guess was suggested); rounds the game never
    reached stay empty.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_COLUMNS + _turn_columns(max_turns))
        writer.writeheader()
        writer.writerows(_row(r, N, max_turns) for r in results)
    return str(out)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` (run id, commit, CLI config, dictionary report, summary) as indented JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(out)


def timestamp_id() -> str:
    # e.g. 20261016T094500Z
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout or without git."""
    try:
        done = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return done.stdout.decode().strip()
