import csv
import json
from pathlib import Path

import pytest
from wordle_minimax.engine import DictionaryEntry
from wordle_minimax.harness import run_batch, run_case, write_csv, write_manifest
from wordle_minimax.harness.io import timestamp_id
from wordle_minimax.solvers import create_solver

WORDS = ["CRANE", "SLATE", "TRACE", "GRAPE", "PLANE"]
ENTRIES = [DictionaryEntry.from_word(w) for w in WORDS]


@pytest.mark.parametrize("solver_id", ["minimax", "random_consistent"])
def test_run_case_smoke(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "grape", entries=ENTRIES, N=5, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["answer"] == "GRAPE"
    assert r["history"][-1][:2] == ("GRAPE", "OOOOO")
    # every wrong guess removes at least itself
    assert r["guesses"] <= len(WORDS)


def test_run_case_answer_outside_dictionary_fails_cleanly():
    r = run_case(create_solver("minimax", workers=1), "bloke", entries=ENTRIES, N=5, seed=1)
    assert r["success"] is False
    assert r["guesses"] == len(r["history"])


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver("minimax"), "crane", entries=ENTRIES, N=5, max_turns=7)


def test_run_batch_and_csv(tmp_path: Path):
    results = run_batch(create_solver("minimax", workers=2), WORDS, entries=ENTRIES, N=5,
                        seed=5, sample=2)
    assert len(results) == 2
    assert all(r["success"] for r in results)

    out = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6, N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == WORDS[:2]
    assert "guar_1" in rows[0]
    assert rows[0]["patt_1"].startswith("'")


def test_csv_pads_unplayed_rounds(tmp_path: Path):
    result = {"solver_id": "minimax", "answer": "GRAPE", "success": True, "guesses": 2,
              "time_ms": 1.23456, "history": [("CRANE", "XOOXO", 4), ("GRAPE", "OOOOO", None)]}
    out = write_csv([result], str(tmp_path / "one.csv"), max_turns=6, N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    header, row = rows
    assert len(header) == 6 + 3 * 6
    cells = dict(zip(header, row))
    assert cells["time_ms"] == "1.235"
    assert (cells["guess_1"], cells["patt_1"], cells["guar_1"]) == ("CRANE", "'XOOXO", "4")
    assert cells["guar_2"] == ""
    assert (cells["guess_3"], cells["patt_3"], cells["guar_3"]) == ("", "", "")


def test_manifest_and_run_id(tmp_path: Path):
    manifest = {"run_id": timestamp_id(), "summary": {"solved": 2}}
    out = write_manifest(manifest, str(tmp_path / "nested" / "manifest.json"))
    assert json.loads(Path(out).read_text(encoding="utf-8")) == manifest
    assert len(manifest["run_id"]) == 16 and manifest["run_id"].endswith("Z")
