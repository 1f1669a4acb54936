"""
Dictionary validator.

What this module does:
- Validate the solver's word list (one word per line, exact length N, A–Z,
  any case since the loader folds to uppercase).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordle_minimax.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_minimax.engine.validation import is_valid_word, normalize_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after case folding)
    invalid_lines: int   # non-blank lines that are not N-letter words
    blank_lines: int     # empty/whitespace-only lines (ignored by the loader)


@dataclass
class ValidationReport:
    N: int
    dictionary: FileReport
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                blank += 1
            elif is_valid_word(raw, N):
                valid.append(normalize_word(raw))
            else:
                invalid += 1

    return valid, invalid, blank


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport:
          - counts, SHA-256, invalid/blank/duplicate diagnostics
          - `passed` (non-empty and no invalid lines; blanks and duplicates
            are reported but tolerated since the loader drops them)
          - `issues` (list of strings)
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = ValidationReport(
            N=N,
            dictionary=FileReport(path, False, 0, "", 0, 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid, blank = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        blank_lines=blank,
    )

    if report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append(f"dictionary contains {report.count - report.unique_count} duplicate word(s)")

    passed = report.count > 0 and invalid == 0

    rep = ValidationReport(N=N, dictionary=report, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | dictionary=12972 (uniq=12972, invalid=0, sha=abc123def456) | OK
    """
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (d.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dictionary={d['count']} (uniq={d['unique_count']}, "
        f"invalid={d['invalid_lines']}, sha={sha}) | {status}"
    )
