from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from wordle_minimax.engine.letters import WORD_LENGTH
from wordle_minimax.engine.validation import is_valid_word, normalize_word

log = logging.getLogger(__name__)

DICTIONARY_FILENAME = "dictionary.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def find_dictionary_path(start: Path | str | None = None,
                         name: str = DICTIONARY_FILENAME) -> Path | None:
    """
    Look for `name` in `start` (default: cwd) and then in each parent
    directory up to the filesystem root. Returns None if it is nowhere.
    """
    path = Path(start) if start is not None else Path.cwd()
    path = path.resolve()
    for d in (path, *path.parents):
        candidate = d / name
        if candidate.is_file():
            return candidate
    return None


def load_dictionary(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list for the solver: one word per line, folded to uppercase.

    Lines that are blank, the wrong length or not A–Z are skipped (and
    counted in the log); duplicates keep their first occurrence.
    """
    words: List[str] = []
    seen = set()
    skipped = 0
    for raw in read_lines(p):
        if not is_valid_word(raw, N):
            if raw.strip():
                skipped += 1
            continue
        w = normalize_word(raw)
        if w in seen:
            continue
        seen.add(w)
        words.append(w)

    log.info("loaded %d words from %s", len(words), p)
    if skipped:
        log.warning("skipped %d line(s) that are not %d-letter words in %s", skipped, N, p)
    return words
