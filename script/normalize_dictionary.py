"""
Normalize a word list into a solver dictionary.

Features:
- Folds every word to uppercase (the dictionary's single case).
- Keeps only exact length-N A–Z words; everything else is dropped.
- Removes duplicates, preserving first-seen order.
- Optional alphabetical sort after dedupe.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_dictionary --in words.txt --out dictionary.txt --sort
"""

import argparse
from pathlib import Path

from wordle_minimax.datasets.io import read_lines, write_lines
from wordle_minimax.engine.letters import WORD_LENGTH
from wordle_minimax.engine.validation import is_valid_word, normalize_word


def normalize_lines(lines, N=WORD_LENGTH, sort=False):
    seen, out = set(), []
    for s in lines:
        if not is_valid_word(s, N):
            continue
        w = normalize_word(s)
        if w not in seen:
            seen.add(w)
            out.append(w)
    if sort:
        out.sort()
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize a word list into a solver dictionary.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = normalize_lines(lines, N=args.N, sort=args.sort)
    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
