"""
Reference feedback for a (guess, answer) pair.

The interactive solver never knows the answer; this is what a real game
would report, and what the self-play harness feeds back into a Session.

Conventions (same codes the player types):
  - 'O' : correct letter in the correct position
  - '-' : correct letter in the wrong position
  - 'X' : letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) Mark every exact match and count the answer's unmatched letters.
  2) Mark a misplaced letter only while that letter still has unmatched
     copies left in the answer.
"""

from collections import Counter


def score(guess: str, answer: str) -> str:
    """
    Feedback string for `guess` against `answer` (case-insensitive).

    Examples:
      score("belle", "level") -> "XO---"
      score("lemon", "level") -> "OOXXX"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = ["X"] * len(guess)

    # Pass 1: exact matches; everything else in the answer stays available.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "O"
        else:
            remaining[a] += 1

    # Pass 2: misplaced letters, capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == "O":
            continue
        if remaining[g] > 0:
            pattern[i] = "-"
            remaining[g] -= 1

    return "".join(pattern)
