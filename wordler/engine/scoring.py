"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (glyphs used wherever a verdict is shown as text):
  - '+' : Mark.CORRECT = correct letter in the correct position
  - '*' : Mark.PRESENT = correct letter somewhere else
  - '_' : Mark.ABSENT  = letter not present (or present fewer times than guessed)

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all CORRECT letters and counts the remaining (unmatched)
     letters of the answer.
  2) Second pass, left to right, marks PRESENT only while the letter still has
     remaining count; everything else is ABSENT.

Guess "robot" against "forty" shows why the order matters: the 'o' in
position 1 is CORRECT and consumes the only 'o', so the second 'o' is ABSENT.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Tuple

from .errors import InvalidInputError


class Mark(Enum):
    CORRECT = "+"
    PRESENT = "*"
    ABSENT = "_"


# One Mark per letter of the guess.
Verdict = Tuple[Mark, ...]


def score(guess: str, answer: str) -> Verdict:
    """
    Compute the verdict for `guess` against `answer`.

    Raises:
      InvalidInputError if the words differ in length.

    Examples:
      encode_verdict(score("dreamt", "machin")) -> "___**_"
      encode_verdict(score("worry", "forty"))   -> "_++_+"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise InvalidInputError(
            f"guess {guess!r} and answer {answer!r} must be the same length")

    n = len(guess)
    marks = [Mark.ABSENT] * n

    # Pass 1: mark CORRECT and collect leftover counts from the answer.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            marks[i] = Mark.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: PRESENT only while the letter still has remaining availability.
    for i, g in enumerate(guess):
        if marks[i] is Mark.CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = Mark.PRESENT
            remaining[g] -= 1  # consume one instance

    return tuple(marks)


def encode_verdict(verdict: Verdict) -> str:
    """Render a verdict with its glyphs, e.g. (CORRECT, ABSENT) -> "+_"."""
    return "".join(m.value for m in verdict)


def winning_verdict(n: int) -> Verdict:
    return (Mark.CORRECT,) * n


def is_winning(verdict: Verdict) -> bool:
    return bool(verdict) and all(m is Mark.CORRECT for m in verdict)
