"""
Candidate filtering given one scored guess.

Given:
  - a candidate set (possible answers, or words still worth guessing)
  - a guess and its verdict
  - the letters already known to be in the answer

Narrow the set in place and record any newly confirmed letters.

Marks are processed by kind: every CORRECT first, then every PRESENT, then
every ABSENT. An ABSENT letter only rules out words containing it when the
letter isn't known to be in the answer; if it is known (a duplicate in the
guess, e.g. the first 'r' of "carer" against "foyer"), only that position is
ruled out. Processing left to right instead would delete "foyer" on the
first 'r' before the CORRECT 'r' is seen.

The `probe` policy is looser and meant for a solver's guess set: a useful
probe must honour every CORRECT and PRESENT mark and must not repeat a known
letter where it was scored ABSENT, but it may still contain a letter that is
ABSENT from the answer.
"""

from __future__ import annotations

import logging
from typing import MutableSet

from .candidates import CandidateSet, contains, letter_at
from .errors import InvalidInputError
from .scoring import Mark, Verdict, is_winning

log = logging.getLogger(__name__)

# Letters confirmed present in the answer, accumulated over a session.
KnownLetters = MutableSet[str]

_ORDER = (Mark.CORRECT, Mark.PRESENT, Mark.ABSENT)


def apply_verdict(
        candidates: CandidateSet,
        guess: str,
        verdict: Verdict,
        known: KnownLetters,
        *,
        probe: bool = False,
) -> None:
    """
    Narrow `candidates` with the information in (`guess`, `verdict`).

    Args:
      candidates : set to filter in place
      guess      : the word that was scored
      verdict    : its marks, one per letter
      known      : letters known to be present; updated in place
      probe      : apply the looser guess-set policy (see module docs)
    """
    if len(guess) != len(verdict):
        raise InvalidInputError(
            f"verdict length {len(verdict)} doesn't match guess {guess!r}")

    if is_winning(verdict):
        known.update(guess)
        candidates.replace([guess])
        log.debug("complete match on %r", guess)
        return

    for kind in _ORDER:
        for i, (c, mark) in enumerate(zip(guess, verdict)):
            if mark is not kind:
                continue

            if mark is Mark.CORRECT:
                known.add(c)
                candidates.keep_only(letter_at(i, c))
                log.debug("keeping only words with %r at %d: %d left", c, i, len(candidates))

            elif mark is Mark.PRESENT:
                known.add(c)
                candidates.keep_only(contains(c))
                candidates.delete(letter_at(i, c))
                log.debug("keeping only words with %r elsewhere than %d: %d left",
                          c, i, len(candidates))

            elif c in known:
                candidates.delete(letter_at(i, c))
                log.debug("deleting words with known %r at %d: %d left", c, i, len(candidates))

            elif not probe:
                candidates.delete(contains(c))
                log.debug("deleting words containing %r: %d left", c, len(candidates))
