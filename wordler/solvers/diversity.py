"""
Letter-Diversity Solver (the default).

Idea:
  - Score every word still worth guessing (the guess set, not only possible
    answers) with CandidateSet.best_guess(): most distinct letters first,
    then the highest sum of per-letter word counts.

Why the guess set:
  - A word already ruled out as an answer can still split the remaining
    solutions, as long as it honours the CORRECT and PRESENT letters seen so
    far.

Notes:
  - Once a single solution is left it is played directly.
  - In hard mode only possible solutions are played.
  - Fully deterministic; the seed is unused.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class DiversitySolver(BaseSolver):
    id = "diversity"
    name = "Letter Diversity"
    version = "1.0.0"

    def next_guess(self) -> str:
        self._require_solutions()
        if len(self.solutions) == 1:
            return self.solutions.first()
        pool = self.solutions if self.hard else self.guesses
        return pool.best_guess()
