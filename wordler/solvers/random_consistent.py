"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT solution set (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to verify the pipeline; it does not try to maximize
    information gain.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self) -> str:
        """
        Pick any possible solution uniformly at random (seeded RNG).

        Raises NoWordsRemainingError if no solutions are left.
        """
        self._require_solutions()
        return self.solutions.pick_random(self.rng)
