from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Dict, Iterable, Type

from wordler.engine import (
    CandidateSet,
    NoWordsRemainingError,
    Verdict,
    apply_verdict,
    exactly,
    is_winning,
    parse_verdict,
)
from wordler.engine.validation import Response

log = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class SolverState(Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    IMPOSSIBLE = "impossible"


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Tracks two candidate sets:
      - solutions: words that could still be the answer
      - guesses:   words still worth playing as probes (a superset of
                   solutions; ABSENT letters never prune it)
    and the letters known to be in the answer.

    Subclasses decide which word to play in next_guess().
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.solutions = CandidateSet()
        self.guesses = CandidateSet()
        self.known: set = set()
        self.rng = random.Random()
        self.hard = False

    def reset(self, *, words: Iterable[str], seed: int | None = None, hard: bool = False) -> None:
        """
        Start over with `words`. With `hard`, strategies only play words that
        could still be the answer, as a hard-mode puzzle requires.
        """
        words = list(words)
        self.hard = hard
        self.solutions = CandidateSet(words)
        self.guesses = CandidateSet(words)
        self.known = set()
        if seed is not None:
            self.rng.seed(seed)

    @property
    def remaining(self) -> int:
        """Number of possible solutions left."""
        return len(self.solutions)

    @property
    def state(self) -> SolverState:
        n = len(self.solutions)
        if n == 0:
            return SolverState.IMPOSSIBLE
        if n == 1:
            return SolverState.SOLVED
        return SolverState.SEARCHING

    def next_guess(self) -> str:
        raise NotImplementedError("Override in subclass")

    def react(self, guess: str, response: Response) -> Verdict:
        """
        Narrow both candidate sets using the response to `guess`.

        `response` is a Verdict or a glyph string such as "+*__+".
        Raises InvalidResponseError (with nothing changed) when it doesn't fit.
        """
        verdict = parse_verdict(response, len(guess))

        if is_winning(verdict):
            self.known.update(guess)
            self.solutions.replace([guess])
            self.guesses.replace([guess])
            log.debug("solved: %r", guess)
            return verdict

        apply_verdict(self.solutions, guess, verdict, self.known)
        apply_verdict(self.guesses, guess, verdict, self.known, probe=True)
        # never play the same word twice
        self.guesses.delete(exactly(guess))

        if not self.solutions:
            log.warning("no solutions left after %r", guess)
        log.debug("after %r: %d solutions, %d guesses",
                  guess, len(self.solutions), len(self.guesses))
        return verdict

    def not_in_wordle(self, word: str) -> None:
        """The puzzle rejected `word`; drop it from both sets."""
        self.solutions.delete(exactly(word))
        self.guesses.delete(exactly(word))

    def _require_solutions(self) -> None:
        if not self.solutions:
            raise NoWordsRemainingError("solver has no possible solutions left")
