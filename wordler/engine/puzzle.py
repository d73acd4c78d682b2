"""
The puzzle oracle: owns the secret word and scores guesses against it.

Besides scoring, the puzzle tracks which dictionary words are still
consistent with everything it has revealed ("remaining"). In hard mode every
guess must come from that set. Remaining shrinks monotonically and the guess
budget only counts down; a rejected guess changes neither.

States:
  ACTIVE    - guesses left and the secret not yet revealed
  REVEALED  - remaining collapsed to the secret (all-correct guess or give-up)
  EXHAUSTED - budget spent without revealing the secret
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .candidates import CandidateSet, WordFilter, keep_only_filter, lowercase_word
from .constraints import apply_verdict
from .errors import (
    InvalidGuessError,
    NoWordsRemainingError,
    NotInDictionaryError,
    OutOfGuessesError,
)
from .scoring import Verdict, encode_verdict, is_winning, score

log = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
DEFAULT_GUESSES = 6


class PuzzleState(Enum):
    ACTIVE = "active"
    REVEALED = "revealed"
    EXHAUSTED = "exhausted"


class Puzzle:
    """
    A single game.

    Args:
      loader      : dictionary source with `load(filters) -> list[str]`
      word_length : letters per word; the dictionary is cut down to
                    lowercase words of exactly this length
      guesses     : guess budget
      hard        : require guesses consistent with earlier responses
      solution    : fixed secret; otherwise one is drawn with `rng`
      filters     : extra construction-time filters, applied first
      rng         : random source for drawing the secret

    Raises:
      NoWordsRemainingError if no dictionary words survive the filters.
      NotInDictionaryError if `solution` isn't in the filtered dictionary.
      Any error raised by the loader.
    """

    def __init__(
            self,
            loader,
            *,
            word_length: int = DEFAULT_WORD_LENGTH,
            guesses: int = DEFAULT_GUESSES,
            hard: bool = True,
            solution: Optional[str] = None,
            filters: Sequence[WordFilter] = (),
            rng: Optional[random.Random] = None,
    ):
        filters = list(filters) + [keep_only_filter(lowercase_word(word_length))]
        self._dict = CandidateSet(loader.load(filters))
        if not self._dict:
            raise NoWordsRemainingError(f"no {word_length}-letter words in dictionary")
        self._remaining = self._dict.copy()
        self._guesses_left = int(guesses)
        self._hard = hard
        self._known: set = set()
        self._history: List[Tuple[str, Verdict]] = []
        self._revealed = False

        if solution:
            if solution not in self._dict:
                raise NotInDictionaryError(solution)
            self._word = solution
        else:
            self._word = self._dict.pick_random(rng or random.Random())

        log.debug("new puzzle: %d words, %d guesses, hard=%s",
                  len(self._dict), self._guesses_left, hard)

    # ---- Queries ----

    @property
    def remaining(self) -> int:
        """Number of dictionary words still consistent with all responses."""
        return len(self._remaining)

    @property
    def guesses_left(self) -> int:
        return self._guesses_left

    @property
    def hard(self) -> bool:
        return self._hard

    @property
    def word_length(self) -> int:
        return len(self._word)

    @property
    def history(self) -> List[Tuple[str, Verdict]]:
        return list(self._history)

    @property
    def state(self) -> PuzzleState:
        if self._revealed:
            return PuzzleState.REVEALED
        if self._guesses_left == 0:
            return PuzzleState.EXHAUSTED
        return PuzzleState.ACTIVE

    def in_dictionary(self, word: str) -> bool:
        return word in self._dict

    # ---- Actions ----

    def guess(self, word: str) -> Verdict:
        """
        Score `word` against the secret.

        Raises (without consuming a guess):
          OutOfGuessesError, NotInDictionaryError, NoWordsRemainingError,
          InvalidGuessError (hard mode only)
        """
        if self._guesses_left == 0:
            raise OutOfGuessesError()
        self._validate(word)
        self._guesses_left -= 1

        verdict = score(word, self._word)
        apply_verdict(self._remaining, word, verdict, self._known)
        self._history.append((word, verdict))
        if is_winning(verdict):
            self._revealed = True

        log.debug("%r -> %s: %d words, %d guesses left",
                  word, encode_verdict(verdict), len(self._remaining), self._guesses_left)
        return verdict

    def give_up(self) -> str:
        """End the game and reveal the secret. Safe to call repeatedly."""
        self._guesses_left = 0
        self._remaining.replace([self._word])
        self._revealed = True
        return self._word

    def _validate(self, word: str) -> None:
        if word not in self._dict:
            raise NotInDictionaryError(word)
        if not self._remaining:
            raise NoWordsRemainingError()
        if self._hard and word not in self._remaining:
            raise InvalidGuessError(word)
