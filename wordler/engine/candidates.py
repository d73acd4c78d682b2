"""
Candidate word sets and the predicates that filter them.

A CandidateSet holds unique words and is narrowed in place by keep_only()
and delete(). Anything that depends on order (iteration, first(),
pick_random()) walks the words in lexicographic order, so results only vary
with an explicitly injected random.Random.

Predicates are plain callables `str -> bool`. The factories below cover what
the constraint model needs (per-position equality and negation, letter
containment) plus a few conveniences for building dictionaries.

Construction-time filters are a small tagged variant:

    filters = [keep_only_filter(of_length(5)), delete_filter(contains("q"))]
    words = CandidateSet(source, filters=filters)

Filters apply in declaration order.
"""

from __future__ import annotations

import logging
import random
import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Sequence

from .errors import NoWordsRemainingError

log = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


# ---- Predicate factories ----

def letter_at(index: int, letter: str) -> Predicate:
    """Word has `letter` at position `index`."""
    return lambda w: index < len(w) and w[index] == letter


def letter_not_at(index: int, letter: str) -> Predicate:
    """Word does not have `letter` at position `index`."""
    return lambda w: index >= len(w) or w[index] != letter


def contains(fragment: str) -> Predicate:
    """Word contains `fragment` (a single letter or a longer substring)."""
    return lambda w: fragment in w


def exactly(word: str) -> Predicate:
    return lambda w: w == word


def of_length(n: int) -> Predicate:
    return lambda w: len(w) == n


def lowercase_word(n: int) -> Predicate:
    """Word is exactly `n` lowercase ASCII letters."""
    pattern = re.compile(rf"[a-z]{{{n}}}")
    return lambda w: pattern.fullmatch(w) is not None


def matches(regex: str) -> Predicate:
    """Word matches `regex` anywhere (re.search semantics)."""
    pattern = re.compile(regex)
    return lambda w: pattern.search(w) is not None


# ---- Construction-time filters ----

class FilterAction(Enum):
    KEEP_ONLY = "keep_only"
    DELETE = "delete"


@dataclass(frozen=True)
class WordFilter:
    action: FilterAction
    predicate: Predicate

    def apply(self, candidates: "CandidateSet") -> None:
        if self.action is FilterAction.KEEP_ONLY:
            candidates.keep_only(self.predicate)
        else:
            candidates.delete(self.predicate)


def keep_only_filter(predicate: Predicate) -> WordFilter:
    return WordFilter(FilterAction.KEEP_ONLY, predicate)


def delete_filter(predicate: Predicate) -> WordFilter:
    return WordFilter(FilterAction.DELETE, predicate)


# ---- CandidateSet ----

class CandidateSet:
    """
    Unordered set of words with in-place filtering.

    Two sets compare equal when they hold the same words. The constructor
    copies its input, so later changes to the source list never leak in.
    """

    def __init__(self, words: Iterable[str] = (), filters: Sequence[WordFilter] = ()):
        self._words = set(words)
        for f in filters:
            f.apply(self)

    # ---- Basic protocol ----

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        shown = sorted(self._words)
        if len(shown) > 8:
            return f"CandidateSet({shown[:8]} ... {len(shown)} words)"
        return f"CandidateSet({shown})"

    def words(self) -> List[str]:
        """Return the words in lexicographic order (a copy)."""
        return sorted(self._words)

    def copy(self) -> "CandidateSet":
        return CandidateSet(self._words)

    def replace(self, words: Iterable[str]) -> None:
        """Swap the whole content for `words`."""
        self._words = set(words)

    # ---- Filtering ----

    def keep_only(self, predicate: Predicate) -> None:
        """Remove every word for which `predicate` is false."""
        self._words = {w for w in self._words if predicate(w)}

    def delete(self, predicate: Predicate) -> None:
        """Remove every word for which `predicate` is true."""
        self._words = {w for w in self._words if not predicate(w)}

    # ---- Picking ----

    def first(self) -> str:
        """The lexicographically smallest word."""
        if not self._words:
            raise NoWordsRemainingError()
        return min(self._words)

    def pick_random(self, rng: random.Random) -> str:
        """
        Uniform pick using `rng` over the sorted words, so a seeded RNG
        always yields the same word for the same set.
        """
        if not self._words:
            raise NoWordsRemainingError()
        return rng.choice(sorted(self._words))

    def best_guess(self) -> str:
        """
        Greedy information heuristic.

        Each letter is weighted by the number of words containing it at
        least once ("forgo" counts 'o' once). A word's diversity is its
        number of distinct letters and its weight is the sum of its distinct
        letters' counts. Highest diversity wins, then highest weight, then
        the lexicographically smallest word.

        Known limitation: letters are scored independently, so words sharing
        common fragments look more informative than they are.
        """
        if not self._words:
            raise NoWordsRemainingError()

        counts: Counter[str] = Counter()
        for w in self._words:
            counts.update(set(w))

        def rank(w: str):
            letters = set(w)
            return (-len(letters), -sum(counts[c] for c in letters), w)

        best = min(self._words, key=rank)
        log.debug("best guess among %d words: %s", len(self._words), best)
        return best
