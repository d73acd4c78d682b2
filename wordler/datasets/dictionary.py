"""
Dictionary sources for puzzles and solvers.

A loader reads its word list at most once, caches it as an immutable tuple
and hands every caller a fresh, filtered list. Puzzles and solvers build
their own CandidateSets from that list, so nothing they do can reach the
cache or another game.

Typical use:
    loader = DictionaryLoader()                # /usr/share/dict/words
    words = loader.load([keep_only_filter(of_length(5))])

Tests and embedders use StaticLoader(words) instead of a file.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from wordler.engine.candidates import CandidateSet, WordFilter

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list, one word per line, without line endings.
    Raises FileNotFoundError if the path doesn't exist.
    """
    with Path(p).open("r", encoding="utf-8") as f:
        return [ln.rstrip("\r\n") for ln in f]


def _normalize(lines: Iterable[str]) -> Tuple[str, ...]:
    """Lowercase, strip, drop blanks and duplicates; keep first-seen order."""
    seen = set()
    out: List[str] = []
    for ln in lines:
        w = ln.strip().lower()
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return tuple(out)


class DictionaryLoader:
    """
    File-backed word source with one-time, thread-safe loading.

    Errors from reading the file (FileNotFoundError, UnicodeDecodeError, ...)
    propagate to the caller and nothing is cached, so a later call retries.
    """

    def __init__(self, path: Path | str = DEFAULT_DICTIONARY_PATH):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._words: Optional[Tuple[str, ...]] = None

    def _read(self) -> Iterable[str]:
        return read_words(self.path)

    def words(self) -> Tuple[str, ...]:
        """All words of the source (loaded on first call)."""
        if self._words is None:
            with self._lock:
                if self._words is None:
                    self._words = _normalize(self._read())
                    log.info("loaded %d words from %s", len(self._words), self.describe())
        return self._words

    def load(self, filters: Sequence[WordFilter] = ()) -> List[str]:
        """
        Return a new list of the source's words with `filters` applied in
        order (sorted).
        """
        return CandidateSet(self.words(), filters=filters).words()

    def describe(self) -> str:
        return str(self.path)


class StaticLoader(DictionaryLoader):
    """Loader over an in-memory word list."""

    def __init__(self, words: Iterable[str]):
        super().__init__(path="<static>")
        self._source = list(words)

    def _read(self) -> Iterable[str]:
        return self._source

    def describe(self) -> str:
        return f"<static: {len(self._source)} words>"
