"""
Lightweight input validation.

This module answers two questions:
  - "Is this word well formed for a game of length N?"  (lowercase a-z, exact
    length; dictionary membership is the puzzle's job)
  - "Is this response a usable verdict for that guess?"  (same length, only
    the three verdict glyphs or Mark values)

Responses are accepted either as glyph strings ("+*__+") or as sequences of
Mark; both come back as a Verdict tuple.
"""

from __future__ import annotations

from typing import Iterable, Union

from .errors import InvalidResponseError
from .scoring import Mark, Verdict

_BY_GLYPH = {m.value: m for m in Mark}

Response = Union[str, Iterable[Mark]]


def is_well_formed(word: str, N: int) -> bool:
    """
    Return True if `word` is an N-letter lowercase ASCII word.
    """
    if not isinstance(word, str):
        return False
    return len(word) == N and word.isascii() and word.isalpha() and word.islower()


def parse_verdict(response: Response, length: int) -> Verdict:
    """
    Convert `response` into a Verdict for a guess of `length` letters.

    Raises:
      InvalidResponseError if the length differs or any symbol is unknown.
    """
    symbols = list(response)

    if len(symbols) != length:
        raise InvalidResponseError(
            f"invalid response {_show(symbols)}: want {length} symbols, got {len(symbols)}")

    marks = []
    for s in symbols:
        if isinstance(s, Mark):
            marks.append(s)
        elif isinstance(s, str) and s in _BY_GLYPH:
            marks.append(_BY_GLYPH[s])
        else:
            allowed = "".join(_BY_GLYPH)
            raise InvalidResponseError(
                f"invalid response {_show(symbols)}: symbols must be one of {allowed!r}")
    return tuple(marks)


def _show(symbols: list) -> str:
    return repr("".join(s.value if isinstance(s, Mark) else str(s) for s in symbols))
