from .errors import (
    WordlerError,
    NotInDictionaryError,
    InvalidGuessError,
    NoWordsRemainingError,
    OutOfGuessesError,
    InvalidResponseError,
    InvalidInputError,
)
from .scoring import Mark, Verdict, score, encode_verdict, winning_verdict, is_winning
from .validation import is_well_formed, parse_verdict
from .candidates import (
    CandidateSet,
    FilterAction,
    WordFilter,
    keep_only_filter,
    delete_filter,
    letter_at,
    letter_not_at,
    contains,
    exactly,
    of_length,
    lowercase_word,
    matches,
)
from .constraints import apply_verdict
from .puzzle import Puzzle, PuzzleState, DEFAULT_WORD_LENGTH, DEFAULT_GUESSES

__all__ = [
    "WordlerError", "NotInDictionaryError", "InvalidGuessError", "NoWordsRemainingError",
    "OutOfGuessesError", "InvalidResponseError", "InvalidInputError",
    "Mark", "Verdict", "score", "encode_verdict", "winning_verdict", "is_winning",
    "is_well_formed", "parse_verdict",
    "CandidateSet", "FilterAction", "WordFilter", "keep_only_filter", "delete_filter",
    "letter_at", "letter_not_at", "contains", "exactly", "of_length", "lowercase_word", "matches",
    "apply_verdict",
    "Puzzle", "PuzzleState", "DEFAULT_WORD_LENGTH", "DEFAULT_GUESSES",
]
