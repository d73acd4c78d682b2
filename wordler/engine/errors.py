"""
Error types raised by the engine, solvers and loaders.

Every operation validates its inputs before touching any state, so catching
one of these leaves candidate sets, guess counters and known letters exactly
as they were. Interactive callers can report the problem and re-prompt.
"""


class WordlerError(Exception):
    """Base class for all game errors."""


class NotInDictionaryError(WordlerError, LookupError):
    """A guess or fixed solution is missing from the puzzle's dictionary."""

    def __init__(self, word: str):
        super().__init__(f"not in dictionary: {word!r}")
        self.word = word


class InvalidGuessError(WordlerError, ValueError):
    """Hard mode: the guess ignores information already revealed."""

    def __init__(self, word: str):
        super().__init__(f"invalid guess: {word!r} is inconsistent with earlier responses")
        self.word = word


class NoWordsRemainingError(WordlerError):
    """A candidate set is empty; nothing further can be guessed."""

    def __init__(self, message: str = "no words remaining"):
        super().__init__(message)


class OutOfGuessesError(WordlerError):
    """The guess budget is exhausted."""

    def __init__(self, message: str = "no remaining guesses"):
        super().__init__(message)


class InvalidResponseError(WordlerError, ValueError):
    """A response doesn't match the guess length or uses unknown symbols."""


class InvalidInputError(WordlerError, ValueError):
    """Caller contract violation, e.g. scoring words of different lengths."""
