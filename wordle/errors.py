"""
Errors raised by the game core.

They all derive from ValueError so callers that only care about
"bad input" (the API routes, the console prompt) can catch one type.
"""


class WordleError(ValueError):
    pass


class LengthMismatch(WordleError):
    """Guess or target handed to the evaluator is not 5 letters."""


class InvalidGuessLength(WordleError):
    """A submitted guess is not exactly 5 characters."""


class InvalidGuessCharacters(WordleError):
    """A submitted guess contains something other than ASCII letters."""


class EmptyDictionary(WordleError):
    """No word to pick a target from; no round can start."""


class RoundFinished(WordleError):
    """Guess submitted after the round was already won or lost."""


class NoActiveRound(WordleError):
    pass
