"""
Round state machine and the session that owns it.

A round is "in_progress" until the target is guessed ("won") or the
attempts run out ("lost"). Nothing here blocks or does I/O: the word list
is handed in ready-made and randomness comes from an injected random.Random
so tests can use a fixed seed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from time import time
from typing import List, Optional, Sequence, Tuple

from .types import Comparison, RoundStatus, Word, MAX_ATTEMPTS
from .engine import evaluate, is_win, normalize_word, summarize
from .errors import EmptyDictionary, NoActiveRound, RoundFinished

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GuessEntry:
    guess: Word
    comparison: Comparison
    message: str
    timestamp: float

class RoundController:
    def __init__(
        self,
        dictionary: Sequence[Word],
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self._target: Word = ""
        self.attempts_used = 0
        self.status: RoundStatus = "in_progress"
        self.history: List[GuessEntry] = []
        self.start_new_round(dictionary)

    @property
    def target(self) -> Word:
        return self._target

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts_used

    def start_new_round(self, dictionary: Sequence[Word]) -> None:
        """Pick a fresh target (uniformly, repeats allowed) and reset the counters."""
        if len(dictionary) == 0:
            raise EmptyDictionary("The dictionary has no words; cannot start a round.")

        self._target = self._rng.choice(dictionary).upper()
        self.attempts_used = 0
        self.status = "in_progress"
        self.history = []
        logger.debug("New round started with %d candidate words", len(dictionary))

    def submit_guess(self, guess: str) -> Tuple[Comparison, RoundStatus]:
        if self.is_terminal():
            raise RoundFinished(f"Round already {self.status}. No more guesses allowed.")

        word = normalize_word(guess)
        comparison = evaluate(word, self._target)

        self.history.append(
            GuessEntry(
                guess=word,
                comparison=comparison,
                message=summarize(comparison),
                timestamp=time(),
            )
        )
        self.attempts_used += 1

        if is_win(word, self._target):
            self.status = "won"
        elif self.attempts_used >= self.max_attempts:
            self.status = "lost"

        if self.is_terminal():
            logger.info("Round %s after %d attempt(s)", self.status, self.attempts_used)

        return comparison, self.status

    def is_terminal(self) -> bool:
        return self.status != "in_progress"

    def outcome(self) -> Optional[RoundStatus]:
        """Final status once the round is over; None while it is still being played."""
        if self.is_terminal():
            return self.status
        return None

class Session:
    """
    One player, one active round at a time.
    The word list is shared (read-only) by every round of the session.
    """

    def __init__(self, words: Sequence[Word], rng: Optional[random.Random] = None) -> None:
        self.words = words
        self._rng = rng if rng is not None else random.Random()
        self._round: Optional[RoundController] = None

    @property
    def round(self) -> Optional[RoundController]:
        return self._round

    def start_round(self) -> RoundController:
        if self._round is None:
            self._round = RoundController(self.words, rng=self._rng)
        else:
            self._round.start_new_round(self.words)
        return self._round

    def submit_guess(self, guess: str) -> Tuple[Comparison, RoundStatus]:
        if self._round is None:
            raise NoActiveRound("Start a round before guessing.")
        return self._round.submit_guess(guess)
