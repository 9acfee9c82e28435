"""
In-memory store
Holds every game (one round at a time each) and the win/loss scoreboard in memory.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence
from uuid import uuid4
from time import time
from threading import RLock

from .types import Word
from .round import RoundController

logger = logging.getLogger(__name__)

@dataclass
class Game:
    id: str
    round: RoundController
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

# Scoreboard: win/loss only
@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0


class GameStore:
    def __init__(self, words: Sequence[Word], rng: Optional[random.Random] = None) -> None:
        self.words = words
        self._rng = rng if rng is not None else random.Random()
        self._games: Dict[str, Game] = {}
        self._lock = RLock()
        self._stats = Stats()

    def create(self) -> Game:
        with self._lock:
            # Raises EmptyDictionary before anything is stored
            controller = RoundController(self.words, rng=self._rng)
            new_id = str(uuid4())
            game = Game(id=new_id, round=controller)
            self._games[new_id] = game
            self._stats.games_started += 1
        logger.info("Game %s created", new_id)
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.round.is_terminal():
                # If the round already ended, just return it (ignore extra guesses)
                return game

            # Length/letter errors propagate to the caller as ValueError
            _, status = game.round.submit_guess(attempt)
            game.updated_at = time()

            # Update scoreboard exactly once, on the guess that ends the round
            if status == "won":
                self._stats.games_won += 1
            elif status == "lost":
                self._stats.games_lost += 1

            return game

    def new_round(self, game_id: str) -> Optional[Game]:
        """Replay: same game id, fresh target, counters reset."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            game.round.start_new_round(self.words)
            game.updated_at = time()
            self._stats.games_started += 1
            return game

    def get_stats(self) -> Stats:
        return self._stats

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
