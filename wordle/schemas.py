"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Verdict = Literal["absent", "correct", "misplaced"]
Status = Literal["in_progress", "won", "lost"]

# 1. Represents response when a new game (or a new round) is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; the target word is never returned")
    attempts_left: int = Field(..., description="How many guesses remain")
    max_attempts: int = Field(..., description="Guesses allowed per round")
    status: Status = Field(..., description="Current state of the round")

# 2. Validates player's guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="A 5-letter word, any case")

    @field_validator("guess")
    @classmethod
    def strip_guess(cls, guess: str) -> str:
        """
        We only trim surrounding spaces here.
        Length and letters are checked by the round itself so the
        API and the console reject the same inputs with the same messages.
        """
        return guess.strip()

    model_config = {
        "json_schema_extra": {
            "examples": [
                { "guess": "crane" },
                { "guess": "SLATE" },
            ]
        }
    }

# 3. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The player's guess, upper-cased")
    comparison: List[Verdict] = Field(..., description="One verdict per letter, aligned with the guess")
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")

# 4. Represents the overall state of the current round
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    attempts_used: int = Field(..., description="Guesses made this round")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the round")
    history: List[GuessEntryOut] = Field(..., description="All guesses made this round with feedback")

# 5. Result of a guess (or end of the round)
class GuessResponse(BaseModel):
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the round")
    feedback: Optional[GuessEntryOut] = Field(None, description="Feedback from the latest guess")
    target: Optional[str] = Field(None, description="The target word (only revealed once the round is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Round lost. No more guesses allowed.')")

# 6. Scoreboard
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Rounds started since the last reset")
    games_won: int = Field(..., description="Rounds won")
    games_lost: int = Field(..., description="Rounds lost")
