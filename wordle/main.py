'''
Wordle API (in-memory)

Endpoints:
POST /games                  -> start a game
GET  /games/{id}             -> read state & history of the current round
POST /games/{id}/guess       -> submit a guess
POST /games/{id}/new-round   -> play again with a new word

Extras:
GET  /stats                  -> scoreboard
POST /stats/reset            -> reset scoreboard

Nothing is persisted; restarting the process forgets every game.
'''

import random
from threading import Lock
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .dictionary import load_dictionary
from .errors import EmptyDictionary
from .store import Game, GameStore
from .round import GuessEntry

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
    GuessEntryOut,
    StatsOut,
)

app = FastAPI(title="Wordle API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

_store: Optional[GameStore] = None
_store_lock = Lock()

# One store per process; the word list is loaded the first time it is needed
def get_store() -> GameStore:
    global _store
    if _store is None:
        # Sync dependencies run in a thread pool: only one thread may build the store
        with _store_lock:
            if _store is None:
                words = load_dictionary()
                _store = GameStore(words, rng=random.Random(config.get_seed()))
    return _store

# --- Dev convenience: load the dictionary at startup instead of on the first request ---
if config.APP_ENV == "local":
    @app.on_event("startup")
    def _dev_load_dictionary():
        get_store()

# --- Small DTO builders ---

def _to_guess_out(entry: GuessEntry) -> GuessEntryOut:
    return GuessEntryOut(
        guess=entry.guess,
        comparison=list(entry.comparison),
        message=entry.message,
        timestamp=entry.timestamp,
    )

def _to_game_state(game: Game) -> GameState:
    return GameState(
        game_id=game.id,
        attempts_used=game.round.attempts_used,
        attempts_left=game.round.attempts_left,
        status=game.round.status,
        history=[_to_guess_out(h) for h in game.round.history],
    )

def _to_new_game(game: Game) -> NewGameResponse:
    return NewGameResponse(
        game_id=game.id,
        attempts_left=game.round.attempts_left,
        max_attempts=game.round.max_attempts,
        status=game.round.status,
    )

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(store: GameStore = Depends(get_store)) -> NewGameResponse:
    try:
        game = store.create()
    except EmptyDictionary as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return _to_new_game(game)

@app.get("/games/{game_id}", response_model=GameState, summary="Get current round state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    game = store.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_game_state(game)

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # store.guess() lets the round validate the word and update history/attempts/status
    try:
        game = store.guess(game_id, payload.guess)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")

    controller = game.round
    feedback = _to_guess_out(controller.history[-1]) if controller.history else None
    finished = controller.is_terminal()

    return GuessResponse(
        attempts_left=controller.attempts_left,
        status=controller.status,
        feedback=feedback,
        # Only reveal the word once the round is over
        target=controller.target if finished else None,
        note=(f"Round {controller.status}. No more guesses allowed."
              if finished else None),
    )

@app.post("/games/{game_id}/new-round", response_model=NewGameResponse, summary="Start another round")
def new_round(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    try:
        game = store.new_round(game_id)
    except EmptyDictionary as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_new_game(game)

@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(store: GameStore = Depends(get_store)) -> StatsOut:
    stats = store.get_stats()
    return StatsOut(
        games_started=stats.games_started,
        games_won=stats.games_won,
        games_lost=stats.games_lost,
    )

@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(store: GameStore = Depends(get_store)) -> dict:
    store.reset_stats()
    return {"message": "Stats reset."}
