"""
Console front end: prompt, show colored feedback, ask to play again.

usage:
  wordle                      # random word from ./wordle.dict (downloaded if missing)
  wordle --seed 42            # reproducible targets
  wordle --dict words.txt     # your own word list
  wordle --no-color           # plain letters + symbols
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from . import config
from .dictionary import load_dictionary
from .errors import EmptyDictionary, WordleError
from .render import render_comparison, render_symbols
from .round import Session
from .types import RoundStatus

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

def ask_guess(session: Session, read: Reader, write: Writer, prompt: str):
    """Keep asking until the round accepts a guess; returns (guess, comparison)."""
    controller = session.round
    while True:
        raw = read(prompt + "Please enter a 5-letter word: ")
        try:
            comparison, _ = session.submit_guess(raw)
        except WordleError as exc:
            write(f"Invalid input. {exc}")
            continue
        return controller.history[-1].guess, comparison

def play(
    session: Session,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    color: Optional[bool] = None,
) -> List[RoundStatus]:
    """Run rounds until the player declines another one. Returns each round's outcome."""
    read = read or input
    write = write or print
    outcomes: List[RoundStatus] = []
    write("Welcome to wordle!")

    while True:
        controller = session.start_round()
        write("I picked a random 5-letter word. Try to guess it.")

        while not controller.is_terminal():
            attempt = controller.attempts_used + 1
            guess, comparison = ask_guess(
                session, read, write, f"Guess {attempt}/{controller.max_attempts}. "
            )
            write(f"{render_comparison(guess, comparison, color)} - your guess compared: "
                  f"{render_symbols(comparison)}")

        outcome = controller.outcome()
        outcomes.append(outcome)
        if outcome == "won":
            write("Congrats! You guessed the correct word.")
        else:
            write(f"You didn't guess the right word. It was {controller.target}")

        answer = read("Press 'y(es)' for another round, else exit. ")
        if answer.strip().lower() not in ("y", "yes"):
            return outcomes
        write("---- new game ----")

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="wordle", description="Guess the 5-letter word in 6 tries.")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible targets")
    parser.add_argument("--dict", dest="dict_path", default=None, help="word list file (one word per line)")
    parser.add_argument("--url", default=None, help="where to download the word list if the file is missing")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    args = parser.parse_args(argv)
    if args.seed is None:
        try:
            args.seed = config.get_seed()
        except RuntimeError as exc:
            parser.error(str(exc))

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    words = load_dictionary(args.dict_path, args.url)
    session = Session(words, rng=random.Random(args.seed))
    try:
        play(session, color=False if args.no_color else None)
    except EmptyDictionary as exc:
        logger.error("%s", exc)
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
    return 0

if __name__ == "__main__":
    sys.exit(main())
