"""
Pure game logic (no HTTP, no storage, no printing).
We compare a guess with the target letter by letter and give one verdict per position:
- correct: same letter, same position
- misplaced: the letter is in the target, but somewhere else
- absent: the letter is not in the target (or all its copies are already used up)

Duplicate letters are handled in two passes so a letter is never credited
more times than it appears in the target.
"""

from .types import Comparison, Word, WORD_LENGTH, ABSENT, CORRECT, MISPLACED
from .errors import LengthMismatch, InvalidGuessLength, InvalidGuessCharacters

def normalize_word(raw: str) -> Word:
    """
    Turn raw player input into a Word: strip spaces, upper-case, validate.
    Nothing is truncated or padded; bad input is rejected.
    """
    word = raw.strip().upper()
    if len(word) != WORD_LENGTH:
        raise InvalidGuessLength(f"Guess must have exactly {WORD_LENGTH} letters.")
    if not (word.isascii() and word.isalpha()):
        raise InvalidGuessCharacters("Guess must contain only letters A-Z.")
    return word

def evaluate(guess: Word, target: Word) -> Comparison:
    """
    Example:
      guess  = "ABCDE"
      target = "EDCBA"
      -> ["misplaced", "misplaced", "correct", "misplaced", "misplaced"]

      guess  = "SPEED"
      target = "ABIDE"
      -> ["absent", "absent", "misplaced", "absent", "misplaced"]
      ABIDE has one E, so only the first unmatched E in SPEED gets credit
    """

    # 0. Validate lengths
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise LengthMismatch(
            f"Guess and target must both have {WORD_LENGTH} letters "
            f"(got {len(guess)} and {len(target)})."
        )

    guess = guess.upper()
    target = target.upper()

    comparison: Comparison = [ABSENT] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH
    pending = []

    # 1. Exact matches --> correct, and the target slot is used up
    i = 0
    while i < WORD_LENGTH:
        if guess[i] == target[i]:
            comparison[i] = CORRECT
            consumed[i] = True
        else:
            pending.append(i)
        i += 1

    # 2. Left-over letters: take the first unused copy in the target, if any
    for i in pending:
        for j in range(WORD_LENGTH):
            if not consumed[j] and target[j] == guess[i]:
                comparison[i] = MISPLACED
                consumed[j] = True
                break

    return comparison

def is_win(guess: Word, target: Word) -> bool:
    """Win = same word, ignoring case."""
    return guess.upper() == target.upper()

def summarize(comparison: Comparison) -> str:
    # Short feedback line that does not say which letters are which
    correct = comparison.count(CORRECT)
    misplaced = comparison.count(MISPLACED)
    if correct == 0 and misplaced == 0:
        return "all absent"
    return f"{correct} correct letter(s) and {misplaced} misplaced letter(s)"
