"""
Terminal rendering of a comparison.
Green background = correct, yellow background = misplaced, plain = absent.
ANSI codes from https://gist.github.com/fnky/458719343aabd01cfb17a3a4f7296797
"""

import os
from typing import Optional

from .types import Comparison, Word, CORRECT, MISPLACED

GREEN = "\x1b[30;42;1m"
YELLOW = "\x1b[30;43;1m"
RESET = "\x1b[0m"

# Short symbols so the feedback still reads without colors
SYMBOLS = {"absent": "-", "correct": "+", "misplaced": "?"}

def supports_color() -> bool:
    # The classic Windows console prints the escape codes literally
    return os.name != "nt"

def render_comparison(guess: Word, comparison: Comparison, color: Optional[bool] = None) -> str:
    if color is None:
        color = supports_color()

    parts = []
    for letter, verdict in zip(guess, comparison):
        if color and verdict == CORRECT:
            parts.append(GREEN + letter + RESET)
        elif color and verdict == MISPLACED:
            parts.append(YELLOW + letter + RESET)
        else:
            parts.append(letter)
    return "".join(parts)

def render_symbols(comparison: Comparison) -> str:
    return "".join(SYMBOLS[v] for v in comparison)
