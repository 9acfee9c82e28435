"""
Labels for clarity.
"""

from typing import List, Literal

Word = str  # 5 ASCII letters, upper-cased
Verdict = Literal["absent", "correct", "misplaced"]
Comparison = List[Verdict]  # one verdict per guess position
RoundStatus = Literal["in_progress", "won", "lost"]

WORD_LENGTH = 5
MAX_ATTEMPTS = 6

ABSENT: Verdict = "absent"
CORRECT: Verdict = "correct"
MISPLACED: Verdict = "misplaced"
