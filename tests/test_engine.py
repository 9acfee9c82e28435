"""
Testing pure game logic.
"""

import pytest

from wordle.engine import evaluate, is_win, normalize_word, summarize
from wordle.errors import LengthMismatch, InvalidGuessLength, InvalidGuessCharacters

A, C, M = "absent", "correct", "misplaced"

@pytest.mark.parametrize("word", ["CRANE", "ERASE", "LLAMA", "ZZZZZ"])
def test_same_word_is_all_correct(word):
    assert evaluate(word, word) == [C, C, C, C, C]

def test_no_shared_letters_is_all_absent():
    assert evaluate("CRANE", "BUILT") == [A, A, A, A, A]

def test_reversed_word():
    assert evaluate("ABCDE", "EDCBA") == [M, M, C, M, M]

def test_extra_copy_of_a_letter_is_absent():
    # ABIDE has a single E: only the first unmatched E in SPEED gets credit
    result = evaluate("SPEED", "ABIDE")
    assert result == [A, A, M, A, M]

def test_duplicates_never_over_credited():
    # ERASE has two E's, SPEED has two E's; no more than two may be credited
    result = evaluate("SPEED", "ERASE")
    credited = [i for i, ch in enumerate("SPEED") if ch == "E" and result[i] != A]
    assert len(credited) <= "ERASE".count("E")
    assert result == [M, A, M, M, A]

def test_exact_match_consumes_letter_first():
    # TOTAL has one L: only the first L in ALLOT is credited
    assert evaluate("ALLOT", "TOTAL") == [M, M, A, M, M]
    # The green B wins over an earlier unmatched B
    assert evaluate("ABBEY", "CABIN") == [M, A, C, A, A]

def test_case_is_ignored():
    assert evaluate("crane", "CRANE") == [C, C, C, C, C]

def test_same_inputs_same_result():
    assert evaluate("SPEED", "ERASE") == evaluate("SPEED", "ERASE")

def test_length_mismatch():
    with pytest.raises(LengthMismatch):
        evaluate("CRANES", "CRANE")
    with pytest.raises(LengthMismatch):
        evaluate("CRANE", "CRAN")

def test_normalize_word():
    assert normalize_word("  crane ") == "CRANE"
    with pytest.raises(InvalidGuessLength):
        normalize_word("cranes")
    with pytest.raises(InvalidGuessCharacters):
        normalize_word("cr4ne")

def test_is_win_true_and_false():
    assert is_win("crane", "CRANE") is True
    assert is_win("CRANE", "CRATE") is False

def test_summarize():
    assert summarize([A, A, A, A, A]) == "all absent"
    assert summarize([C, M, A, A, C]) == "2 correct letter(s) and 1 misplaced letter(s)"
