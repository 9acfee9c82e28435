"""
Testing the console loop with scripted input instead of a real terminal.
"""

import random

from wordle.console import play, main
from wordle.render import render_comparison, render_symbols, GREEN, YELLOW, RESET
from wordle.round import Session


def scripted(answers):
    """Return a fake input() that replays the given answers in order."""
    it = iter(answers)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(it)
    read.prompts = prompts
    return read


def test_render_comparison_colors():
    out = render_comparison("TRACE", ["absent", "correct", "correct", "misplaced", "correct"], color=True)
    assert out == "T" + GREEN + "R" + RESET + GREEN + "A" + RESET + YELLOW + "C" + RESET + GREEN + "E" + RESET


def test_render_without_color():
    comparison = ["absent", "correct", "misplaced", "absent", "absent"]
    assert render_comparison("CRANE", comparison, color=False) == "CRANE"
    assert render_symbols(comparison) == "-+?--"


def test_play_win_then_quit():
    lines = []
    read = scripted(["cranes", "slate", "crane", "n"])
    outcomes = play(Session(["CRANE"], rng=random.Random(0)), read=read, write=lines.append, color=False)

    assert outcomes == ["won"]
    assert any(line.startswith("Invalid input.") for line in lines)
    assert "Congrats! You guessed the correct word." in lines
    assert read.prompts[0].startswith("Guess 1/6.")
    assert read.prompts[2].startswith("Guess 2/6.")


def test_play_lose_then_play_again():
    lines = []
    answers = ["moody"] * 6 + ["yes", "crane", "no"]
    outcomes = play(Session(["CRANE"], rng=random.Random(0)), read=scripted(answers), write=lines.append, color=False)

    assert outcomes == ["lost", "won"]
    assert "You didn't guess the right word. It was CRANE" in lines
    assert "---- new game ----" in lines


def test_main_with_local_dictionary(tmp_path, monkeypatch):
    path = tmp_path / "words.txt"
    path.write_text("crane\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", scripted(["crane", "n"]))

    assert main(["--dict", str(path), "--seed", "1", "--no-color"]) == 0


def test_main_with_empty_dictionary(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("ab\nabcdef\n", encoding="utf-8")

    assert main(["--dict", str(path)]) == 1


def test_main_with_undecodable_dictionary(tmp_path, monkeypatch):
    path = tmp_path / "words.txt"
    path.write_bytes(b"crane\ncaf\xe9s\n")
    monkeypatch.setattr("builtins.input", scripted(["crane", "n"]))

    assert main(["--dict", str(path), "--no-color"]) == 0
