import io
import random

import pytest

from jeu2048.cli import ask_dimension, ask_target, main, menu_text, play


def scripted(words):
    items = iter(words)

    def read():
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


class Output:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def test_menu_text_shows_dimension():
    text = menu_text(5)
    assert "S : Commencer 5x5" in text
    assert text.startswith("Bienvenue au jeu 2048 !")
    assert "3 : Quitter" in text


def test_ask_dimension_rejects_invalid_sizes():
    out = Output()
    assert ask_dimension(scripted(["7", "2", "9", "x", "5"]), out) == 5
    assert out.text.count("Taille de la grille") == 5


def test_ask_dimension_accepts_eight():
    assert ask_dimension(scripted(["8"]), Output()) == 8


@pytest.mark.parametrize(
    "words, start, expected",
    [
        (["C", "3", "X"], 2048, 8192),
        (["C", "1", "X"], 8192, 2048),
        (["C", "2", "X"], 2048, 4098),
        (["X"], 2048, 2048),
    ],
)
def test_ask_target_choices(words, start, expected):
    assert ask_target(start, scripted(words), Output()) == expected


def test_ask_target_reports_errors():
    out = Output()
    assert ask_target(2048, scripted(["Z", "C", "4", "3", "X"]), out) == 8192
    assert out.text.count("Erreur") == 2
    assert "Le jeu se fini à : 8192" in out.text


def test_play_quit_immediately():
    out = Output()
    play(scripted(["3"]), out, random.Random(1))
    assert "Bienvenue au jeu 2048 !" in out.text
    assert "Score:" not in out.text


def test_play_bad_menu_entry():
    out = Output()
    play(scripted(["?", "3"]), out, random.Random(1))
    assert out.text.count("Bienvenue") == 2
    assert "Erreur" in out.text


def test_play_start_and_stop():
    out = Output()
    play(scripted(["S", "x", "X"]), out, random.Random(1))
    assert out.text.count("Score: 0, Vides: 14") == 1
    assert "Fin du programme." in out.text


def test_play_invalid_action():
    out = Output()
    play(scripted(["S", "q", "x", "X"]), out, random.Random(1))
    assert "Erreur " in out.text
    assert out.text.count(">> ") == 2


def test_play_move_renders_again():
    out = Output()
    play(scripted(["S", "g", "x", "X"]), out, random.Random(3))
    assert out.text.count("Score:") == 2


def test_play_return_to_menu():
    out = Output()
    play(scripted(["S", "x", "R", "3"]), out, random.Random(1))
    assert out.text.count("Bienvenue") == 2
    assert "Retour au menu ..." in out.text


def test_play_with_smaller_board():
    out = Output()
    play(scripted(["1", "3", "S", "x", "X"]), out, random.Random(1))
    assert "S : Commencer 3x3" in out.text
    assert "\n \t " + "-" * 20 + "\n" in out.text
    assert "Vides: 7" in out.text


def test_play_raises_on_exhausted_input():
    with pytest.raises(EOFError):
        play(scripted(["S"]), Output(), random.Random(1))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("S x\nX\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Bienvenue au jeu 2048 !" in captured
    assert "Fin du programme." in captured


def test_main_handles_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    assert "S : Commencer 4x4" in capsys.readouterr().out