"""Interactive text menu and game loop for 2048."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from jeu2048.grid import Grid, make_rng, new_grid

__all__ = ["ask_dimension", "ask_target", "main", "menu_text", "play"]

Reader = Callable[[], str]
Writer = Callable[[str], object]

_DEFAULT_DIMENSION = 4
_DEFAULT_TARGET = 2048
_DEFAULT_PROPORTION = 5
_VALID_DIMENSIONS = {3, 4, 5, 6, 8}
_TARGET_CHOICES = {"1": 2048, "2": 4098, "3": 8192}
_ACTIONS = ("d", "g", "h", "b", "x")


def menu_text(dimension: int) -> str:
    """Return the main menu for a board of the given size."""
    return (
        "Bienvenue au jeu 2048 !\n"
        f"S : Commencer {dimension}x{dimension}\n"
        "1 : Choisir la taille de la grille \n"
        "2 : Paramètres\n"
        "3 : Quitter\n"
    )


def ask_dimension(read: Reader, write: Writer) -> int:
    """Ask for a board size until one of 3, 4, 5, 6 or 8 is entered."""
    write("CHANGEMENT DE LA TAILLE DE LA GRILLE \n")
    while True:
        write(
            "Taille de la grille : \n"
            "3: petit 3x3\t\t4: Classique 4x4\n"
            "5: Grand 5x5\t\t6: Immense 6x6\t\t\n"
            "8: Immense  8x8\n"
        )
        answer = read()
        try:
            dimension = int(answer)
        except ValueError:
            continue
        if dimension in _VALID_DIMENSIONS:
            return dimension


def ask_target(target: int, read: Reader, write: Writer) -> int:
    """Let the player change the target score; return the chosen target."""
    while True:
        write(
            "\nCHANGER L'OBJECTIF: \n"
            f"\nLe jeu se fini à : {target}\n"
            "C : Changer le moment ou le jeu se fini \nX : Sortir\n"
        )
        answer = read()
        if answer == "C":
            while True:
                write("Quel est votre objectif ? \n1 : 2048\n2 : 4096\n3 : 8192\n")
                choice = read()
                if choice in _TARGET_CHOICES:
                    target = _TARGET_CHOICES[choice]
                    break
                write("Erreur\n")
        elif answer == "X":
            return target
        else:
            write("Erreur\n")


def _run_menu(
    dimension: int, target: int, read: Reader, write: Writer
) -> tuple[str, int, int]:
    while True:
        write(menu_text(dimension))
        answer = read()
        if answer in ("S", "3"):
            return answer, dimension, target
        if answer == "1":
            dimension = ask_dimension(read, write)
        elif answer == "2":
            target = ask_target(target, read, write)
        else:
            write("Erreur\n\n")
        write("\n\n\n")


def _ask_action(read: Reader, write: Writer) -> str:
    while True:
        write(
            "Tapez g pour gauche, d pour droite, b pour bas, h pour haut "
            "ou x pour s'arrêter\n>> "
        )
        action = read()
        if action in _ACTIONS:
            return action
        write("Erreur ")


def _play_game(grid: Grid, read: Reader, write: Writer, rng: random.Random) -> None:
    moves = {"d": grid.right, "g": grid.left, "h": grid.up, "b": grid.down}
    write(grid.render())
    while True:
        action = _ask_action(read, write)
        if action == "x":
            return
        blocked = moves[action]() is None and grid.empty_count() == 0
        if blocked or grid.success():
            if grid.success() or grid.empty_count() != 0:
                write("Bravo ! Objectif atteint !\n")
            else:
                write("Perdu... Tu n'as qu'à réessayer.\n")
            return
        grid.spawn(rng)
        write(grid.render())


def _ask_continue(read: Reader, write: Writer) -> bool:
    while True:
        write("R : Retour au menu  \nX : Mettre fin au programme\n")
        answer = read()
        if answer == "R":
            write("Retour au menu ...\n")
        elif answer == "X":
            write("Fin du programme.\n")
        write(answer + "\n")
        if answer in ("R", "X"):
            return answer == "R"


def play(read: Reader, write: Writer, rng: random.Random) -> None:
    """Run the menu and games until the player quits.

    ``read`` returns the next word typed by the player and raises EOFError
    when input is exhausted; ``write`` receives the text to display.
    """
    dimension = _DEFAULT_DIMENSION
    target = _DEFAULT_TARGET
    while True:
        answer, dimension, target = _run_menu(dimension, target, read, write)
        if answer == "3":
            return
        grid = new_grid(dimension, target, _DEFAULT_PROPORTION, rng)
        _play_game(grid, read, write, rng)
        if not _ask_continue(read, write):
            return


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _reader(stream: TextIO) -> Reader:
    words = _words(stream)

    def read() -> str:
        try:
            return next(words)
        except StopIteration:
            raise EOFError("end of input") from None

    return read


def main(argv: list[str] | None = None) -> int:
    """Play 2048 on standard input and output."""
    write = sys.stdout.write
    try:
        play(_reader(sys.stdin), write, make_rng(True))
    except EOFError:
        write("\n")
    return 0