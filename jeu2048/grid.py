"""The 2048 board: creation, moves, tile spawning and text rendering."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

__all__ = [
    "Grid",
    "load_grid",
    "make_rng",
    "new_grid",
    "new_tile_value",
    "slide",
]

_CELL_WIDTH = 6
_PROPORTION_SCALE = 10


def make_rng(from_clock: bool) -> random.Random:
    """Return a random generator, seeded from the clock or with the fixed seed 1."""
    return random.Random() if from_clock else random.Random(1)


def new_tile_value(proportion: int, rng: random.Random) -> int:
    """Draw a new tile: 2 with probability proportion/10, otherwise 4."""
    draw = rng.randrange(_PROPORTION_SCALE)
    if draw < proportion:
        return 2
    return 4


def slide(row: list[int]) -> tuple[list[int], int]:
    """Slide and merge a row towards index 0.

    Returns the new row and the points gained by merging. A tile produced
    by a merge is not merged again during the same slide.
    """
    tiles = [value for value in row if value]
    merged: list[int] = []
    gained = 0
    pending: int | None = None
    for value in tiles:
        if pending is None:
            pending = value
        elif pending == value:
            merged.append(2 * value)
            gained += 2 * value
            pending = None
        else:
            merged.append(pending)
            pending = value
    if pending is not None:
        merged.append(pending)
    return merged + [0] * (len(row) - len(merged)), gained


@dataclass
class Grid:
    """A square board of tiles with its score, target and share of 2 tiles."""

    table: list[list[int]]
    target: int
    proportion: int
    score: int = field(default=0)

    @property
    def proportion4(self) -> int:
        """Share (out of 10) of new tiles that are 4."""
        return _PROPORTION_SCALE - self.proportion

    def dimension(self) -> int:
        """Number of rows of the board."""
        return len(self.table)

    def empty_count(self) -> int:
        """Number of empty cells."""
        return sum(value == 0 for row in self.table for value in row)

    def success(self) -> bool:
        """True once the score has reached the target."""
        return self.score >= self.target

    def _slide_rows(self, rows: list[list[int]], reverse: bool) -> list[list[int]]:
        result = []
        for row in rows:
            line = row[::-1] if reverse else list(row)
            moved, gained = slide(line)
            self.score += gained
            result.append(moved[::-1] if reverse else moved)
        return result

    def _apply(self, new_table: list[list[int]]) -> int | None:
        if new_table == self.table:
            return None
        self.table = new_table
        return self.empty_count()

    def _horizontal(self, reverse: bool) -> int | None:
        return self._apply(self._slide_rows(self.table, reverse))

    def _vertical(self, reverse: bool) -> int | None:
        columns = [list(column) for column in zip(*self.table)]
        moved = self._slide_rows(columns, reverse)
        return self._apply([list(row) for row in zip(*moved)])

    def left(self) -> int | None:
        """Move left; return the empty count, or None if nothing moved."""
        return self._horizontal(reverse=False)

    def right(self) -> int | None:
        """Move right; return the empty count, or None if nothing moved."""
        return self._horizontal(reverse=True)

    def up(self) -> int | None:
        """Move up; return the empty count, or None if nothing moved."""
        return self._vertical(reverse=False)

    def down(self) -> int | None:
        """Move down; return the empty count, or None if nothing moved."""
        return self._vertical(reverse=True)

    def spawn(self, rng: random.Random) -> tuple[int, int] | None:
        """Place a new tile on a random empty cell.

        Returns the (row, column) filled, or None if the board is full.
        """
        empty = [
            (i, j)
            for i, row in enumerate(self.table)
            for j, value in enumerate(row)
            if value == 0
        ]
        if not empty:
            return None
        value = new_tile_value(self.proportion, rng)
        i, j = rng.choice(empty)
        self.table[i][j] = value
        return i, j

    def render(self) -> str:
        """Draw the board as text, followed by the score and empty count."""
        size = self.dimension()
        dashes = "-" * ((_CELL_WIDTH + 1) * size - 1)
        parts = ["\n \t " + dashes + "\n"]
        for index, row in enumerate(self.table):
            cells = "".join(
                " " * _CELL_WIDTH + "|" if value == 0 else f" {value:>4} |"
                for value in row
            )
            parts.append("\t|" + cells)
            if index != size - 1:
                parts.append("\n\t|" + dashes + "|\n")
            else:
                parts.append("\n\t " + dashes + "\n")
        parts.append(f"\nScore: {self.score}, Vides: {self.empty_count()}\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def new_grid(
    dimension: int, target: int, proportion: int, rng: random.Random
) -> Grid:
    """Create an empty board of the given size holding two random tiles."""
    if dimension <= 0:
        raise ValueError(f"dimension must be positive: {dimension}")
    if target <= 0:
        raise ValueError(f"target must be positive: {target}")
    if not 0 <= proportion <= _PROPORTION_SCALE:
        raise ValueError(f"proportion must be between 0 and 10: {proportion}")
    grid = Grid(
        table=[[0] * dimension for _ in range(dimension)],
        target=target,
        proportion=proportion,
    )
    grid.spawn(rng)
    grid.spawn(rng)
    return grid


def load_grid(rows: list[list[int]], target: int, proportion: int) -> Grid:
    """Build a board from given rows; the score starts at 0."""
    if len(rows) < 4:
        raise ValueError(f"Nombre de lignes insuffisant: {len(rows)}")
    if target <= 0:
        raise ValueError("Nombre cible incorrect (négatif)")
    return Grid(
        table=[list(row) for row in rows],
        target=target,
        proportion=proportion,
    )