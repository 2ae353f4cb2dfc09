# jeu2048

The 2048 puzzle in your terminal. Slide the tiles left, right, up or down.
When two tiles with the same value meet, they merge into one tile worth their sum, and that sum is added to your score.
A tile made by a merge does not merge again in the same move.
You win once your score reaches the target.
You lose when a move changes nothing and no cell is empty.

## Installation

```
pip install .
```

## Playing

```
jeu2048
```

The game reads whitespace-separated words from standard input and writes to standard output.
The menu, in French, offers these choices:

- `S` starts a game on the current grid size. The default is 4x4, with a target of 2048.
- `1` chooses the grid size: 3, 4, 5, 6 or 8.
- `2` opens the settings, where `C` changes the target score and `X` returns to the menu.
  Choice `1` sets 2048, `2` sets 4098 and `3` sets 8192.
- `3` quits.

During a game, type `g` (left), `d` (right), `h` (up) or `b` (down).
Type `x` to stop the game.
A new tile appears after every move that does not end the game; on average half of the new tiles are `2` and half are `4`.
After a game, `R` goes back to the menu and `X` ends the program.
The program also ends when the input runs out.

## Using the library

```python
import random
from jeu2048.grid import load_grid, new_grid, slide

grid = load_grid([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]], 2048, 5)
grid.left()              # returns the number of empty cells, or None if nothing moved
print(grid.render())
print(grid.score, grid.success())

game = new_grid(4, 2048, 5, random.Random())
game.spawn(random.Random())  # places a tile, returns (row, column) or None if full

slide([2, 2, 4, 0])      # ([4, 4, 0, 0], 4): the new row and the points gained
```

- `new_grid(dimension, target, proportion, rng)` builds an empty square grid and places two random tiles.
  It raises `ValueError` if `dimension` or `target` is not positive, or if `proportion` is outside 0 to 10.
- `load_grid(rows, target, proportion)` builds a grid from given rows, with a score of 0.
  It raises `ValueError` if there are fewer than 4 rows or if `target` is not positive.
- `Grid` has the moves `left()`, `right()`, `up()` and `down()`, plus `dimension()`, `empty_count()`, `success()`, `spawn(rng)` and `render()`.
- `new_tile_value(proportion, rng)` draws 2 with probability `proportion / 10`, otherwise 4.
- `make_rng(from_clock)` returns a `random.Random` seeded from the clock, or with the fixed seed 1.

The `proportion` argument runs from 0 to 10.
It is the average number of `2` tiles out of every ten new tiles; the others are `4` tiles.

`jeu2048.cli` exposes `play(read, write, rng)`, which runs the menu and games with any input and output functions, as well as `menu_text`, `ask_dimension`, `ask_target` and `main`.

## What it does not do

Games cannot be saved or restored; each game lives only as long as the program runs.
The interface is plain text on standard input and output, with no full-screen or graphical display.

## Tests

```
pip install ".[test]"
pytest
```