# eternity

A backtracking solver and a solution checker for square edge-matching
puzzles in the style of Eternity II.

A puzzle is an `N x N` board and `N * N` square tiles. Each tile has a
colour on each of its four sides and may be placed in any of four rotations.
Adjacent tiles must show the same colour on the sides they share, and every
side lying on the border of the board must show colour `0`.

## Installation

```
pip install .
```

Only the Python standard library is needed (Python 3.10 or later). To run
the tests:

```
pip install ".[test]"
pytest
```

## Puzzle format

A puzzle is plain text made of whitespace-separated unsigned integers:

```
N C
n e s w      <- tile 0
n e s w      <- tile 1
...          <- N * N tiles in all
```

`N` is the side of the board and `C` the number of colours, which must be
below 256 (colour `0` is the border colour and is not counted). Each tile
lists its colours in the order north, east, south, west. Tiles are numbered
from `0` in the order they appear.

## Solution format

A solution has one line per board cell, in rows from top to bottom and,
within a row, from left to right. Each line holds the tile number and its
rotation (`0` to `3`, in quarter turns):

```
id rotation
```

## Commands

### `eternity-solve`

Reads a puzzle from standard input and searches for a solution, starting
with a corner tile (a tile with exactly two sides of colour `0`) in the
top-left cell:

```
eternity-solve < puzzle.txt
eternity-solve --vertex 5 < puzzle.txt
```

`--vertex` (default `0`) picks the start: choices `0`–`3` place corner tile
0–3 first and fill the board along a clockwise spiral, choices `4`–`7` place
corner tile 0–3 first and fill it counter-clockwise. The solution is printed
in the format above; otherwise the line
`SOLUTION NOT FOUND (starting with vertex tile index N)` is printed. A choice
outside `0`–`7`, or naming a corner tile that does not exist, is reported on
standard error and counts as not found. A final line gives the CPU time
used. Malformed input is reported on standard error with exit status `1`.

### `eternity-parallel`

Reads a puzzle from standard input and runs several searches at once:

```
eternity-parallel < puzzle.txt
eternity-parallel --workers 4 < puzzle.txt
```

Each worker takes one of the starting choices `0`–`7` on its own copy of the
puzzle; with `--workers K`, choices `0` to `min(K, 8) - 1` are tried, and a
worker whose choice fails is not given another. The default number of
workers is the number of CPUs, at most 8. The first solution found is
printed and the other searches are told to stop; if none succeeds,
`SOLUTION NOT FOUND` is printed.

### `eternity-check`

Checks a solution read from standard input against a puzzle file:

```
eternity-solve < puzzle.txt > solution.txt
eternity-check puzzle.txt < solution.txt
```

The exit status is `0` when the solution is valid. Otherwise it names the
first broken rule, scanning column by column, top to bottom:

| Status | Rule broken |
|--------|-------------|
| 1 | west side of a left-column tile is not `0` |
| 2 | east side of a right-column tile is not `0` |
| 3 | north side of a top-row tile is not `0` |
| 4 | south side of a bottom-row tile is not `0` |
| 5 | east side does not match the west side of the tile to its right |
| 6 | south side does not match the north side of the tile below |

Status `1` is also returned for a wrong number of arguments, a puzzle file
that cannot be read, or malformed puzzle or solution text. Extra lines after
the `N * N` solution lines are ignored.

## Library use

```python
from eternity.puzzle import Puzzle
from eternity.solver import solve, format_solution
from eternity.checker import check_solution

with open("puzzle.txt") as handle:
    puzzle = Puzzle.parse(handle.read())

solution = solve(puzzle, 0)
if solution is not None:
    print(format_solution(solution), end="")
    check_solution(puzzle, solution)
```

`eternity.puzzle`

- `Puzzle.parse(text)` reads the puzzle format and raises
  `PuzzleFormatError` (a `ValueError`) on malformed input.
- `Puzzle` holds `size`, `ncolors`, `tiles`, the `board` (rows of `Tile` or
  `None`), per-colour `buckets` and the `corners` list.
  `valid_move(x, y, tile)` tells whether a tile in its current rotation fits
  a cell, `solution()` returns the filled board as `(id, rotation)` pairs row
  by row (raising `ValueError` if a cell is empty), and `reset()` empties the
  board and unrotates every tile.
- `Tile.color(side)` gives the colour shown on a `Side` (`NORTH`, `EAST`,
  `SOUTH`, `WEST`) under the tile's rotation.

`eternity.solver`

- `solve(puzzle, vertex_choice=0)` resets the puzzle, searches, and returns
  the `(id, rotation)` pairs or `None`. It raises `ValueError` for an invalid
  vertex choice.
- `Solver(puzzle).play_first(vertex_choice)` runs the same search on the
  puzzle's current board and returns whether it succeeded; `Spiral` names
  the two walking directions.
- `format_solution(solution)` renders pairs in the solution format.

`eternity.parallel`

- `solve_parallel(puzzle, workers)` runs up to eight starting choices in
  threads and returns the first solution found, or `None`. A negative
  number of workers raises `ValueError`; zero workers returns `None`.

`eternity.checker`

- `parse_solution(text, size)` reads `size * size` pairs, raising
  `PuzzleFormatError` if numbers are missing, malformed or name a tile out
  of range.
- `check_solution(puzzle, placements)` raises `CheckFailure` (with `code`,
  `x` and `y`) on the first broken rule, and otherwise returns the assembled
  board as rows of `(id, rotation)` pairs.

## Limitations

The parallel search runs as threads inside one Python process, so it does
not spread work across machines and, for this CPU-bound search, gains little
speed over `eternity-solve`. Neither solver saves or resumes a search in
progress.