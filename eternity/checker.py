"""Verify that a proposed solution solves a puzzle."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .puzzle import Puzzle, PuzzleFormatError, Side

_REASONS = {
    1: "west edge of a left-column tile is not a border",
    2: "east edge of a right-column tile is not a border",
    3: "north edge of a top-row tile is not a border",
    4: "south edge of a bottom-row tile is not a border",
    5: "east edge does not match the west edge of the next tile",
    6: "south edge does not match the north edge of the tile below",
}


class CheckFailure(Exception):
    """A solution broke a rule; ``code`` identifies which one (1-6)."""

    def __init__(self, code: int, x: int, y: int) -> None:
        super().__init__(f"tile at ({x}, {y}): {_REASONS[code]}")
        self.code = code
        self.x = x
        self.y = y


def _unsigned(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise PuzzleFormatError(f"expected an unsigned integer, got {token!r}")
    return int(token)


def parse_solution(text: str, size: int) -> list[tuple[int, int]]:
    """Read size*size "id rotation" pairs, row by row."""
    tokens = text.split()
    needed = 2 * size * size
    if len(tokens) < needed:
        raise PuzzleFormatError(f"expected {needed} numbers in the solution, got {len(tokens)}")
    numbers = [_unsigned(token) for token in tokens[:needed]]
    placements = list(zip(numbers[::2], numbers[1::2]))
    for tile_id, _ in placements:
        if tile_id >= size * size:
            raise PuzzleFormatError(f"tile id {tile_id} is out of range")
    return placements


def check_solution(puzzle: Puzzle, placements: Sequence[tuple[int, int]]) -> list[list[tuple[int, int]]]:
    """Check placements against the puzzle's rules and return the assembled board.

    A tile id given more than once takes the rotation it was given last.
    Raises CheckFailure on the first broken rule, column by column.
    """
    size = puzzle.size
    if len(placements) != size * size:
        raise ValueError(f"expected {size * size} placements, got {len(placements)}")

    rotations: dict[int, int] = {}
    for tile_id, rotation in placements:
        if not 0 <= tile_id < len(puzzle.tiles):
            raise ValueError(f"tile id {tile_id} is out of range")
        rotations[tile_id] = rotation
    placed = {tile_id: replace(puzzle.tiles[tile_id], rotation=rot) for tile_id, rot in rotations.items()}
    grid = [
        [placed[tile_id] for tile_id, _ in placements[start:start + size]]
        for start in range(0, size * size, size)
    ]

    last = size - 1
    for x in range(size):
        for y in range(size):
            tile = grid[y][x]
            if x == 0 and tile.color(Side.WEST) != 0:
                raise CheckFailure(1, x, y)
            if x == last and tile.color(Side.EAST) != 0:
                raise CheckFailure(2, x, y)
            if y == 0 and tile.color(Side.NORTH) != 0:
                raise CheckFailure(3, x, y)
            if y == last and tile.color(Side.SOUTH) != 0:
                raise CheckFailure(4, x, y)
            if x < last and tile.color(Side.EAST) != grid[y][x + 1].color(Side.WEST):
                raise CheckFailure(5, x, y)
            if y < last and tile.color(Side.SOUTH) != grid[y + 1][x].color(Side.NORTH):
                raise CheckFailure(6, x, y)

    return [[(tile.id, tile.rotation) for tile in row] for row in grid]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage eternity-check input_puzzle <solution")
        return 1
    try:
        text = Path(args[0]).read_text()
    except OSError:
        print("File not found")
        return 1
    try:
        puzzle = Puzzle.parse(text)
        placements = parse_solution(sys.stdin.read(), puzzle.size)
    except PuzzleFormatError:
        return 1
    try:
        check_solution(puzzle, placements)
    except CheckFailure as failure:
        return failure.code
    return 0