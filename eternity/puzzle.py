"""Edge-matching puzzle model: tiles, sides and the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

MAX_COLORS = 256


class Side(IntEnum):
    """The four sides of a tile, in the order colours are listed."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Side":
        return Side((self + 2) % 4)

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) step towards the neighbour on this side."""
        return _OFFSETS[self]


_OFFSETS = {
    Side.NORTH: (0, -1),
    Side.EAST: (1, 0),
    Side.SOUTH: (0, 1),
    Side.WEST: (-1, 0),
}


class PuzzleFormatError(ValueError):
    """Raised when puzzle or solution text cannot be read."""


@dataclass(eq=False)
class Tile:
    """A square tile with four edge colours and a current rotation."""

    id: int
    colors: tuple[int, int, int, int]
    rotation: int = 0
    used: bool = False

    def color(self, side: Side | int) -> int:
        """Colour shown on ``side`` under the current rotation."""
        return self.colors[(int(side) + 4 - self.rotation) % 4]


def _read_unsigned(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise PuzzleFormatError(f"unexpected end of input while reading {what}")
    if not (token.isascii() and token.isdigit()):
        raise PuzzleFormatError(f"expected an unsigned integer for {what}, got {token!r}")
    return int(token)


class Puzzle:
    """A square board together with the tiles that must fill it."""

    def __init__(self, size: int, ncolors: int, tiles: list[Tile]) -> None:
        if len(tiles) != size * size:
            raise PuzzleFormatError(
                f"a board of size {size} needs {size * size} tiles, got {len(tiles)}"
            )
        self.size = size
        self.ncolors = ncolors
        self.tiles = tiles
        self.board: list[list[Optional[Tile]]] = [[None] * size for _ in range(size)]

        # One bucket per colour, colour 0 (the border) included.
        self.buckets: list[list[Tile]] = [[] for _ in range(ncolors + 1)]
        for tile in tiles:
            for color in dict.fromkeys(tile.colors):
                if color < len(self.buckets):
                    self.buckets[color].append(tile)

        self.corners: list[Tile] = [t for t in tiles if t.colors.count(0) == 2]

    @classmethod
    def parse(cls, text: str) -> "Puzzle":
        """Read a puzzle: size, colour count, then four colours per tile."""
        tokens = iter(text.split())
        size = _read_unsigned(tokens, "the board size")
        ncolors = _read_unsigned(tokens, "the number of colours")
        if ncolors >= MAX_COLORS:
            raise PuzzleFormatError(f"at most {MAX_COLORS - 1} colours are supported, got {ncolors}")
        tiles = [
            Tile(
                id=index,
                colors=tuple(_read_unsigned(tokens, f"tile {index}") for _ in range(4)),
            )
            for index in range(size * size)
        ]
        return cls(size, ncolors, tiles)

    def valid_move(self, x: int, y: int, tile: Tile) -> bool:
        """Whether ``tile``, as rotated, fits at (x, y) given borders and neighbours."""
        last = self.size - 1
        on_border = {
            Side.NORTH: y == 0,
            Side.EAST: x == last,
            Side.SOUTH: y == last,
            Side.WEST: x == 0,
        }
        for side in Side:
            if on_border[side]:
                if tile.color(side) != 0:
                    return False
                continue
            dx, dy = side.offset
            neighbour = self.board[y + dy][x + dx]
            if neighbour is not None and neighbour.color(side.opposite) != tile.color(side):
                return False
        return True

    def solution(self) -> list[tuple[int, int]]:
        """The placed tiles as (id, rotation) pairs, row by row."""
        placements = []
        for y, row in enumerate(self.board):
            for x, tile in enumerate(row):
                if tile is None:
                    raise ValueError(f"the board is not complete: ({x}, {y}) is empty")
                placements.append((tile.id, tile.rotation))
        return placements

    def reset(self) -> None:
        """Empty the board and return every tile to its unused, unrotated state."""
        self.board = [[None] * self.size for _ in range(self.size)]
        for tile in self.tiles:
            tile.rotation = 0
            tile.used = False