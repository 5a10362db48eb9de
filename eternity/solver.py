"""Backtracking solver that fills the board along a spiral."""

from __future__ import annotations

import argparse
import sys
import time
from enum import Enum
from typing import Optional, Sequence

from .puzzle import Puzzle, PuzzleFormatError, Side, Tile


class Spiral(Enum):
    """Direction in which the board is walked from the top-left corner."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @property
    def directions(self) -> tuple[Side, ...]:
        """Order in which neighbouring cells are preferred as the next step."""
        if self is Spiral.CLOCKWISE:
            return (Side.EAST, Side.SOUTH, Side.WEST, Side.NORTH)
        return (Side.SOUTH, Side.EAST, Side.NORTH, Side.WEST)

    @property
    def guard(self) -> Side:
        """Side that must already be filled before taking the first direction."""
        return Side.NORTH if self is Spiral.CLOCKWISE else Side.WEST


class Solver:
    """Searches for a placement of all tiles on a puzzle's board."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle

    def play_first(self, vertex_choice: int) -> bool:
        """Solve starting with corner tile ``vertex_choice % 4`` at (0, 0).

        Choices 0-3 walk clockwise, 4-7 counterclockwise.
        """
        if not 0 <= vertex_choice <= 7:
            raise ValueError(f"vertex choice {vertex_choice} is outside the range 0-7")
        spiral = Spiral.CLOCKWISE if vertex_choice < 4 else Spiral.COUNTERCLOCKWISE
        index = vertex_choice % 4
        corners = self.puzzle.corners
        if index >= len(corners):
            raise ValueError(
                f"vertex choice {vertex_choice} is invalid: only {len(corners)} corner tiles"
            )

        start = corners[index]
        first = spiral.directions[0]
        nx, ny = first.offset
        board = self.puzzle.board
        for rotation in range(4):
            start.rotation = rotation
            if not self.puzzle.valid_move(0, 0, start):
                continue
            board[0][0] = start
            start.used = True
            if self._play(nx, ny, start.color(first), spiral):
                return True
            board[0][0] = None
            start.used = False
        return False

    def _neighbour(self, x: int, y: int, side: Side) -> Optional[tuple[int, int]]:
        dx, dy = side.offset
        nx, ny = x + dx, y + dy
        if 0 <= nx < self.puzzle.size and 0 <= ny < self.puzzle.size:
            return nx, ny
        return None

    def _next_step(self, x: int, y: int, tile: Tile, spiral: Spiral) -> Optional[tuple[int, int, int]]:
        board = self.puzzle.board
        for position, side in enumerate(spiral.directions):
            cell = self._neighbour(x, y, side)
            if cell is None or board[cell[1]][cell[0]] is not None:
                continue
            if position == 0:
                guard = self._neighbour(x, y, spiral.guard)
                if guard is not None and board[guard[1]][guard[0]] is None:
                    continue
            return cell[0], cell[1], tile.color(side)
        return None

    def _play(self, x: int, y: int, required_color: int, spiral: Spiral) -> bool:
        puzzle = self.puzzle
        board = puzzle.board
        candidates = puzzle.buckets[required_color] if required_color < len(puzzle.buckets) else ()
        for tile in candidates:
            if tile.used:
                continue
            tile.used = True
            for rotation in range(4):
                tile.rotation = rotation
                if not puzzle.valid_move(x, y, tile):
                    continue
                board[y][x] = tile
                step = self._next_step(x, y, tile, spiral)
                if step is None or self._play(*step, spiral):
                    return True
                board[y][x] = None
            tile.used = False
        return False


def solve(puzzle: Puzzle, vertex_choice: int = 0) -> Optional[list[tuple[int, int]]]:
    """Solve ``puzzle`` from a fresh board; return (id, rotation) pairs or None."""
    puzzle.reset()
    if Solver(puzzle).play_first(vertex_choice):
        return puzzle.solution()
    return None


def format_solution(solution: Sequence[tuple[int, int]]) -> str:
    """One "id rotation" line per board cell, row by row."""
    return "".join(f"{tile_id} {rotation}\n" for tile_id, rotation in solution)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eternity-solve", description="Solve an edge-matching puzzle read from standard input."
    )
    parser.add_argument("--vertex", type=int, default=0, help="starting corner choice, 0-7")
    args = parser.parse_args(argv)

    started = time.process_time()
    try:
        puzzle = Puzzle.parse(sys.stdin.read())
    except PuzzleFormatError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    try:
        solution = solve(puzzle, args.vertex)
    except ValueError as error:
        print(error, file=sys.stderr)
        solution = None

    if solution is not None:
        sys.stdout.write(format_solution(solution))
    else:
        print(f"SOLUTION NOT FOUND (starting with vertex tile index {args.vertex})")
    print(f"Execution time: {time.process_time() - started:f} seconds")
    return 0