"""Concurrent search: several starting choices explored at once, first solution wins."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Sequence

from .puzzle import Puzzle, PuzzleFormatError, Tile
from .solver import Solver, Spiral, format_solution

TOTAL_TASKS = 8
"""Starting choices available: four corner tiles, each walked in two directions."""


class _StoppableSolver(Solver):
    """A solver that abandons its search once ``stop`` is set."""

    def __init__(self, puzzle: Puzzle, stop: threading.Event) -> None:
        super().__init__(puzzle)
        self._stop = stop

    def _play(self, x: int, y: int, required_color: int, spiral: Spiral) -> bool:
        if self._stop.is_set():
            return False
        return super()._play(x, y, required_color, spiral)


def _clone(puzzle: Puzzle) -> Puzzle:
    """An independent copy of ``puzzle`` with an empty board and fresh tiles."""
    tiles = [Tile(id=tile.id, colors=tile.colors) for tile in puzzle.tiles]
    return Puzzle(puzzle.size, puzzle.ncolors, tiles)


def _run_task(puzzle: Puzzle, task: int, stop: threading.Event) -> Optional[list[tuple[int, int]]]:
    copy = _clone(puzzle)
    try:
        found = _StoppableSolver(copy, stop).play_first(task)
    except ValueError:
        # Not enough corner tiles for this choice: the task simply fails.
        return None
    return copy.solution() if found else None


def solve_parallel(puzzle: Puzzle, workers: int) -> Optional[list[tuple[int, int]]]:
    """Search with ``workers`` concurrent tasks; return the first solution found or None.

    Each worker takes one starting choice (0-7) on its own copy of the puzzle;
    a worker whose choice fails is not given another one.
    """
    if workers < 0:
        raise ValueError(f"the number of workers must not be negative, got {workers}")
    tasks = range(min(workers, TOTAL_TASKS))
    if not tasks:
        return None

    stop = threading.Event()
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        futures = [pool.submit(_run_task, puzzle, task, stop) for task in tasks]
        try:
            for future in as_completed(futures):
                result = future.result()
                if result is not None:
                    return result
        finally:
            stop.set()
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="eternity-parallel",
        description="Solve an edge-matching puzzle read from standard input with several workers.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=min(TOTAL_TASKS, os.cpu_count() or 1),
        help=f"number of concurrent workers (at most {TOTAL_TASKS} are used)",
    )
    args = parser.parse_args(argv)

    try:
        puzzle = Puzzle.parse(sys.stdin.read())
    except PuzzleFormatError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    try:
        solution = solve_parallel(puzzle, args.workers)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if solution is None:
        print("SOLUTION NOT FOUND")
    else:
        sys.stdout.write(format_solution(solution))
    return 0