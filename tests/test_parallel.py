import io
import random

import pytest

from eternity.checker import check_solution, parse_solution
from eternity.parallel import solve_parallel, main
from eternity.puzzle import Puzzle
from eternity.solver import solve

SMALL = "2 4\n0 1 2 0\n0 0 3 1\n2 4 0 0\n3 0 0 4\n"


def _generated_text(size, ncolors, seed):
    rng = random.Random(seed)
    # horizontal[y][x]: colour of the edge above row y; vertical[y][x]: left of column x.
    horizontal = [
        [0 if y in (0, size) else rng.randint(1, ncolors) for _ in range(size)]
        for y in range(size + 1)
    ]
    vertical = [
        [0 if x in (0, size) else rng.randint(1, ncolors) for x in range(size + 1)]
        for _ in range(size)
    ]
    tiles = []
    for y in range(size):
        for x in range(size):
            colors = [horizontal[y][x], vertical[y][x + 1], horizontal[y + 1][x], vertical[y][x]]
            shift = rng.randrange(4)
            tiles.append(colors[shift:] + colors[:shift])
    rng.shuffle(tiles)
    lines = [f"{size} {ncolors}"] + [" ".join(map(str, t)) for t in tiles]
    return "\n".join(lines) + "\n"


def _assert_valid(puzzle, solution):
    board = check_solution(puzzle, solution)
    ids = sorted(tile_id for row in board for tile_id, _ in row)
    assert ids == list(range(puzzle.size * puzzle.size))


@pytest.mark.parametrize("workers", [1, 2, 4, 8, 12])
def test_small_puzzle_solved(workers):
    puzzle = Puzzle.parse(SMALL)
    solution = solve_parallel(puzzle, workers)
    assert solution is not None
    _assert_valid(puzzle, solution)


def test_single_worker_matches_sequential():
    puzzle = Puzzle.parse(SMALL)
    expected = solve(Puzzle.parse(SMALL), 0)
    assert solve_parallel(puzzle, 1) == expected


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_generated_puzzle_solved(seed):
    puzzle = Puzzle.parse(_generated_text(3, 3, seed))
    solution = solve_parallel(puzzle, 8)
    assert solution is not None
    _assert_valid(puzzle, solution)


def test_original_puzzle_left_untouched():
    puzzle = Puzzle.parse(SMALL)
    solve_parallel(puzzle, 4)
    assert all(cell is None for row in puzzle.board for cell in row)
    assert [t.rotation for t in puzzle.tiles] == [0, 0, 0, 0]


def test_no_corner_tiles_gives_none():
    puzzle = Puzzle.parse("2 1\n1 1 1 1\n1 1 1 1\n1 1 1 1\n1 1 1 1\n")
    assert solve_parallel(puzzle, 8) is None


def test_zero_workers_gives_none():
    assert solve_parallel(Puzzle.parse(SMALL), 0) is None


def test_negative_workers_rejected():
    with pytest.raises(ValueError):
        solve_parallel(Puzzle.parse(SMALL), -1)


def test_main_prints_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SMALL))
    assert main(["--workers", "3"]) == 0
    out = capsys.readouterr().out
    puzzle = Puzzle.parse(SMALL)
    _assert_valid(puzzle, parse_solution(out, puzzle.size))


def test_main_reports_not_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n1 1 1 1\n"))
    assert main(["--workers", "2"]) == 0
    assert capsys.readouterr().out == "SOLUTION NOT FOUND\n"


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 4\n0 1"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err