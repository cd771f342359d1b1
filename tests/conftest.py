"""Shared fixtures: literal text mazes and random grids."""

import random
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the project root is importable when running from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridpath import Cell, GridMap, Position


def parse_maze(text):
    """'#' wall, '.' floor, 'S' start, 'E' end -> (GridMap, start, end)."""
    rows, start, end = [], None, None
    for y, line in enumerate(text.strip().splitlines()):
        row = []
        for x, ch in enumerate(line.strip()):
            if ch == 'S':
                start = Position(x, y)
            elif ch == 'E':
                end = Position(x, y)
            row.append(Cell.WALL if ch == '#' else Cell.EMPTY)
        rows.append(row)
    return GridMap.from_rows(rows), start, end


def random_grid(width, height, wall_ratio, seed, keep=()):
    """Seeded random grid; positions in ``keep`` stay open."""
    rnd = random.Random(seed)
    cells = np.zeros((height, width), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            if rnd.random() < wall_ratio:
                cells[y, x] = 1
    for x, y in keep:
        cells[y, x] = 0
    return GridMap.from_array(cells)


@pytest.fixture
def maze():
    return parse_maze


@pytest.fixture
def make_random_grid():
    return random_grid


# AoC-style reindeer maze, best cost 7036, 45 cells on best paths
REINDEER_SMALL = """
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

# best cost 11048, 64 cells on best paths
REINDEER_LARGE = """
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

# single-track race course, 84 steps from S to E
RACE_TRACK = """
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""

# falling debris on a 7x7 grid
DEBRIS_BYTES = [
    (5, 4), (4, 2), (4, 5), (3, 0), (2, 1), (6, 3), (2, 4), (1, 5), (0, 6),
    (3, 3), (2, 6), (5, 1), (1, 2), (5, 5), (2, 5), (6, 5), (1, 4), (0, 4),
    (6, 4), (1, 1), (6, 1), (1, 0), (0, 5), (1, 6), (2, 0),
]
