"""
Query-level analyses built on the search engine.

- first_blocking_wall: add walls one at a time (the falling-debris maze) and
  report the first one that cuts the goal off from the start.
- count_shortcuts: on a single-track optimal path, count the jumps of at
  most ``max_skip`` cells (Manhattan) that save at least ``threshold`` steps.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.definitions import Position
from ..core.exceptions import InvalidQueryError
from ..core.grid import GridMap
from .dijkstra import ShortestPathSearch, as_position
from .options import SearchOptions

logger = logging.getLogger(__name__)

SWEEP_METHODS = ('linear', 'bisect')


def first_blocking_wall(grid: GridMap, walls: Sequence[Tuple[int, int]],
                        start: Tuple[int, int], goal: Tuple[int, int],
                        options: Optional[SearchOptions] = None,
                        method: str = "linear") -> Optional[Position]:
    """
    Find the first wall in ``walls`` after which ``goal`` is unreachable.

    Args:
        grid: starting grid (left untouched)
        walls: wall positions in the order they appear
        start, goal: query endpoints
        options: search options for every probe
        method: "linear" adds walls one by one and re-checks only when the
            new wall lands on the current path; "bisect" binary-searches the
            prefix length, building a fresh grid for every probe

    Returns:
        The blocking wall, or None if the goal stays reachable.
    """
    if method not in SWEEP_METHODS:
        raise InvalidQueryError(f"method must be one of {SWEEP_METHODS}, got {method!r}")
    start = as_position(grid, start, "start")
    goal = as_position(grid, goal, "goal")
    walls = [Position(*w) for w in walls]
    if method == "linear":
        return _sweep_linear(grid, walls, start, goal, options)
    return _sweep_bisect(grid, walls, start, goal, options)


def _sweep_linear(grid, walls, start, goal, options) -> Optional[Position]:
    path = ShortestPathSearch(grid, options).run(start, goal).best_path()
    on_path = set(path) if path is not None else set()
    for i, wall in enumerate(walls):
        grid = grid.with_walls([wall])
        if path is not None and wall not in on_path:
            continue
        path = ShortestPathSearch(grid, options).run(start, goal).best_path()
        logger.debug(f"Wall #{i} {wall} hit the current path; "
                     f"re-solved: {'blocked' if path is None else len(path) - 1}")
        if path is None:
            return wall
        on_path = set(path)
    return None


def _sweep_bisect(grid, walls, start, goal, options) -> Optional[Position]:
    def blocked(k: int) -> bool:
        probe = grid.with_walls(walls[:k])
        return ShortestPathSearch(probe, options).run(start, goal).cost is None

    if not walls or not blocked(len(walls)):
        return None
    # smallest k in [1, n] with blocked(k); adding walls never shortens a path
    lo, hi = 1, len(walls)
    while lo < hi:
        mid = (lo + hi) // 2
        if blocked(mid):
            hi = mid
        else:
            lo = mid + 1
        logger.debug(f"Bisect probe {mid}: range now [{lo}, {hi}]")
    return walls[lo - 1]


def count_shortcuts(path: Sequence[Tuple[int, int]], max_skip: int, threshold: int) -> int:
    """
    Count ordered pairs ``i < j`` on ``path`` with Manhattan distance
    ``d <= max_skip`` and saving ``(j - i) - d >= threshold``.

    ``path`` must list one position per step (e.g. from ``shortest_path``).
    """
    if max_skip < 0:
        raise InvalidQueryError(f"max_skip must be non-negative, got {max_skip}")
    pts = np.asarray(path, dtype=np.int64).reshape(-1, 2)
    n = len(pts)
    count = 0
    for i in range(n - 1):
        rest = pts[i + 1:]
        dist = np.abs(rest - pts[i]).sum(axis=1)
        steps = np.arange(1, n - i)
        count += int(np.count_nonzero((dist <= max_skip) & (steps - dist >= threshold)))
    return count

