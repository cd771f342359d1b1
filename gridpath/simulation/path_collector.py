"""
Optimal Path Union
==================

Collect every grid cell that lies on at least one cost-optimal path from
start to goal.

Two collectors produce the identical cell set:

- PredecessorCollector (default, "dag"): runs ShortestPathSearch with ties
  collected, so each finalized state knows all of its optimal parents, then
  walks that DAG backwards from the optimal goal states with an explicit
  worklist. Work is linear in the number of states and optimal edges.
- PathCopyCollector ("copy"): every frontier entry carries the set of
  positions visited so far; equal-cost re-extractions of a state are expanded
  again so that every optimal path survives. Copying the sets makes this
  quadratic in path length and the number of entries grows with the number
  of distinct optimal paths, so it is meant for small grids and as ground
  truth for the DAG collector.
"""

import logging
import time
from typing import Dict, FrozenSet, Hashable, List, NamedTuple, Optional, Set, Tuple

from ..core.definitions import Position
from ..core.exceptions import SearchLimitError
from ..core.grid import GridMap
from .dijkstra import ShortestPathSearch, as_position
from .frontier import Frontier
from .options import SearchDiagnostics, SearchOptions
from .state_space import build_state_space

logger = logging.getLogger(__name__)


class OptimalPaths(NamedTuple):
    """(cost, cells): cost is None and cells empty when the goal is unreachable."""
    cost: Optional[int]
    cells: FrozenSet[Position]


class PredecessorCollector:
    """Optimal path union via the predecessor DAG recorded during finalization."""

    def __init__(self, grid: GridMap, options: Optional[SearchOptions] = None):
        self.search = ShortestPathSearch(grid, options)
        self.diagnostics: Optional[SearchDiagnostics] = None

    def collect(self, start: Tuple[int, int], goal: Tuple[int, int]) -> OptimalPaths:
        result = self.search.run(start, goal, collect_ties=True)
        self.diagnostics = result.diagnostics
        if result.cost is None:
            return OptimalPaths(None, frozenset())

        stack: List[Hashable] = [s for s in result.goal_states
                                 if result.finalized[s] == result.cost]
        seen: Set[Hashable] = set(stack)
        cells: Set[Position] = set()
        while stack:
            state = stack.pop()
            cells.add(result.position_of(state))
            for pred in result.predecessors[state]:
                if pred not in seen:
                    seen.add(pred)
                    stack.append(pred)

        logger.debug(f"DAG collector: cost={result.cost}, {len(cells)} cells "
                     f"from {len(seen)} optimal states")
        return OptimalPaths(result.cost, frozenset(cells))


class PathCopyCollector:
    """Brute-force optimal path union carrying a position set in every entry."""

    def __init__(self, grid: GridMap, options: Optional[SearchOptions] = None):
        self.grid = grid
        self.options = (options or SearchOptions()).validate()
        self.state_space = build_state_space(grid, self.options)
        self.diagnostics: Optional[SearchDiagnostics] = None

    def collect(self, start: Tuple[int, int], goal: Tuple[int, int]) -> OptimalPaths:
        start = as_position(self.grid, start, "start")
        goal = as_position(self.grid, goal, "goal")
        space = self.state_space
        diag = self.diagnostics = SearchDiagnostics()
        t0 = time.perf_counter()

        if start == goal and self.grid.is_passable(start):
            diag.goal_cost = 0
            return OptimalPaths(0, frozenset({start}))

        frontier = Frontier()
        for state in space.initial_states(start):
            frontier.insert(state, 0, payload=frozenset({start}))
            diag.entries_pushed += 1

        finalized: Dict[Hashable, int] = {}
        cells: Set[Position] = set()
        best: Optional[int] = None
        limit = self.options.max_expansions

        while frontier:
            entry = frontier.extract_min()
            state, cost = entry.state, entry.cost

            if best is not None and cost > best:
                diag.terminated_early = True
                break

            pos = space.position_of(state)
            if not self.grid.is_passable(pos):
                diag.entries_discarded += 1
                continue

            if pos == goal:
                cells.update(entry.payload)
                best = cost
                continue

            prev = finalized.get(state)
            if prev is not None and cost > prev:
                diag.entries_discarded += 1
                continue
            if prev is None:
                finalized[state] = cost
                if limit is not None and len(finalized) > limit:
                    logger.warning(f"Path-copy search exceeded max_expansions={limit}; aborting")
                    raise SearchLimitError(limit, len(finalized))

            for nxt, step in space.neighbors(state):
                frontier.insert(nxt, cost + step, payload=entry.payload | {space.position_of(nxt)})
                diag.entries_pushed += 1

        diag.goal_cost = best
        diag.states_finalized = len(finalized)
        diag.max_frontier_size = frontier.max_size
        diag.time_taken_ms = (time.perf_counter() - t0) * 1000
        logger.debug(f"Copy collector: cost={best}, {len(cells)} cells, "
                     f"{diag.entries_pushed} entries pushed")
        if best is None:
            return OptimalPaths(None, frozenset())
        return OptimalPaths(best, frozenset(cells))


COLLECTOR_CLASSES = {
    'dag': PredecessorCollector,
    'copy': PathCopyCollector,
}


def optimal_path_cells(grid: GridMap, start: Tuple[int, int], goal: Tuple[int, int],
                       options: Optional[SearchOptions] = None) -> OptimalPaths:
    """Optimal cost plus the union of cells on every optimal path."""
    options = (options or SearchOptions()).validate()
    collector = COLLECTOR_CLASSES[options.collector](grid, options)
    return collector.collect(start, goal)
