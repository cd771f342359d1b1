"""
Dijkstra Search over Grid State Spaces
======================================

Best-first search that drains a cost-ordered Frontier and finalizes every
state exactly once. Duplicate frontier entries are resolved lazily at
extraction: the first extraction of a state is authoritative because the
Frontier is cost-ordered and every transition has a positive cost.

Besides the finalized cost of each state, the search records:
- ``parents``: the parent that finalized each state (one optimal path)
- ``predecessors``: every parent that reaches the state at its finalized
  cost (the optimal predecessor DAG used by PredecessorCollector)

Termination:
- no goal: the Frontier is drained (full distance field)
- goal given: stop once the cheapest pending entry costs more than the best
  finalized goal state. For positional searches that do not need ties the
  search stops on the first finalized goal state.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Set, Tuple

import networkx as nx
import numpy as np

from ..core.definitions import Position
from ..core.exceptions import InvalidQueryError, SearchLimitError
from ..core.grid import GridMap
from .frontier import Frontier
from .options import SearchDiagnostics, SearchOptions
from .state_space import build_state_space

logger = logging.getLogger(__name__)


def as_position(grid: GridMap, pos: Tuple[int, int], name: str) -> Position:
    """Validate a caller-supplied coordinate; out-of-bounds is a caller bug."""
    try:
        pos = Position(*pos)
    except TypeError as e:
        raise InvalidQueryError(f"{name} must be an (x, y) pair, got {pos!r}") from e
    if not grid.in_bounds(pos):
        raise InvalidQueryError(
            f"{name} {pos} is outside the {grid.width}x{grid.height} grid")
    return pos


@dataclass
class SearchResult:
    """Outcome of one ShortestPathSearch run."""
    start: Position
    goal: Optional[Position]
    cost: Optional[int]
    goal_states: List[Hashable] = field(default_factory=list)
    finalized: Dict[Hashable, int] = field(default_factory=dict)
    parents: Dict[Hashable, Optional[Hashable]] = field(default_factory=dict)
    predecessors: Dict[Hashable, Set[Hashable]] = field(default_factory=dict)
    diagnostics: SearchDiagnostics = field(default_factory=SearchDiagnostics)
    oriented: bool = False

    @property
    def reachable(self) -> bool:
        return self.cost is not None

    def position_of(self, state: Hashable) -> Position:
        return state.position if self.oriented else state

    def position_costs(self) -> Dict[Position, int]:
        """Minimum finalized cost per Position (minimum over orientations)."""
        costs: Dict[Position, int] = {}
        for state, cost in self.finalized.items():
            pos = self.position_of(state)
            if pos not in costs or cost < costs[pos]:
                costs[pos] = cost
        return costs

    def cost_array(self, grid: GridMap) -> np.ndarray:
        """``[y, x]`` array of position costs with -1 where nothing was finalized."""
        out = np.full(grid.shape, -1, dtype=np.int64)
        for pos, cost in self.position_costs().items():
            out[pos.y, pos.x] = cost
        return out

    def path_to(self, state: Hashable) -> List[Position]:
        """Positions from the start to ``state`` along the finalizing parents."""
        if state not in self.finalized:
            raise KeyError(f"state {state} was not finalized")
        path = [self.position_of(state)]
        while self.parents.get(state) is not None:
            state = self.parents[state]
            path.append(self.position_of(state))
        path.reverse()
        return path

    def best_goal_state(self) -> Optional[Hashable]:
        if not self.goal_states:
            return None
        return min(self.goal_states, key=lambda s: self.finalized[s])

    def best_path(self) -> Optional[List[Position]]:
        state = self.best_goal_state()
        return self.path_to(state) if state is not None else None

    def predecessor_graph(self) -> nx.DiGraph:
        """Optimal predecessor DAG: edge ``p -> s`` for every optimal parent ``p`` of ``s``."""
        G = nx.DiGraph()
        for state, cost in self.finalized.items():
            G.add_node(state, cost=cost, position=self.position_of(state))
        for state, preds in self.predecessors.items():
            for pred in preds:
                G.add_edge(pred, state, weight=self.finalized[state] - self.finalized[pred])
        return G


class ShortestPathSearch:
    """
    Dijkstra search on a GridMap.

    One instance can run many queries; every ``run`` owns a fresh Frontier and
    finalized map, and the grid is only read.
    """

    def __init__(self, grid: GridMap, options: Optional[SearchOptions] = None):
        self.grid = grid
        self.options = (options or SearchOptions()).validate()
        self.state_space = build_state_space(grid, self.options)
        self.result: Optional[SearchResult] = None

    def run(self, start: Tuple[int, int], goal: Optional[Tuple[int, int]] = None,
            collect_ties: bool = False) -> SearchResult:
        """
        Search from ``start``.

        Args:
            start: start coordinate (must lie inside the grid)
            goal: goal coordinate, or None to explore everything reachable
            collect_ties: keep draining equal-cost entries after the goal is
                finalized so ``predecessors`` holds every optimal parent

        Returns:
            SearchResult (``cost`` is None when the goal is unreachable)
        """
        start = as_position(self.grid, start, "start")
        if goal is not None:
            goal = as_position(self.grid, goal, "goal")

        space = self.state_space
        diag = SearchDiagnostics()
        result = SearchResult(start=start, goal=goal, cost=None,
                              diagnostics=diag, oriented=space.oriented)
        self.result = result
        t0 = time.perf_counter()

        logger.debug(f"Search {self.grid!r} from {start} to {goal} using {space!r}")

        if goal is not None and start == goal and self.grid.is_passable(start):
            for state in space.initial_states(start):
                result.finalized[state] = 0
                result.parents[state] = None
                result.predecessors[state] = set()
                result.goal_states.append(state)
            result.cost = diag.goal_cost = 0
            diag.states_finalized = len(result.finalized)
            diag.time_taken_ms = (time.perf_counter() - t0) * 1000
            return result

        finalized = result.finalized
        frontier = Frontier()
        for state in space.initial_states(start):
            frontier.insert(state, 0)
            diag.entries_pushed += 1

        stop_on_first_goal = goal is not None and not (collect_ties or space.oriented)
        limit = self.options.max_expansions
        best_goal: Optional[int] = None

        while frontier:
            if best_goal is not None and frontier.peek_cost() > best_goal:
                diag.terminated_early = True
                break

            entry = frontier.extract_min()
            state, cost = entry.state, entry.cost

            if state in finalized:
                if entry.parent is not None and finalized[state] == cost:
                    result.predecessors[state].add(entry.parent)
                diag.entries_discarded += 1
                continue

            pos = space.position_of(state)
            if not self.grid.is_passable(pos):
                diag.entries_discarded += 1
                continue

            finalized[state] = cost
            result.parents[state] = entry.parent
            result.predecessors[state] = {entry.parent} if entry.parent is not None else set()

            if limit is not None and len(finalized) > limit:
                logger.warning(f"Search exceeded max_expansions={limit}; aborting")
                raise SearchLimitError(limit, len(finalized))

            if goal is not None and pos == goal:
                result.goal_states.append(state)
                if best_goal is None:
                    best_goal = cost
                    if stop_on_first_goal:
                        diag.terminated_early = True
                        break
                # a path through the goal can never return to it at equal cost
                continue

            for nxt, step in space.neighbors(state):
                frontier.insert(nxt, cost + step, parent=state)
                diag.entries_pushed += 1

        result.cost = best_goal
        diag.goal_cost = best_goal
        diag.states_finalized = len(finalized)
        diag.max_frontier_size = frontier.max_size
        diag.time_taken_ms = (time.perf_counter() - t0) * 1000
        if goal is not None and best_goal is None:
            logger.debug(f"Goal {goal} unreachable from {start}")
        return result

    def predecessor_graph(self) -> nx.DiGraph:
        if self.result is None:
            raise RuntimeError("predecessor_graph() called before run()")
        return self.result.predecessor_graph()


# ==========================================
# QUERY FUNCTIONS
# ==========================================

def shortest_distance(grid: GridMap, start: Tuple[int, int], goal: Tuple[int, int],
                      options: Optional[SearchOptions] = None) -> Optional[int]:
    """Minimum cost from ``start`` to ``goal`` (over all goal orientations), or None."""
    return ShortestPathSearch(grid, options).run(start, goal).cost


def shortest_path(grid: GridMap, start: Tuple[int, int], goal: Tuple[int, int],
                  options: Optional[SearchOptions] = None) -> Optional[List[Position]]:
    """One cost-optimal path as a list of Positions (start first), or None."""
    return ShortestPathSearch(grid, options).run(start, goal).best_path()


def distance_field(grid: GridMap, start: Tuple[int, int],
                   options: Optional[SearchOptions] = None) -> Dict[Position, int]:
    """Minimum cost from ``start`` to every reachable Position."""
    return ShortestPathSearch(grid, options).run(start).position_costs()
