"""
State spaces for grid search
============================

A state space turns a GridMap into an implicit weighted graph:

- PositionalStateSpace: states are Positions, every step costs ``step_cost``.
- OrientedStateSpace: states are (Position, Direction). A move in direction
  ``d`` from a state facing ``f`` costs
    * ``step_cost``                       if d == f (straight on)
    * ``step_cost + turn_penalty``        if d is perpendicular to f
    * ``step_cost + 2 * turn_penalty``    if d reverses f (when allowed)
  A start state with no facing pays ``step_cost`` in every direction.

Neighbours on a wall or outside the grid are never generated.
"""

from typing import Hashable, Iterator, List, Tuple

from ..core.definitions import Direction, OrientedState, Position
from ..core.grid import GridMap
from .options import SearchOptions

State = Hashable
Transition = Tuple[State, int]


class PositionalStateSpace:
    """4-connected grid, direction-free."""

    oriented = False

    def __init__(self, grid: GridMap, step_cost: int = 1):
        self.grid = grid
        self.step_cost = step_cost

    def initial_states(self, start: Position) -> List[Position]:
        return [Position(*start)]

    @staticmethod
    def position_of(state: Position) -> Position:
        return state

    def neighbors(self, state: Position) -> Iterator[Transition]:
        for direction in Direction:
            nxt = state.moved(direction)
            if self.grid.is_passable(nxt):
                yield nxt, self.step_cost

    def __repr__(self):
        return f"PositionalStateSpace(step_cost={self.step_cost})"


class OrientedStateSpace:
    """4-connected grid where changing heading costs a turn penalty."""

    oriented = True

    def __init__(self, grid: GridMap, turn_penalty: int = 1000, step_cost: int = 1,
                 allow_reversal: bool = True, start_direction=Direction.RIGHT):
        self.grid = grid
        self.turn_penalty = turn_penalty
        self.step_cost = step_cost
        self.allow_reversal = allow_reversal
        self.start_direction = start_direction

    def initial_states(self, start: Position) -> List[OrientedState]:
        return [OrientedState(Position(*start), self.start_direction)]

    @staticmethod
    def position_of(state: OrientedState) -> Position:
        return state.position

    def move_cost(self, facing, direction: Direction):
        """Cost of stepping in ``direction`` while facing ``facing``; None if illegal."""
        if facing is None or facing == direction:
            return self.step_cost
        if facing.is_orthogonal(direction):
            return self.step_cost + self.turn_penalty
        if self.allow_reversal:
            return self.step_cost + 2 * self.turn_penalty
        return None

    def neighbors(self, state: OrientedState) -> Iterator[Transition]:
        pos, facing = state
        for direction in Direction:
            cost = self.move_cost(facing, direction)
            if cost is None:
                continue
            nxt = pos.moved(direction)
            if self.grid.is_passable(nxt):
                yield OrientedState(nxt, direction), cost

    def __repr__(self):
        return (f"OrientedStateSpace(turn_penalty={self.turn_penalty}, "
                f"step_cost={self.step_cost}, allow_reversal={self.allow_reversal}, "
                f"start_direction={self.start_direction!r})")


def build_state_space(grid: GridMap, options: SearchOptions):
    """Pick the state space described by ``options``."""
    if options.oriented:
        return OrientedStateSpace(
            grid,
            turn_penalty=options.turn_penalty,
            step_cost=options.step_cost,
            allow_reversal=options.allow_reversal,
            start_direction=options.start_direction,
        )
    return PositionalStateSpace(grid, step_cost=options.step_cost)
