"""
GRIDPATH DEFINITIONS
====================
Central constants and value types shared by the grid and the search engine.

This file is the SINGLE SOURCE OF TRUTH for:
- Cell values (passability)
- Directions and their (dx, dy) offsets
- Position / OrientedState value types
- Default cost constants

Coordinates are (x, y): x grows to the right, y grows downwards.
"""

from enum import IntEnum
from typing import Dict, NamedTuple, Optional, Tuple

# ==========================================
# COST CONSTANTS
# ==========================================

DEFAULT_STEP_COST = 1
DEFAULT_TURN_PENALTY = 1000


# ==========================================
# CELLS
# ==========================================

class Cell(IntEnum):
    """Passability of one grid cell (0 = free, 1 = blocked)."""
    EMPTY = 0
    WALL = 1


CELL_CHARS: Dict[Cell, str] = {
    Cell.EMPTY: '.',
    Cell.WALL: '#',
}
MARK_CHAR = 'O'


# ==========================================
# DIRECTIONS
# ==========================================

class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]

    def reverse(self) -> 'Direction':
        return _REVERSE[self]

    def turn_left(self) -> 'Direction':
        return _TURN_LEFT[self]

    def turn_right(self) -> 'Direction':
        return _TURN_RIGHT[self]

    def is_orthogonal(self, other: 'Direction') -> bool:
        """True iff the two directions are perpendicular (a 90 degree turn)."""
        return (self in _VERTICAL) != (other in _VERTICAL)


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_VERTICAL = frozenset({Direction.UP, Direction.DOWN})

_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_TURN_LEFT = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}

_TURN_RIGHT = {v: k for k, v in _TURN_LEFT.items()}


# ==========================================
# SEARCH STATE VALUE TYPES
# ==========================================

class Position(NamedTuple):
    """Integer grid coordinate. Hashable and compared by value."""
    x: int
    y: int

    def moved(self, direction: Direction) -> 'Position':
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: 'Position') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self):
        return f"Position ({self.x}, {self.y})"


class OrientedState(NamedTuple):
    """(Position, facing) search state.

    ``direction`` is the heading of the last move. It is ``None`` only for a
    start state without a direction constraint.
    """
    position: Position
    direction: Optional[Direction]

    def __str__(self):
        facing = self.direction.name if self.direction is not None else '-'
        return f"({self.position.x}, {self.position.y}, {facing})"
