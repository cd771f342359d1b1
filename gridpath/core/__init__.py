"""
gridpath.core
=============
Value types, the GridMap container and the error taxonomy.
"""

from .definitions import (
    Cell,
    Direction,
    Position,
    OrientedState,
    DIRECTION_DELTAS,
    DEFAULT_STEP_COST,
    DEFAULT_TURN_PENALTY,
)
from .exceptions import (
    GridPathError,
    MalformedGridError,
    InvalidQueryError,
    SearchLimitError,
)
from .grid import GridMap

__all__ = [
    'Cell',
    'Direction',
    'Position',
    'OrientedState',
    'DIRECTION_DELTAS',
    'DEFAULT_STEP_COST',
    'DEFAULT_TURN_PENALTY',
    'GridPathError',
    'MalformedGridError',
    'InvalidQueryError',
    'SearchLimitError',
    'GridMap',
]
