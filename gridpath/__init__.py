"""
gridpath - Grid State-Space Shortest Paths
==========================================

Dijkstra search over 2D wall/empty grids where the search state is either a
cell or a (cell, facing) pair, with a configurable turn penalty and
enumeration of every cell on any optimal path.

Submodules:
- core: Position / Direction / Cell value types, GridMap, exceptions
- simulation: state spaces, frontier, search, path collection, analyses

Quick use:
    >>> from gridpath import GridMap, SearchOptions, shortest_distance
    >>> grid = GridMap.from_rows([[0, 0], [1, 0]])
    >>> shortest_distance(grid, (0, 0), (1, 1))
    2
"""

__version__ = "1.0.0"

from .core import (
    Cell,
    Direction,
    Position,
    OrientedState,
    GridMap,
    GridPathError,
    MalformedGridError,
    InvalidQueryError,
    SearchLimitError,
)
from .simulation import (
    SearchOptions,
    SearchDiagnostics,
    ShortestPathSearch,
    SearchResult,
    OptimalPaths,
    shortest_distance,
    shortest_path,
    distance_field,
    optimal_path_cells,
    first_blocking_wall,
    count_shortcuts,
)

__all__ = [
    'Cell',
    'Direction',
    'Position',
    'OrientedState',
    'GridMap',
    'GridPathError',
    'MalformedGridError',
    'InvalidQueryError',
    'SearchLimitError',
    'SearchOptions',
    'SearchDiagnostics',
    'ShortestPathSearch',
    'SearchResult',
    'OptimalPaths',
    'shortest_distance',
    'shortest_path',
    'distance_field',
    'optimal_path_cells',
    'first_blocking_wall',
    'count_shortcuts',
]
