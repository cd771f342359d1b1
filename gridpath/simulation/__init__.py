"""
gridpath.simulation
===================
Shortest-path search over grid state spaces.

This module contains:
- options: SearchOptions (configuration) and SearchDiagnostics
- state_space: positional and oriented (turn-penalty) state spaces
- frontier: cost-ordered priority queue with insertion-order tie breaking
- dijkstra: ShortestPathSearch and the distance / path queries
- path_collector: union of cells over every optimal path
- analysis: wall sweeps and shortcut counting
"""

from .options import SearchOptions, SearchDiagnostics
from .state_space import PositionalStateSpace, OrientedStateSpace, build_state_space
from .frontier import Frontier, FrontierEntry
from .dijkstra import (
    ShortestPathSearch,
    SearchResult,
    shortest_distance,
    shortest_path,
    distance_field,
)
from .path_collector import (
    OptimalPaths,
    PredecessorCollector,
    PathCopyCollector,
    optimal_path_cells,
)
from .analysis import first_blocking_wall, count_shortcuts

__all__ = [
    'SearchOptions',
    'SearchDiagnostics',
    'PositionalStateSpace',
    'OrientedStateSpace',
    'build_state_space',
    'Frontier',
    'FrontierEntry',
    'ShortestPathSearch',
    'SearchResult',
    'shortest_distance',
    'shortest_path',
    'distance_field',
    'OptimalPaths',
    'PredecessorCollector',
    'PathCopyCollector',
    'optimal_path_cells',
    'first_blocking_wall',
    'count_shortcuts',
]
