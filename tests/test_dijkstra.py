"""
Tests for ShortestPathSearch and the distance / path queries.

Run with: pytest tests/test_dijkstra.py -v
"""

import networkx as nx
import numpy as np
import pytest

from gridpath import (
    Direction,
    GridMap,
    InvalidQueryError,
    OrientedState,
    Position,
    SearchLimitError,
    SearchOptions,
    ShortestPathSearch,
    distance_field,
    shortest_distance,
    shortest_path,
)
from conftest import REINDEER_LARGE, REINDEER_SMALL

REINDEER = SearchOptions.for_variant("reindeer")


# ==============================================================================
# SCENARIOS
# ==============================================================================

def test_start_equals_goal_costs_zero(maze):
    grid, _, _ = maze("""
    ...
    .#.
    ...
    """)
    for p in grid.passable_positions():
        assert shortest_distance(grid, p, p) == 0
        assert shortest_distance(grid, p, p, REINDEER) == 0


def test_start_equals_goal_does_not_expand(maze):
    grid, start, _ = maze("S..")
    result = ShortestPathSearch(grid).run(start, start)
    assert result.cost == 0
    assert result.diagnostics.entries_pushed == 0
    assert result.best_path() == [start]


def test_l_shaped_corridor_costs_steps_plus_one_turn(maze):
    grid, start, end = maze("""
    S.#
    #.#
    #E#
    """)
    assert shortest_distance(grid, start, end, REINDEER) == 2 + 1000 + 1
    assert shortest_distance(grid, start, end) == 3


def test_longer_l_corridor(maze):
    grid, start, end = maze("""
    S..
    ##.
    ##E
    """)
    assert shortest_distance(grid, start, end, REINDEER) == 4 + 1000
    penalty_7 = REINDEER.with_changes(turn_penalty=7)
    assert shortest_distance(grid, start, end, penalty_7) == 4 + 7


def test_straight_corridor_equals_manhattan():
    rows = [[1] * 7 for _ in range(7)]
    rows[3] = [0] * 7
    grid = GridMap.from_rows(rows)
    start, goal = Position(0, 3), Position(6, 3)
    assert shortest_distance(grid, start, goal) == start.manhattan(goal)
    assert shortest_distance(grid, start, goal, REINDEER) == start.manhattan(goal)
    assert shortest_distance(grid, start, goal, REINDEER.with_changes(turn_penalty=5)) == 6


def test_enclosed_goal_unreachable(maze):
    grid, start, end = maze("""
    S....
    ..###
    ..#E#
    ..###
    """)
    assert shortest_distance(grid, start, end) is None
    assert shortest_distance(grid, start, end, REINDEER) is None
    assert shortest_path(grid, start, end) is None


def test_wall_endpoints_are_unreachable_not_errors():
    grid = GridMap.from_rows([[1, 0, 0], [0, 0, 1]])
    assert shortest_distance(grid, (0, 0), (2, 0)) is None
    assert shortest_distance(grid, (2, 0), (2, 1)) is None
    assert shortest_distance(grid, (0, 0), (0, 0)) is None


@pytest.mark.parametrize("start,goal", [
    ((-1, 0), (1, 1)),
    ((0, 0), (3, 0)),
    ((0, 0), (0, 2)),
])
def test_out_of_bounds_endpoints_rejected(start, goal):
    grid = GridMap.from_walls([], 3, 2)
    with pytest.raises(InvalidQueryError):
        shortest_distance(grid, start, goal)


def test_reversal_needed_at_start(maze):
    # facing right against a wall, the only way out is back to the left
    grid, start, end = maze("E.S")
    assert shortest_distance(grid, start, end, REINDEER) == 2 + 2000
    free = SearchOptions.for_variant("reindeer_free_start")
    assert shortest_distance(grid, start, end, free) == 2
    assert shortest_distance(grid, start, end, SearchOptions.for_variant("reindeer_no_reversal")) is None


def test_start_direction_changes_cost(maze):
    grid, start, end = maze("""
    S
    .
    E
    """)
    assert shortest_distance(grid, start, end, REINDEER) == 1002
    down = REINDEER.with_changes(start_direction=Direction.DOWN)
    assert shortest_distance(grid, start, end, down) == 2


def test_goal_cost_is_minimum_over_orientations(maze):
    # the goal can be entered from the left (no turn) or from below (one turn)
    grid, start, end = maze("""
    S.E
    ...
    """)
    result = ShortestPathSearch(grid, REINDEER).run(start, end)
    assert result.cost == 2
    assert OrientedState(end, Direction.RIGHT) in result.goal_states
    assert all(result.finalized[s] >= result.cost for s in result.goal_states)


def test_reindeer_examples(maze):
    grid, start, end = maze(REINDEER_SMALL)
    assert shortest_distance(grid, start, end, REINDEER) == 7036
    grid, start, end = maze(REINDEER_LARGE)
    assert shortest_distance(grid, start, end, REINDEER) == 11048


# ==============================================================================
# PATHS AND FIELDS
# ==============================================================================

def test_shortest_path_is_contiguous_and_optimal(maze):
    grid, start, end = maze(REINDEER_SMALL)
    path = shortest_path(grid, start, end, REINDEER)
    assert path[0] == start and path[-1] == end
    for a, b in zip(path, path[1:]):
        assert a.manhattan(b) == 1
        assert grid.is_passable(b)

    # re-price the path by hand
    cost, facing = 0, Direction.RIGHT
    for a, b in zip(path, path[1:]):
        heading = next(d for d in Direction if a.moved(d) == b)
        cost += 1 + (1000 if heading != facing else 0)
        facing = heading
    assert cost == 7036


def test_distance_field_matches_networkx(make_random_grid):
    grid = make_random_grid(9, 7, 0.25, seed=11, keep=[(0, 0)])
    field = distance_field(grid, (0, 0))

    G = nx.grid_2d_graph(grid.width, grid.height)
    G.remove_nodes_from([n for n in list(G) if not grid.is_passable(n)])
    expected = nx.single_source_shortest_path_length(G, (0, 0))
    assert field == {Position(*k): v for k, v in expected.items()}


def test_cost_array_marks_unreached(maze):
    grid, start, _ = maze("""
    S.#.
    ..#.
    """)
    arr = ShortestPathSearch(grid).run(start).cost_array(grid)
    assert arr.shape == (2, 4)
    np.testing.assert_array_equal(arr, [[0, 1, -1, -1], [1, 2, -1, -1]])


def test_oriented_distance_field_is_min_over_headings(maze):
    grid, start, _ = maze("""
    S..
    ...
    """)
    field = distance_field(grid, start, REINDEER)
    assert field[Position(2, 0)] == 2
    assert field[Position(0, 1)] == 1001
    assert field[Position(2, 1)] == 1003


def test_predecessor_graph_is_acyclic(make_random_grid):
    grid = make_random_grid(6, 6, 0.2, seed=3, keep=[(0, 0), (5, 5)])
    search = ShortestPathSearch(grid, REINDEER)
    search.run((0, 0), (5, 5), collect_ties=True)
    G = search.predecessor_graph()
    assert nx.is_directed_acyclic_graph(G)
    for u, v, data in G.edges(data=True):
        assert data['weight'] > 0


def test_predecessor_graph_requires_run():
    with pytest.raises(RuntimeError):
        ShortestPathSearch(GridMap.from_walls([], 2, 2)).predecessor_graph()


def test_search_instance_is_reusable(maze):
    grid, start, end = maze("""
    S..
    .#.
    ..E
    """)
    search = ShortestPathSearch(grid)
    assert search.run(start, end).cost == 4
    assert search.run(end, start).cost == 4
    assert search.run(start, start).cost == 0


# ==============================================================================
# OPTIONS AND LIMITS
# ==============================================================================

def test_expansion_limit_raises():
    grid = GridMap.from_walls([], 20, 20)
    with pytest.raises(SearchLimitError) as exc:
        shortest_distance(grid, (0, 0), (19, 19), SearchOptions(max_expansions=10))
    assert exc.value.limit == 10


@pytest.mark.parametrize("options", [
    SearchOptions(step_cost=0),
    SearchOptions(turn_penalty=-1),
    SearchOptions(collector="bogus"),
    SearchOptions(max_expansions=0),
    SearchOptions(oriented=True, start_direction="RIGHT"),
])
def test_invalid_options_rejected(options):
    with pytest.raises(InvalidQueryError):
        shortest_distance(GridMap.from_walls([], 2, 2), (0, 0), (1, 1), options)


def test_unknown_variant_rejected():
    with pytest.raises(InvalidQueryError):
        SearchOptions.for_variant("sokoban")


def test_diagnostics_summary(maze):
    grid, start, end = maze("S.E")
    diag = ShortestPathSearch(grid).run(start, end).diagnostics
    assert diag.success
    assert diag.states_finalized >= 3
    text = diag.summary()
    assert "REACHED (cost 2)" in text
    assert "States Finalized" in text
