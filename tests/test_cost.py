"""Tests for the cost model."""

from pathfinder.core.cost import HEURISTIC_WEIGHT, heuristic_distance, path_length, priority
from pathfinder.core.frontier import SearchNode
from pathfinder.core.types import Coordinate


def test_heuristic_is_squared_euclidean():
    goal = Coordinate(4, 4)

    assert heuristic_distance(goal, Coordinate(0, 0)) == 32
    assert heuristic_distance(goal, Coordinate(4, 1)) == 9
    assert heuristic_distance(goal, Coordinate(5, 6)) == 5


def test_heuristic_zero_only_at_goal():
    goal = Coordinate(2, 3)

    assert heuristic_distance(goal, goal) == 0
    for c in [Coordinate(2, 2), Coordinate(3, 3), Coordinate(0, 0)]:
        assert heuristic_distance(goal, c) > 0


def _chain():
    # (0,0) <- (1,0) <- (2,0)
    return [
        SearchNode(0, Coordinate(0, 0), None, 8),
        SearchNode(1, Coordinate(1, 0), 0, 5),
        SearchNode(2, Coordinate(2, 0), 1, 4),
    ]


def test_path_length_walks_parents():
    arena = _chain()

    assert path_length(arena, 0) == 0
    assert path_length(arena, 1) == 1
    assert path_length(arena, 2) == 2


def test_path_length_follows_reparenting():
    arena = _chain()
    arena[2].parent = 0

    assert path_length(arena, 2) == 1


def test_priority_combines_length_and_weighted_heuristic():
    arena = _chain()

    assert HEURISTIC_WEIGHT > 1
    assert priority(arena, 0) == HEURISTIC_WEIGHT * 8
    assert priority(arena, 2) == 2 + HEURISTIC_WEIGHT * 4
