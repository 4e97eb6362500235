# pathfinder/core/cost.py
#!/usr/bin/env python3
"""
Cost model for the best-first search.

Heuristic:
- Squared Euclidean distance to the goal. It overestimates on purpose so the
  search is pulled toward the goal faster; routes are not guaranteed optimal.
- Weighted by HEURISTIC_WEIGHT (> 1) in the priority, trading optimality for
  fewer expansions.
"""

from typing import TYPE_CHECKING, List

from pathfinder.core.types import Coordinate

if TYPE_CHECKING:
    from pathfinder.core.frontier import SearchNode

HEURISTIC_WEIGHT = 2


def heuristic_distance(goal: Coordinate, cell: Coordinate) -> int:
    dx = cell[0] - goal[0]
    dy = cell[1] - goal[1]
    return dx * dx + dy * dy


def path_length(arena: "List[SearchNode]", node_id: int) -> int:
    """Edges between the node and the root, walked through parent links."""
    length = 0
    parent = arena[node_id].parent
    while parent is not None:
        length += 1
        parent = arena[parent].parent
    return length


def priority(arena: "List[SearchNode]", node_id: int) -> int:
    return path_length(arena, node_id) + HEURISTIC_WEIGHT * arena[node_id].heuristic_distance
