# pathfinder/core/frontier.py
#!/usr/bin/env python3
"""
Open and closed sets of one search run.

Nodes live in an arena (a list) and refer to their parent by index, so
relaxation is a single index update. Both sets map a cell's coordinate to a
node id and keep insertion order, which the insertion-order engine relies on.

Admission rules when a neighbour is reached from `current`:
- closed, and recorded path longer than path(current) + 1 -> reparent, stays closed
- open, and recorded path longer than path(current) + 1   -> reparent, moved to the back
- in neither set                                          -> appended to the open set
- anything else                                           -> untouched
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pathfinder.core.cost import heuristic_distance, path_length, priority
from pathfinder.core.grid import Grid
from pathfinder.core.types import Coordinate

log = logging.getLogger(__name__)


@dataclass
class SearchNode:
    id: int
    coordinate: Coordinate
    parent: Optional[int]        # arena index, None only for the root
    heuristic_distance: int


class Frontier:
    def __init__(self, grid: Grid, goal: Coordinate):
        self.grid = grid
        self.goal = goal
        self.arena: List[SearchNode] = []
        self.open: Dict[Coordinate, int] = {}
        self.closed: Dict[Coordinate, int] = {}
        self.relaxations = 0

    # -------------------- nodes --------------------

    def _new_node(self, c: Coordinate, parent: Optional[int]) -> int:
        node = SearchNode(
            id=len(self.arena),
            coordinate=c,
            parent=parent,
            heuristic_distance=heuristic_distance(self.goal, c),
        )
        self.arena.append(node)
        return node.id

    def node(self, node_id: int) -> SearchNode:
        return self.arena[node_id]

    def path_length(self, node_id: int) -> int:
        return path_length(self.arena, node_id)

    def priority(self, node_id: int) -> int:
        return priority(self.arena, node_id)

    def add_root(self, c: Coordinate) -> int:
        root = self._new_node(c, None)
        self.closed[c] = root
        return root

    # -------------------- sets --------------------

    def settle(self, node_id: int) -> None:
        """Move a node from the open set to the closed set."""
        c = self.arena[node_id].coordinate
        self.open.pop(c, None)
        self.closed[c] = node_id

    def expand(self, node_id: int) -> List[Coordinate]:
        """Admit the walkable neighbours of a node; returns newly opened cells."""
        current = self.arena[node_id]
        via = self.path_length(node_id) + 1
        opened: List[Coordinate] = []

        for n in self.grid.neighbors4(current.coordinate):
            if self.grid.cell_at(n).is_wall:
                continue

            if n in self.closed:
                known = self.closed[n]
                if self.path_length(known) > via:
                    self.arena[known].parent = node_id
                    self.relaxations += 1
                    log.debug("relaxed closed %s to length %d", tuple(n), via)
            elif n in self.open:
                known = self.open[n]
                if self.path_length(known) > via:
                    self.arena[known].parent = node_id
                    del self.open[n]
                    self.open[n] = known
                    self.relaxations += 1
            else:
                self.open[n] = self._new_node(n, node_id)
                opened.append(n)

        return opened

    def clear(self) -> None:
        self.arena.clear()
        self.open.clear()
        self.closed.clear()
        self.relaxations = 0
