# pathfinder/core/route.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Iterator, List

from pathfinder.core.frontier import Frontier
from pathfinder.core.grid import Grid
from pathfinder.core.types import Coordinate


@dataclass
class Route:
    coordinates: List[Coordinate] = field(default_factory=list)  # start -> goal

    @property
    def length(self) -> int:
        return max(0, len(self.coordinates) - 1)


def build_route(frontier: Frontier, node_id: int) -> Route:
    """Follow parent links from the goal node back to the root."""
    path: List[Coordinate] = []
    cur = node_id
    while cur is not None:
        node = frontier.node(cur)
        path.append(node.coordinate)
        cur = node.parent
    path.reverse()
    return Route(path)


def mark_route(grid: Grid, route: Route) -> Iterator[Coordinate]:
    """
    Paint the route from the goal backwards, one cell per iteration.

    The start cell (the root) is left as it is.
    """
    for c in reversed(route.coordinates[1:]):
        grid.cell_at(c).mark_route()
        yield c
