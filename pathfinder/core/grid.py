# pathfinder/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a square matrix of cells and the edits the host applies to it.

- Role flags (wall / start / end) are set by the user, one per cell.
- Visualization flags (open / closed / route) belong to the search and are
  cleared at the start of every run.
- `highlighted` is grid-wide and only used for the "no route" flash.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from pathfinder.core.types import Coordinate, Role

WALL_DENSITY = 0.35


@dataclass
class Cell:
    coordinate: Coordinate
    is_wall: bool = False
    is_start: bool = False
    is_end: bool = False
    is_part_of_open_list: bool = False
    is_part_of_closed_list: bool = False
    is_part_of_route: bool = False

    def set_role(self, role: Role) -> None:
        """Toggle `role` and clear the other two role flags."""
        if role is Role.WALL:
            self.is_wall = not self.is_wall
            self.is_start = False
            self.is_end = False
        elif role is Role.START:
            self.is_start = not self.is_start
            self.is_wall = False
            self.is_end = False
        elif role is Role.END:
            self.is_end = not self.is_end
            self.is_start = False
            self.is_wall = False

    def clear_search_flags(self) -> None:
        self.is_part_of_open_list = False
        self.is_part_of_closed_list = False
        self.is_part_of_route = False

    def mark_open(self) -> None:
        self.is_part_of_open_list = True
        self.is_part_of_closed_list = False
        self.is_part_of_route = False

    def mark_closed(self) -> None:
        self.is_part_of_open_list = False
        self.is_part_of_closed_list = True
        self.is_part_of_route = False

    def mark_route(self) -> None:
        self.is_part_of_open_list = False
        self.is_part_of_closed_list = False
        self.is_part_of_route = True


@dataclass
class Grid:
    size: int
    cells: List[List[Cell]] = field(default_factory=list)   # [row][col]
    highlighted: bool = False

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if not self.cells:
            self.cells = [[Cell(Coordinate(x, y)) for x in range(self.size)]
                          for y in range(self.size)]

    def in_bounds(self, c: Coordinate) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_at(self, c: Coordinate) -> Cell:
        if not self.in_bounds(c):
            raise ValueError(f"Coordinate {tuple(c)} is outside a {self.size}x{self.size} grid")
        x, y = c
        return self.cells[y][x]

    def all_cells(self) -> List[Cell]:
        return [cell for row in self.cells for cell in row]

    def neighbors4(self, c: Coordinate) -> List[Coordinate]:
        """In-bounds 4-connected neighbours of c, walls included."""
        x, y = c
        candidates = [
            Coordinate(x + 1, y),
            Coordinate(x - 1, y),
            Coordinate(x, y + 1),
            Coordinate(x, y - 1),
        ]
        return [n for n in candidates if self.in_bounds(n)]

    def starts(self) -> List[Cell]:
        return [cell for cell in self.all_cells() if cell.is_start]

    def ends(self) -> List[Cell]:
        return [cell for cell in self.all_cells() if cell.is_end]

    def reset_path(self) -> None:
        """Clear every visualization flag, leaving walls and endpoints alone."""
        for cell in self.all_cells():
            cell.clear_search_flags()
        self.highlighted = False

    def random_walls(self, density: float = WALL_DENSITY,
                     rng: Optional[random.Random] = None) -> None:
        """Scatter walls; top-left becomes the start and bottom-right the end."""
        rng = rng or random.Random()
        last = self.size - 1
        for cell in self.all_cells():
            cell.is_wall = rng.random() < density
            cell.is_start = False
            cell.is_end = False
            if cell.coordinate == (0, 0):
                cell.is_wall = False
                cell.is_start = True
            if cell.coordinate == (last, last):
                cell.is_wall = False
                cell.is_end = True


def create_grid(size: int) -> Grid:
    return Grid(size)


def set_cell_role(cell: Cell, role: Role) -> None:
    cell.set_role(role)
