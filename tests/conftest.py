"""Shared fixtures for the pathfinder tests."""

import pytest

from pathfinder.core.config import SearchConfig
from pathfinder.core.grid import create_grid, set_cell_role
from pathfinder.core.types import Coordinate, Role


@pytest.fixture
def make_grid():
    """Build a square grid with optional start, end and walls given as (x, y) tuples."""
    def _make(size, start=None, end=None, walls=()):
        grid = create_grid(size)
        if start is not None:
            set_cell_role(grid.cell_at(Coordinate(*start)), Role.START)
        if end is not None:
            set_cell_role(grid.cell_at(Coordinate(*end)), Role.END)
        for w in walls:
            set_cell_role(grid.cell_at(Coordinate(*w)), Role.WALL)
        return grid
    return _make


@pytest.fixture
def fast_config():
    """No pacing delays at all."""
    return SearchConfig(delay_ms=0, route_delay_ms=0, flash_delay_ms=0)


def visual_flags(cell):
    return (cell.is_part_of_open_list, cell.is_part_of_closed_list, cell.is_part_of_route)


def assert_valid_route(grid, route, start, end):
    """Route runs start -> end through walkable, 4-adjacent cells."""
    assert route[0] == start, f"route starts at {route[0]}, expected {start}"
    assert route[-1] == end, f"route ends at {route[-1]}, expected {end}"
    for a, b in zip(route, route[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} and {b} are not adjacent"
    for c in route:
        assert not grid.cell_at(c).is_wall, f"route crosses wall at {c}"
