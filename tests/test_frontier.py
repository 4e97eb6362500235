"""Tests for open/closed set admission and relaxation."""

from pathfinder.core.frontier import Frontier
from pathfinder.core.types import Coordinate


def settle_and_expand(frontier, xy):
    node_id = frontier.open[Coordinate(*xy)]
    frontier.settle(node_id)
    return frontier.expand(node_id)


def test_add_root_goes_to_closed(make_grid):
    frontier = Frontier(make_grid(3), Coordinate(2, 2))
    root = frontier.add_root(Coordinate(0, 0))

    assert frontier.closed == {(0, 0): root}
    assert frontier.open == {}
    assert frontier.node(root).parent is None
    assert frontier.node(root).heuristic_distance == 8


def test_expand_opens_walkable_neighbours(make_grid):
    grid = make_grid(3, walls=[(1, 2)])
    frontier = Frontier(grid, Coordinate(2, 2))
    root = frontier.add_root(Coordinate(1, 1))

    opened = frontier.expand(root)

    assert opened == [(2, 1), (0, 1), (1, 0)], "wall (1,2) must be skipped"
    assert list(frontier.open) == opened
    for c in opened:
        node = frontier.node(frontier.open[c])
        assert node.parent == root
        assert frontier.path_length(node.id) == 1


def test_expand_has_no_visual_side_effects(make_grid):
    grid = make_grid(3)
    frontier = Frontier(grid, Coordinate(2, 2))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))

    for cell in grid.all_cells():
        assert not (cell.is_part_of_open_list or cell.is_part_of_closed_list or cell.is_part_of_route)


def test_settle_moves_node_to_closed(make_grid):
    frontier = Frontier(make_grid(3), Coordinate(2, 2))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))
    node_id = frontier.open[Coordinate(1, 0)]

    frontier.settle(node_id)

    assert Coordinate(1, 0) not in frontier.open
    assert frontier.closed[Coordinate(1, 0)] == node_id


def test_closed_node_relaxed_by_shorter_path(make_grid):
    """A settled cell reached again by a strictly shorter path is reparented and stays settled."""
    frontier = Frontier(make_grid(5), Coordinate(4, 4))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))

    settle_and_expand(frontier, (1, 0))
    settle_and_expand(frontier, (1, 1))
    settle_and_expand(frontier, (1, 2))
    far = frontier.open[Coordinate(0, 2)]
    frontier.settle(far)
    assert frontier.path_length(far) == 4

    shortcut = frontier.open[Coordinate(0, 1)]
    opened = settle_and_expand(frontier, (0, 1))

    assert opened == []
    assert frontier.relaxations == 1
    assert frontier.closed[Coordinate(0, 2)] == far
    assert Coordinate(0, 2) not in frontier.open
    assert frontier.node(far).parent == shortcut
    assert frontier.path_length(far) == 2


def test_closed_node_not_relaxed_by_equal_path(make_grid):
    frontier = Frontier(make_grid(5), Coordinate(4, 4))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))
    first_parent = frontier.open[Coordinate(1, 0)]
    settle_and_expand(frontier, (1, 0))
    settle_and_expand(frontier, (1, 1))

    # (1,1) is closed at length 2; reaching it from (0,1) also gives 2
    settle_and_expand(frontier, (0, 1))

    node = frontier.node(frontier.closed[Coordinate(1, 1)])
    assert node.parent == first_parent
    assert frontier.relaxations == 0


def test_open_node_replaced_by_shorter_path(make_grid):
    """An open entry found again more cheaply gets the new parent and moves to the back."""
    frontier = Frontier(make_grid(5), Coordinate(4, 4))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))

    for xy in [(1, 0), (2, 0), (2, 1), (2, 2), (1, 2)]:
        settle_and_expand(frontier, xy)
    detour = frontier.open[Coordinate(0, 2)]
    assert frontier.path_length(detour) == 6

    shortcut = frontier.open[Coordinate(0, 1)]
    settle_and_expand(frontier, (0, 1))

    assert frontier.relaxations == 1
    assert frontier.open[Coordinate(0, 2)] == detour
    assert frontier.node(detour).parent == shortcut
    assert frontier.path_length(detour) == 2
    assert list(frontier.open)[-1] == (0, 2)


def test_open_node_kept_when_not_shorter(make_grid):
    frontier = Frontier(make_grid(3), Coordinate(2, 2))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))
    settle_and_expand(frontier, (1, 0))
    before = list(frontier.open.items())

    # (1,1) is open at length 2; from (0,1) it would be 2 as well
    settle_and_expand(frontier, (0, 1))

    assert list(frontier.open.items())[:len(before) - 1] == before[1:]
    assert frontier.relaxations == 0


def test_cell_never_in_both_sets(make_grid):
    frontier = Frontier(make_grid(4), Coordinate(3, 3))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))
    for _ in range(8):
        if not frontier.open:
            break
        settle_and_expand(frontier, next(iter(frontier.open)))
        assert not set(frontier.open) & set(frontier.closed)


def test_clear(make_grid):
    frontier = Frontier(make_grid(3), Coordinate(2, 2))
    frontier.expand(frontier.add_root(Coordinate(0, 0)))

    frontier.clear()

    assert frontier.arena == [] and frontier.open == {} and frontier.closed == {}
    assert frontier.relaxations == 0
