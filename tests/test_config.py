"""Tests for settings resolution."""

import pytest

from pathfinder.core.config import DEFAULT_GRID_SIZE, SearchConfig, load_config
from pathfinder.core.types import Algorithm


def test_defaults():
    cfg = load_config([], {})

    assert cfg.grid_size == DEFAULT_GRID_SIZE
    assert cfg.delay_ms == 75
    assert cfg.algorithm is Algorithm.BEST_FIRST
    assert cfg.flash_toggles == 4


def test_environment():
    env = {"PATHFINDER_GRID_SIZE": "12", "PATHFINDER_DELAY_MS": "0", "PATHFINDER_ALGO": "insertion_order"}
    cfg = load_config([], env)

    assert cfg.grid_size == 12
    assert cfg.delay_ms == 0
    assert cfg.algorithm is Algorithm.INSERTION_ORDER


def test_cli_overrides_environment():
    env = {"PATHFINDER_GRID_SIZE": "12", "PATHFINDER_ALGO": "best_first"}
    cfg = load_config(["--size=20", "--algo=bfs", "--unrelated"], env)

    assert cfg.grid_size == 20
    assert cfg.algorithm is Algorithm.INSERTION_ORDER


@pytest.mark.parametrize("argv", [["--size=0"], ["--size=big"], ["--delay=-5"], ["--algo=dfs"]])
def test_invalid_values(argv):
    with pytest.raises(ValueError):
        load_config(argv, {})


def test_search_config_validates():
    with pytest.raises(ValueError):
        SearchConfig(grid_size=-1)


def test_algorithm_parse_aliases():
    assert Algorithm.parse("A*") is Algorithm.BEST_FIRST
    assert Algorithm.parse("Insertion-Order") is Algorithm.INSERTION_ORDER
