# pathfinder/core/config.py
#!/usr/bin/env python3
"""
Run settings.

Resolution order (later wins):
- defaults below
- ENV: PATHFINDER_GRID_SIZE, PATHFINDER_DELAY_MS, PATHFINDER_ALGO
- CLI: --size=N, --delay=MS, --algo=best_first|insertion_order
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from pathfinder.core.grid import WALL_DENSITY
from pathfinder.core.pacing import DECAY_CHANCE, DEFAULT_DELAY_MS
from pathfinder.core.types import Algorithm

DEFAULT_GRID_SIZE = 30
ROUTE_DELAY_MS = 60
FLASH_DELAY_MS = 150
FLASH_TOGGLES = 4


@dataclass
class SearchConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    delay_ms: int = DEFAULT_DELAY_MS
    decay_chance: float = DECAY_CHANCE
    route_delay_ms: int = ROUTE_DELAY_MS
    flash_delay_ms: int = FLASH_DELAY_MS
    flash_toggles: int = FLASH_TOGGLES
    wall_density: float = WALL_DENSITY
    algorithm: Algorithm = Algorithm.BEST_FIRST

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid size must be positive, got {self.grid_size}")
        if self.delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {self.delay_ms}")


def _int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


def load_config(argv: Optional[Sequence[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> SearchConfig:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    size = environ.get("PATHFINDER_GRID_SIZE")
    delay = environ.get("PATHFINDER_DELAY_MS")
    algo = environ.get("PATHFINDER_ALGO")
    for arg in argv:
        if arg.startswith("--size="):
            size = arg.split("=", 1)[1]
        elif arg.startswith("--delay="):
            delay = arg.split("=", 1)[1]
        elif arg.startswith("--algo="):
            algo = arg.split("=", 1)[1]

    cfg = SearchConfig()
    if size is not None:
        cfg.grid_size = _int(size, "grid size")
    if delay is not None:
        cfg.delay_ms = _int(delay, "delay")
    if algo:
        cfg.algorithm = Algorithm.parse(algo)
    cfg.__post_init__()
    return cfg
