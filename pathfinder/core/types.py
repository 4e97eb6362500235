# pathfinder/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Dict, Any


class Coordinate(NamedTuple):
    x: int  # column
    y: int  # row


class Role(Enum):
    WALL = "wall"
    START = "start"
    END = "end"


class Algorithm(Enum):
    BEST_FIRST = "best_first"
    INSERTION_ORDER = "insertion_order"

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        key = name.strip().lower().replace("-", "_")
        aliases = {"astar": "best_first", "a*": "best_first", "bfs": "insertion_order"}
        key = aliases.get(key, key)
        for algo in cls:
            if algo.value == key:
                return algo
        raise ValueError(f"Unknown algorithm: {name!r}")


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self in (RunState.SUCCEEDED, RunState.FAILED, RunState.CANCELLED)


class FailureReason(Enum):
    INVALID_ENDPOINTS = "invalid endpoints"
    NO_ROUTE = "no route exists"


class CancelFlag:
    """Cooperative reset signal, polled by the engine at step boundaries."""

    def __init__(self):
        self.requested = False

    def set(self) -> None:
        self.requested = True

    def clear(self) -> None:
        self.requested = False


@dataclass
class StepResult:
    status: RunState
    reason: Optional[FailureReason] = None
    opened: List[Coordinate] = field(default_factory=list)
    closed: List[Coordinate] = field(default_factory=list)
    current: Optional[Coordinate] = None
    route: Optional[List[Coordinate]] = None
    receding: bool = False        # current node is farther from the goal than its parent
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RunOutcome:
    state: RunState
    reason: Optional[FailureReason] = None
    route_length: Optional[int] = None
    steps: int = 0
