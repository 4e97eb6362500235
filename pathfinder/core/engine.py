# pathfinder/core/engine.py
#!/usr/bin/env python3
"""
Step engine — one node selection per step() so the host can animate.

API used by the controller and the viewer:
- init(grid) - begin() - step() -> StepResult - reset()

Variants only differ in how the next node is picked from the open set;
see best_first.py and insertion_order.py.

States: idle -> running -> succeeded | failed | cancelled. Terminal states
stick until the next begin().
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from pathfinder.core.frontier import Frontier
from pathfinder.core.grid import Grid
from pathfinder.core.route import Route, build_route
from pathfinder.core.types import CancelFlag, Coordinate, FailureReason, RunState, StepResult

log = logging.getLogger(__name__)


@dataclass
class StepEngine:
    name: str = "engine"

    grid: Optional[Grid] = None
    cancel: CancelFlag = field(default_factory=CancelFlag)
    notify: Optional[Callable[[], None]] = None

    # Internal state
    frontier: Optional[Frontier] = None
    state: RunState = RunState.IDLE
    reason: Optional[FailureReason] = None
    start_cell: Optional[Coordinate] = None
    goal_cell: Optional[Coordinate] = None
    route: Optional[Route] = None
    popped_count: int = 0
    expanded_count: int = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Drop all run state and go back to idle. Cell flags are not touched."""
        if self.frontier is not None:
            self.frontier.clear()
        self.frontier = None
        self.state = RunState.IDLE
        self.reason = None
        self.start_cell = None
        self.goal_cell = None
        self.route = None
        self.popped_count = 0
        self.expanded_count = 0

    def begin(self) -> StepResult:
        """Validate endpoints, seed the open set from the start cell."""
        if self.grid is None:
            return StepResult(status=RunState.IDLE, metrics=self._metrics())

        self.reset()
        self.grid.reset_path()

        starts, ends = self.grid.starts(), self.grid.ends()
        if len(starts) != 1 or len(ends) != 1:
            log.info("%s: %d start(s), %d end(s); not starting", self.name, len(starts), len(ends))
            return self._fail(FailureReason.INVALID_ENDPOINTS)

        self.start_cell = starts[0].coordinate
        self.goal_cell = ends[0].coordinate
        self.frontier = Frontier(self.grid, self.goal_cell)
        root = self.frontier.add_root(self.start_cell)
        log.info("%s: searching %s -> %s", self.name, tuple(self.start_cell), tuple(self.goal_cell))

        if self.start_cell == self.goal_cell:
            return self._succeed(root)

        opened = self.frontier.expand(root)
        self.state = RunState.RUNNING
        self._paint_lists()
        self._notify()
        return StepResult(
            status=RunState.RUNNING,
            opened=opened,
            closed=[self.start_cell],
            current=self.start_cell,
            metrics=self._metrics(),
        )

    # -------------------- selection (per variant) --------------------

    def _select(self) -> Optional[int]:
        """Node id to expand next, or None when the open set is empty."""
        raise NotImplementedError

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE step:
          - Honour a pending reset.
          - Pick the next open node; none left means no route.
          - If it is the goal, build the route and finish.
          - Else settle it and admit its neighbours.
        """
        if self.state is RunState.IDLE:
            return StepResult(status=RunState.IDLE, metrics=self._metrics())

        if self.state.terminal:
            return StepResult(
                status=self.state,
                reason=self.reason,
                route=self.route.coordinates if self.route else None,
                metrics=self._metrics(),
            )

        if self.cancel.requested:
            return self._cancel()

        node_id = self._select()
        if node_id is None:
            return self._fail(FailureReason.NO_ROUTE)

        self.popped_count += 1
        node = self.frontier.node(node_id)
        receding = False
        if node.parent is not None:
            receding = node.heuristic_distance > self.frontier.node(node.parent).heuristic_distance

        if node.coordinate == self.goal_cell:
            result = self._succeed(node_id)
            result.receding = receding
            return result

        self.frontier.settle(node_id)
        opened: List[Coordinate] = self.frontier.expand(node_id)
        self.expanded_count += 1

        self._paint_lists()
        self._notify()
        return StepResult(
            status=RunState.RUNNING,
            opened=opened,
            closed=[node.coordinate],
            current=node.coordinate,
            receding=receding,
            metrics=self._metrics(),
        )

    # -------------------- transitions --------------------

    def _succeed(self, node_id: int) -> StepResult:
        self.state = RunState.SUCCEEDED
        self.route = build_route(self.frontier, node_id)
        log.info("%s: route found, length %d after %d expansions",
                 self.name, self.route.length, self.expanded_count)
        return StepResult(
            status=RunState.SUCCEEDED,
            current=self.goal_cell,
            route=self.route.coordinates,
            metrics=self._metrics(),
        )

    def _fail(self, reason: FailureReason) -> StepResult:
        self.state = RunState.FAILED
        self.reason = reason
        log.info("%s: failed (%s)", self.name, reason.value)
        return StepResult(status=RunState.FAILED, reason=reason, metrics=self._metrics())

    def _cancel(self) -> StepResult:
        if self.frontier is not None:
            self.frontier.clear()
        self.grid.reset_path()
        self.state = RunState.CANCELLED
        log.info("%s: cancelled after %d expansions", self.name, self.expanded_count)
        self._notify()
        return StepResult(status=RunState.CANCELLED, metrics=self._metrics())

    # -------------------- helpers --------------------

    def _paint_lists(self) -> None:
        for c in self.frontier.closed:
            self.grid.cell_at(c).mark_closed()
        for c in self.frontier.open:
            self.grid.cell_at(c).mark_open()

    def _notify(self) -> None:
        if self.notify is not None:
            self.notify()

    def _metrics(self) -> dict:
        f = self.frontier
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "expanded": self.expanded_count,
            "open_size": len(f.open) if f else 0,
            "closed_count": len(f.closed) if f else 0,
            "relaxations": f.relaxations if f else 0,
            "route_len": self.route.length if self.route else 0,
        }
