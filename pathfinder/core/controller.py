# pathfinder/core/controller.py
#!/usr/bin/env python3
"""
Run controller: owns the grid for the duration of a run.

- iter_search(algo) is the run as a generator. It yields the delay (ms) the
  host should wait after every repaint, so a GUI can pull one step per tick.
- run_search(algo) drives the same generator to the end, sleeping in between.
- request_reset() is the cooperative cancel; the engine sees it at the next
  step boundary.
"""

import logging
import random
import time
from typing import Callable, Dict, Iterator, Optional, Type, Union

from pathfinder.core.best_first import BestFirstEngine
from pathfinder.core.config import SearchConfig
from pathfinder.core.engine import StepEngine
from pathfinder.core.grid import Grid
from pathfinder.core.insertion_order import InsertionOrderEngine
from pathfinder.core.pacing import Pacing
from pathfinder.core.route import mark_route
from pathfinder.core.types import Algorithm, CancelFlag, RunOutcome, RunState, StepResult

log = logging.getLogger(__name__)

ENGINES: Dict[Algorithm, Type[StepEngine]] = {
    Algorithm.BEST_FIRST: BestFirstEngine,
    Algorithm.INSERTION_ORDER: InsertionOrderEngine,
}


def make_engine(algorithm: Algorithm, cancel: Optional[CancelFlag] = None,
                notify: Optional[Callable[[], None]] = None) -> StepEngine:
    engine_cls = ENGINES[algorithm]
    return engine_cls(cancel=cancel or CancelFlag(), notify=notify)


class RunController:
    def __init__(self, grid: Grid,
                 notify: Optional[Callable[[], None]] = None,
                 config: Optional[SearchConfig] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 rng: Optional[random.Random] = None):
        self.grid = grid
        self.config = config or SearchConfig()
        self.cancel = CancelFlag()
        self.engine: Optional[StepEngine] = None
        self.pacing = Pacing(self.config.delay_ms, self.config.decay_chance, rng or random.Random())
        self.outcome = RunOutcome(RunState.IDLE)
        self.last_result: Optional[StepResult] = None
        self.active = False
        self._notify_cb = notify
        self._sleep = sleep

    @property
    def state(self) -> RunState:
        if self.active and self.engine is not None:
            return self.engine.state
        return self.outcome.state

    def _notify(self) -> None:
        if self._notify_cb is not None:
            self._notify_cb()

    # -------------------- running --------------------

    def run_search(self, algorithm: Union[Algorithm, str]) -> RunOutcome:
        """Run to a terminal state, sleeping between repaints."""
        for delay_ms in self.iter_search(algorithm):
            if delay_ms > 0:
                self._sleep(delay_ms / 1000.0)
        return self.outcome

    def iter_search(self, algorithm: Union[Algorithm, str]) -> Iterator[int]:
        if isinstance(algorithm, str):
            algorithm = Algorithm.parse(algorithm)
        if self.active:
            raise RuntimeError("A search is already running on this grid")

        self.active = True
        self.cancel.clear()
        self.grid.highlighted = False
        self.outcome = RunOutcome(RunState.RUNNING)
        self.pacing = Pacing(self.config.delay_ms, self.config.decay_chance, self.pacing.rng)
        self.engine = make_engine(algorithm, cancel=self.cancel, notify=self._notify)
        self.engine.init(self.grid)

        try:
            result = self.engine.begin()
            self.last_result = result
            if result.status is RunState.RUNNING:
                yield self.pacing.delay_ms

            while result.status is RunState.RUNNING:
                result = self.engine.step()
                self.last_result = result
                delay_ms = self.pacing.after_step(result.receding)
                if result.status is RunState.RUNNING:
                    yield delay_ms

            outcome = RunOutcome(
                state=result.status,
                reason=result.reason,
                route_length=self.engine.route.length if self.engine.route else None,
                steps=self.engine.expanded_count,
            )

            if result.status is RunState.SUCCEEDED:
                for _ in mark_route(self.grid, self.engine.route):
                    self._notify()
                    yield self.config.route_delay_ms
                    if self.cancel.requested:
                        self.grid.reset_path()
                        self._notify()
                        outcome = RunOutcome(RunState.CANCELLED, steps=outcome.steps)
                        break
            elif result.status is RunState.FAILED:
                yield from self._flash_failure()

            self.outcome = outcome
            log.info("run finished: %s%s", outcome.state.value,
                     f" ({outcome.reason.value})" if outcome.reason else "")
        finally:
            self.active = False
            self.cancel.clear()

    def _flash_failure(self) -> Iterator[int]:
        """Blink the whole grid; skipped or cut short while a reset is pending."""
        for _ in range(self.config.flash_toggles):
            if self.cancel.requested:
                break
            self.grid.highlighted = not self.grid.highlighted
            self._notify()
            yield self.config.flash_delay_ms
        if self.cancel.requested:
            self.grid.reset_path()
        self.grid.highlighted = False
        self._notify()

    # -------------------- reset --------------------

    def request_reset(self) -> None:
        """Cancel an active run at its next step, or clear the grid right away."""
        if self.active:
            log.debug("reset requested during run")
            self.cancel.set()
            return
        if self.engine is not None:
            self.engine.reset()
        self.grid.reset_path()
        self.cancel.clear()
        self.outcome = RunOutcome(RunState.IDLE)
        self.last_result = None
        self._notify()
