# pathfinder/core/insertion_order.py
#!/usr/bin/env python3
"""
Insertion-order search: always expand the earliest discovered open node.

This is breadth-first exploration, not a cost-ordered search; on unit-cost
grids it still finds shortest routes.
"""

from dataclasses import dataclass
from typing import Optional

from pathfinder.core.engine import StepEngine


@dataclass
class InsertionOrderEngine(StepEngine):
    name: str = "Insertion order"

    def _select(self) -> Optional[int]:
        return next(iter(self.frontier.open.values()), None)
