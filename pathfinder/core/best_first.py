# pathfinder/core/best_first.py
#!/usr/bin/env python3
"""
Best-first search: expand the open node with the lowest priority
(path length + weighted squared distance to the goal).

Tie-breaking: among equal priorities the earliest inserted open entry wins.
"""

from dataclasses import dataclass
from typing import Optional

from pathfinder.core.engine import StepEngine


@dataclass
class BestFirstEngine(StepEngine):
    name: str = "Best-first"

    def _select(self) -> Optional[int]:
        if not self.frontier.open:
            return None
        # min() keeps the first of equal keys, i.e. insertion order
        return min(self.frontier.open.values(), key=self.frontier.priority)
