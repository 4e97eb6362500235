# pathfinder/core/pacing.py
#!/usr/bin/env python3
"""Visual step delay; cosmetic only, never affects the search result."""

import random
from dataclasses import dataclass, field

DEFAULT_DELAY_MS = 75
DECAY_CHANCE = 0.35


@dataclass
class Pacing:
    delay_ms: int = DEFAULT_DELAY_MS
    decay_chance: float = DECAY_CHANCE
    rng: random.Random = field(default_factory=random.Random)

    def after_step(self, receding: bool) -> int:
        """Shave a millisecond now and then while the search drifts away from the goal."""
        if receding and self.delay_ms > 0 and self.rng.random() < self.decay_chance:
            self.delay_ms -= 1
        return self.delay_ms
