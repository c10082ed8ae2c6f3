# radarscope/simulation/clock.py

import math
import logging
from typing import Optional

logger = logging.getLogger(__name__)

class SimulationClock:
    """Turns the frame callback's timestamps into elapsed milliseconds."""

    def __init__(self):
        self.last_ms: Optional[float] = None

    def tick(self, now_ms: float) -> float:
        """
        Returns the milliseconds elapsed since the previous tick.
        The first tick only starts the clock and returns 0. A timestamp earlier
        than the previous one also returns 0 and restarts from it. A non-finite
        timestamp returns 0 and is discarded.
        """
        if not math.isfinite(now_ms):
            logger.warning(f"Ignoring non-finite frame timestamp {now_ms!r}")
            return 0.0
        if self.last_ms is None:
            self.last_ms = now_ms
            return 0.0
        delta_ms = now_ms - self.last_ms
        self.last_ms = now_ms
        if delta_ms < 0:
            logger.warning(f"Clock went backwards by {-delta_ms:.1f} ms; frame skipped")
            return 0.0
        return delta_ms

    def reset(self) -> None:
        self.last_ms = None
