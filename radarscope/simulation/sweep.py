# radarscope/simulation/sweep.py
"""
Radar sweep timing.

A rotating antenna only reports each target once per revolution. The
scheduler accumulates elapsed time and signals a sweep each time a full
interval has passed; the interval is subtracted rather than the accumulator
zeroed, so the sweep cadence does not drift with the frame rate.
"""
import math

class SweepScheduler:
    """Signals at most one sweep per advance, carrying the remainder over."""

    def __init__(self, interval_ms: float = 2000.0):
        self.interval_ms = interval_ms
        self.accumulated_ms = 0.0
        self.sweep_count = 0

    def advance(self, delta_ms: float) -> bool:
        """Adds elapsed time and returns True when a sweep is due. Non-finite deltas are ignored."""
        if delta_ms > 0 and math.isfinite(delta_ms):
            self.accumulated_ms += delta_ms
        if self.accumulated_ms >= self.interval_ms:
            self.accumulated_ms -= self.interval_ms
            self.sweep_count += 1
            return True
        return False

    @property
    def time_to_next_sweep_ms(self) -> float:
        return max(0.0, self.interval_ms - self.accumulated_ms)
