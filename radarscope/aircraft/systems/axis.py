# radarscope/aircraft/systems/axis.py
"""
Shared capture logic for the three controller-commanded axes.

Each axis holds a true value and a target. Every update moves the true value
toward the target by at most rate * dt and snaps exactly onto the target once
the remaining difference is smaller than one step, so an axis never overshoots
or oscillates around its target.
"""
import math

from ..data_models import AxisState
from ..exceptions import InvalidCommandError

class CaptureAxis:
    """One true/target pair that closes at a fixed rate per second."""

    def __init__(self, value: float, rate_per_s: float):
        self.current = float(value)
        self.target = float(value)
        self.rate_per_s = rate_per_s

    @property
    def state(self) -> AxisState:
        return AxisState.CAPTURED if self.current == self.target else AxisState.CAPTURING

    def set_target(self, value: float) -> None:
        self.target = float(value)

    def _difference(self) -> float:
        """Signed distance still to travel from current to target."""
        return self.target - self.current

    def _normalize(self, value: float) -> float:
        return value

    def step(self, dt: float) -> float:
        """Advances the axis by dt seconds and returns the signed change applied."""
        if self.current == self.target or dt <= 0:
            return 0.0

        max_step = self.rate_per_s * dt
        diff = self._difference()
        if abs(diff) < max_step:
            self.current = self.target
            return diff

        change = math.copysign(max_step, diff)
        self.current = self._normalize(self.current + change)
        return change

def coerce_command(field: str, value) -> float:
    """Converts controller input to a finite float or raises InvalidCommandError."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidCommandError(field, value) from None
    if not math.isfinite(number):
        raise InvalidCommandError(field, value)
    return number
