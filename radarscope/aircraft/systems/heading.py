# radarscope/aircraft/systems/heading.py

from .axis import CaptureAxis, coerce_command

def normalize_heading(degrees: float) -> float:
    """Wraps any angle into [0, 360)."""
    heading = degrees % 360.0
    return 0.0 if heading == 360.0 else heading

def heading_difference(current: float, target: float) -> float:
    """Signed shortest turn from current to target, in (-180, 180]."""
    diff = (target - current) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff

class HeadingSystem(CaptureAxis):
    """Turns toward the assigned heading at a fixed rate, always the short way round"""

    def __init__(self, heading_deg: float, turn_rate_deg_s: float):
        super().__init__(normalize_heading(heading_deg), turn_rate_deg_s)

    def set_target(self, value) -> None:
        self.target = normalize_heading(coerce_command('heading', value))

    def _difference(self) -> float:
        return heading_difference(self.current, self.target)

    def _normalize(self, value: float) -> float:
        return normalize_heading(value)
