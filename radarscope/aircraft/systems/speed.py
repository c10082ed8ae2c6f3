# radarscope/aircraft/systems/speed.py

from .axis import CaptureAxis, coerce_command

class SpeedSystem(CaptureAxis):
    """Accelerates or decelerates toward the assigned speed"""

    def __init__(self, speed_kt: float, acceleration_kt_s: float, min_speed_kt: float):
        super().__init__(speed_kt, acceleration_kt_s)
        self.min_speed_kt = min_speed_kt

    def set_target(self, value) -> None:
        """Raises commanded speeds below the operational minimum to that minimum."""
        self.target = max(self.min_speed_kt, coerce_command('speed', value))
