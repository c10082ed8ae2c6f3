# radarscope/aircraft/systems/altitude.py

import math

from .axis import CaptureAxis, coerce_command
from ..data_models import AxisState
from ..exceptions import InvalidCommandError
from ...constants.units import UnitConstants

class AltitudeSystem(CaptureAxis):
    """
    Climbs or descends toward the assigned altitude at a constant vertical rate.
    The vertical speed is derived: +/- the rate while capturing, 0 otherwise.
    """

    def __init__(self, altitude_ft: float, vertical_rate_fpm: float):
        super().__init__(altitude_ft, vertical_rate_fpm / UnitConstants.SECONDS_PER_MINUTE)
        self.vertical_rate_fpm = vertical_rate_fpm
        self.vertical_speed_fpm = 0.0

    def set_target(self, value) -> None:
        altitude = coerce_command('altitude', value)
        if altitude < 0:
            raise InvalidCommandError('altitude', value, "Altitude cannot be negative")
        self.target = altitude

    def step(self, dt: float) -> float:
        change = super().step(dt)
        if self.state is AxisState.CAPTURED:
            self.vertical_speed_fpm = 0.0
        elif change:
            self.vertical_speed_fpm = math.copysign(self.vertical_rate_fpm, change)
        return change
