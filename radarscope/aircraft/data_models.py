# radarscope/aircraft/data_models.py

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from .constants import KinematicsConstants

class AxisState(Enum):
    """Capture state of a single controlled axis."""
    CAPTURING = "capturing"
    CAPTURED = "captured"

@dataclass(frozen=True)
class PerformanceProfile:
    """Rates at which an aircraft seeks its controller-assigned targets."""
    turn_rate_deg_s: float = KinematicsConstants.TURN_RATE_DEG_S
    acceleration_kt_s: float = KinematicsConstants.ACCELERATION_KT_S
    vertical_rate_fpm: float = KinematicsConstants.VERTICAL_RATE_FPM
    min_speed_kt: float = KinematicsConstants.MIN_SPEED_KT

@dataclass(frozen=True)
class AircraftSnapshot:
    """Read-only copy of an aircraft's true, target and display state."""
    callsign: str
    lat: float
    lon: float
    heading_deg: float
    altitude_ft: float
    speed_kt: float
    vertical_speed_fpm: float
    target_heading_deg: float
    target_altitude_ft: float
    target_speed_kt: float
    display_x: Optional[float]
    display_y: Optional[float]
    display_heading_deg: float
