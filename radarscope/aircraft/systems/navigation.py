# radarscope/aircraft/systems/navigation.py
"""
Great-circle position update. Headings are true, so the aircraft is moved
along the sphere rather than across the screen.
"""
import math
from typing import Tuple

from ...constants.units import UnitConstants

def advance_position(lat: float, lon: float, heading_deg: float, distance_km: float) -> Tuple[float, float]:
    """Destination reached from (lat, lon) after distance_km on the given true heading."""
    R = UnitConstants.EARTH_RADIUS_KM
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    bearing_rad = math.radians(heading_deg)
    angular = distance_km / R

    new_lat_rad = math.asin(math.sin(lat_rad) * math.cos(angular) +
                            math.cos(lat_rad) * math.sin(angular) * math.cos(bearing_rad))
    new_lon_rad = lon_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular) * math.cos(lat_rad),
                                       math.cos(angular) - math.sin(lat_rad) * math.sin(new_lat_rad))
    return math.degrees(new_lat_rad), math.degrees(new_lon_rad)

def distance_flown_km(speed_kt: float, dt: float) -> float:
    return speed_kt * UnitConstants.KNOTS_TO_KPS * dt

class NavigationSystem:
    """Owns the aircraft's true geographic position"""

    def __init__(self, lat: float, lon: float):
        self.lat = float(lat)
        self.lon = float(lon)

    def update(self, heading_deg: float, speed_kt: float, dt: float) -> Tuple[float, float]:
        if dt > 0:
            self.lat, self.lon = advance_position(self.lat, self.lon, heading_deg, distance_flown_km(speed_kt, dt))
        return self.lat, self.lon
