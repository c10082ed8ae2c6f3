# radarscope/nav_geometry/utils/coordinates.py
"""
Distance and direction helpers shared by the geometry resolver and the scene.
"""
import numpy as np
from typing import Tuple

from ...constants.units import UnitConstants

class CoordinateCalculations:
    """A collection of static methods for coordinate-based calculations."""

    @staticmethod
    def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculates the Haversine distance between two points in kilometers."""
        R = UnitConstants.EARTH_RADIUS_KM
        d_lat = np.radians(lat2 - lat1)
        d_lon = np.radians(lon2 - lon1)
        a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
        c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
        return float(R * c)

    @staticmethod
    def screen_offset(bearing_deg: float, length_px: float) -> Tuple[float, float]:
        """
        Pixel offset of a line of the given length pointing along a true bearing.
        North is up on the scope, so y decreases as the bearing points north.
        """
        bearing_rad = np.radians(bearing_deg)
        return float(np.sin(bearing_rad) * length_px), float(-np.cos(bearing_rad) * length_px)

    @staticmethod
    def point_along(x: float, y: float, bearing_deg: float, length_px: float) -> Tuple[float, float]:
        dx, dy = CoordinateCalculations.screen_offset(bearing_deg, length_px)
        return x + dx, y + dy
