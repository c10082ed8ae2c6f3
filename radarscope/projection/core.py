# radarscope/projection/core.py
"""
Linear mapping between geographic coordinates and canvas pixels.

No distortion correction is applied: the covered range is a few tens of
nautical miles, where a flat-earth mapping is good enough for a radar scope.
Screen rows grow downward while latitude grows northward, so the y axis is
inverted.
"""
from typing import Tuple

import numpy as np

from ..constants.units import UnitConstants
from .data_models import GeoBounds
from .exceptions import InvalidCanvasError

class GeoProjection:
    """Maps (lat, lon) to (x, y) pixels and back for a fixed box and canvas."""

    def __init__(self, bounds: GeoBounds, width: float, height: float):
        if width <= 0 or height <= 0:
            raise InvalidCanvasError(width, height)
        self.bounds = bounds
        self.width = float(width)
        self.height = float(height)

    def to_pixel(self, lat: float, lon: float) -> Tuple[float, float]:
        b = self.bounds
        x = (lon - b.min_lon) / b.lon_span * self.width
        y = (b.max_lat - lat) / b.lat_span * self.height
        return x, y

    def to_geo(self, x: float, y: float) -> Tuple[float, float]:
        b = self.bounds
        lon = x / self.width * b.lon_span + b.min_lon
        lat = b.max_lat - y / self.height * b.lat_span
        return lat, lon

    def to_pixel_array(self, lats, lons) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorised to_pixel for many points at once."""
        b = self.bounds
        lats = np.asarray(lats, dtype=float)
        lons = np.asarray(lons, dtype=float)
        xs = (lons - b.min_lon) / b.lon_span * self.width
        ys = (b.max_lat - lats) / b.lat_span * self.height
        return xs, ys

    @property
    def km_per_pixel(self) -> float:
        """Ground distance covered by one pixel, measured on the latitude axis."""
        return self.bounds.lat_span * UnitConstants.KM_PER_DEGREE_LAT / self.height

    def km_to_pixels(self, distance_km: float) -> float:
        return distance_km / self.km_per_pixel

    def resized(self, width: float, height: float) -> 'GeoProjection':
        """Returns a projection of the same bounds onto a new canvas size."""
        return GeoProjection(self.bounds, width, height)

    def __repr__(self) -> str:
        return f"GeoProjection({self.bounds!r}, width={self.width}, height={self.height})"
