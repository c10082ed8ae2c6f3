# radarscope/projection/data_models.py
"""
Defines the geographic bounding box that every projection is built on.
The box is computed once at startup and never changes afterwards.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from ..constants.units import UnitConstants
from .exceptions import DegenerateBoundsError

@dataclass(frozen=True)
class GeoBounds:
    """A latitude/longitude rectangle in decimal degrees."""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self):
        if not self.min_lat < self.max_lat:
            raise DegenerateBoundsError('latitude', self.min_lat, self.max_lat)
        if not self.min_lon < self.max_lon:
            raise DegenerateBoundsError('longitude', self.min_lon, self.max_lon)

    @classmethod
    def from_center(cls, lat: float, lon: float, range_nm: float) -> 'GeoBounds':
        """
        Builds the box that extends range_nm from the center in every direction.
        Uses 111.32 km per degree of latitude and scales longitude by the cosine
        of the center latitude, which is adequate away from the poles.
        """
        range_km = range_nm * UnitConstants.NM_TO_KM
        lat_delta = range_km / UnitConstants.KM_PER_DEGREE_LAT
        lon_delta = range_km / (UnitConstants.KM_PER_DEGREE_LAT * math.cos(math.radians(lat)))
        return cls(
            min_lat=lat - lat_delta,
            max_lat=lat + lat_delta,
            min_lon=lon - lon_delta,
            max_lon=lon + lon_delta
        )

    @classmethod
    def from_corners(cls, lat1: float, lon1: float, lat2: float, lon2: float) -> 'GeoBounds':
        """Builds the box spanned by two opposite corners, in any order."""
        return cls(
            min_lat=min(lat1, lat2),
            max_lat=max(lat1, lat2),
            min_lon=min(lon1, lon2),
            max_lon=max(lon1, lon2)
        )

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    @property
    def center(self) -> Tuple[float, float]:
        return (self.min_lat + self.max_lat) / 2, (self.min_lon + self.max_lon) / 2

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon
