# radarscope/simulation/config.py
"""
Configuration for one radar simulation session. Defaults describe the Milan
terminal area with Linate RW35 and Malpensa RW35R active.
"""
import json
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

from ..aircraft.constants import KinematicsConstants
from ..aircraft.data_models import PerformanceProfile
from ..nav_geometry.constants import NavGeometryConstants
from ..projection.data_models import GeoBounds
from ..projection.exceptions import DegenerateBoundsError
from .exceptions import ConfigurationError

def _require_number(name: str, value: Any) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise ConfigurationError(name, f"Must be a finite number, got {value!r}")
    return value

def _parse_corners(corners: Any) -> Tuple[float, float, float, float]:
    if isinstance(corners, (str, bytes)):
        raise ConfigurationError('corners', f"Expected (lat1, lon1, lat2, lon2), got {corners!r}")
    try:
        values = tuple(float(c) for c in corners)
    except (TypeError, ValueError) as e:
        raise ConfigurationError('corners', f"Expected four numbers ({e})") from e
    if len(values) != 4 or not all(math.isfinite(v) for v in values):
        raise ConfigurationError('corners', f"Expected (lat1, lon1, lat2, lon2), got {corners!r}")
    return values

@dataclass
class SimulationConfig:
    """Configuration parameters for a radar simulation."""
    center_lat: float = 45.44944444
    center_lon: float = 9.27833333
    range_nm: float = 30.0
    corners: Optional[Tuple[float, float, float, float]] = None   # lat1, lon1, lat2, lon2; overrides center/range
    active_airports: Optional[Dict[str, List[str]]] = field(default_factory=lambda: {
        "LIML": ["RW35"],
        "LIMC": ["RW35R"]
    })
    sweep_interval_ms: float = 2000.0
    turn_rate_deg_s: float = KinematicsConstants.TURN_RATE_DEG_S
    acceleration_kt_s: float = KinematicsConstants.ACCELERATION_KT_S
    vertical_rate_fpm: float = KinematicsConstants.VERTICAL_RATE_FPM
    min_speed_kt: float = KinematicsConstants.MIN_SPEED_KT
    canvas_width: int = 800
    canvas_height: int = 800
    vector_seconds: float = KinematicsConstants.VECTOR_SECONDS
    ils_fallback_nm: float = NavGeometryConstants.ILS_FALLBACK_NM
    navdb_path: Optional[str] = None

    def __post_init__(self):
        for name in ('range_nm', 'sweep_interval_ms', 'turn_rate_deg_s', 'acceleration_kt_s',
                     'vertical_rate_fpm', 'canvas_width', 'canvas_height', 'vector_seconds', 'ils_fallback_nm'):
            if _require_number(name, getattr(self, name)) <= 0:
                raise ConfigurationError(name, f"Must be a positive number, got {getattr(self, name)!r}")
        _require_number('center_lat', self.center_lat)
        _require_number('center_lon', self.center_lon)
        if _require_number('min_speed_kt', self.min_speed_kt) < 0:
            raise ConfigurationError('min_speed_kt', f"Cannot be negative, got {self.min_speed_kt!r}")
        if self.corners is not None:
            self.corners = _parse_corners(self.corners)
        if self.active_airports is not None and not isinstance(self.active_airports, dict):
            raise ConfigurationError('active_airports', "Expected a mapping of airport -> runway identifiers")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(", ".join(unknown), "Unknown configuration keys")
        return cls(**values)

    @classmethod
    def from_json(cls, path: str) -> 'SimulationConfig':
        try:
            with open(path, 'r') as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(path, f"Cannot read configuration file ({e})") from e
        if not isinstance(values, dict):
            raise ConfigurationError(path, "Configuration file must contain a JSON object")
        return cls.from_dict(values)

    def build_bounds(self) -> GeoBounds:
        """Bounding box from the explicit corners, or from center and range."""
        try:
            if self.corners is not None:
                return GeoBounds.from_corners(*self.corners)
            return GeoBounds.from_center(self.center_lat, self.center_lon, self.range_nm)
        except DegenerateBoundsError as e:
            raise ConfigurationError('corners' if self.corners else 'range_nm', str(e)) from e

    def performance_profile(self) -> PerformanceProfile:
        return PerformanceProfile(
            turn_rate_deg_s=self.turn_rate_deg_s,
            acceleration_kt_s=self.acceleration_kt_s,
            vertical_rate_fpm=self.vertical_rate_fpm,
            min_speed_kt=self.min_speed_kt
        )
