# radarscope/nav_geometry/data_models.py
"""
Defines the drawable navigation geometry derived from the loaded records.
Everything here is in pixels of the projection it was resolved against and
is thrown away whenever the dataset, the canvas size or the bounds change.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Point = Tuple[float, float]

class WaypointSymbol(Enum):
    TRIANGLE = "triangle"
    STAR = "star"
    NONE = "none"

@dataclass(frozen=True)
class RenderedRunway:
    """One physical pavement, drawn once from threshold to threshold."""
    airport_id: str
    runway_id: str
    threshold_a: Point
    threshold_b: Point
    reciprocal_id: Optional[str] = None   # set when the far end came from the reciprocal record

    @property
    def uses_fallback(self) -> bool:
        return self.reciprocal_id is None

@dataclass(frozen=True)
class RenderedLocalizer:
    """Final approach course drawn outward from the threshold."""
    airport_id: str
    runway_id: str
    threshold: Point
    end: Point
    true_bearing: float
    length_km: float
    initial_fix: Optional[str] = None     # None when the fixed fallback length was used

@dataclass(frozen=True)
class RenderedWaypoint:
    name: str
    position: Point
    symbol: WaypointSymbol
    show_label: bool
    terminal: bool = False

@dataclass(frozen=True)
class RenderedVor:
    ident: str
    position: Point
    has_dme: bool

@dataclass(frozen=True)
class NavGeometry:
    """Everything the renderer needs to draw the navigation map."""
    runways: Tuple[RenderedRunway, ...] = ()
    localizers: Tuple[RenderedLocalizer, ...] = ()
    waypoints: Tuple[RenderedWaypoint, ...] = ()
    vors: Tuple[RenderedVor, ...] = ()

    @classmethod
    def empty(cls) -> 'NavGeometry':
        return cls()

    @property
    def is_empty(self) -> bool:
        return not (self.runways or self.localizers or self.waypoints or self.vors)

    def counts(self) -> dict:
        return {
            'runways': len(self.runways),
            'localizers': len(self.localizers),
            'waypoints': len(self.waypoints),
            'vors': len(self.vors)
        }
