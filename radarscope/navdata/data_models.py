# radarscope/navdata/data_models.py
"""
Typed navigation records and the dataset that owns them.

Records are immutable snapshots loaded once per session. The dataset carries
an explicit state so that "nothing loaded yet" and "the provider failed" are
distinguishable from a genuinely empty area.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# --- Record variants ---

@dataclass(frozen=True)
class Waypoint:
    """An en-route fix."""
    name: str
    type_code: str
    lat: float
    lon: float

@dataclass(frozen=True)
class TerminalWaypoint:
    """A terminal-area fix belonging to one airport."""
    name: str
    airport_id: str
    type_code: str
    lat: float
    lon: float

@dataclass(frozen=True)
class Airport:
    icao: str
    name: str
    lat: float
    lon: float
    elevation_ft: Optional[float] = None
    transition_altitude_ft: Optional[float] = None
    transition_level_ft: Optional[float] = None

@dataclass(frozen=True)
class Vor:
    ident: str
    name: str
    type_code: str
    lat: float
    lon: float

@dataclass(frozen=True)
class Runway:
    """One runway end. The threshold coordinate is the landing end."""
    id: str
    airport_id: str
    lat: float
    lon: float
    length_ft: float
    true_bearing: float
    magnetic_bearing: Optional[float] = None
    width_ft: Optional[float] = None
    threshold_elevation_ft: Optional[float] = None

@dataclass(frozen=True)
class Ils:
    """Localizer for one runway end. Bearing is magnetic; declination is signed."""
    airport_id: str
    runway_id: str
    magnetic_bearing: float
    declination: float
    ident: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    category: Optional[str] = None

    @property
    def true_bearing(self) -> float:
        return self.magnetic_bearing + self.declination

@dataclass(frozen=True)
class ApproachLeg:
    """One leg of a published instrument approach procedure."""
    airport_id: str
    approach_id: str
    waypoint_id: str
    waypoint_type_code: str
    lat: float
    lon: float
    seqno: Optional[int] = None
    route_type: Optional[str] = None
    transition_id: Optional[str] = None

# --- Dataset ---

class DatasetState(Enum):
    PENDING = "pending"             # loader has not delivered yet
    LOADED = "loaded"
    UNAVAILABLE = "unavailable"     # loader failed; collections stay empty

@dataclass(frozen=True)
class NavigationDataset:
    """All navigation records for the simulated area."""
    state: DatasetState = DatasetState.PENDING
    waypoints: Tuple[Waypoint, ...] = ()
    terminal_waypoints: Tuple[TerminalWaypoint, ...] = ()
    airports: Tuple[Airport, ...] = ()
    vors: Tuple[Vor, ...] = ()
    runways: Tuple[Runway, ...] = ()
    ils: Tuple[Ils, ...] = ()
    approach_legs: Tuple[ApproachLeg, ...] = ()
    error: Optional[str] = None

    @classmethod
    def pending(cls) -> 'NavigationDataset':
        return cls(state=DatasetState.PENDING)

    @classmethod
    def unavailable(cls, reason: str) -> 'NavigationDataset':
        return cls(state=DatasetState.UNAVAILABLE, error=reason)

    @classmethod
    def loaded(cls, **collections) -> 'NavigationDataset':
        """Builds a LOADED dataset; any iterable is accepted for each collection."""
        return cls(state=DatasetState.LOADED, **{k: tuple(v) for k, v in collections.items()})

    @property
    def is_loaded(self) -> bool:
        return self.state is DatasetState.LOADED

    def find_runway(self, airport_id: str, runway_id: str) -> Optional[Runway]:
        for runway in self.runways:
            if runway.airport_id == airport_id and runway.id == runway_id:
                return runway
        return None

    def approach_legs_for(self, airport_id: str) -> Tuple[ApproachLeg, ...]:
        return tuple(leg for leg in self.approach_legs if leg.airport_id == airport_id)

    def summary(self) -> dict:
        return {
            'state': self.state.value,
            'waypoints': len(self.waypoints),
            'terminal_waypoints': len(self.terminal_waypoints),
            'airports': len(self.airports),
            'vors': len(self.vors),
            'runways': len(self.runways),
            'ils': len(self.ils),
            'approach_legs': len(self.approach_legs)
        }
