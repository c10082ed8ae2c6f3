# radarscope/aircraft/core.py

import math
from typing import Optional

from .constants import KinematicsConstants
from .data_models import AxisState, PerformanceProfile, AircraftSnapshot
from .exceptions import InvalidCommandError
from .systems.heading import HeadingSystem
from .systems.speed import SpeedSystem
from .systems.altitude import AltitudeSystem
from .systems.navigation import NavigationSystem, distance_flown_km
from ..projection.core import GeoProjection

class Aircraft:
    """
    A simulated aircraft as seen by the radar.

    True state (position, heading, altitude, speed) moves every frame toward
    the controller's targets. Display state (display_x, display_y,
    display_heading) only changes when refresh_display() is called by the radar
    sweep, so the symbol on the scope jumps once per antenna revolution while
    the true state keeps flying.
    """

    def __init__(
        self,
        callsign: str,
        lat: float,
        lon: float,
        heading: float,
        altitude: float,
        speed: float,
        destination: str,
        wtc: str,
        tag_angle: float = 0.0,
        profile: Optional[PerformanceProfile] = None,
        scratchpad: str = KinematicsConstants.DEFAULT_SCRATCHPAD,
        projection: Optional[GeoProjection] = None
    ):
        """
        Args:
            callsign: Unique identifier, e.g. "BAW123"
            heading: Initial true heading in degrees
            altitude: Initial altitude in feet
            speed: Initial speed in knots
            destination: Destination airport ICAO code
            wtc: Wake turbulence category ("L", "M", "H", "J")
            tag_angle: Data tag placement around the symbol, in radians
            projection: When given, the displayed return starts at the true position

        Raises:
            InvalidCommandError: If wtc is not a known wake turbulence category
        """
        if wtc not in KinematicsConstants.WAKE_CATEGORIES:
            raise InvalidCommandError('wtc', wtc, "Unknown wake turbulence category")
        self.callsign = callsign
        self.destination = destination
        self.wtc = wtc
        self.scratchpad = scratchpad
        self.tag_angle = tag_angle
        self.profile = profile or PerformanceProfile()

        self._navigation = NavigationSystem(lat, lon)
        self._heading = HeadingSystem(heading, self.profile.turn_rate_deg_s)
        self._speed = SpeedSystem(speed, self.profile.acceleration_kt_s, self.profile.min_speed_kt)
        self._altitude = AltitudeSystem(altitude, self.profile.vertical_rate_fpm)

        self.display_x: Optional[float] = None
        self.display_y: Optional[float] = None
        self.display_heading = self._heading.current
        if projection is not None:
            self.refresh_display(projection)

    # --- True state ---

    @property
    def lat(self) -> float:
        return self._navigation.lat

    @property
    def lon(self) -> float:
        return self._navigation.lon

    @property
    def heading(self) -> float:
        return self._heading.current

    @property
    def speed(self) -> float:
        return self._speed.current

    @property
    def altitude(self) -> float:
        return self._altitude.current

    @property
    def vertical_speed(self) -> float:
        """Feet per minute; derived from the altitude capture, not settable."""
        return self._altitude.vertical_speed_fpm

    # --- Target state ---

    @property
    def target_heading(self) -> float:
        return self._heading.target

    @property
    def target_speed(self) -> float:
        return self._speed.target

    @property
    def target_altitude(self) -> float:
        return self._altitude.target

    @property
    def heading_state(self) -> AxisState:
        return self._heading.state

    @property
    def speed_state(self) -> AxisState:
        return self._speed.state

    @property
    def altitude_state(self) -> AxisState:
        return self._altitude.state

    # --- Controller commands ---

    def set_heading_target(self, degrees) -> None:
        """Assigns a heading, normalised into [0, 360). True heading is unchanged."""
        self._heading.set_target(degrees)

    def set_speed_target(self, knots) -> None:
        """Assigns a speed, never below the profile's minimum operational speed."""
        self._speed.set_target(knots)

    def set_altitude_target(self, feet) -> None:
        self._altitude.set_target(feet)

    def rotate_tag(self, step_rad: float = KinematicsConstants.TAG_ROTATION_RAD) -> None:
        self.tag_angle = (self.tag_angle + step_rad) % (2 * math.pi)

    # --- Simulation ---

    def update(self, delta_seconds: float) -> None:
        """Advances heading, speed and altitude toward their targets, then moves along the great circle."""
        if not math.isfinite(delta_seconds) or delta_seconds <= 0:
            return
        self._heading.step(delta_seconds)
        self._speed.step(delta_seconds)
        self._altitude.step(delta_seconds)
        self._navigation.update(self.heading, self.speed, delta_seconds)

    def refresh_display(self, projection: GeoProjection) -> None:
        """Copies the true position and heading into the displayed radar return."""
        self.display_x, self.display_y = projection.to_pixel(self.lat, self.lon)
        self.display_heading = self.heading

    def reproject_display(self, previous: GeoProjection, current: GeoProjection) -> None:
        """Moves the displayed return onto a new canvas without sampling the true state."""
        if self.display_x is None or self.display_y is None:
            return
        lat, lon = previous.to_geo(self.display_x, self.display_y)
        self.display_x, self.display_y = current.to_pixel(lat, lon)

    def vector_length_km(self, seconds: float = KinematicsConstants.VECTOR_SECONDS) -> float:
        """Distance covered at the current speed over the given time."""
        return distance_flown_km(self.speed, seconds)

    def snapshot(self) -> AircraftSnapshot:
        return AircraftSnapshot(
            callsign=self.callsign,
            lat=self.lat,
            lon=self.lon,
            heading_deg=self.heading,
            altitude_ft=self.altitude,
            speed_kt=self.speed,
            vertical_speed_fpm=self.vertical_speed,
            target_heading_deg=self.target_heading,
            target_altitude_ft=self.target_altitude,
            target_speed_kt=self.target_speed,
            display_x=self.display_x,
            display_y=self.display_y,
            display_heading_deg=self.display_heading
        )

    def __repr__(self) -> str:
        return (f"Aircraft({self.callsign}, lat={self.lat:.5f}, lon={self.lon:.5f}, "
                f"hdg={self.heading:.1f}, alt={self.altitude:.0f}, spd={self.speed:.0f})")
