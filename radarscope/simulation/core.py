# radarscope/simulation/core.py
"""
The frame-driven radar simulation loop.

One external callback per display refresh calls tick(). Every aircraft is
advanced synchronously, the radar sweep refreshes displayed positions when
due, and the redraw callback is notified. Nothing here blocks or runs in the
background, and a navigation data outage never stops the traffic.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..aircraft.core import Aircraft
from ..navdata.data_models import NavigationDataset
from ..navdata.loader import NavDatabaseLoader
from ..nav_geometry.core import NavGeometryResolver
from ..nav_geometry.data_models import NavGeometry
from ..projection.core import GeoProjection
from ..visualization.scene import SceneBuilder
from .clock import SimulationClock
from .config import SimulationConfig
from .exceptions import SimulationError, UnknownAircraftError, ConfigurationError
from .sweep import SweepScheduler

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class FrameResult:
    """Outcome of one tick."""
    delta_seconds: float
    swept: bool
    sweep_count: int

class RadarSimulation:
    """Owns the traffic, the navigation map and the two clocks that drive them."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        dataset: Optional[NavigationDataset] = None,
        on_redraw: Optional[Callable[[FrameResult], None]] = None
    ):
        self.config = config or SimulationConfig()
        self.bounds = self.config.build_bounds()
        self.projection = GeoProjection(self.bounds, self.config.canvas_width, self.config.canvas_height)
        self.profile = self.config.performance_profile()
        self.aircraft: Dict[str, Aircraft] = {}
        self.dataset = dataset or NavigationDataset.pending()
        self.clock = SimulationClock()
        self.sweep = SweepScheduler(self.config.sweep_interval_ms)
        self.on_redraw = on_redraw
        self.geometry = NavGeometry.empty()
        self._rebuild_geometry()
        logger.info(f"RadarSimulation initialized. Bounds: {self.bounds}")

    # --- Traffic ---

    def add_aircraft(
        self,
        callsign: str,
        lat: float,
        lon: float,
        heading: float,
        altitude: float,
        speed: float,
        destination: str,
        wtc: str,
        **kwargs
    ) -> Aircraft:
        """Creates an aircraft whose true, target and displayed state all start equal."""
        if callsign in self.aircraft:
            raise SimulationError(f"Aircraft already exists: {callsign}")
        kwargs.setdefault('profile', self.profile)
        kwargs.setdefault('projection', self.projection)
        aircraft = Aircraft(callsign, lat, lon, heading, altitude, speed, destination, wtc, **kwargs)
        self.aircraft[callsign] = aircraft
        logger.info(f"Aircraft added: {aircraft}")
        return aircraft

    def remove_aircraft(self, callsign: str) -> Aircraft:
        try:
            aircraft = self.aircraft.pop(callsign)
        except KeyError:
            raise UnknownAircraftError(callsign) from None
        logger.info(f"Aircraft removed: {callsign}")
        return aircraft

    def get_aircraft(self, callsign: str) -> Aircraft:
        try:
            return self.aircraft[callsign]
        except KeyError:
            raise UnknownAircraftError(callsign) from None

    # --- Frame loop ---

    def tick(self, now_ms: float) -> FrameResult:
        """Advances everything to the timestamp supplied by the frame callback."""
        delta_ms = self.clock.tick(now_ms)
        result = self.advance(delta_ms)
        self._notify_redraw(result)
        return result

    def advance(self, delta_ms: float) -> FrameResult:
        """Updates every aircraft by delta_ms and runs the sweep when one is due."""
        delta_seconds = max(0.0, delta_ms) / 1000.0
        for aircraft in self.aircraft.values():
            aircraft.update(delta_seconds)

        swept = self.sweep.advance(delta_ms)
        if swept:
            self.refresh_displays()
        return FrameResult(delta_seconds, swept, self.sweep.sweep_count)

    def refresh_displays(self) -> None:
        for aircraft in self.aircraft.values():
            aircraft.refresh_display(self.projection)

    def _notify_redraw(self, result: FrameResult) -> None:
        if self.on_redraw is None:
            return
        try:
            self.on_redraw(result)
        except Exception as e:
            # A broken renderer must not stop the traffic
            logger.error(f"Redraw callback failed: {e}", exc_info=True)

    # --- Navigation map ---

    def load_navigation(self, dataset: NavigationDataset) -> NavGeometry:
        """Replaces the dataset and re-derives the map geometry."""
        self.dataset = dataset
        return self._rebuild_geometry()

    def load_navigation_from_db(self, db_path: Optional[str] = None) -> NavGeometry:
        path = db_path or self.config.navdb_path
        if not path:
            raise ConfigurationError('navdb_path', "No navigation database configured")
        return self.load_navigation(NavDatabaseLoader(path).load(self.bounds))

    def resize(self, width: float, height: float) -> NavGeometry:
        """
        Re-projects onto a new canvas size. Displayed returns keep their last
        swept position, only expressed in the new canvas.
        """
        previous = self.projection
        self.projection = previous.resized(width, height)
        for aircraft in self.aircraft.values():
            aircraft.reproject_display(previous, self.projection)
        return self._rebuild_geometry()

    def _rebuild_geometry(self) -> NavGeometry:
        resolver = NavGeometryResolver(self.projection, self.config.active_airports, self.config.ils_fallback_nm)
        self.geometry = resolver.resolve(self.dataset)
        return self.geometry

    # --- Rendering ---

    def scene(self, hovered: Optional[str] = None) -> List:
        """Drawing primitives for the current frame."""
        builder = SceneBuilder(self.projection, self.config.vector_seconds)
        return builder.build(self.geometry, self.aircraft.values(), hovered)
