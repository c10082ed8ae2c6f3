# radarscope/nav_geometry/core.py
"""
Turns navigation records into drawable geometry for one projection.

Runways are drawn once per pavement: the reciprocal record supplies the far
threshold when it exists, otherwise the far end is projected along the true
bearing for the declared length. Localizer courses run outward from the
threshold, opposite to the inbound course, for the distance to the usual
initial approach fix or a fixed fallback length.
"""
import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..constants.units import UnitConstants
from ..projection.core import GeoProjection
from ..navdata.data_models import NavigationDataset, Runway, Ils
from .constants import NavGeometryConstants
from .data_models import (
    NavGeometry, RenderedRunway, RenderedLocalizer, RenderedWaypoint, RenderedVor, WaypointSymbol
)
from .utils.coordinates import CoordinateCalculations
from .utils.runway_ids import reciprocal_runway_id
from .utils.approach import select_initial_fix, has_digits

logger = logging.getLogger(__name__)

class NavGeometryResolver:
    """Derives runway, localizer, waypoint and VOR geometry from a NavigationDataset."""

    def __init__(
        self,
        projection: GeoProjection,
        active_airports: Optional[Dict[str, Sequence[str]]] = None,
        ils_fallback_nm: float = NavGeometryConstants.ILS_FALLBACK_NM
    ):
        """
        Args:
            projection: Projection the geometry is expressed in
            active_airports: Airport ICAO -> active runway identifiers. None draws every airport.
            ils_fallback_nm: Localizer length when no approach data qualifies
        """
        self.projection = projection
        self.active_airports = active_airports
        self.ils_fallback_nm = ils_fallback_nm

    # --- Allowlist ---

    def is_active_airport(self, airport_id: str) -> bool:
        return self.active_airports is None or airport_id in self.active_airports

    def is_active_runway(self, airport_id: str, runway_id: str) -> bool:
        if self.active_airports is None:
            return True
        return runway_id in self.active_airports.get(airport_id, ())

    # --- Resolution ---

    def resolve(self, dataset: NavigationDataset) -> NavGeometry:
        """Derives the complete geometry; a dataset that is not loaded derives nothing."""
        if not dataset.is_loaded:
            logger.debug(f"Dataset is {dataset.state.value}; no geometry derived")
            return NavGeometry.empty()

        geometry = NavGeometry(
            runways=tuple(self.resolve_runways(dataset)),
            localizers=tuple(self.resolve_localizers(dataset)),
            waypoints=tuple(self.resolve_waypoints(dataset)),
            vors=tuple(self.resolve_vors(dataset))
        )
        logger.info(f"Navigation geometry derived: {geometry.counts()}")
        return geometry

    def resolve_runways(self, dataset: NavigationDataset) -> List[RenderedRunway]:
        drawn: Set[Tuple[str, str]] = set()
        rendered = []
        for runway in dataset.runways:
            key = (runway.airport_id, runway.id)
            if key in drawn or not self.is_active_runway(runway.airport_id, runway.id):
                continue
            rendered.append(self._resolve_runway(dataset, runway, drawn))
            drawn.add(key)
        return rendered

    def _resolve_runway(self, dataset: NavigationDataset, runway: Runway, drawn: Set[Tuple[str, str]]) -> RenderedRunway:
        threshold_a = self.projection.to_pixel(runway.lat, runway.lon)

        opposite_id = reciprocal_runway_id(runway.id)
        opposite = dataset.find_runway(runway.airport_id, opposite_id) if opposite_id else None
        if opposite is not None:
            drawn.add((opposite.airport_id, opposite.id))
            return RenderedRunway(
                airport_id=runway.airport_id,
                runway_id=runway.id,
                threshold_a=threshold_a,
                threshold_b=self.projection.to_pixel(opposite.lat, opposite.lon),
                reciprocal_id=opposite.id
            )

        logger.debug(f"No reciprocal for {runway.airport_id} {runway.id}; projecting {runway.length_ft} ft along {runway.true_bearing}")
        length_px = self.projection.km_to_pixels(runway.length_ft * UnitConstants.FEET_TO_KM)
        threshold_b = CoordinateCalculations.point_along(*threshold_a, runway.true_bearing, length_px)
        return RenderedRunway(runway.airport_id, runway.id, threshold_a, threshold_b)

    def resolve_localizers(self, dataset: NavigationDataset) -> List[RenderedLocalizer]:
        rendered = []
        for ils in dataset.ils:
            if not self.is_active_runway(ils.airport_id, ils.runway_id):
                continue
            runway = dataset.find_runway(ils.airport_id, ils.runway_id)
            if runway is None:
                logger.debug(f"ILS {ils.airport_id} {ils.runway_id} has no runway record; skipped")
                continue
            rendered.append(self._resolve_localizer(dataset, ils, runway))
        return rendered

    def _resolve_localizer(self, dataset: NavigationDataset, ils: Ils, runway: Runway) -> RenderedLocalizer:
        threshold = self.projection.to_pixel(runway.lat, runway.lon)
        length_km, fix_name = self.localizer_length_km(dataset, ils, runway)
        # Drawn opposite to the inbound course, away from the runway
        end = CoordinateCalculations.point_along(
            *threshold, ils.true_bearing + 180.0, self.projection.km_to_pixels(length_km)
        )
        return RenderedLocalizer(
            airport_id=ils.airport_id,
            runway_id=ils.runway_id,
            threshold=threshold,
            end=end,
            true_bearing=ils.true_bearing,
            length_km=length_km,
            initial_fix=fix_name
        )

    def localizer_length_km(self, dataset: NavigationDataset, ils: Ils, runway: Runway) -> Tuple[float, Optional[str]]:
        """Distance from the threshold to the usual initial approach fix, or the fallback."""
        fix = select_initial_fix(dataset.approach_legs_for(ils.airport_id), ils.airport_id, ils.runway_id)
        if fix is None:
            logger.debug(f"No initial approach fix for {ils.airport_id} {ils.runway_id}; using {self.ils_fallback_nm} NM")
            return self.ils_fallback_nm * UnitConstants.NM_TO_KM, None
        return CoordinateCalculations.distance_km(runway.lat, runway.lon, fix.lat, fix.lon), fix.waypoint_id

    def resolve_waypoints(self, dataset: NavigationDataset) -> List[RenderedWaypoint]:
        rendered = [self._render_waypoint(point) for point in dataset.waypoints]
        for point in dataset.terminal_waypoints:
            if self.is_active_airport(point.airport_id) and not has_digits(point.name):
                rendered.append(self._render_waypoint(point, terminal=True))
        return rendered

    def _render_waypoint(self, point, terminal: bool = False) -> RenderedWaypoint:
        return RenderedWaypoint(
            name=point.name,
            position=self.projection.to_pixel(point.lat, point.lon),
            symbol=waypoint_symbol(point.type_code),
            show_label=not has_digits(point.name),
            terminal=terminal
        )

    def resolve_vors(self, dataset: NavigationDataset) -> List[RenderedVor]:
        return [
            RenderedVor(
                ident=vor.ident,
                position=self.projection.to_pixel(vor.lat, vor.lon),
                has_dme=len(vor.type_code) > 1 and vor.type_code[1] == NavGeometryConstants.DME_TYPE_CODE
            )
            for vor in dataset.vors
        ]

def waypoint_symbol(type_code: str) -> WaypointSymbol:
    first = (type_code or ' ')[0]
    if first in NavGeometryConstants.TRIANGLE_TYPE_CODES:
        return WaypointSymbol.TRIANGLE
    if first in NavGeometryConstants.STAR_TYPE_CODES:
        return WaypointSymbol.STAR
    return WaypointSymbol.NONE
