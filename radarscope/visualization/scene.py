# radarscope/visualization/scene.py
"""
Translates navigation geometry and aircraft into drawing primitives.
"""
import math
from typing import Iterable, List, Optional, Tuple

from ..aircraft.core import Aircraft
from ..aircraft.constants import KinematicsConstants
from ..aircraft.tag import build_tag_layout
from ..nav_geometry.data_models import NavGeometry, WaypointSymbol
from ..nav_geometry.utils.coordinates import CoordinateCalculations
from ..projection.core import GeoProjection
from .primitives import Point, Style, LineSegment, PolygonShape, CircleShape, TextLabel

# Scope colours
RUNWAY_STYLE = Style(color="#ffffff", line_width=4, zorder=2)
LOCALIZER_STYLE = Style(color="#9c9c6a", line_width=3, zorder=1)
MAP_SYMBOL_STYLE = Style(color="#ffffff", alpha=0.75, fill=True, zorder=3)
MAP_OUTLINE_STYLE = Style(color="#ffffff", alpha=0.75, line_width=1.5, zorder=3)
TRAFFIC_STYLE = Style(color="#00ff00", line_width=2, fill=True, zorder=5)
TAG_BACKGROUND_STYLE = Style(color="#1e1e1e", alpha=0.9, fill=True, zorder=6)
TAG_TEXT_STYLE = Style(color="#00ff00", zorder=7)

LABEL_OFFSET_PX = 8
TRIANGLE_SIZE_PX = 6
STAR_SIZE_PX = 5
VOR_SIZE_PX = 5
VOR_CENTER_DOT_PX = 1.5
DME_BOX_FACTOR = 2.5
AIRCRAFT_RADIUS_PX = 4

def triangle_points(x: float, y: float, size: float = TRIANGLE_SIZE_PX) -> Tuple[Point, ...]:
    return ((x, y - size * 0.75), (x - size * 0.6, y + size * 0.45), (x + size * 0.6, y + size * 0.45))

def star_points(x: float, y: float, size: float = STAR_SIZE_PX) -> Tuple[Point, ...]:
    """Four-pointed star."""
    inner = size / 2.5
    return (
        (x, y - size), (x + inner, y - inner), (x + size, y), (x + inner, y + inner),
        (x, y + size), (x - inner, y + inner), (x - size, y), (x - inner, y - inner)
    )

def hexagon_points(x: float, y: float, size: float = VOR_SIZE_PX) -> Tuple[Point, ...]:
    return tuple((x + size * math.cos(i * math.pi / 3), y + size * math.sin(i * math.pi / 3)) for i in range(6))

def square_points(x: float, y: float, side: float) -> Tuple[Point, ...]:
    half = side / 2
    return ((x - half, y - half), (x + half, y - half), (x + half, y + half), (x - half, y + half))

class SceneBuilder:
    """Builds the full list of primitives for one frame."""

    def __init__(self, projection: GeoProjection, vector_seconds: float = KinematicsConstants.VECTOR_SECONDS):
        self.projection = projection
        self.vector_seconds = vector_seconds

    def build(self, geometry: NavGeometry, aircraft: Iterable[Aircraft], hovered: Optional[str] = None) -> List:
        """Navigation map first, then traffic on top. `hovered` is the callsign shown expanded."""
        primitives = self.navigation_primitives(geometry)
        for plane in aircraft:
            primitives.extend(self.aircraft_primitives(plane, hovered=plane.callsign == hovered))
        return primitives

    def navigation_primitives(self, geometry: NavGeometry) -> List:
        primitives: List = []
        for runway in geometry.runways:
            primitives.append(LineSegment(runway.threshold_a, runway.threshold_b, RUNWAY_STYLE))
        for localizer in geometry.localizers:
            primitives.append(LineSegment(localizer.threshold, localizer.end, LOCALIZER_STYLE))

        for waypoint in geometry.waypoints:
            x, y = waypoint.position
            if waypoint.symbol is WaypointSymbol.TRIANGLE:
                primitives.append(PolygonShape(triangle_points(x, y), MAP_SYMBOL_STYLE))
            elif waypoint.symbol is WaypointSymbol.STAR:
                primitives.append(PolygonShape(star_points(x, y), MAP_SYMBOL_STYLE))
            if waypoint.show_label:
                primitives.append(TextLabel((x + LABEL_OFFSET_PX, y), waypoint.name, MAP_SYMBOL_STYLE))

        for vor in geometry.vors:
            x, y = vor.position
            primitives.append(PolygonShape(hexagon_points(x, y), MAP_OUTLINE_STYLE))
            primitives.append(CircleShape((x, y), VOR_CENTER_DOT_PX, MAP_SYMBOL_STYLE))
            primitives.append(TextLabel((x + LABEL_OFFSET_PX, y), vor.ident, MAP_SYMBOL_STYLE))
            if vor.has_dme:
                primitives.append(PolygonShape(square_points(x, y, VOR_SIZE_PX * DME_BOX_FACTOR), MAP_OUTLINE_STYLE))
        return primitives

    def aircraft_primitives(self, aircraft: Aircraft, hovered: bool = False) -> List:
        """Symbol, heading vector and data tag. Aircraft not yet swept are not drawn."""
        if aircraft.display_x is None or aircraft.display_y is None:
            return []
        position = (aircraft.display_x, aircraft.display_y)
        vector_px = self.projection.km_to_pixels(aircraft.vector_length_km(self.vector_seconds))
        vector_end = CoordinateCalculations.point_along(*position, aircraft.display_heading, vector_px)

        primitives: List = [
            CircleShape(position, AIRCRAFT_RADIUS_PX, TRAFFIC_STYLE),
            LineSegment(position, vector_end, TRAFFIC_STYLE)
        ]

        layout = build_tag_layout(aircraft, hovered)
        if hovered:
            x, y, width, height = layout.bounding_box
            primitives.append(PolygonShape(
                ((x, y), (x + width, y), (x + width, y + height), (x, y + height)),
                TAG_BACKGROUND_STYLE
            ))
        for text, line_position in zip(layout.lines, layout.line_positions):
            primitives.append(TextLabel(line_position, text, TAG_TEXT_STYLE))
        return primitives
