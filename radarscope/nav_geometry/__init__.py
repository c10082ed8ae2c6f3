"""
nav_geometry - drawable runways, localizers, waypoints and VORs
"""

from .core import NavGeometryResolver, waypoint_symbol
from .constants import NavGeometryConstants
from .data_models import (
    NavGeometry, RenderedRunway, RenderedLocalizer, RenderedWaypoint, RenderedVor, WaypointSymbol
)

__all__ = [
    'NavGeometryResolver',
    'waypoint_symbol',
    'NavGeometryConstants',
    'NavGeometry',
    'RenderedRunway',
    'RenderedLocalizer',
    'RenderedWaypoint',
    'RenderedVor',
    'WaypointSymbol'
]
