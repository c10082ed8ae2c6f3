"""
visualization - drawing primitives, scene building and the matplotlib scope
"""

from .primitives import Style, LineSegment, PolygonShape, CircleShape, TextLabel
from .scene import SceneBuilder
from .plotter import RadarPlotter

__all__ = [
    'Style',
    'LineSegment',
    'PolygonShape',
    'CircleShape',
    'TextLabel',
    'SceneBuilder',
    'RadarPlotter'
]
