# radarscope/visualization/primitives.py
"""
Geometric drawing primitives handed to a rendering surface.

A renderer only ever sees these; it never receives aircraft or navigation
records. All coordinates are canvas pixels with y growing downward.
"""
from dataclasses import dataclass, field
from typing import Tuple

Point = Tuple[float, float]

@dataclass(frozen=True)
class Style:
    color: str = "#00ff00"
    line_width: float = 1.0
    alpha: float = 1.0
    fill: bool = False
    zorder: int = 1

@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point
    style: Style = field(default_factory=Style)

@dataclass(frozen=True)
class PolygonShape:
    points: Tuple[Point, ...]
    style: Style = field(default_factory=Style)

@dataclass(frozen=True)
class CircleShape:
    center: Point
    radius: float
    style: Style = field(default_factory=Style)

@dataclass(frozen=True)
class TextLabel:
    position: Point
    text: str
    style: Style = field(default_factory=Style)
    font_size: float = 11.0
    font_family: str = "monospace"
