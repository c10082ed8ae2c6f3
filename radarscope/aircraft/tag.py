# radarscope/aircraft/tag.py
"""
Data tag (label block) layout for an aircraft on the scope.

The tag text is live: it reads true and target state every frame. Only the
anchor follows the display position, so the label stays attached to the
symbol between sweeps.
"""
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .core import Aircraft

TAG_GAP_PX = 15
TAG_PADDING_PX = 3
LINE_HEIGHT_PX = 15
CHAR_WIDTH_PX = 6.6     # 11px monospace
TREND_THRESHOLD_FT = 50

@dataclass
class TagLayout:
    """Positioned text block for one aircraft."""
    lines: List[str]
    anchor: Tuple[float, float]
    origin_x: float
    width: float
    height: float
    line_positions: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height) including padding, used for hover detection."""
        return (
            self.anchor[0] - self.width / 2 - TAG_PADDING_PX,
            self.anchor[1] - self.height / 2 - TAG_PADDING_PX,
            self.width + TAG_PADDING_PX * 2,
            self.height + TAG_PADDING_PX * 2
        )

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def _flight_level(altitude_ft: float) -> str:
    return f"{_round_half_up(altitude_ft / 100):03d}"

def trend_indicator(aircraft: Aircraft) -> str:
    """Arrow showing the direction of an assigned level change, blank when level."""
    if abs(aircraft.target_altitude - aircraft.altitude) > TREND_THRESHOLD_FT:
        return "↑" if aircraft.target_altitude > aircraft.altitude else "↓"
    return " "

def climb_rate_text(vertical_speed_fpm: float) -> str:
    """Vertical speed in hundreds of ft/min, e.g. '+15', '-15', '00'."""
    crc = _round_half_up(vertical_speed_fpm / 100)
    sign = '+' if crc > 0 else ''
    return f"{sign}{str(crc).zfill(2)}"

def build_tag_lines(aircraft: Aircraft, hovered: bool = False) -> List[str]:
    assigned_heading = f"H{_round_half_up(aircraft.target_heading):03d}"
    line1 = f"{aircraft.callsign} {assigned_heading}"

    level = f"{_flight_level(aircraft.altitude)}{trend_indicator(aircraft)} {aircraft.destination}"
    line2 = f"{level} XX {climb_rate_text(aircraft.vertical_speed)}" if hovered else level

    line3 = f"{_round_half_up(aircraft.speed)}{aircraft.wtc} {_flight_level(aircraft.target_altitude)}"

    lines = [line1, line2, line3]
    if hovered:
        lines.append(aircraft.scratchpad)
    return lines

def build_tag_layout(aircraft: Aircraft, hovered: bool = False) -> TagLayout:
    """
    Places the tag on an ellipse around the displayed symbol at the aircraft's
    tag_angle. Requires the aircraft to have been swept at least once.
    """
    lines = build_tag_lines(aircraft, hovered)
    width = max(len(line) for line in lines) * CHAR_WIDTH_PX
    height = LINE_HEIGHT_PX * len(lines)

    radius_x = width / 2 + TAG_GAP_PX + TAG_PADDING_PX
    radius_y = height / 2 + TAG_GAP_PX + TAG_PADDING_PX
    anchor = (
        aircraft.display_x + radius_x * math.cos(aircraft.tag_angle),
        aircraft.display_y + radius_y * math.sin(aircraft.tag_angle)
    )
    origin_x = anchor[0] - width / 2

    # Lines are vertically centred on the anchor
    first_offset = -(len(lines) - 1) / 2
    positions = [(origin_x, anchor[1] + (first_offset + i) * LINE_HEIGHT_PX) for i in range(len(lines))]

    return TagLayout(
        lines=lines,
        anchor=anchor,
        origin_x=origin_x,
        width=width,
        height=height,
        line_positions=positions
    )
