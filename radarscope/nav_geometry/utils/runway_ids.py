# radarscope/nav_geometry/utils/runway_ids.py
"""
Runway identifier handling ("RW09L", "RW35", "RW18C").
"""
import re
from typing import Optional, Tuple

from ..constants import NavGeometryConstants

RUNWAY_ID_PATTERN = re.compile(r'^RW(\d{1,3})([LRC]?)$')

def parse_runway_id(runway_id: str) -> Optional[Tuple[int, str]]:
    """Returns (number, side) or None when the identifier is not a runway designator."""
    match = RUNWAY_ID_PATTERN.match(runway_id or '')
    if not match:
        return None
    number = int(match.group(1))
    if not 1 <= number <= 36:
        return None
    return number, match.group(2)

def reciprocal_runway_id(runway_id: str) -> Optional[str]:
    """The opposite end of the same pavement: number +/- 18, L<->R, C stays C."""
    parsed = parse_runway_id(runway_id)
    if parsed is None:
        return None
    number, side = parsed
    opposite = number - 18 if number > 18 else number + 18
    return f"RW{opposite:02d}{NavGeometryConstants.RECIPROCAL_SIDES[side]}"

def runway_suffix(runway_id: str) -> str:
    """'RW35R' -> '35R'. Identifiers without the RW prefix are returned as-is."""
    return runway_id[2:] if runway_id.startswith('RW') else runway_id
