# radarscope/nav_geometry/utils/approach.py
"""
Picks the fix where published approaches to a runway usually begin.

Navigation data has no field saying how long a localizer course should be
drawn, so it is inferred from the initial approach fixes of the approach
procedures for that runway.
"""
from collections import Counter
from typing import Iterable, Optional

from ...navdata.data_models import ApproachLeg
from ..constants import NavGeometryConstants
from .runway_ids import runway_suffix

def is_initial_fix(leg: ApproachLeg) -> bool:
    code = leg.waypoint_type_code or ''
    if len(code) <= NavGeometryConstants.IAF_CODE_INDEX:
        return False
    return code[NavGeometryConstants.IAF_CODE_INDEX] in NavGeometryConstants.IAF_DESCRIPTION_CODES

def has_digits(name: str) -> bool:
    return any(ch.isdigit() for ch in name)

def select_initial_fix(legs: Iterable[ApproachLeg], airport_id: str, runway_id: str) -> Optional[ApproachLeg]:
    """
    Returns the most frequently used initial fix of the airport's approaches to
    this runway, or None when no approach leg qualifies.

    Ties between equally frequent fixes go to a name without digits ("KITE"
    over "AB12"); a less frequent named fix never beats a more frequent coded
    one. Remaining ties keep the first fix encountered.
    """
    suffix = runway_suffix(runway_id)
    candidates = [
        leg for leg in legs
        if leg.airport_id == airport_id and suffix in leg.approach_id and is_initial_fix(leg)
    ]
    if not candidates:
        return None

    tally = Counter(leg.waypoint_id for leg in candidates)
    top_count = max(tally.values())
    leaders = [name for name, count in tally.items() if count == top_count]
    named = [name for name in leaders if not has_digits(name)]
    winner = (named or leaders)[0]
    return next(leg for leg in candidates if leg.waypoint_id == winner)
