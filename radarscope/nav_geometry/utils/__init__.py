from .coordinates import CoordinateCalculations
from .runway_ids import parse_runway_id, reciprocal_runway_id, runway_suffix
from .approach import is_initial_fix, select_initial_fix, has_digits
