# radarscope/nav_geometry/constants.py
"""
Static constants for deriving drawable navigation geometry.
"""

class NavGeometryConstants:
    """Constants used by the geometry resolver"""

    # Localizer line length when no approach procedure tells us better
    ILS_FALLBACK_NM = 15.0

    # ARINC 424 waypoint description code, 4th column: initial approach fix variants
    IAF_CODE_INDEX = 3
    IAF_DESCRIPTION_CODES = frozenset({'A', 'C', 'D'})

    # First letter of the waypoint type code -> symbol
    TRIANGLE_TYPE_CODES = frozenset({'C', 'R'})
    STAR_TYPE_CODES = frozenset({'W'})

    # VOR type code, 2nd letter: co-located DME
    DME_TYPE_CODE = 'D'

    RECIPROCAL_SIDES = {'L': 'R', 'R': 'L', 'C': 'C', '': ''}
