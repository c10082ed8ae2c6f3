# radarscope/constants/units.py

class UnitConstants:
    """Unit conversions shared by every radarscope subpackage."""

    NM_TO_KM = 1.852
    KNOTS_TO_KPS = 0.000514444      # knots -> kilometres per second
    FEET_TO_KM = 0.0003048
    EARTH_RADIUS_KM = 6371.0
    KM_PER_DEGREE_LAT = 111.32      # flat-earth approximation used for bounds
    SECONDS_PER_MINUTE = 60.0
