# radarscope/aircraft/constants.py

class KinematicsConstants:
    """Default performance used when a controller command is being captured"""

    # ===== CAPTURE RATES =====
    TURN_RATE_DEG_S = 2.0           # standard-ish rate turn
    ACCELERATION_KT_S = 10.0        # speed change in knots per second
    VERTICAL_RATE_FPM = 1500.0      # climb/descent rate in feet per minute

    # ===== LIMITS =====
    MIN_SPEED_KT = 100.0            # commanded speeds below this are raised to it

    # ===== PRESENTATION =====
    VECTOR_SECONDS = 60             # heading vector shows one minute of travel
    TAG_ROTATION_RAD = 1.0471975511965976   # pi / 3
    DEFAULT_SCRATCHPAD = "SCRATCHPAD"
    WAKE_CATEGORIES = ('L', 'M', 'H', 'J')
