"""radarscope/projection/exceptions.py"""

class ProjectionError(Exception):
    """Base exception for geographic <-> screen projection errors."""
    pass

class DegenerateBoundsError(ProjectionError):
    """Raised when a bounding box has zero or negative span on an axis."""
    def __init__(self, axis: str, low: float, high: float):
        self.axis = axis
        self.low = low
        self.high = high
        super().__init__(f"Degenerate bounds on {axis}: min={low} must be < max={high}")

class InvalidCanvasError(ProjectionError):
    """Raised for a canvas with a non-positive width or height."""
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        super().__init__(f"Canvas size must be positive, got {width}x{height}")
