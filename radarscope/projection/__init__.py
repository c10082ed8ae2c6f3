"""
projection - geographic <-> screen coordinate mapping for radarscope
"""

from .core import GeoProjection
from .data_models import GeoBounds
from .exceptions import ProjectionError, DegenerateBoundsError, InvalidCanvasError

__all__ = [
    'GeoProjection',
    'GeoBounds',
    'ProjectionError',
    'DegenerateBoundsError',
    'InvalidCanvasError'
]
