"""
navdata - navigation records for the simulated area

Typed records, the NavigationDataset that owns them, and the SQLite loader
that fills it from a Navigraph-style database.
"""

from .data_models import (
    Waypoint, TerminalWaypoint, Airport, Vor, Runway, Ils, ApproachLeg,
    DatasetState, NavigationDataset
)
from .exceptions import NavDataError, DataProviderUnavailable
from .loader import NavDatabaseLoader

__all__ = [
    'Waypoint',
    'TerminalWaypoint',
    'Airport',
    'Vor',
    'Runway',
    'Ils',
    'ApproachLeg',
    'DatasetState',
    'NavigationDataset',
    'NavDataError',
    'DataProviderUnavailable',
    'NavDatabaseLoader'
]
