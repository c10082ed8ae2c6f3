"""
aircraft - simulated traffic for the radar scope

Exposes the Aircraft entity, its performance profile and the data tag layout.
"""

from .core import Aircraft
from .constants import KinematicsConstants
from .data_models import AxisState, PerformanceProfile, AircraftSnapshot
from .exceptions import AircraftException, InvalidCommandError
from .tag import TagLayout, build_tag_layout, build_tag_lines

__all__ = [
    'Aircraft',
    'KinematicsConstants',
    'AxisState',
    'PerformanceProfile',
    'AircraftSnapshot',
    'AircraftException',
    'InvalidCommandError',
    'TagLayout',
    'build_tag_layout',
    'build_tag_lines'
]
