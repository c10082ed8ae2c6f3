#!/usr/bin/env python3
"""
Aircraft Systems Package
Per-axis capture systems and the great-circle position update
"""
from .axis import CaptureAxis, coerce_command
from .heading import HeadingSystem, normalize_heading, heading_difference
from .speed import SpeedSystem
from .altitude import AltitudeSystem
from .navigation import NavigationSystem, advance_position, distance_flown_km

# Public API
__all__ = [
    'CaptureAxis',
    'coerce_command',
    'HeadingSystem',
    'SpeedSystem',
    'AltitudeSystem',
    'NavigationSystem',
    'normalize_heading',
    'heading_difference',
    'advance_position',
    'distance_flown_km'
]
