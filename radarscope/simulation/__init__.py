"""
simulation - configuration, clocks and the radar simulation loop
"""

from .config import SimulationConfig
from .clock import SimulationClock
from .sweep import SweepScheduler
from .core import RadarSimulation, FrameResult
from .commands import ControllerCommands
from .exceptions import SimulationError, ConfigurationError, UnknownAircraftError

__all__ = [
    'SimulationConfig',
    'SimulationClock',
    'SweepScheduler',
    'RadarSimulation',
    'FrameResult',
    'ControllerCommands',
    'SimulationError',
    'ConfigurationError',
    'UnknownAircraftError'
]
