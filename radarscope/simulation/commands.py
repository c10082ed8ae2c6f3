# radarscope/simulation/commands.py
"""
Controller command surface.

Translates raw operator input (text typed into a data tag, values from a
script) into aircraft target changes. Every call returns a standardized
response; rejected input leaves the aircraft untouched and never raises.
"""
import time
import logging
from typing import Any, Dict

from ..aircraft.exceptions import InvalidCommandError
from ..aircraft.systems.axis import coerce_command
from .exceptions import SimulationError

logger = logging.getLogger(__name__)

class ControllerCommands:
    """Applies heading, speed, altitude and flight level commands to simulated aircraft."""

    FIELDS = ('heading', 'speed', 'altitude', 'flight_level')

    def __init__(self, simulation):
        self.simulation = simulation

    def apply(self, callsign: str, field: str, raw: Any) -> Dict[str, Any]:
        """
        Args:
            field: "heading"|"speed"|"altitude"|"flight_level"
            raw: Operator input; flight levels are hundreds of feet
        """
        try:
            if field not in self.FIELDS:
                raise InvalidCommandError(field, raw, "Unknown command field")
            aircraft = self.simulation.get_aircraft(callsign)
            if field == 'heading':
                aircraft.set_heading_target(raw)
            elif field == 'speed':
                aircraft.set_speed_target(raw)
            elif field == 'altitude':
                aircraft.set_altitude_target(raw)
            else:
                aircraft.set_altitude_target(coerce_command(field, raw) * 100)
        except (InvalidCommandError, SimulationError) as e:
            logger.warning(f"Command rejected for {callsign}: {e}")
            return self._format_response(
                success=False,
                message=str(e),
                data={"callsign": callsign, "field": field, "error_type": type(e).__name__}
            )

        return self._format_response(
            success=True,
            message=f"{callsign} {field} set",
            data={"callsign": callsign, "field": field, "targets": self._targets(aircraft)}
        )

    def set_heading(self, callsign: str, raw: Any) -> Dict[str, Any]:
        return self.apply(callsign, 'heading', raw)

    def set_speed(self, callsign: str, raw: Any) -> Dict[str, Any]:
        return self.apply(callsign, 'speed', raw)

    def set_altitude(self, callsign: str, raw: Any) -> Dict[str, Any]:
        return self.apply(callsign, 'altitude', raw)

    def set_flight_level(self, callsign: str, raw: Any) -> Dict[str, Any]:
        return self.apply(callsign, 'flight_level', raw)

    def rotate_tag(self, callsign: str) -> Dict[str, Any]:
        try:
            aircraft = self.simulation.get_aircraft(callsign)
        except SimulationError as e:
            logger.warning(f"Tag rotation rejected: {e}")
            return self._format_response(False, str(e), {"callsign": callsign, "error_type": type(e).__name__})
        aircraft.rotate_tag()
        return self._format_response(True, f"{callsign} tag rotated", {"callsign": callsign, "tag_angle": aircraft.tag_angle})

    @staticmethod
    def _targets(aircraft) -> Dict[str, float]:
        return {
            "heading": aircraft.target_heading,
            "speed": aircraft.target_speed,
            "altitude": aircraft.target_altitude
        }

    def _format_response(self, success: bool, message: str, data: Dict) -> Dict[str, Any]:
        """Standardized JSON response."""
        return {
            "module": "simulation",
            "success": success,
            "message": message,
            "data": data,
            "timestamp": time.time()
        }
