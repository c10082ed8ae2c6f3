"""
Simulation Exceptions
Error types raised while configuring or driving the radar simulation
"""

class SimulationError(Exception):
    """Base class for all simulation errors"""
    pass

class ConfigurationError(SimulationError):
    """Invalid simulation configuration detected"""
    def __init__(self, config_name, message="Configuration error"):
        self.config_name = config_name
        super().__init__(f"{message}: {config_name}")

class UnknownAircraftError(SimulationError):
    """No aircraft with this callsign is being simulated"""
    def __init__(self, callsign, message="Unknown aircraft"):
        self.callsign = callsign
        super().__init__(f"{message}: {callsign}")
