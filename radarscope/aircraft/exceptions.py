class AircraftException(Exception):
    """Base exception for all simulated-aircraft errors"""
    pass

class InvalidCommandError(AircraftException):
    """Controller input that cannot be applied to an aircraft"""
    def __init__(self, field: str, value, message: str = "Invalid command value"):
        """
        Args:
            field: "heading"|"speed"|"altitude"|"flight_level"|"wtc"
        """
        self.field = field
        self.value = value
        super().__init__(f"{message}: {field}={value!r}")
