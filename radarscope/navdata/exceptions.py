"""radarscope/navdata/exceptions.py"""

class NavDataError(Exception):
    """Base exception for navigation data errors."""
    pass

class DataProviderUnavailable(NavDataError):
    """Raised when the navigation database cannot be read."""
    def __init__(self, source, message="Navigation data unavailable"):
        self.source = source
        super().__init__(f"{message}: {source}")
