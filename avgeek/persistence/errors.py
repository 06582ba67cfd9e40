"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class FlightImportError(PersistenceError):
    """Raised when an import could not be merged. The log is left untouched."""


class ImportParseError(FlightImportError):
    """Raised when an import buffer is not a valid JSON array of flight logs."""


class ImportReadError(FlightImportError):
    """Raised when an import file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class DuplicateFlightError(PersistenceError):
    """Raised when appending a flight whose id is already in the log."""

    def __init__(self, flight_id: str):
        self.flight_id = flight_id
        super().__init__(f"flight {flight_id} already logged")


class UnknownAirportError(PersistenceError):
    """Raised when a flight names an airport code the catalog cannot resolve."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"airport {code} not found")


class UnknownAircraftError(PersistenceError):
    """Raised when a flight names an aircraft id the catalog cannot resolve."""

    def __init__(self, aircraft_id: str):
        self.aircraft_id = aircraft_id
        super().__init__(f"aircraft {aircraft_id} not found")
