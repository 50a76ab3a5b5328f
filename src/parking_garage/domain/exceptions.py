# File: src/parking_garage/domain/exceptions.py
"""
Domain exceptions for the Parking Garage

Construction-time errors derive from GarageValidationError (also a
ValueError). Allocation-time errors signal that no spot fits a vehicle.
"""


class GarageError(Exception):
    """Base class for all garage domain errors"""


# ============================================================================
# CONSTRUCTION ERRORS
# ============================================================================

class GarageValidationError(GarageError, ValueError):
    """A garage cannot be built from the given floors"""


class FirstFloorMissingError(GarageValidationError):
    """The lowest floor level is not 1"""

    def __init__(self, lowest_level=None):
        self.lowest_level = lowest_level
        if lowest_level is None:
            message = "A garage needs a ground floor (level 1), but no floors were given"
        else:
            message = f"A garage needs a ground floor (level 1), lowest level is {lowest_level}"
        super().__init__(message)


class DuplicateFloorLevelError(GarageValidationError):
    """Two or more floors share a level"""

    def __init__(self, levels):
        self.levels = sorted(levels)
        super().__init__(f"Duplicate floor levels: {self.levels}")


class NonSequentialFloorLevelsError(GarageValidationError):
    """Floor levels do not form the range 1..N"""

    def __init__(self, levels):
        self.levels = sorted(levels)
        super().__init__(
            f"Floor levels must run from 1 to {len(self.levels)} without gaps, got {self.levels}"
        )


# ============================================================================
# ALLOCATION ERRORS
# ============================================================================

class NoAvailableParkingSpotError(GarageError):
    """No spot can take the vehicle"""


class FloorNotFoundError(GarageError, KeyError):
    """The garage has no floor at the requested level"""

    def __init__(self, level):
        self.level = level
        super().__init__(f"Garage has no floor at level {level}")

    def __str__(self) -> str:
        return self.args[0]
