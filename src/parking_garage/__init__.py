"""
Parking Garage

Allocates parking spots in a multi-floor garage to cars, motorcycles and
vans. Motorcycles share spots, vans take one and a half spots and may only
use the ground floor.
"""

from .domain import (
    DuplicateFloorLevelError,
    FirstFloorMissingError,
    FloorNotFoundError,
    Garage,
    GarageError,
    GarageFloor,
    GarageValidationError,
    NoAvailableParkingSpotError,
    NonSequentialFloorLevelsError,
    ParkingAllocation,
    ParkingSpot,
    ParkingStatus,
    SpotState,
    VehicleSize,
    VehicleType,
)

__version__ = "1.0.0"
