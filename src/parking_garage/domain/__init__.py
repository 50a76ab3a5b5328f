"""Domain layer: spots, floors, the garage and allocation strategies."""

from .aggregates import GROUND_FLOOR, Garage, GarageFloor, ParkingArea
from .exceptions import (
    DuplicateFloorLevelError,
    FirstFloorMissingError,
    FloorNotFoundError,
    GarageError,
    GarageValidationError,
    NoAvailableParkingSpotError,
    NonSequentialFloorLevelsError,
)
from .models import (
    ParkingAllocation,
    ParkingSpot,
    ParkingStatus,
    SpotPool,
    SpotState,
    VehicleSize,
    VehicleType,
)
from .strategies import (
    AllocationStrategy,
    AllocationStrategyFactory,
    FullSizeStrategy,
    HalfSizeStrategy,
    OneAndHalfSizeStrategy,
)
