# File: src/parking_garage/domain/aggregates.py
"""
Aggregate Roots for the Parking Garage
Following Domain-Driven Design (DDD) Aggregate Pattern

Aggregates:
1. GarageFloor - owns the parking spots of one level
2. Garage - owns the floors and routes vehicles between them

Key Concepts:
- Spots are only ever changed through their floor
- Floors are only reached through the garage once it is built
- Garage topology (set of floors and their levels) is fixed at construction
- A failed park leaves every spot untouched
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .exceptions import (
    DuplicateFloorLevelError,
    FirstFloorMissingError,
    FloorNotFoundError,
    NoAvailableParkingSpotError,
    NonSequentialFloorLevelsError,
)
from .models import (
    ParkingAllocation,
    ParkingSpot,
    ParkingStatus,
    SpotPool,
    SpotState,
)
from .strategies import AllocationStrategyFactory, default_strategy_factory

GROUND_FLOOR = 1


# ============================================================================
# BASE AGGREGATE
# ============================================================================

class ParkingArea(ABC):
    """
    Base class for everything a vehicle can be parked in
    Provides versioning and a per-class logger

    `vehicle` arguments are anything exposing `size` (a VehicleSize) and
    `is_oversized`, such as a VehicleType member.
    """

    def __init__(self):
        self._version: int = 1
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def version(self) -> int:
        """Get current aggregate version"""
        return self._version

    def _increment_version(self) -> None:
        """Increment version after state change"""
        self._version += 1

    @abstractmethod
    def has_parking_spot(self, vehicle) -> bool:
        pass

    @abstractmethod
    def park_vehicle(self, vehicle) -> ParkingAllocation:
        pass

    @abstractmethod
    def get_status(self) -> ParkingStatus:
        pass

    @property
    @abstractmethod
    def parking_spot_count(self) -> int:
        pass


# ============================================================================
# GARAGE FLOOR AGGREGATE
# ============================================================================

class GarageFloor(ParkingArea):
    """
    Aggregate Root: One level of the garage and its parking spots

    The declared capacity is fixed for the lifetime of the floor. When it is
    larger than the list of spots passed in, the floor is topped up with
    empty spots, so only the occupied spots have to be listed.
    """

    def __init__(
        self,
        floor_level: int,
        parking_spots: Optional[Iterable[ParkingSpot]] = None,
        parking_spot_count: Optional[int] = None,
        strategy_factory: Optional[AllocationStrategyFactory] = None,
    ):
        super().__init__()
        if floor_level < GROUND_FLOOR:
            raise ValueError(f"Floor level must be at least {GROUND_FLOOR}, got {floor_level}")

        spots = list(parking_spots or [])
        if parking_spot_count is None:
            parking_spot_count = len(spots)
        if parking_spot_count < len(spots):
            raise ValueError(
                f"Floor {floor_level} declares {parking_spot_count} parking spots "
                f"but {len(spots)} were given"
            )

        self._floor_level = floor_level
        self._parking_spot_count = parking_spot_count
        self._strategies = strategy_factory or default_strategy_factory
        self._pool = SpotPool(spots)
        self._fill_with_empty_spots()

        self._logger.debug(f"Created floor {floor_level}: {self._pool.status()}")

    def _fill_with_empty_spots(self) -> None:
        """Add empty spots until the pool reaches the declared capacity"""
        missing = self._parking_spot_count - len(self._pool)
        next_id = 0
        while missing > 0:
            if next_id not in self._pool:
                self._pool.add(ParkingSpot(next_id))
                missing -= 1
            next_id += 1

    @classmethod
    def create(
        cls,
        floor_level: int,
        parking_spot_count: int,
        state: SpotState = SpotState.EMPTY,
        strategy_factory: Optional[AllocationStrategyFactory] = None,
    ) -> 'GarageFloor':
        """Create a floor of `parking_spot_count` spots, ids 0..count-1, all in `state`"""
        if parking_spot_count < 0:
            raise ValueError("Parking spot count cannot be negative")

        spots = [ParkingSpot(i, state) for i in range(parking_spot_count)]
        return cls(floor_level, spots, parking_spot_count, strategy_factory)

    @property
    def floor_level(self) -> int:
        return self._floor_level

    @property
    def parking_spot_count(self) -> int:
        return self._parking_spot_count

    @property
    def parking_spots(self) -> List[ParkingSpot]:
        """Spots on this floor ordered by id"""
        return self._pool.spots()

    def get_spot(self, spot_id: int) -> ParkingSpot:
        spot = self._pool.get(spot_id)
        if spot is None:
            raise KeyError(f"Floor {self._floor_level} has no parking spot {spot_id}")
        return spot

    def accepts(self, vehicle) -> bool:
        """Oversized vehicles are only allowed on the ground floor"""
        return not (vehicle.is_oversized and self._floor_level > GROUND_FLOOR)

    def has_parking_spot(self, vehicle) -> bool:
        if not self.accepts(vehicle):
            return False
        return self._strategies.create_for_vehicle(vehicle).is_available(self._pool)

    def park_vehicle(self, vehicle) -> ParkingAllocation:
        """
        Park a vehicle on this floor
        Floor eligibility is the caller's responsibility, see has_parking_spot().
        Raises: NoAvailableParkingSpotError if no spot fits
        """
        strategy = self._strategies.create_for_vehicle(vehicle)
        try:
            spots = strategy.allocate(self._pool)
        except NoAvailableParkingSpotError:
            self._logger.warning(f"No parking spot for a {vehicle.size} vehicle on floor {self._floor_level}")
            raise

        self._increment_version()
        allocation = ParkingAllocation(
            floor_level=self._floor_level,
            vehicle_size=vehicle.size,
            spot_ids=tuple(spot.id for spot in spots),
        )
        self._logger.info(
            f"Parked {vehicle.size} vehicle on floor {self._floor_level}, spots {list(allocation.spot_ids)}"
        )
        return allocation

    def get_status(self) -> ParkingStatus:
        return self._pool.status()

    def __repr__(self) -> str:
        return (
            f"GarageFloor(floor_level={self._floor_level}, "
            f"parking_spot_count={self._parking_spot_count})"
        )


# ============================================================================
# GARAGE AGGREGATE
# ============================================================================

class Garage(ParkingArea):
    """
    Aggregate Root: A multi-floor garage

    Floors must be numbered 1..N without gaps or duplicates; the order in
    which they are passed in does not matter. Vehicles are parked on the
    lowest floor with room (first fit), except oversized vehicles, which
    only ever go to the ground floor.
    """

    def __init__(self, floors: Iterable[GarageFloor]):
        super().__init__()
        floors = list(floors)
        self._validate(floors)

        self._floors: Dict[int, GarageFloor] = {
            floor.floor_level: floor
            for floor in sorted(floors, key=lambda floor: floor.floor_level)
        }
        self._floor_count = len(self._floors)
        self._parking_spot_count = sum(floor.parking_spot_count for floor in floors)

        self._logger.info(f"Created garage: {self}")

    @staticmethod
    def _validate(floors: List[GarageFloor]) -> List[int]:
        """
        Check that floor levels are exactly 1..N
        Returns: the levels in ascending order
        """
        levels = [floor.floor_level for floor in floors]

        if not levels:
            raise FirstFloorMissingError()

        lowest = min(levels)
        if lowest != GROUND_FLOOR:
            raise FirstFloorMissingError(lowest)

        duplicates = [level for level, count in Counter(levels).items() if count > 1]
        if duplicates:
            raise DuplicateFloorLevelError(duplicates)

        ordered = sorted(levels)
        if ordered != list(range(GROUND_FLOOR, len(levels) + 1)):
            raise NonSequentialFloorLevelsError(levels)

        return ordered

    @property
    def floor_count(self) -> int:
        return self._floor_count

    @property
    def parking_spot_count(self) -> int:
        """Sum of declared floor capacities"""
        return self._parking_spot_count

    @property
    def floors(self) -> Tuple[GarageFloor, ...]:
        """Floors in ascending level order"""
        return tuple(self._floors.values())

    def get_floor(self, level: int) -> GarageFloor:
        try:
            return self._floors[level]
        except KeyError:
            raise FloorNotFoundError(level) from None

    def has_parking_spot(self, vehicle) -> bool:
        if vehicle.is_oversized:
            return self.get_floor(GROUND_FLOOR).has_parking_spot(vehicle)

        return any(floor.has_parking_spot(vehicle) for floor in self._floors.values())

    def park_vehicle(self, vehicle) -> ParkingAllocation:
        """
        Park a vehicle on the first floor that has room
        Raises: NoAvailableParkingSpotError if no floor can take it
        """
        if vehicle.is_oversized:
            allocation = self.get_floor(GROUND_FLOOR).park_vehicle(vehicle)
            self._increment_version()
            return allocation

        for floor in self._floors.values():
            if floor.has_parking_spot(vehicle):
                allocation = floor.park_vehicle(vehicle)
                self._increment_version()
                return allocation

        self._logger.warning(f"Garage is full for a {vehicle.size} vehicle")
        raise NoAvailableParkingSpotError(f"No parking spot available for a {vehicle.size} vehicle")

    def get_status(self) -> ParkingStatus:
        return sum((floor.get_status() for floor in self._floors.values()), ParkingStatus())

    def __str__(self) -> str:
        return f"{self._floor_count} floors with a total of {self._parking_spot_count} parking spots."

    def __repr__(self) -> str:
        return f"Garage(floors={list(self._floors.values())!r})"
