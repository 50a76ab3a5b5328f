# File: src/parking_garage/domain/models.py
"""
Domain Models for the Parking Garage

This module contains:
1. Enums: Vehicle kinds, vehicle footprints and spot occupancy states
2. Entities: ParkingSpot, a single capacity unit with identity
3. Value Objects: ParkingStatus and ParkingAllocation snapshots
4. SpotPool: the partition of a floor's spots by occupancy state

A spot always represents one "full" unit of capacity. Vehicles consume
half, one or one and a half units depending on their footprint.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


# ============================================================================
# ENUMS FOR DOMAIN TYPES
# ============================================================================

class VehicleSize(Enum):
    """
    Enumeration of vehicle footprints
    Expresses how much of one parking spot a vehicle consumes
    """
    FULL = "full"                   # One whole spot
    HALF = "half"                   # Half a spot, two can share
    ONE_AND_HALF = "one_and_half"   # One whole spot plus half of another

    @property
    def capacity_units(self) -> Decimal:
        """Get the number of spot units this footprint consumes"""
        units = {
            VehicleSize.FULL: Decimal('1.0'),
            VehicleSize.HALF: Decimal('0.5'),
            VehicleSize.ONE_AND_HALF: Decimal('1.5'),
        }
        return units[self]

    def __str__(self) -> str:
        return self.value.replace('_', ' ')


class VehicleType(Enum):
    """
    Enumeration of vehicle kinds accepted by the garage
    Each kind maps to exactly one footprint
    """
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    VAN = "van"

    @property
    def size(self) -> VehicleSize:
        """Get the footprint for this vehicle kind"""
        return _VEHICLE_SIZES[self]

    @property
    def is_oversized(self) -> bool:
        """Oversized vehicles may only use the ground floor"""
        return self.size is VehicleSize.ONE_AND_HALF

    @classmethod
    def from_value(cls, value: str) -> 'VehicleType':
        """Parse a vehicle kind name, ignoring case and surrounding whitespace"""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Invalid vehicle type: {value}")

    def __str__(self) -> str:
        return self.value


_VEHICLE_SIZES: Dict[VehicleType, VehicleSize] = {
    VehicleType.CAR: VehicleSize.FULL,
    VehicleType.MOTORCYCLE: VehicleSize.HALF,
    VehicleType.VAN: VehicleSize.ONE_AND_HALF,
}

# Every vehicle kind must have a footprint
_unmapped = set(VehicleType) - set(_VEHICLE_SIZES)
if _unmapped:
    raise TypeError(f"Vehicle types without a footprint: {sorted(v.value for v in _unmapped)}")


class SpotState(Enum):
    """
    Enumeration of parking spot occupancy states
    """
    EMPTY = "empty"
    HALF_OCCUPIED = "half_occupied"
    FULLY_OCCUPIED = "fully_occupied"

    def __str__(self) -> str:
        return self.value.replace('_', ' ')


# ============================================================================
# DOMAIN ENTITIES
# ============================================================================

class ParkingSpot:
    """
    Entity: A single parking spot on a garage floor
    The id is only unique within the owning floor.
    """

    def __init__(self, id: int, state: SpotState = SpotState.EMPTY):
        self._id = id
        self._state = state

    @property
    def id(self) -> int:
        return self._id

    @property
    def state(self) -> SpotState:
        return self._state

    def set_state(self, state: SpotState) -> None:
        """Change the occupancy state. The owning floor keeps its groups in sync."""
        self._state = state

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self._id, "state": self._state.value}

    def __repr__(self) -> str:
        return f"ParkingSpot(id={self._id}, state={self._state.name})"


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)
class ParkingStatus:
    """
    Value Object: Counts of parking spots per occupancy state
    Statuses of several floors add up componentwise.
    """
    empty: int = 0
    half_occupied: int = 0
    fully_occupied: int = 0

    def __post_init__(self):
        """Validate counts"""
        if self.empty < 0 or self.half_occupied < 0 or self.fully_occupied < 0:
            raise ValueError("Parking spot counts cannot be negative")

    def __add__(self, other: 'ParkingStatus') -> 'ParkingStatus':
        if not isinstance(other, ParkingStatus):
            return NotImplemented
        return ParkingStatus(
            self.empty + other.empty,
            self.half_occupied + other.half_occupied,
            self.fully_occupied + other.fully_occupied,
        )

    @property
    def total(self) -> int:
        """Total number of spots counted"""
        return self.empty + self.half_occupied + self.fully_occupied

    def count(self, state: SpotState) -> int:
        """Get the count for a single state"""
        counts = {
            SpotState.EMPTY: self.empty,
            SpotState.HALF_OCCUPIED: self.half_occupied,
            SpotState.FULLY_OCCUPIED: self.fully_occupied,
        }
        return counts[state]

    def to_dict(self) -> Dict[str, int]:
        return {
            "empty": self.empty,
            "half_occupied": self.half_occupied,
            "fully_occupied": self.fully_occupied,
        }

    def __str__(self) -> str:
        return (
            f"{self.empty} empty, {self.half_occupied} half occupied, "
            f"{self.fully_occupied} fully occupied."
        )


@dataclass(frozen=True)
class ParkingAllocation:
    """Value Object: Where a vehicle ended up after a successful park"""
    floor_level: int
    vehicle_size: VehicleSize
    spot_ids: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "floor_level": self.floor_level,
            "vehicle_size": self.vehicle_size.value,
            "spot_ids": list(self.spot_ids),
        }


# ============================================================================
# SPOT PARTITION
# ============================================================================

class SpotPool:
    """
    Parking spots of one floor, partitioned into one group per state.

    Every spot sits in exactly one group, and the group always matches the
    spot's own state. The pool size never changes after construction.
    """

    def __init__(self, spots: Iterable[ParkingSpot] = ()):
        self._groups: Dict[SpotState, Dict[int, ParkingSpot]] = {
            state: {} for state in SpotState
        }
        self._size = 0
        for spot in spots:
            self.add(spot)

    def add(self, spot: ParkingSpot) -> None:
        if self.get(spot.id) is not None:
            raise ValueError(f"Duplicate parking spot id: {spot.id}")
        self._groups[spot.state][spot.id] = spot
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __contains__(self, spot_id: int) -> bool:
        return self.get(spot_id) is not None

    def count(self, state: SpotState) -> int:
        return len(self._groups[state])

    def get(self, spot_id: int) -> Optional[ParkingSpot]:
        for group in self._groups.values():
            if spot_id in group:
                return group[spot_id]
        return None

    def move_any(self, from_state: SpotState, to_state: SpotState) -> ParkingSpot:
        """
        Move an arbitrary spot from one state group to another
        Raises: LookupError if the source group is empty
        """
        group = self._groups[from_state]
        if not group:
            raise LookupError(f"No {from_state} parking spot left")

        _, spot = group.popitem()
        spot.set_state(to_state)
        self._groups[to_state][spot.id] = spot
        return spot

    def spots(self) -> List[ParkingSpot]:
        """All spots ordered by id"""
        return sorted(
            (spot for group in self._groups.values() for spot in group.values()),
            key=lambda spot: spot.id,
        )

    def status(self) -> ParkingStatus:
        return ParkingStatus(
            self.count(SpotState.EMPTY),
            self.count(SpotState.HALF_OCCUPIED),
            self.count(SpotState.FULLY_OCCUPIED),
        )
