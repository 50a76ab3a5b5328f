# File: src/parking_garage/infrastructure/factories.py
"""
Factory Pattern Implementation for the Parking Garage

1. GarageFactory - builds a garage from a floor count and a ground floor
   size, shrinking each higher floor by one spot down to a minimum
2. GarageBuilder - step by step construction of a garage with explicit
   floors, including floors with partial initial occupancy

Both end in the Garage constructor, so floor level validation always runs.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from ..application.dtos import NewGarageRequest
from ..domain.aggregates import Garage, GarageFloor
from ..domain.models import ParkingSpot, SpotState


@dataclass
class FactoryPolicies:
    """Value Object: Rules the garage factory builds by"""
    min_spots_per_floor: int = 2

    def __post_init__(self):
        """Validate policy values"""
        if self.min_spots_per_floor < 1:
            raise ValueError("Minimum spots per floor must be at least 1")


class GarageFactory:
    """Factory for creating Garage aggregates from a couple of numbers"""

    def __init__(self, policies: Optional[FactoryPolicies] = None):
        self.policies = policies or FactoryPolicies()
        self.logger = logging.getLogger(self.__class__.__name__)

    def floor_sizes(self, floor_count: int, highest_spot_count: int) -> List[int]:
        """Spot count per floor, ground floor first"""
        if floor_count < 1:
            raise ValueError(f"A garage needs at least one floor, got {floor_count}")
        if highest_spot_count < 1:
            raise ValueError(f"A floor needs at least one parking spot, got {highest_spot_count}")

        return [
            max(self.policies.min_spots_per_floor, highest_spot_count - (level - 1))
            for level in range(1, floor_count + 1)
        ]

    def create(self, floor_count: int, highest_spot_count: int) -> Garage:
        """
        Create a garage with `floor_count` empty floors
        The ground floor gets `highest_spot_count` spots, every floor above one less,
        but never fewer than the policy minimum.
        """
        sizes = self.floor_sizes(floor_count, highest_spot_count)
        self.logger.debug(f"Creating garage with floor sizes {sizes}")

        return Garage(
            GarageFloor.create(level, size)
            for level, size in enumerate(sizes, start=1)
        )

    def create_from_request(self, request: NewGarageRequest) -> Garage:
        """Create garage from DTO"""
        return self.create(request.floors, request.spots)


class GarageBuilder:
    """Builder for garages with hand-picked floors"""

    def __init__(self):
        self.reset()

    def reset(self) -> 'GarageBuilder':
        """Reset builder state"""
        self.floors: List[GarageFloor] = []
        return self

    def add_floor(
        self,
        floor_level: int,
        parking_spot_count: int,
        state: SpotState = SpotState.EMPTY,
    ) -> 'GarageBuilder':
        """Add a floor whose spots all start in the same state"""
        self.floors.append(GarageFloor.create(floor_level, parking_spot_count, state))
        return self

    def add_floor_with_spots(
        self,
        floor_level: int,
        parking_spots: Iterable[ParkingSpot],
        parking_spot_count: Optional[int] = None,
    ) -> 'GarageBuilder':
        """Add a floor from explicit spots, topped up with empty spots up to the count"""
        self.floors.append(GarageFloor(floor_level, parking_spots, parking_spot_count))
        return self

    def build(self) -> Garage:
        """Build the garage and reset the builder"""
        garage = Garage(self.floors)
        self.reset()
        return garage
