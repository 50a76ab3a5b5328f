# File: src/parking_garage/domain/strategies.py
"""
Strategy Pattern Implementation for Spot Allocation

Each vehicle footprint has its own allocation strategy. A strategy looks at
the state groups of a floor's SpotPool and produces a plan: the ordered list
of state transitions needed to fit the vehicle. The plan is computed in full
before any spot is touched, so a failed allocation never leaves the pool
half-mutated.

Strategies:
1. HalfSizeStrategy - motorcycles, reuses half occupied spots first
2. FullSizeStrategy - cars, takes one empty spot
3. OneAndHalfSizeStrategy - vans, completes a half spot plus one empty spot,
   or takes one empty spot fully and splits a second one
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
import logging

from .exceptions import NoAvailableParkingSpotError
from .models import ParkingSpot, SpotPool, SpotState, VehicleSize

Transition = Tuple[SpotState, SpotState]


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class AllocationStrategy(ABC):
    """
    Abstract base class for allocation strategies
    Defines how a vehicle footprint is mapped onto spot state transitions
    """

    size: VehicleSize

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def plan(self, pool: SpotPool) -> Optional[List[Transition]]:
        """
        Work out the transitions needed to fit one vehicle
        Returns: list of (from_state, to_state) pairs, or None if it does not fit
        """
        pass

    def is_available(self, pool: SpotPool) -> bool:
        return self.plan(pool) is not None

    def allocate(self, pool: SpotPool) -> List[ParkingSpot]:
        """
        Apply the plan to the pool
        Returns: the spots that changed state, in plan order
        Raises: NoAvailableParkingSpotError if the vehicle does not fit
        """
        transitions = self.plan(pool)
        if transitions is None:
            raise NoAvailableParkingSpotError(f"No parking spot available for a {self.size} vehicle")

        self.logger.debug(
            f"Allocating {self.size} vehicle: "
            + ", ".join(f"{src.name} -> {dst.name}" for src, dst in transitions)
        )
        return [pool.move_any(src, dst) for src, dst in transitions]

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("Strategy", "")

    def __str__(self) -> str:
        return self.get_strategy_name()


# ============================================================================
# CONCRETE STRATEGIES
# ============================================================================

class HalfSizeStrategy(AllocationStrategy):
    """
    Strategy: Half footprint vehicles
    - Always completes a half occupied spot if there is one
    - Only splits an empty spot when no half occupied spot is left
    """

    size = VehicleSize.HALF

    def plan(self, pool: SpotPool) -> Optional[List[Transition]]:
        if pool.count(SpotState.HALF_OCCUPIED) > 0:
            return [(SpotState.HALF_OCCUPIED, SpotState.FULLY_OCCUPIED)]
        if pool.count(SpotState.EMPTY) > 0:
            return [(SpotState.EMPTY, SpotState.HALF_OCCUPIED)]
        return None


class FullSizeStrategy(AllocationStrategy):
    """Strategy: Full footprint vehicles need one empty spot"""

    size = VehicleSize.FULL

    def plan(self, pool: SpotPool) -> Optional[List[Transition]]:
        if pool.count(SpotState.EMPTY) > 0:
            return [(SpotState.EMPTY, SpotState.FULLY_OCCUPIED)]
        return None


class OneAndHalfSizeStrategy(AllocationStrategy):
    """
    Strategy: One and a half footprint vehicles
    - Prefers pairing an empty spot with an existing half occupied spot
    - Otherwise fills one empty spot and splits another
    """

    size = VehicleSize.ONE_AND_HALF

    def plan(self, pool: SpotPool) -> Optional[List[Transition]]:
        empty = pool.count(SpotState.EMPTY)

        if pool.count(SpotState.HALF_OCCUPIED) > 0 and empty > 0:
            return [
                (SpotState.EMPTY, SpotState.FULLY_OCCUPIED),
                (SpotState.HALF_OCCUPIED, SpotState.FULLY_OCCUPIED),
            ]
        if empty > 1:
            return [
                (SpotState.EMPTY, SpotState.FULLY_OCCUPIED),
                (SpotState.EMPTY, SpotState.HALF_OCCUPIED),
            ]
        return None


# ============================================================================
# STRATEGY FACTORY
# ============================================================================

class AllocationStrategyFactory:
    """Factory for the allocation strategy matching a vehicle footprint"""

    _strategy_classes = {
        VehicleSize.HALF: HalfSizeStrategy,
        VehicleSize.FULL: FullSizeStrategy,
        VehicleSize.ONE_AND_HALF: OneAndHalfSizeStrategy,
    }

    def __init__(self):
        # One shared instance per footprint
        self._strategies: Dict[VehicleSize, AllocationStrategy] = {}

    def create_for_size(self, size: VehicleSize) -> AllocationStrategy:
        """Get the strategy for a footprint"""
        if size not in self._strategies:
            strategy_class = self._strategy_classes.get(size)
            if strategy_class is None:
                raise ValueError(f"Unknown vehicle size: {size}")
            self._strategies[size] = strategy_class()
        return self._strategies[size]

    def create_for_vehicle(self, vehicle) -> AllocationStrategy:
        """Get the strategy for anything exposing a `size` footprint"""
        return self.create_for_size(vehicle.size)


_missing = set(VehicleSize) - set(AllocationStrategyFactory._strategy_classes)
if _missing:
    raise TypeError(f"Vehicle sizes without an allocation strategy: {sorted(s.value for s in _missing)}")

default_strategy_factory = AllocationStrategyFactory()
