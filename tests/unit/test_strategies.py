#!/usr/bin/env python3
"""
Allocation Strategy Unit Tests
"""

import unittest

from parking_garage.domain.exceptions import NoAvailableParkingSpotError
from parking_garage.domain.models import (
    ParkingSpot,
    ParkingStatus,
    SpotPool,
    SpotState,
    VehicleSize,
    VehicleType,
)
from parking_garage.domain.strategies import (
    AllocationStrategyFactory,
    FullSizeStrategy,
    HalfSizeStrategy,
    OneAndHalfSizeStrategy,
)

E = SpotState.EMPTY
H = SpotState.HALF_OCCUPIED
F = SpotState.FULLY_OCCUPIED


def make_pool(*states):
    return SpotPool(ParkingSpot(i, state) for i, state in enumerate(states))


class TestStrategyFactory(unittest.TestCase):

    def setUp(self):
        self.factory = AllocationStrategyFactory()

    def test_strategy_per_size(self):
        self.assertIsInstance(self.factory.create_for_size(VehicleSize.HALF), HalfSizeStrategy)
        self.assertIsInstance(self.factory.create_for_size(VehicleSize.FULL), FullSizeStrategy)
        self.assertIsInstance(
            self.factory.create_for_size(VehicleSize.ONE_AND_HALF), OneAndHalfSizeStrategy
        )

    def test_strategy_per_vehicle(self):
        self.assertIsInstance(self.factory.create_for_vehicle(VehicleType.MOTORCYCLE), HalfSizeStrategy)
        self.assertIsInstance(self.factory.create_for_vehicle(VehicleType.CAR), FullSizeStrategy)
        self.assertIsInstance(self.factory.create_for_vehicle(VehicleType.VAN), OneAndHalfSizeStrategy)

    def test_strategies_are_reused(self):
        self.assertIs(
            self.factory.create_for_size(VehicleSize.FULL),
            self.factory.create_for_size(VehicleSize.FULL),
        )

    def test_unknown_size(self):
        with self.assertRaises(ValueError):
            self.factory.create_for_size("huge")

    def test_strategy_name(self):
        self.assertEqual(str(OneAndHalfSizeStrategy()), "OneAndHalfSize")


class TestPlans(unittest.TestCase):
    """Transition plans for every footprint"""

    def test_half_prefers_half_occupied(self):
        self.assertEqual(HalfSizeStrategy().plan(make_pool(E, H)), [(H, F)])

    def test_half_splits_empty_when_no_half_spot(self):
        self.assertEqual(HalfSizeStrategy().plan(make_pool(E, F)), [(E, H)])

    def test_half_on_full_floor(self):
        self.assertIsNone(HalfSizeStrategy().plan(make_pool(F, F)))

    def test_full(self):
        self.assertEqual(FullSizeStrategy().plan(make_pool(H, E)), [(E, F)])
        self.assertIsNone(FullSizeStrategy().plan(make_pool(H, H)))

    def test_one_and_half_pairs_with_half_spot(self):
        self.assertEqual(
            OneAndHalfSizeStrategy().plan(make_pool(E, E, H)),
            [(E, F), (H, F)],
        )

    def test_one_and_half_uses_two_empty(self):
        self.assertEqual(
            OneAndHalfSizeStrategy().plan(make_pool(E, E, F)),
            [(E, F), (E, H)],
        )

    def test_one_and_half_does_not_fit(self):
        cases = {
            "single empty spot": make_pool(E),
            "only half spots": make_pool(H, H, H),
            "one empty, rest full": make_pool(E, F, F),
            "empty floor": make_pool(),
        }
        for name, pool in cases.items():
            with self.subTest(name):
                self.assertIsNone(OneAndHalfSizeStrategy().plan(pool))
                self.assertFalse(OneAndHalfSizeStrategy().is_available(pool))


class TestAllocate(unittest.TestCase):

    def test_allocate_returns_changed_spots(self):
        pool = make_pool(E, H)
        spots = OneAndHalfSizeStrategy().allocate(pool)

        self.assertEqual([spot.id for spot in spots], [0, 1])
        self.assertTrue(all(spot.state is F for spot in spots))
        self.assertEqual(pool.status(), ParkingStatus(0, 0, 2))

    def test_failed_allocate_leaves_pool_untouched(self):
        pool = make_pool(E, F)
        with self.assertRaises(NoAvailableParkingSpotError):
            OneAndHalfSizeStrategy().allocate(pool)
        self.assertEqual(pool.status(), ParkingStatus(1, 0, 1))
        self.assertIs(pool.get(0).state, E)


if __name__ == "__main__":
    unittest.main()
