#!/usr/bin/env python3
"""
Application Layer Unit Tests

Tests for DTOs, ParkingService and the command processor.
"""

import threading
import unittest
from unittest.mock import Mock

from pydantic import ValidationError

from parking_garage.application.commands import (
    CheckParkingSpotCommand,
    CommandProcessor,
    ParkVehicleCommand,
)
from parking_garage.application.dtos import (
    GarageDTO,
    NewGarageRequest,
    ParkingResultDTO,
    ParkingStatusDTO,
)
from parking_garage.application.parking_service import ParkingService
from parking_garage.domain.aggregates import Garage, GarageFloor
from parking_garage.domain.exceptions import NoAvailableParkingSpotError
from parking_garage.domain.models import ParkingStatus, SpotState, VehicleType


# ============================================================================
# DTO TESTS
# ============================================================================

class TestDTOs(unittest.TestCase):

    def test_new_garage_request_validation(self):
        request = NewGarageRequest(floors=3, spots=5)
        self.assertEqual((request.floors, request.spots), (3, 5))

        for floors, spots in [(0, 5), (3, 0), (-1, -1)]:
            with self.subTest(floors=floors, spots=spots):
                with self.assertRaises(ValidationError):
                    NewGarageRequest(floors=floors, spots=spots)

    def test_new_garage_request_from_json(self):
        request = NewGarageRequest.from_json('{"floors": 2, "spots": 4}')
        self.assertEqual(request.to_dict(), {"floors": 2, "spots": 4})

    def test_status_dto_from_status(self):
        dto = ParkingStatusDTO.from_status(ParkingStatus(1, 2, 3))
        self.assertEqual(dto.empty, 1)
        self.assertEqual(dto.half_occupied, 2)
        self.assertEqual(dto.fully_occupied, 3)
        self.assertEqual(dto.summary, "1 empty, 2 half occupied, 3 fully occupied.")

    def test_garage_dto(self):
        garage = Garage([GarageFloor.create(1, 3), GarageFloor.create(2, 2, SpotState.HALF_OCCUPIED)])
        dto = GarageDTO.from_garage(garage)

        self.assertEqual(dto.floor_count, 2)
        self.assertEqual(dto.parking_spot_count, 5)
        self.assertEqual(dto.summary, "2 floors with a total of 5 parking spots.")
        self.assertEqual([floor.floor_level for floor in dto.floors], [1, 2])
        self.assertEqual(dto.floors[1].status.half_occupied, 2)
        self.assertEqual(dto.to_dict()["status"]["empty"], 3)

    def test_result_dto_rejects_unknown_category(self):
        with self.assertRaises(ValidationError):
            ParkingResultDTO(success=True, vehicle_type=VehicleType.CAR, message="ok", category="other")

    def test_result_dto_rejects_blank_message(self):
        with self.assertRaises(ValidationError):
            ParkingResultDTO(success=True, vehicle_type=VehicleType.CAR, message="  ", category="info")

    def test_result_dto_serializes_vehicle_type_as_value(self):
        dto = ParkingResultDTO(success=False, vehicle_type=VehicleType.VAN, message="x", category="danger")
        self.assertEqual(dto.to_dict()["vehicle_type"], "van")
        self.assertIn('"vehicle_type":"van"', dto.to_json())


# ============================================================================
# SERVICE TESTS
# ============================================================================

class TestParkingService(unittest.TestCase):

    def setUp(self):
        self.garage = Garage([GarageFloor.create(1, 2), GarageFloor.create(2, 1)])
        self.service = ParkingService(self.garage)

    def test_park_vehicle_success(self):
        result = self.service.park_vehicle(VehicleType.CAR)

        self.assertTrue(result.success)
        self.assertEqual(result.category, "success")
        self.assertEqual(result.message, "Successfully parked a car.")
        self.assertEqual(result.floor_level, 1)
        self.assertEqual(len(result.spot_ids), 1)

    def test_park_vehicle_by_name(self):
        result = self.service.park_vehicle("Van")
        self.assertTrue(result.success)
        self.assertEqual(result.vehicle_type, "van")
        self.assertEqual(self.garage.get_status(), ParkingStatus(1, 1, 1))

    def test_park_vehicle_failure(self):
        self.service.park_vehicle("van")
        result = self.service.park_vehicle("van")

        self.assertFalse(result.success)
        self.assertEqual(result.category, "danger")
        self.assertEqual(result.message, "Could not park a van.")
        self.assertIsNone(result.floor_level)
        self.assertEqual(result.spot_ids, [])

    def test_park_vehicle_unknown_type(self):
        with self.assertRaises(ValueError):
            self.service.park_vehicle("boat")

    def test_check_parking_spot(self):
        result = self.service.check_parking_spot("motorcycle")
        self.assertTrue(result.success)
        self.assertEqual(result.category, "info")
        self.assertEqual(result.message, "There is a parking spot for a motorcycle. Welcome, please go in")

        self.service.park_vehicle("van")
        result = self.service.check_parking_spot("van")
        self.assertFalse(result.success)
        self.assertEqual(result.category, "warning")
        self.assertEqual(result.message, "Sorry, no spaces left for a van")

    def test_check_does_not_park(self):
        self.service.check_parking_spot("car")
        self.assertEqual(self.service.get_status().empty, 3)

    def test_status_and_summary(self):
        self.service.park_vehicle("motorcycle")

        self.assertEqual(self.service.get_status().summary, "2 empty, 1 half occupied, 0 fully occupied.")
        self.assertEqual(
            self.service.get_garage_summary().summary,
            "2 floors with a total of 3 parking spots.",
        )

    def test_from_request(self):
        service = ParkingService.from_request(NewGarageRequest(floors=3, spots=4))
        self.assertEqual(
            [floor.parking_spot_count for floor in service.garage.floors],
            [4, 3, 2],
        )

    def test_uses_given_garage(self):
        garage = Mock(spec=Garage)
        garage.park_vehicle.side_effect = NoAvailableParkingSpotError()
        service = ParkingService(garage)

        result = service.park_vehicle("car")

        garage.park_vehicle.assert_called_once_with(VehicleType.CAR)
        self.assertFalse(result.success)

    def test_concurrent_parks_never_oversubscribe(self):
        garage = Garage([GarageFloor.create(1, 10), GarageFloor.create(2, 10)])
        service = ParkingService(garage)
        results = []

        def park_many():
            for _ in range(10):
                results.append(service.park_vehicle("car"))

        threads = [threading.Thread(target=park_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sum(1 for r in results if r.success), 20)
        self.assertEqual(garage.get_status(), ParkingStatus(0, 0, 20))


# ============================================================================
# COMMAND TESTS
# ============================================================================

class TestCommands(unittest.TestCase):

    def setUp(self):
        self.service = ParkingService(Garage([GarageFloor.create(1, 2)]))
        self.processor = CommandProcessor(self.service)

    def test_command_validation(self):
        self.assertEqual(ParkVehicleCommand("car").validate(), (True, []))
        self.assertEqual(CheckParkingSpotCommand(VehicleType.VAN).validate(), (True, []))

        is_valid, errors = ParkVehicleCommand("boat").validate()
        self.assertFalse(is_valid)
        self.assertEqual(errors, ["Invalid vehicle type: boat"])

    def test_processor_rejects_invalid_command(self):
        with self.assertRaises(ValueError):
            self.processor.execute(ParkVehicleCommand("boat"))
        self.assertEqual(self.processor.get_history(), [])

    def test_processor_executes_and_records(self):
        results = self.processor.execute_many([
            CheckParkingSpotCommand("van"),
            ParkVehicleCommand("van"),
            ParkVehicleCommand("car"),
        ])

        self.assertEqual([r.success for r in results], [True, True, False])
        history = self.processor.get_history()
        self.assertEqual(len(history), 3)
        self.assertEqual(history[1]["command"]["command_type"], "ParkVehicleCommand")
        self.assertIsNotNone(history[1]["command"]["executed_at"])
        self.assertEqual(history[2]["result"]["message"], "Could not park a car.")

        self.processor.clear_history()
        self.assertEqual(self.processor.get_history(), [])

    def test_command_description(self):
        self.assertEqual(ParkVehicleCommand("car").get_description(), "ParkVehicle (car)")
        self.assertEqual(CheckParkingSpotCommand("van").get_description(), "CheckParkingSpot (van)")

    def test_command_with_mock_service(self):
        service = Mock(spec=ParkingService)
        ParkVehicleCommand("motorcycle").execute(service)
        service.park_vehicle.assert_called_once_with("motorcycle")


if __name__ == "__main__":
    unittest.main()
