# File: src/parking_garage/application/parking_service.py
"""
Parking Garage Application Service

Orchestrates the domain for the use cases a front end needs:
1. Park a vehicle and report where it went (or why it could not)
2. Check whether a vehicle would fit before letting it in
3. Report garage occupancy

The service is handed its garage explicitly; it never looks one up from
ambient state. A lock around each check-then-act pair makes it safe to
share one service between threads.
"""

from typing import Optional, Union
import logging
import threading

from ..domain.aggregates import Garage
from ..domain.exceptions import NoAvailableParkingSpotError
from ..domain.models import VehicleType
from ..infrastructure.factories import GarageFactory
from .dtos import GarageDTO, NewGarageRequest, ParkingResultDTO, ParkingStatusDTO


class ParkingService:
    """Application service wrapping a single garage"""

    def __init__(self, garage: Garage):
        self.garage = garage
        self.logger = logging.getLogger(self.__class__.__name__)
        self._lock = threading.Lock()

    @classmethod
    def from_request(
        cls,
        request: NewGarageRequest,
        factory: Optional[GarageFactory] = None,
    ) -> 'ParkingService':
        """Build a garage with the factory and wrap it in a service"""
        factory = factory or GarageFactory()
        return cls(factory.create_from_request(request))

    @staticmethod
    def resolve_vehicle_type(vehicle_type: Union[VehicleType, str]) -> VehicleType:
        """Accept either a VehicleType or its name"""
        if isinstance(vehicle_type, VehicleType):
            return vehicle_type
        return VehicleType.from_value(vehicle_type)

    # ========================================================================
    # COMMANDS
    # ========================================================================

    def park_vehicle(self, vehicle_type: Union[VehicleType, str]) -> ParkingResultDTO:
        """
        Park a vehicle of the given kind
        A full garage is reported in the result, not raised.
        """
        vehicle = self.resolve_vehicle_type(vehicle_type)

        with self._lock:
            try:
                allocation = self.garage.park_vehicle(vehicle)
            except NoAvailableParkingSpotError as e:
                self.logger.warning(f"Could not park a {vehicle}: {e}")
                return ParkingResultDTO(
                    success=False,
                    vehicle_type=vehicle,
                    message=f"Could not park a {vehicle}.",
                    category="danger",
                )

        self.logger.info(f"Parked a {vehicle} on floor {allocation.floor_level}")
        return ParkingResultDTO.from_allocation(
            vehicle,
            allocation,
            message=f"Successfully parked a {vehicle}.",
        )

    # ========================================================================
    # QUERIES
    # ========================================================================

    def check_parking_spot(self, vehicle_type: Union[VehicleType, str]) -> ParkingResultDTO:
        """Tell whether a vehicle of the given kind would fit right now"""
        vehicle = self.resolve_vehicle_type(vehicle_type)

        with self._lock:
            available = self.garage.has_parking_spot(vehicle)

        if available:
            return ParkingResultDTO(
                success=True,
                vehicle_type=vehicle,
                message=f"There is a parking spot for a {vehicle}. Welcome, please go in",
                category="info",
            )
        return ParkingResultDTO(
            success=False,
            vehicle_type=vehicle,
            message=f"Sorry, no spaces left for a {vehicle}",
            category="warning",
        )

    def get_status(self) -> ParkingStatusDTO:
        with self._lock:
            return ParkingStatusDTO.from_status(self.garage.get_status())

    def get_garage_summary(self) -> GarageDTO:
        with self._lock:
            return GarageDTO.from_garage(self.garage)
