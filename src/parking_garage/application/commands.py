# File: src/parking_garage/application/commands.py
"""
Command Pattern Implementation for the Parking Garage

Parking operations are wrapped as command objects so that a front end can
validate, execute and audit them uniformly.

Command Types:
1. ParkVehicleCommand - park a vehicle of a given kind
2. CheckParkingSpotCommand - check availability for a vehicle kind
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union
import logging
import uuid

from ..domain.models import VehicleType
from .dtos import ParkingResultDTO
from .parking_service import ParkingService


# ============================================================================
# COMMAND INTERFACES AND BASE CLASSES
# ============================================================================

class Command(ABC):
    """
    Abstract base class for all commands

    A command represents an intent to act on the garage.
    Commands are named in the imperative (e.g., ParkVehicleCommand).
    """

    def __init__(self, command_id: Optional[str] = None):
        self.command_id = command_id or str(uuid.uuid4())
        self.executed_at: Optional[datetime] = None
        self.logger = logging.getLogger(self.__class__.__name__)

        self.metadata = {
            "command_id": self.command_id,
            "command_type": self.__class__.__name__,
            "created_at": datetime.now().isoformat()
        }

    @abstractmethod
    def execute(self, service: ParkingService) -> ParkingResultDTO:
        """Execute the command using the provided service"""
        pass

    @abstractmethod
    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate command parameters before execution

        Returns: (is_valid, error_messages)
        """
        pass

    def get_description(self) -> str:
        """Get human-readable command description"""
        return self.__class__.__name__.replace("Command", "")

    def to_dict(self) -> Dict[str, Any]:
        """Convert command to dictionary for serialization"""
        return {
            "command_id": self.command_id,
            "command_type": self.__class__.__name__,
            "metadata": self.metadata,
            "executed_at": self.executed_at.isoformat() if self.executed_at else None,
        }


class VehicleCommand(Command):
    """Base class for commands that act on one vehicle kind"""

    def __init__(self, vehicle_type: Union[VehicleType, str], command_id: Optional[str] = None):
        super().__init__(command_id)
        self.vehicle_type = vehicle_type
        self.metadata["vehicle_type"] = str(vehicle_type)

    def validate(self) -> Tuple[bool, List[str]]:
        errors = []
        try:
            ParkingService.resolve_vehicle_type(self.vehicle_type)
        except ValueError as e:
            errors.append(str(e))
        return len(errors) == 0, errors

    def get_description(self) -> str:
        return f"{super().get_description()} ({self.vehicle_type})"


# ============================================================================
# CONCRETE COMMANDS
# ============================================================================

class ParkVehicleCommand(VehicleCommand):
    """Park a vehicle in the garage"""

    def execute(self, service: ParkingService) -> ParkingResultDTO:
        self.logger.info(f"Executing park command for {self.vehicle_type}")
        result = service.park_vehicle(self.vehicle_type)
        self.executed_at = datetime.now()
        return result


class CheckParkingSpotCommand(VehicleCommand):
    """Check whether a vehicle would fit"""

    def execute(self, service: ParkingService) -> ParkingResultDTO:
        self.logger.debug(f"Executing availability check for {self.vehicle_type}")
        result = service.check_parking_spot(self.vehicle_type)
        self.executed_at = datetime.now()
        return result


# ============================================================================
# COMMAND PROCESSOR
# ============================================================================

class CommandProcessor:
    """
    Validates and executes commands against one parking service
    Keeps an audit trail of executed commands and their results
    """

    def __init__(self, service: ParkingService):
        self.service = service
        self.logger = logging.getLogger(self.__class__.__name__)
        self._history: List[Dict[str, Any]] = []

    def execute(self, command: Command) -> ParkingResultDTO:
        """
        Validate and run a command
        Raises: ValueError if the command does not validate
        """
        is_valid, errors = command.validate()
        if not is_valid:
            self.logger.error(f"Rejected {command.get_description()}: {'; '.join(errors)}")
            raise ValueError(f"Invalid command {command.command_id}: {'; '.join(errors)}")

        result = command.execute(self.service)
        self._history.append({
            "command": command.to_dict(),
            "result": result.to_dict(),
        })
        return result

    def execute_many(self, commands: List[Command]) -> List[ParkingResultDTO]:
        return [self.execute(command) for command in commands]

    def get_history(self) -> List[Dict[str, Any]]:
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()
