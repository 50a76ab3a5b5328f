# File: src/parking_garage/application/dtos.py
"""
Data Transfer Objects (DTOs) for the Parking Garage

DTOs carry data between the application layer and whatever sits in front
of it (CLI, web handlers, tests):
1. Input DTOs - NewGarageRequest
2. Output DTOs - ParkingStatusDTO, FloorDTO, GarageDTO, ParkingResultDTO

DTO Principles:
- Validation at creation (pydantic)
- No business logic, only data
- Built from domain objects through `from_*` class methods
"""

from typing import Any, Dict, List, Optional
import json

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.aggregates import Garage, GarageFloor
from ..domain.models import ParkingAllocation, ParkingStatus, VehicleType


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        return self.model_dump(exclude_none=exclude_none, **kwargs)

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """Create DTO from dictionary"""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        return cls(**json.loads(json_str))


# ============================================================================
# INPUT DTOs
# ============================================================================

class NewGarageRequest(BaseDTO):
    """Request to build a garage with the convenience factory"""
    floors: int = Field(..., ge=1, description="Number of floors")
    spots: int = Field(..., ge=1, description="Parking spots on the ground floor")


# ============================================================================
# OUTPUT DTOs
# ============================================================================

class ParkingStatusDTO(BaseDTO):
    """Spot counts per occupancy state"""
    empty: int = Field(..., ge=0)
    half_occupied: int = Field(..., ge=0)
    fully_occupied: int = Field(..., ge=0)
    summary: str = ""

    @classmethod
    def from_status(cls, status: ParkingStatus) -> 'ParkingStatusDTO':
        return cls(
            empty=status.empty,
            half_occupied=status.half_occupied,
            fully_occupied=status.fully_occupied,
            summary=str(status),
        )


class FloorDTO(BaseDTO):
    """One garage floor"""
    floor_level: int = Field(..., ge=1)
    parking_spot_count: int = Field(..., ge=0)
    status: ParkingStatusDTO

    @classmethod
    def from_floor(cls, floor: GarageFloor) -> 'FloorDTO':
        return cls(
            floor_level=floor.floor_level,
            parking_spot_count=floor.parking_spot_count,
            status=ParkingStatusDTO.from_status(floor.get_status()),
        )


class GarageDTO(BaseDTO):
    """Whole garage with per-floor breakdown"""
    floor_count: int = Field(..., ge=1)
    parking_spot_count: int = Field(..., ge=0)
    summary: str
    status: ParkingStatusDTO
    floors: List[FloorDTO] = Field(default_factory=list)

    @classmethod
    def from_garage(cls, garage: Garage) -> 'GarageDTO':
        return cls(
            floor_count=garage.floor_count,
            parking_spot_count=garage.parking_spot_count,
            summary=str(garage),
            status=ParkingStatusDTO.from_status(garage.get_status()),
            floors=[FloorDTO.from_floor(floor) for floor in garage.floors],
        )


class ParkingResultDTO(BaseDTO):
    """Outcome of a park or availability check"""
    success: bool
    vehicle_type: VehicleType
    message: str
    category: str = Field(..., pattern="^(success|danger|info|warning)$")
    floor_level: Optional[int] = None
    spot_ids: List[int] = Field(default_factory=list)

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError("Message cannot be empty")
        return v

    @classmethod
    def from_allocation(
        cls,
        vehicle_type: VehicleType,
        allocation: ParkingAllocation,
        message: str,
    ) -> 'ParkingResultDTO':
        return cls(
            success=True,
            vehicle_type=vehicle_type,
            message=message,
            category="success",
            floor_level=allocation.floor_level,
            spot_ids=list(allocation.spot_ids),
        )
