# File: src/parking_garage/main.py
"""
Command line entry point for the Parking Garage

Builds a garage with the factory, then parks (or checks) each vehicle
given on the command line in order and prints the outcome.

    parking-garage --floors 3 --spots 4 van car motorcycle motorcycle
"""

import argparse
import logging
import sys
from typing import List, Optional

from .application.commands import CheckParkingSpotCommand, CommandProcessor, ParkVehicleCommand
from .application.dtos import NewGarageRequest
from .application.parking_service import ParkingService
from .domain.models import VehicleType


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Setup application logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parking-garage",
        description="Park vehicles in a multi-floor garage",
    )
    parser.add_argument("vehicles", nargs="*", metavar="VEHICLE",
                        help="vehicles to park, in order (car, motorcycle, van)")
    parser.add_argument("--floors", type=int, default=3, help="number of floors (default: 3)")
    parser.add_argument("--spots", type=int, default=5,
                        help="parking spots on the ground floor (default: 5)")
    parser.add_argument("--check", action="store_true",
                        help="only check availability instead of parking")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.log_level)

    if args.floors < 1 or args.spots < 1:
        parser.error("--floors and --spots must be at least 1")

    known = {v.value for v in VehicleType}
    unknown = [v for v in args.vehicles if v.lower() not in known]
    if unknown:
        parser.error(f"unknown vehicle type(s): {', '.join(unknown)} (choose from {', '.join(sorted(known))})")

    service = ParkingService.from_request(NewGarageRequest(floors=args.floors, spots=args.spots))
    processor = CommandProcessor(service)
    logger.info(f"Garage ready: {service.garage}")

    command_class = CheckParkingSpotCommand if args.check else ParkVehicleCommand
    for vehicle in args.vehicles:
        result = processor.execute(command_class(vehicle))
        print(result.message)

    summary = service.get_garage_summary()
    print(summary.summary)
    print(summary.status.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
