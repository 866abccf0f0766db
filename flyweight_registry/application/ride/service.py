"""Ride assignment application service."""

from typing import Dict, List, Union

from flyweight_registry.domain.ride.ride_assignment import Location, RideAssignment
from flyweight_registry.domain.vehicle.value_objects import VehicleAttributes
from flyweight_registry.infrastructure.logging.logger import get_logger
from flyweight_registry.infrastructure.registry.vehicle_type_registry import (
    VehicleTypeRegistry,
)


def _as_location(value: Union[str, Location]) -> Location:
    return value if isinstance(value, Location) else Location(name=value)


class RideService:
    """Assigns rides to shared vehicle types."""

    def __init__(self, vehicle_types: VehicleTypeRegistry):
        self._vehicle_types = vehicle_types
        self._assignments: Dict[str, RideAssignment] = {}
        self._logger = get_logger(__name__)

    def assign(self,
               ride_id: str,
               driver_id: str,
               category: str,
               color: str,
               capacity: int,
               pickup: Union[str, Location],
               dropoff: Union[str, Location]) -> RideAssignment:
        """
        Assign a ride to a driver with the given vehicle.

        Args:
            ride_id: Ride identifier
            driver_id: Driver identifier
            category: Vehicle category
            color: Vehicle color
            capacity: Vehicle seat capacity
            pickup: Pickup location or location name
            dropoff: Dropoff location or location name

        Returns:
            The ride assignment referencing the shared vehicle type
        """
        vehicle_type = self._vehicle_types.acquire(
            VehicleAttributes(category=category, color=color, capacity=capacity)
        )
        assignment = RideAssignment(
            ride_id=ride_id,
            driver_id=driver_id,
            vehicle_type=vehicle_type,
            pickup=_as_location(pickup),
            dropoff=_as_location(dropoff),
        )
        self._assignments[ride_id] = assignment
        self._logger.info(
            "Ride assigned",
            ride_id=ride_id,
            driver_id=driver_id,
            vehicle_type=vehicle_type.describe(),
        )
        return assignment

    def assignments(self) -> List[RideAssignment]:
        return list(self._assignments.values())

    def fleet_vehicle_types(self) -> int:
        """Number of distinct shared vehicle types backing the assignments."""
        return len({id(a.vehicle_type) for a in self._assignments.values()})
