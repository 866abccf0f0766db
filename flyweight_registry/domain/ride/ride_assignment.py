# flyweight_registry/domain/ride/ride_assignment.py
from __future__ import annotations
from dataclasses import dataclass

from flyweight_registry.domain.vehicle.value_objects import VehicleType


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float = 0.0
    longitude: float = 0.0

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RideAssignment:
    """A ride served by a shared vehicle type.

    Ride id, driver and route are extrinsic: they belong to this ride only
    and are never stored on the shared ``VehicleType``.
    """
    ride_id: str
    driver_id: str
    vehicle_type: VehicleType
    pickup: Location
    dropoff: Location

    def summary(self) -> str:
        return (
            f"Ride {self.ride_id}: driver {self.driver_id} in a "
            f"{self.vehicle_type.describe()} from {self.pickup} to {self.dropoff}"
        )
