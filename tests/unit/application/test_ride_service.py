"""Tests for the ride assignment service."""

from flyweight_registry.application.ride.service import RideService
from flyweight_registry.domain.ride.ride_assignment import Location
from flyweight_registry.infrastructure.registry.vehicle_type_registry import (
    VehicleTypeRegistry,
)


class TestRideService:
    """Test ride assignment with shared vehicle types."""

    def test_rides_share_vehicle_type(self, ride_service, vehicle_registry):
        first = ride_service.assign("r1", "d1", "Car", "Red", 4, "Airport", "Downtown")
        second = ride_service.assign("r2", "d2", "Car", "Red", 4, "Mall", "Station")

        assert first.vehicle_type is second.vehicle_type
        assert first.pickup != second.pickup
        assert vehicle_registry.size() == 1

    def test_fleet_vehicle_types(self, ride_service):
        ride_service.assign("r1", "d1", "Car", "Red", 4, "A", "B")
        ride_service.assign("r2", "d2", "Car", "Red", 4, "C", "D")
        ride_service.assign("r3", "d3", "Bike", "Black", 2, "E", "F")
        ride_service.assign("r4", "d4", "Car", "Blue", 4, "G", "H")

        assert len(ride_service.assignments()) == 4
        assert ride_service.fleet_vehicle_types() == 3

    def test_summary(self, ride_service):
        assignment = ride_service.assign(
            "r9", "d7", "Bike", "Black", 2, Location("Park", 1.0, 2.0), "Harbor"
        )

        assert assignment.summary() == (
            "Ride r9: driver d7 in a Black Bike (2 seats) from Park to Harbor"
        )

    def test_services_with_shared_registry(self):
        registry = VehicleTypeRegistry()
        first_service = RideService(registry)
        second_service = RideService(registry)

        first = first_service.assign("r1", "d1", "Van", "Grey", 8, "A", "B")
        second = second_service.assign("r2", "d2", "Van", "Grey", 8, "C", "D")

        assert first.vehicle_type is second.vehicle_type
