import os
import pytest
from unittest.mock import patch
from flyweight_registry.config.schemas import RegistryConfig
from flyweight_registry.infrastructure.registry.vehicle_type_registry import VehicleTypeRegistry
from flyweight_registry.application.ride.service import RideService


@pytest.fixture
def clean_env():
    """Environment without a configured config file."""
    with patch.dict(os.environ, {}, clear=False):
        os.environ.pop("FLYWEIGHT_CONFIG_FILE", None)
        yield


@pytest.fixture
def vehicle_registry():
    return VehicleTypeRegistry()


@pytest.fixture
def strict_vehicle_registry():
    return VehicleTypeRegistry(RegistryConfig(name="strict", validate_attributes=True))


@pytest.fixture
def ride_service(vehicle_registry):
    return RideService(vehicle_registry)
