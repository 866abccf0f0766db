"""Registry infrastructure."""

from .shared_instance_registry import RegistryStats, SharedInstanceRegistry
from .vehicle_type_registry import VehicleTypeRegistry

__all__ = ["RegistryStats", "SharedInstanceRegistry", "VehicleTypeRegistry"]
