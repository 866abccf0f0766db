"""Vehicle domain."""

from .value_objects import VehicleAttributes, VehicleCategory, VehicleType, VehicleTypeKey

__all__ = ["VehicleAttributes", "VehicleCategory", "VehicleType", "VehicleTypeKey"]
