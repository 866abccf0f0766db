"""Flyweight Registry - Root Package.

Shared vehicle types for a ride-sharing domain. A registry hands out one
immutable ``VehicleType`` per distinct category, color and capacity, and
rides reference that shared instance instead of carrying their own copy.

Key Components:
    - domain: Vehicle value objects, ride assignments and exceptions
    - infrastructure: Shared instance registries and logging
    - application: Ride assignment service
    - config: Configuration schemas and loading
"""

from ._package import PACKAGE_NAME, __version__
from .infrastructure.registry import (
    RegistryStats,
    SharedInstanceRegistry,
    VehicleTypeRegistry,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "RegistryStats",
    "SharedInstanceRegistry",
    "VehicleTypeRegistry",
    "__version__",
]
