"""Vehicle Type Registry - shared vehicle types for the ride domain."""

from typing import Any, Optional

from flyweight_registry.config.schemas.registry_schema import RegistryConfig
from flyweight_registry.domain.vehicle.value_objects import (
    VehicleAttributes,
    VehicleType,
    VehicleTypeKey,
)
from flyweight_registry.infrastructure.registry.shared_instance_registry import (
    SharedInstanceRegistry,
)


class VehicleTypeRegistry(SharedInstanceRegistry[VehicleAttributes, VehicleType]):
    """
    Registry of shared ``VehicleType`` instances.

    Attributes may be passed as a ``VehicleAttributes`` record, a mapping
    with ``category``, ``color`` and ``capacity`` keys, or a 3-tuple in that
    order. Attribute values are stored as given unless the registry is
    configured with ``validate_attributes``.
    """

    def __init__(self, config: Optional[RegistryConfig] = None):
        """
        Initialize vehicle type registry.

        Args:
            config: Registry configuration, schema defaults if None
        """
        self.config = config or RegistryConfig()
        super().__init__(
            key_factory=VehicleTypeKey.from_attributes,
            value_factory=VehicleType.from_attributes,
            name=self.config.name,
        )

    def _coerce(self, attributes: Any) -> VehicleAttributes:
        attributes = VehicleAttributes.coerce(attributes)
        if self.config.validate_attributes:
            attributes.validate()
        return attributes

    def acquire(self, attributes: Any) -> VehicleType:
        """
        Return the shared vehicle type for the given attributes.

        Raises:
            ValidationError: If attributes are incomplete, or malformed while
                attribute validation is enabled
        """
        return super().acquire(self._coerce(attributes))

    def contains(self, attributes: Any) -> bool:
        return super().contains(VehicleAttributes.coerce(attributes))

    def get_vehicle_type(self, category: str, color: str, capacity: int) -> VehicleType:
        return self.acquire(
            VehicleAttributes(category=category, color=color, capacity=capacity)
        )
