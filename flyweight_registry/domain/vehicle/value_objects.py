# flyweight_registry/domain/vehicle/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Sequence, Tuple, Union
from flyweight_registry.domain.core.exceptions import ValidationError


class VehicleCategory(str, Enum):
    """Known vehicle categories."""
    CAR = "Car"
    BIKE = "Bike"
    AUTO = "Auto"
    SUV = "SUV"
    VAN = "Van"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in [e.value for e in cls]


def _category_value(category: Union[str, VehicleCategory]) -> str:
    # str-based enums hash by member name, so keys must hold the plain value
    if isinstance(category, Enum):
        return category.value
    return category


@dataclass(frozen=True)
class VehicleAttributes:
    """Intrinsic attributes requested from a vehicle type registry.

    All fields are required and must be hashable. No domain validation
    happens on construction; call ``validate()`` to enforce it.
    """
    category: str
    color: str
    capacity: int

    FIELDS = ("category", "color", "capacity")

    def __post_init__(self):
        object.__setattr__(self, "category", _category_value(self.category))
        unhashable = []
        for name in self.FIELDS:
            try:
                hash(getattr(self, name))
            except TypeError:
                unhashable.append(name)
        if unhashable:
            raise ValidationError(
                f"Vehicle attributes must be hashable, got unhashable: {unhashable}",
                details={"unhashable": unhashable},
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VehicleAttributes:
        missing = [name for name in cls.FIELDS if name not in data]
        if missing:
            raise ValidationError(
                f"Vehicle attributes are incomplete, missing: {missing}",
                details={"missing": missing},
            )
        return cls(
            category=data["category"],
            color=data["color"],
            capacity=data["capacity"],
        )

    @classmethod
    def from_tuple(cls, values: Sequence[Any]) -> VehicleAttributes:
        if len(values) != len(cls.FIELDS):
            raise ValidationError(
                f"Expected {len(cls.FIELDS)} vehicle attributes "
                f"{cls.FIELDS}, got {len(values)}"
            )
        category, color, capacity = values
        return cls(category=category, color=color, capacity=capacity)

    @classmethod
    def coerce(cls, value: Any) -> VehicleAttributes:
        """Build attributes from an attributes record, a mapping or a 3-tuple."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        if isinstance(value, (tuple, list)):
            return cls.from_tuple(value)
        raise ValidationError(
            f"Cannot build vehicle attributes from {type(value).__name__}"
        )

    def validate(self) -> None:
        errors: Dict[str, str] = {}
        if not VehicleCategory.is_known(self.category):
            errors["category"] = f"Unknown vehicle category: {self.category}"
        if not isinstance(self.color, str) or not self.color.strip():
            errors["color"] = "Color must be a non-empty string"
        if (
            not isinstance(self.capacity, int)
            or isinstance(self.capacity, bool)
            or self.capacity <= 0
        ):
            errors["capacity"] = "Capacity must be a positive integer"
        if errors:
            raise ValidationError(f"Invalid vehicle attributes: {self}", errors)


@dataclass(frozen=True)
class VehicleTypeKey:
    """Composite key identifying a shared vehicle type.

    Attribute types are part of the key, so values that Python considers
    equal across types (``4`` and ``4.0``, ``1`` and ``True``) stay distinct.
    """
    category: str
    color: str
    capacity: int
    value_types: Tuple[type, ...] = ()

    def __post_init__(self):
        if not self.value_types:
            object.__setattr__(
                self,
                "value_types",
                (type(self.category), type(self.color), type(self.capacity)),
            )

    @classmethod
    def from_attributes(cls, attributes: VehicleAttributes) -> VehicleTypeKey:
        return cls(
            category=_category_value(attributes.category),
            color=attributes.color,
            capacity=attributes.capacity,
        )

    def __str__(self) -> str:
        return f"{self.category}/{self.color}/{self.capacity}"


@dataclass(frozen=True)
class VehicleType:
    """Shared, intrinsic-only description of a vehicle.

    Instances are handed out by a registry and shared between every ride
    using the same category, color and capacity.
    """
    category: str
    color: str
    capacity: int

    @classmethod
    def from_attributes(cls, attributes: VehicleAttributes) -> VehicleType:
        return cls(
            category=attributes.category,
            color=attributes.color,
            capacity=attributes.capacity,
        )

    def describe(self) -> str:
        return f"{self.color} {self.category} ({self.capacity} seats)"

    def __str__(self) -> str:
        return self.describe()
