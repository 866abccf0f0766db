"""Shared instance registry configuration schema."""

from pydantic import BaseModel, Field


class RegistryConfig(BaseModel):
    """Registry configuration."""

    name: str = Field("vehicle-types", description="Registry name used in logs")
    validate_attributes: bool = Field(
        False,
        description="Reject malformed vehicle attributes instead of storing them",
    )
