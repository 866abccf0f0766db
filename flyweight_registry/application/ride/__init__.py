"""Ride application services."""

from .service import RideService

__all__ = ["RideService"]
