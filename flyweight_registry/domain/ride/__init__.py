"""Ride domain."""

from .ride_assignment import Location, RideAssignment

__all__ = ["Location", "RideAssignment"]
