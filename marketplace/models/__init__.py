"""Database models."""

from marketplace.models.driver import Driver
from marketplace.models.hotel import Hotel
from marketplace.models.ride import Ride, RideStatus

__all__ = [
    "Driver",
    "Hotel",
    "Ride",
    "RideStatus",
]
