"""Pydantic schemas for API validation."""

from marketplace.schemas.driver import DriverCreate, DriverResponse, DriverStatusUpdate
from marketplace.schemas.hotel import (
    BookingSummary,
    HotelBookingResponse,
    HotelBookRequest,
    HotelCreate,
    HotelResponse,
    MessageResponse,
)
from marketplace.schemas.ride import RideAccept, RideCreate, RideResponse

__all__ = [
    # Ride
    "RideCreate",
    "RideAccept",
    "RideResponse",
    # Driver
    "DriverCreate",
    "DriverStatusUpdate",
    "DriverResponse",
    # Hotel
    "HotelCreate",
    "HotelResponse",
    "HotelBookRequest",
    "HotelBookingResponse",
    "BookingSummary",
    "MessageResponse",
]
