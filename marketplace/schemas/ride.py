"""Ride-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RideCreate(BaseModel):
    """Schema for requesting a ride."""

    pickup: str = Field(..., max_length=500)
    destination: str = Field(..., max_length=500)


class RideAccept(BaseModel):
    """Schema for a driver accepting a ride."""

    driver_id: int | None = None


class RideResponse(BaseModel):
    """Schema for ride response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    pickup: str
    destination: str
    driver_id: int | None
    status: str
    created_at: datetime

    # Joined from the assigned driver for display
    driver_name: str | None = None
