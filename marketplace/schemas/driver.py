"""Driver-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DriverCreate(BaseModel):
    """Schema for registering a driver."""

    name: str = Field(..., max_length=255)
    status: str = Field(default="available", max_length=50)


class DriverStatusUpdate(BaseModel):
    status: str = Field(..., max_length=50)


class DriverResponse(BaseModel):
    """Schema for driver response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: str
    created_at: datetime
