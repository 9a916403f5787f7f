"""Hotel-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HotelCreate(BaseModel):
    """Schema for creating a hotel."""

    name: str = Field(..., max_length=255)
    location: str = Field(..., max_length=255)
    price_per_night: float
    rating: float | None = None
    amenities: str = ""
    description: str = ""
    available_rooms: int | None = None


class HotelResponse(BaseModel):
    """Schema for hotel response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    price_per_night: float
    rating: float
    amenities: str | None
    description: str | None
    available_rooms: int
    created_at: datetime


class HotelBookRequest(BaseModel):
    """Schema for booking a room."""

    nights: int = Field(default=1, ge=1, le=365)


class BookingSummary(BaseModel):
    """Priced summary of a single-room booking."""

    model_config = ConfigDict(from_attributes=True)

    hotel_id: int
    nights: int
    total_cost: float


class HotelBookingResponse(BaseModel):
    message: str = "Hotel booked successfully"
    hotel: HotelResponse
    booking: BookingSummary


class MessageResponse(BaseModel):
    message: str
