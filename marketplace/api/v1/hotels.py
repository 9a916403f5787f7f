"""Hotel endpoints."""

from fastapi import APIRouter, Query, status

from marketplace.api.deps import HotelServiceDep
from marketplace.models.hotel import Hotel
from marketplace.schemas.hotel import (
    BookingSummary,
    HotelBookingResponse,
    HotelBookRequest,
    HotelCreate,
    HotelResponse,
    MessageResponse,
)

router = APIRouter()


@router.get("/", response_model=list[HotelResponse])
async def list_hotels(
    hotels: HotelServiceDep,
    location: str | None = None,
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
) -> list[Hotel]:
    """Search hotels with rooms left."""
    return await hotels.list_hotels(location=location, min_price=min_price, max_price=max_price)


@router.post("/", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
async def create_hotel(hotel_data: HotelCreate, hotels: HotelServiceDep) -> Hotel:
    """Create a new hotel."""
    return await hotels.create_hotel(**hotel_data.model_dump())


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(hotel_id: int, hotels: HotelServiceDep) -> Hotel:
    return await hotels.get_hotel(hotel_id)


@router.delete("/{hotel_id}", response_model=MessageResponse)
async def delete_hotel(hotel_id: int, hotels: HotelServiceDep) -> MessageResponse:
    await hotels.delete_hotel(hotel_id)
    return MessageResponse(message="Hotel deleted successfully")


@router.post("/{hotel_id}/book", response_model=HotelBookingResponse)
async def book_hotel(
    hotel_id: int, hotels: HotelServiceDep, request: HotelBookRequest | None = None
) -> HotelBookingResponse:
    """Book one room; 409 when the hotel is sold out."""
    nights = request.nights if request else 1
    result = await hotels.book_hotel(hotel_id, nights)
    return HotelBookingResponse(
        hotel=HotelResponse.model_validate(result.hotel),
        booking=BookingSummary.model_validate(result.booking),
    )
