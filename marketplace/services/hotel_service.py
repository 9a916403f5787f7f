"""Hotel inventory and room reservations."""

import logging
from dataclasses import dataclass

from sqlalchemy import func

from marketplace.config import settings
from marketplace.core.exceptions import ConflictError, NotFoundError, ValidationError
from marketplace.models.hotel import Hotel
from marketplace.store import Store

logger = logging.getLogger(__name__)


@dataclass
class BookingQuote:
    """Outcome of a single room reservation."""

    hotel_id: int
    nights: int
    total_cost: float


@dataclass
class HotelBooking:
    hotel: Hotel
    booking: BookingQuote


class HotelService:
    """Creates hotels and hands out rooms one at a time.

    Room decrements are a single conditional update guarded by
    ``available_rooms > 0``, so concurrent bookings can never drive the
    counter below zero.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    async def create_hotel(
        self,
        name: str | None,
        location: str | None,
        price_per_night: float | None,
        rating: float | None = None,
        amenities: str | None = "",
        description: str | None = "",
        available_rooms: int | None = None,
    ) -> Hotel:
        """Create a hotel listing.

        Args:
            name: Display name, required
            location: Free-text location, required
            price_per_night: Nightly price, must be greater than 0
            rating: 0-5, defaults to the configured default rating
            amenities: Free-text amenity list
            description: Free-text description
            available_rooms: Bookable rooms, defaults to the configured pool size

        Returns:
            Hotel: The stored hotel
        """
        if not name or not name.strip() or not location or not location.strip() or price_per_night is None:
            raise ValidationError("Name, location, and price per night are required")
        if price_per_night <= 0:
            raise ValidationError("Price must be greater than 0")

        if rating is None:
            rating = settings.default_hotel_rating
        if rating < 0 or rating > 5:
            raise ValidationError("Rating must be between 0 and 5")

        if available_rooms is None:
            available_rooms = settings.default_hotel_rooms
        if available_rooms < 0:
            raise ValidationError("Available rooms cannot be negative")

        hotel = Hotel(
            name=name,
            location=location,
            price_per_night=price_per_night,
            rating=rating,
            amenities=amenities or "",
            description=description or "",
            available_rooms=available_rooms,
        )
        hotel = await self.store.insert(hotel)
        logger.info(f"Hotel {hotel.id} created with {available_rooms} rooms")
        return hotel

    async def get_hotel(self, hotel_id: int) -> Hotel:
        hotel = await self.store.get(Hotel, hotel_id)
        if not hotel:
            raise NotFoundError("Hotel", str(hotel_id))
        return hotel

    async def list_hotels(
        self,
        location: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> list[Hotel]:
        """List hotels that still have rooms, newest first."""
        filters = [Hotel.available_rooms > 0]

        if location:
            filters.append(func.lower(Hotel.location).contains(location.lower()))
        if min_price is not None:
            filters.append(Hotel.price_per_night >= min_price)
        if max_price is not None:
            filters.append(Hotel.price_per_night <= max_price)

        return await self.store.list(
            Hotel, *filters, order_by=(Hotel.created_at.desc(), Hotel.id.desc())
        )

    async def delete_hotel(self, hotel_id: int) -> None:
        deleted = await self.store.delete(Hotel, hotel_id)
        if not deleted:
            raise NotFoundError("Hotel", str(hotel_id))
        logger.info(f"Hotel {hotel_id} deleted")

    async def book_hotel(self, hotel_id: int, nights: int = 1) -> HotelBooking:
        """Reserve one room for ``nights`` nights.

        Raises:
            ValidationError: nights below 1
            NotFoundError: hotel does not exist
            ConflictError: no rooms left
        """
        if nights is None or nights < 1:
            raise ValidationError("Nights must be at least 1")

        changed = await self.store.update_conditional(
            Hotel,
            hotel_id,
            expected=[Hotel.available_rooms > 0],
            values={"available_rooms": Hotel.available_rooms - 1},
        )
        if not changed:
            # Distinguish a missing hotel from a sold-out one
            await self.get_hotel(hotel_id)
            logger.warning(f"Booking refused for hotel {hotel_id}: no rooms available")
            raise ConflictError("No rooms available")

        hotel = await self.get_hotel(hotel_id)
        total_cost = hotel.price_per_night * nights
        logger.info(
            f"Hotel {hotel_id} booked for {nights} night(s), "
            f"{hotel.available_rooms} room(s) left"
        )
        return HotelBooking(
            hotel=hotel,
            booking=BookingQuote(hotel_id=hotel.id, nights=nights, total_cost=total_cost),
        )
