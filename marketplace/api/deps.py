"""API dependencies wiring sessions into the booking services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.database import get_db
from marketplace.services.driver_service import DriverService
from marketplace.services.hotel_service import HotelService
from marketplace.services.ride_service import RideService
from marketplace.store import Store


async def get_store(
    db: Annotated[AsyncSession, Depends(get_db, scope="function")],
) -> Store:
    """Store bound to the request's session.

    The session is function-scoped so its commit runs before the response
    is sent and a failed commit reaches the client as a 503.
    """
    return Store(db)


async def get_ride_service(store: Annotated[Store, Depends(get_store)]) -> RideService:
    return RideService(store)


async def get_driver_service(store: Annotated[Store, Depends(get_store)]) -> DriverService:
    return DriverService(store)


async def get_hotel_service(store: Annotated[Store, Depends(get_store)]) -> HotelService:
    return HotelService(store)


RideServiceDep = Annotated[RideService, Depends(get_ride_service)]
DriverServiceDep = Annotated[DriverService, Depends(get_driver_service)]
HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
