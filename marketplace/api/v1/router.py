"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from marketplace.api.v1 import drivers, hotels, rides

api_router = APIRouter()

# Rides
api_router.include_router(rides.router, prefix="/rides", tags=["Rides"])

# Drivers
api_router.include_router(drivers.router, prefix="/drivers", tags=["Drivers"])

# Hotels
api_router.include_router(hotels.router, prefix="/hotels", tags=["Hotels"])
