"""Ride endpoints."""

from fastapi import APIRouter, Query, status

from marketplace.api.deps import RideServiceDep
from marketplace.models.ride import Ride
from marketplace.schemas.ride import RideAccept, RideCreate, RideResponse

router = APIRouter()


@router.get("/", response_model=list[RideResponse])
async def list_rides(
    rides: RideServiceDep,
    status_filter: str | None = Query(
        default=None, alias="status", pattern="^(pending|accepted|completed)$"
    ),
) -> list[Ride]:
    """List rides, newest first."""
    return await rides.list_rides(status=status_filter)


@router.post("/", response_model=RideResponse, status_code=status.HTTP_201_CREATED)
async def create_ride(ride_data: RideCreate, rides: RideServiceDep) -> Ride:
    """Request a new ride."""
    return await rides.create_ride(ride_data.pickup, ride_data.destination)


@router.get("/{ride_id}", response_model=RideResponse)
async def get_ride(ride_id: int, rides: RideServiceDep) -> Ride:
    """Get a ride by ID."""
    return await rides.get_ride(ride_id)


@router.post("/{ride_id}/accept", response_model=RideResponse)
async def accept_ride(ride_id: int, request: RideAccept, rides: RideServiceDep) -> Ride:
    """Accept a pending ride on behalf of a driver.

    Returns 404 when the ride does not exist and 409 when another driver
    already took it.
    """
    return await rides.accept_ride(ride_id, request.driver_id)


@router.post("/{ride_id}/complete", response_model=RideResponse)
async def complete_ride(ride_id: int, rides: RideServiceDep) -> Ride:
    """Complete an accepted ride."""
    return await rides.complete_ride(ride_id)
