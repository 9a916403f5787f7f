"""Driver endpoints."""

from fastapi import APIRouter, status

from marketplace.api.deps import DriverServiceDep
from marketplace.models.driver import Driver
from marketplace.schemas.driver import DriverCreate, DriverResponse, DriverStatusUpdate

router = APIRouter()


@router.get("/", response_model=list[DriverResponse])
async def list_drivers(drivers: DriverServiceDep) -> list[Driver]:
    return await drivers.list_drivers()


@router.post("/", response_model=DriverResponse, status_code=status.HTTP_201_CREATED)
async def register_driver(driver_data: DriverCreate, drivers: DriverServiceDep) -> Driver:
    """Register a new driver."""
    return await drivers.register_driver(driver_data.name, driver_data.status)


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(driver_id: int, drivers: DriverServiceDep) -> Driver:
    return await drivers.get_driver(driver_id)


@router.patch("/{driver_id}/status", response_model=DriverResponse)
async def set_driver_status(
    driver_id: int, request: DriverStatusUpdate, drivers: DriverServiceDep
) -> Driver:
    """Update a driver's status (e.g. available, busy, offline)."""
    return await drivers.set_driver_status(driver_id, request.status)
