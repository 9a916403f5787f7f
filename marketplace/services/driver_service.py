"""Driver registry."""

import logging

from marketplace.core.exceptions import NotFoundError, ValidationError
from marketplace.models.driver import Driver
from marketplace.store import Store

logger = logging.getLogger(__name__)

DEFAULT_DRIVER_STATUS = "available"


class DriverService:
    """Registers drivers and updates their status on request.

    Ride acceptance and completion never touch a driver's status; callers
    that want to mark a driver busy do so through ``set_driver_status``.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    async def register_driver(self, name: str | None, status: str | None = DEFAULT_DRIVER_STATUS) -> Driver:
        if not name or not name.strip():
            raise ValidationError("Name is required")

        driver = await self.store.insert(
            Driver(name=name, status=status or DEFAULT_DRIVER_STATUS)
        )
        logger.info(f"Driver {driver.id} registered")
        return driver

    async def list_drivers(self) -> list[Driver]:
        return await self.store.list(
            Driver, order_by=(Driver.created_at.desc(), Driver.id.desc())
        )

    async def get_driver(self, driver_id: int) -> Driver:
        driver = await self.store.get(Driver, driver_id)
        if not driver:
            raise NotFoundError("Driver", str(driver_id))
        return driver

    async def set_driver_status(self, driver_id: int, status: str | None) -> Driver:
        """Overwrite a driver's free-form status."""
        if not status or not status.strip():
            raise ValidationError("Status is required")

        changed = await self.store.update_conditional(
            Driver, driver_id, expected=[], values={"status": status}
        )
        if not changed:
            raise NotFoundError("Driver", str(driver_id))

        logger.info(f"Driver {driver_id} status set to '{status}'")
        return await self.get_driver(driver_id)
